"""Data models for the deep comparer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from collections.abc import Iterable
from typing import Any, Optional

import yaml

from .exceptions import ConfigError


DEFAULT_ROOT = "root"


class _Missing:
    """Marks a changelog value that is absent, as opposed to ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING: Any = _Missing()


class ChangeType(Enum):
    ADDED = "Added"
    UPDATED = "Updated"
    DELETED = "Deleted"


class ValueKind(Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    DATE = "date"
    SCALAR = "scalar"
    UNSUPPORTED = "unsupported"


class PairKind(Enum):
    BOTH_SEQUENCES = "both_sequences"
    BOTH_MAPPINGS = "both_mappings"
    BOTH_DATES = "both_dates"
    HETEROGENEOUS = "heterogeneous"
    BOTH_SCALARS = "both_scalars"


@dataclass
class ChangelogEntry:
    """A single addition, deletion or update found during comparison."""
    path: str
    note: ChangeType
    old_val: Any = MISSING
    new_val: Any = MISSING

    @property
    def has_old_val(self) -> bool:
        return self.old_val is not MISSING

    @property
    def has_new_val(self) -> bool:
        return self.new_val is not MISSING

    def to_dict(self) -> dict:
        result = {"path": self.path}
        if self.has_old_val:
            result["oldVal"] = self.old_val
        if self.has_new_val:
            result["newVal"] = self.new_val
        result["note"] = self.note.value
        return result


_CONFIG_ALIASES = {
    "keys_to_ignore": "keys_to_ignore",
    "keysToIgnore": "keys_to_ignore",
    "keys_to_filter": "keys_to_filter",
    "keysToFilter": "keys_to_filter",
    "root_label": "root_label",
    "rootLabel": "root_label",
    "diagnostics": "diagnostics",
}


def _as_key_set(value: Optional[Iterable[str]], name: str) -> frozenset:
    if value is None:
        return frozenset()
    if isinstance(value, (str, bytes, dict)) or not isinstance(value, Iterable):
        raise ConfigError(f"'{name}' must be a list of key names")
    keys = frozenset(value)
    for key in keys:
        if not isinstance(key, str):
            raise ConfigError(f"'{name}' must only contain strings, got {key!r}")
    return keys


@dataclass
class ComparerConfig:
    """Configuration bound to a comparer when it is created."""
    keys_to_ignore: frozenset = field(default_factory=frozenset)
    keys_to_filter: frozenset = field(default_factory=frozenset)
    root_label: str = DEFAULT_ROOT
    diagnostics: bool = False

    def __post_init__(self):
        self.keys_to_ignore = _as_key_set(self.keys_to_ignore, "keys_to_ignore")
        self.keys_to_filter = _as_key_set(self.keys_to_filter, "keys_to_filter")
        if not isinstance(self.root_label, str):
            raise ConfigError("'root_label' must be a string")
        if not isinstance(self.diagnostics, bool):
            raise ConfigError("'diagnostics' must be a boolean")

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "ComparerConfig":
        """Build a config from a plain mapping, accepting camelCase keys."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Comparer config must be a mapping")

        kwargs = {}
        for key, value in data.items():
            if key not in _CONFIG_ALIASES:
                raise ConfigError(f"Unknown config key: {key}")
            kwargs[_CONFIG_ALIASES[key]] = value
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str | Path) -> "ComparerConfig":
        """Load a config from a YAML (or JSON) file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, 'r') as f:
            content = f.read()

        # JSON is valid YAML
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config file: {e}", str(config_path))

        try:
            return cls.from_dict(data)
        except ConfigError as e:
            e.source = str(config_path)
            raise
