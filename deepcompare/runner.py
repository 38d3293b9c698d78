"""Dataset runner: compares before/after pairs stored as JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .engine import DeepComparer
from .exceptions import DeepCompareError
from .models import ChangeType, ComparerConfig


logger = logging.getLogger(__name__)


@dataclass
class ScenarioResult:
    """Result of a single dataset."""
    name: str
    dataset_path: str
    passed: bool
    changelog: list[dict] = field(default_factory=list)
    expected: Optional[list[dict]] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "dataset_path": self.dataset_path,
            "passed": self.passed,
            "changes_count": len(self.changelog),
            "changelog": self.changelog,
        }
        if self.expected is not None:
            result["expected"] = self.expected
        if self.error:
            result["error"] = self.error
        return result


# Breakdown categories, in summary order
BREAKDOWN_LABELS = {
    "no_changes": "No changes",
    "with_changes": "With changes",
    "entries_added": "Entries added",
    "entries_removed": "Entries removed",
    "errors": "Errors",
}


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


def _categories(result: ScenarioResult) -> list[str]:
    """Breakdown categories a dataset result falls into."""
    if result.error:
        return ["errors"]
    if not result.changelog:
        return ["no_changes"]

    notes = {entry["note"] for entry in result.changelog}
    categories = ["with_changes"]
    if ChangeType.ADDED.value in notes:
        categories.append("entries_added")
    if ChangeType.DELETED.value in notes:
        categories.append("entries_removed")
    return categories


@dataclass
class GlobalReport:
    """Report across all datasets of a folder."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    scenarios: list[ScenarioResult] = field(default_factory=list)
    breakdown: dict[str, list[str]] = field(
        default_factory=lambda: {key: [] for key in BREAKDOWN_LABELS}
    )
    timestamp: str = field(default_factory=_utc_timestamp)

    @property
    def pass_rate(self) -> str:
        return f"{self.passed / self.total:.1%}" if self.total else "0.0%"

    def add(self, result: ScenarioResult):
        self.scenarios.append(result)
        self.total += 1
        if result.passed:
            self.passed += 1
        else:
            self.failed += 1
        for category in _categories(result):
            self.breakdown.setdefault(category, []).append(result.name)

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "summary": {
                "total_scenarios": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "pass_rate": self.pass_rate,
            },
            "breakdown": self.breakdown,
            "scenarios": [s.to_dict() for s in self.scenarios],
        }

    def print_summary(self):
        print(f"\nDataset Results: {self.passed}/{self.total} passed ({self.pass_rate})")
        if self.failed:
            print(f"  Failed: {self.failed}")
        for key, label in BREAKDOWN_LABELS.items():
            if self.breakdown.get(key):
                print(f"  {label}: {len(self.breakdown[key])} datasets")


class ChangelogRunner:
    """Runs dataset files through a deep comparer."""

    def __init__(self, config: Optional[ComparerConfig] = None):
        self.config = config or ComparerConfig()
        self.comparer = DeepComparer(self.config)

    def run_dataset(self, dataset: dict, name: str, dataset_path: str) -> ScenarioResult:
        """Run a single dataset."""
        expected = dataset.get("expected")
        result = ScenarioResult(name=name, dataset_path=dataset_path, passed=False, expected=expected)

        try:
            entries = self.comparer.compare(dataset.get("before"), dataset.get("after"))
        except DeepCompareError as e:
            logger.warning("Dataset %s failed: %s", name, e)
            result.error = str(e)
            return result

        result.changelog = [entry.to_dict() for entry in entries]
        result.passed = expected is None or result.changelog == expected
        return result

    def run_folder(self, folder: str | Path, print_report: bool = True) -> GlobalReport:
        """Run all dataset files in a folder."""
        report = GlobalReport()
        folder_path = Path(folder)

        for dataset_file in sorted(folder_path.glob("*.json")):
            with open(dataset_file) as f:
                dataset = json.load(f)

            name = dataset.get("name", dataset_file.stem)
            result = self.run_dataset(dataset, name, str(dataset_file))
            report.add(result)

            if print_report:
                print(f"{'PASS' if result.passed else 'FAIL'}: {name}")

        if print_report:
            report.print_summary()

        return report


def run_tests(
    config_path: Optional[str | Path],
    test_folder: str | Path,
    print_report: bool = True,
    diagnostics: bool = False
) -> GlobalReport:
    """
    Run every dataset of a folder.

        from deepcompare.runner import run_tests
        report = run_tests("comparer.yaml", "datasets/")

    Args:
        config_path: Path to a YAML/JSON comparer config, or None for defaults
        test_folder: Path to folder containing dataset JSON files
        print_report: Whether to print the summary report
        diagnostics: Log the execution time of every comparison, whatever
            the config says

    Returns:
        GlobalReport with all results
    """
    folder = Path(test_folder)
    if not folder.exists():
        raise FileNotFoundError(f"Test folder not found: {folder}")

    config = ComparerConfig() if config_path is None else ComparerConfig.from_file(config_path)
    if diagnostics:
        config = replace(config, diagnostics=True)
    return ChangelogRunner(config).run_folder(folder, print_report)
