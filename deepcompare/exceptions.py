"""Custom exceptions for the deep comparer."""


class DeepCompareError(Exception):
    """Base exception for deep comparer errors."""
    pass


class InvalidInputError(DeepCompareError):
    """Raised when a top-level comparison argument is missing."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnsupportedValueError(DeepCompareError):
    """Raised when a function value is met during comparison."""
    def __init__(self, path: str):
        super().__init__(f"Function found at {path}")
        self.path = path


class UnknownChangeTypeError(DeepCompareError):
    """Raised when a changelog entry is requested for an unknown change type."""
    def __init__(self, change_type):
        super().__init__(f"Unknown diffType: {change_type}")
        self.change_type = change_type


class ConfigError(DeepCompareError):
    """Raised when a comparer configuration cannot be loaded."""
    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.message = message
        self.source = source
