"""Custom exceptions for roster loading and validation."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing or is not valid JSON."""


class DataValidationError(DataError):
    """Raised when definition content fails structural validation."""


class DataReferenceError(DataError):
    """Raised when a definition references an unknown preset or entry."""
