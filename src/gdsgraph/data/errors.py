"""Custom exceptions for table loading."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a table source fails in a way that must abort the load."""


class TableNotFoundError(DataLoadError):
    """Raised when a table file does not exist."""


