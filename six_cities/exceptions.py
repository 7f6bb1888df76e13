class SixCitiesError(Exception):
    """Base error for the import tool."""


class FileReadError(SixCitiesError):
    """Raised when a data file cannot be read."""


class FileNotReadError(SixCitiesError):
    """Raised when parsing is attempted before the file was read."""


class VersionReadError(SixCitiesError):
    """Raised when the version config file is missing or malformed."""


class CommandAlreadyRegisteredError(SixCitiesError):
    """Raised when two commands share a name."""
