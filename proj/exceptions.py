"""
Custom exceptions for the proj CLI application.

Every error is terminal to the current invocation. The CLI layer prints the
message, then the usage block named by ``usage_for`` (a command's long
name, ``""`` for the top-level usage, ``None`` for no usage) and exits with
``exit_code``.
"""
from typing import Optional


class ProjError(Exception):
    """Base exception for all proj-related errors."""

    exit_code = 1

    def __init__(self, message: str, usage_for: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage_for = usage_for


class UnknownCommandError(ProjError):
    """Raised when a command token matches neither a long nor a short name."""
    pass


class MissingArgumentError(ProjError):
    """Raised when a required positional argument is absent."""
    pass


class TooManyArgumentsError(ProjError):
    """Raised when a command receives more positional arguments than it takes."""
    pass


class InvalidArgumentError(ProjError):
    """Raised for unrecognized tokens or malformed values."""
    pass


class DuplicateProjectError(ProjError):
    """Raised when attempting to register a name that already exists."""
    pass


class ProjectNotFoundError(ProjError):
    """Raised when a requested project is not in the registry."""
    pass


class ConfigurationError(ProjError):
    """Raised when there's a configuration or setup issue."""
    pass


class ConfigParseError(ConfigurationError):
    """Raised for malformed or unknown run-control lines."""
    pass


class StorageError(ProjError):
    """Raised when the registry file cannot be read, parsed or written."""
    pass


class PathExpansionError(ProjError):
    """Raised when a path cannot be expanded to an existing directory."""
    pass


class FeatureNotImplementedError(ProjError):
    """Raised by placeholder commands and options.

    Not a failure: the invocation ends with a notice and exit status 0.
    """

    exit_code = 0
