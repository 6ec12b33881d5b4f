"""Custom exceptions for the ZINC translator."""

from zinc.constants import EXIT_FAILURE, EXIT_INVALID_SOURCE


class ZincError(RuntimeError):
    """Base exception for fatal translator failures."""

    exit_code: int = EXIT_FAILURE
    to_stderr: bool = True


class InputNotFoundError(ZincError):
    """Raised when the input script cannot be opened."""


class InvalidSourceError(ZincError):
    """Raised when a line appears before the import marker."""

    exit_code = EXIT_INVALID_SOURCE
    to_stderr = False

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("Error : Not a valid ZINC file [2]")
        self.line_number = line_number
        self.line = line


class OutputUnwritableError(ZincError):
    """Raised when the intermediate translation file cannot be created."""


class ConfigError(ZincError):
    """Raised when the configuration file is missing or malformed."""
