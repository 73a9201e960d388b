"""
mhopt exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All mhopt-specific exceptions inherit from MHOptError for easy catching.

Example:
    try:
        result = run(config)
    except MHOptError as e:
        print(f"Search failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class MHOptError(Exception):
    """
    Base exception for all mhopt errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MHOptError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidAlgorithmError(ConfigurationError):
    """Raised when an unknown search strategy is specified."""

    def __init__(self, algorithm: str, available: list[str] | None = None) -> None:
        available = available or ["ga", "grasp"]
        message = f"Unknown algorithm '{algorithm}'."
        suggestion = f"Available algorithms: {', '.join(available)}"
        super().__init__(message, suggestion, {"algorithm": algorithm, "available": available})


class InvalidProblemError(ConfigurationError):
    """Raised when an unknown problem is specified."""

    def __init__(self, problem: str, available: list[str] | None = None) -> None:
        available = available or ["qbf", "kqbf"]
        message = f"Unknown problem '{problem}'."
        suggestion = f"Available problems: {', '.join(available)}"
        super().__init__(message, suggestion, {"problem": problem, "available": available})


class InvalidParameterError(ConfigurationError):
    """Raised when a numeric search parameter is out of range."""

    def __init__(self, name: str, value: Any, expected: str) -> None:
        message = f"Invalid value {value!r} for '{name}'."
        suggestion = f"'{name}' must be {expected}"
        super().__init__(message, suggestion, {"name": name, "value": value})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or pass it on the command line when building {config_class}"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Data/IO Errors
# =============================================================================


class DataError(MHOptError):
    """Base class for instance data errors."""

    pass


class InstanceNotFoundError(DataError):
    """Raised when an instance file cannot be opened."""

    def __init__(self, path: str) -> None:
        message = f"Instance file not found at '{path}'."
        suggestion = "Check the path passed with --instance or the 'instance' key of the run spec"
        super().__init__(message, suggestion, {"path": path})


class InvalidInstanceError(DataError):
    """Raised when instance data is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        suggestion = "Instance files hold whitespace-separated numbers: the size first, then the problem data."
        super().__init__(message, suggestion, {"path": path})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MHOptError",
    # Configuration
    "ConfigurationError",
    "InvalidAlgorithmError",
    "InvalidProblemError",
    "InvalidParameterError",
    "MissingConfigError",
    # Data/IO
    "DataError",
    "InstanceNotFoundError",
    "InvalidInstanceError",
]
