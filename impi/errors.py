"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from ImpiUserError.

Programming errors and bugs should NOT inherit from ImpiUserError;
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Violation


class ImpiUserError(Exception):
    """
    Base class for all user-facing errors in impi.

    These errors indicate problems that the user can fix:
    malformed sources, bad options, broken configuration files.
    """
    pass


class ConfigurationError(ImpiUserError, ValueError):
    """Invalid options, unknown verification scheme or unusable configuration."""
    pass


class ParseError(ImpiUserError):
    """The import section of a source file is not well formed."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"{line}: {message}"
        super().__init__(message)


class VerificationError(ImpiUserError):
    """
    Aggregate of all grouping/ordering violations found in one file.

    The message is every violation message on its own line, in the order
    the violations were produced.
    """

    def __init__(self, violations: Iterable[Violation]):
        self.violations: Tuple[Violation, ...] = tuple(violations)
        super().__init__("\n".join(v.message for v in self.violations))


__all__ = ["ImpiUserError", "ConfigurationError", "ParseError", "VerificationError"]
