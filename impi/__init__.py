"""
impi: verifies grouping and ordering of Go imports.
"""

from .errors import ConfigurationError, ImpiUserError, ParseError, VerificationError
from .go import classify
from .grouping import group_imports
from .model import (
    ImportGroup,
    ImportKind,
    ImportStatement,
    ScanResult,
    VerificationScheme,
    VerifyOptions,
    Violation,
)
from .schemes import match_scheme
from .verifier import Verifier, scan, verify

__all__ = [
    "Verifier",
    "verify",
    "scan",
    "classify",
    "group_imports",
    "match_scheme",
    "ImportKind",
    "ImportStatement",
    "ImportGroup",
    "ScanResult",
    "VerificationScheme",
    "VerifyOptions",
    "Violation",
    "ImpiUserError",
    "ConfigurationError",
    "ParseError",
    "VerificationError",
]
