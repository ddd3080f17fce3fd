"""
Data model of the import verification pipeline.

All records are immutable: every stage of the pipeline consumes the
previous stage's output and produces new values.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .errors import ConfigurationError


class ImportKind(Enum):
    """Kind of an import path."""
    STANDARD = "std"
    LOCAL = "local"
    THIRD_PARTY = "third party"

    @property
    def label(self) -> str:
        return self.value


class VerificationScheme(Enum):
    """
    Accepted ordering of import kinds across groups.

    A file may omit any kind, but the kinds it has must appear
    in the order listed by the scheme.
    """
    STD_LOCAL_THIRD_PARTY = ("stdLocalThirdParty", (ImportKind.STANDARD, ImportKind.LOCAL, ImportKind.THIRD_PARTY))
    STD_THIRD_PARTY_LOCAL = ("stdThirdPartyLocal", (ImportKind.STANDARD, ImportKind.THIRD_PARTY, ImportKind.LOCAL))

    def __init__(self, cli_name: str, kinds: Tuple[ImportKind, ...]):
        self.cli_name = cli_name
        self.kinds = kinds

    @classmethod
    def from_name(cls, name: str) -> VerificationScheme:
        """
        Resolve a scheme by its CLI name ("stdLocalThirdParty") or enum name
        ("STD_LOCAL_THIRD_PARTY").

        Raises:
            ConfigurationError: If the name is not a known scheme
        """
        for scheme in cls:
            if name in (scheme.cli_name, scheme.name):
                return scheme
        known = ", ".join(s.cli_name for s in cls)
        raise ConfigurationError(f"Unknown verification scheme '{name}' (expected one of: {known})")

    def describe(self) -> str:
        return " -> ".join(k.label for k in self.kinds)


@dataclass(frozen=True)
class ImportStatement:
    """Single import spec of a source file."""
    path: str
    line: int                        # 1-based line of the spec
    preceded_by_blank_line: bool = False
    kind: Optional[ImportKind] = None

    def with_kind(self, kind: ImportKind) -> ImportStatement:
        return replace(self, kind=kind)


@dataclass(frozen=True)
class ImportGroup:
    """Maximal run of import statements not separated by a blank line."""
    statements: Tuple[ImportStatement, ...]
    kinds_present: FrozenSet[ImportKind] = field(init=False)

    def __post_init__(self):
        if not self.statements:
            raise ValueError("ImportGroup requires at least one statement")
        kinds = frozenset(s.kind for s in self.statements if s.kind is not None)
        object.__setattr__(self, "kinds_present", kinds)

    @property
    def start_line(self) -> int:
        return self.statements[0].line

    @property
    def end_line(self) -> int:
        return self.statements[-1].line

    @property
    def kind(self) -> Optional[ImportKind]:
        """Kind of the group's first statement."""
        return self.statements[0].kind

    @property
    def is_mixed(self) -> bool:
        return len(self.kinds_present) > 1


@dataclass(frozen=True)
class VerifyOptions:
    """Options of a single verification call. All fields are required."""
    scheme: VerificationScheme
    local_prefix: str
    ignore_generated: bool


@dataclass(frozen=True)
class Violation:
    """Reportable finding addressed to a line and an import path."""
    line: int
    path: str
    message: str


@dataclass(frozen=True)
class ScanResult:
    """Output of the source scanner."""
    statements: Tuple[ImportStatement, ...]
    is_generated: bool = False


__all__ = [
    "ImportKind",
    "VerificationScheme",
    "ImportStatement",
    "ImportGroup",
    "VerifyOptions",
    "Violation",
    "ScanResult",
]
