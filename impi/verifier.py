"""
Import verification entry point.

Wires the scanner, classifier, grouper and scheme matcher together:

    text -> scan -> classify -> group -> match -> VerificationError | None
"""

from __future__ import annotations

import threading
from typing import Optional, TextIO, Union

from .errors import ConfigurationError, VerificationError
from .go import GoImportClassifier, GoImportScanner, load_go_language
from .grouping import group_imports
from .model import ScanResult, VerificationScheme, VerifyOptions
from .schemes import match_scheme

Source = Union[str, TextIO]


class Verifier:
    """
    Stateless import verifier.

    Build once and reuse: the Go grammar is loaded by the constructor,
    every verify() call allocates its own parser and intermediate records,
    so one instance may be shared between threads.
    """

    def __init__(self):
        self._scanner = GoImportScanner(load_go_language())

    def scan(self, source: Source) -> ScanResult:
        return self._scanner.scan(_read(source))

    def verify(self, source: Source, options: VerifyOptions) -> Optional[VerificationError]:
        """
        Verify grouping and ordering of the imports of one Go source.

        Args:
            source: Source text or a readable text stream
            options: Verification options

        Returns:
            VerificationError with every violation, or None when the imports are valid

        Raises:
            ConfigurationError: If options are invalid
            ParseError: If the import section is malformed
        """
        _validate_options(options)

        scanned = self.scan(source)
        if options.ignore_generated and scanned.is_generated:
            return None

        classifier = GoImportClassifier(options.local_prefix)
        statements = [s.with_kind(classifier.classify(s.path)) for s in scanned.statements]

        violations = match_scheme(group_imports(statements), options.scheme)
        if violations:
            return VerificationError(violations)
        return None


def _validate_options(options: VerifyOptions) -> None:
    if not isinstance(options, VerifyOptions):
        raise ConfigurationError(f"Expected VerifyOptions, got {type(options).__name__}")
    if not isinstance(options.scheme, VerificationScheme):
        raise ConfigurationError(f"Unknown verification scheme: {options.scheme!r}")
    if not isinstance(options.local_prefix, str):
        raise ConfigurationError(f"Local prefix must be a string, got {type(options.local_prefix).__name__}")


def _read(source: Source) -> str:
    if isinstance(source, str):
        return source
    data = source.read()
    if isinstance(data, bytes):
        return data.decode("utf-8")
    return data


_default_verifier: Optional[Verifier] = None
_default_lock = threading.Lock()


def default_verifier() -> Verifier:
    """Lazily created shared verifier."""
    global _default_verifier
    with _default_lock:
        if _default_verifier is None:
            _default_verifier = Verifier()
        return _default_verifier


def verify(source: Source, options: VerifyOptions) -> Optional[VerificationError]:
    """Verify a source with the shared default verifier."""
    return default_verifier().verify(source, options)


def scan(source: Source) -> ScanResult:
    """Scan a source with the shared default verifier."""
    return default_verifier().scan(source)


__all__ = ["Verifier", "verify", "scan", "default_verifier"]
