"""
Concurrent verification of many files.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import ParseError
from .model import VerifyOptions
from .report import FileReport, RunReport, ViolationModel
from .verifier import Verifier

logger = logging.getLogger(__name__)


def default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


def verify_file(verifier: Verifier, path: Path, options: VerifyOptions) -> FileReport:
    """Verify one file; parse and read errors are reported, not raised."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        return FileReport(path=str(path), ok=False, error=f"failed to read file: {e}")

    try:
        error = verifier.verify(text, options)
    except ParseError as e:
        logger.debug(f"Parse error in {path}: {e}")
        return FileReport(path=str(path), ok=False, error=str(e))

    if error is None:
        return FileReport(path=str(path), ok=True)

    return FileReport(
        path=str(path),
        ok=False,
        violations=[ViolationModel.from_violation(v) for v in error.violations],
    )


def run_verification(
    paths: Sequence[Path],
    options: VerifyOptions,
    workers: Optional[int] = None,
    verifier: Optional[Verifier] = None,
) -> RunReport:
    """
    Verify files on a thread pool.

    Results keep the order of `paths`.
    """
    verifier = verifier or Verifier()
    workers = workers or default_workers()
    logger.info(f"Verifying {len(paths)} file(s) with {workers} worker(s)")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        reports: List[FileReport] = list(pool.map(lambda p: verify_file(verifier, p, options), paths))

    return RunReport(files=reports)


__all__ = ["run_verification", "verify_file", "default_workers"]
