"""
Discovery of Go source files to verify.

Targets follow the go tool conventions:
- `path/to/file.go`: a single file;
- `path/to/dir`: Go files directly inside the directory;
- `path/to/dir/...`: Go files in the directory tree.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List, Optional, Set

import pathspec

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

RECURSIVE_SUFFIX = "..."
PRUNED_DIRS = {"vendor", "testdata"}


def compile_skip(patterns: Iterable[str]) -> Optional[pathspec.PathSpec]:
    patterns = [p for p in patterns if p.strip()]
    if not patterns:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


def iter_go_files(targets: Iterable[str], skip: Iterable[str] = (), root: Optional[Path] = None) -> List[Path]:
    """
    Resolve targets into a sorted, de-duplicated list of Go files.

    Skip patterns are matched against paths relative to root (default: cwd).

    Raises:
        ConfigurationError: If a target does not exist
    """
    root = root or Path.cwd()
    spec = compile_skip(skip)
    found: Set[Path] = set()

    for target in targets:
        for path in _expand_target(target, root):
            if spec is not None and spec.match_file(_rel_posix(path, root)):
                logger.debug(f"Skipping {path}")
                continue
            found.add(path)

    return sorted(found)


def _expand_target(target: str, root: Path) -> Iterator[Path]:
    recursive = target == RECURSIVE_SUFFIX or target.endswith("/" + RECURSIVE_SUFFIX)
    base_str = target[:-len(RECURSIVE_SUFFIX)].rstrip("/") if recursive else target
    base = Path(base_str) if base_str else Path(".")
    if not base.is_absolute():
        base = root / base

    if base.is_file():
        if recursive:
            raise ConfigurationError(f"Recursive pattern requires a directory: {target}")
        yield base
        return

    if not base.is_dir():
        raise ConfigurationError(f"No such file or directory: {target}")

    if not recursive:
        yield from (p for p in sorted(base.iterdir()) if _is_go_file(p))
        return

    for dirpath, dirnames, filenames in os.walk(base):
        dirnames[:] = sorted(d for d in dirnames if not _is_pruned(d))
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if _is_go_file(path):
                yield path


def _is_go_file(path: Path) -> bool:
    return path.suffix == ".go" and path.is_file() and not path.name.startswith(".")


def _is_pruned(dirname: str) -> bool:
    return dirname in PRUNED_DIRS or dirname.startswith(".") or dirname.startswith("_")


def _rel_posix(path: Path, root: Path) -> str:
    try:
        return PurePosixPath(path.resolve().relative_to(root.resolve())).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["iter_go_files", "compile_skip", "RECURSIVE_SUFFIX"]
