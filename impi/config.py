"""
Configuration file support.

The configuration lives in `.impi.yaml` at the project root:

    local: github.com/org/project
    scheme: stdLocalThirdParty
    ignore_generated: true
    skip:
      - "**/*.pb.go"
      - "internal/mocks/**"
    workers: 8

Command line flags override file values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigurationError
from .model import VerificationScheme, VerifyOptions

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".impi.yaml"

_YAML = YAML(typ="safe")


@dataclass(frozen=True)
class ImpiConfig:
    local: Optional[str] = None
    scheme: Optional[VerificationScheme] = None
    ignore_generated: bool = False
    skip: List[str] = field(default_factory=list)
    workers: Optional[int] = None

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]], source: str = CONFIG_FILE_NAME) -> ImpiConfig:
        """Build configuration from a YAML mapping, validating every key."""
        if not d:
            return ImpiConfig()
        if not isinstance(d, dict):
            raise ConfigurationError(f"{source}: top level must be a mapping")

        unknown = sorted(set(d) - {"local", "scheme", "ignore_generated", "skip", "workers"})
        if unknown:
            raise ConfigurationError(f"{source}: unknown keys: {', '.join(unknown)}")

        local = d.get("local")
        if local is not None and not isinstance(local, str):
            raise ConfigurationError(f"{source}: 'local' must be a string")

        scheme = d.get("scheme")
        if scheme is not None:
            if not isinstance(scheme, str):
                raise ConfigurationError(f"{source}: 'scheme' must be a string")
            scheme = VerificationScheme.from_name(scheme)

        ignore_generated = d.get("ignore_generated", False)
        if not isinstance(ignore_generated, bool):
            raise ConfigurationError(f"{source}: 'ignore_generated' must be a boolean")

        skip = d.get("skip") or []
        if not isinstance(skip, list) or not all(isinstance(p, str) for p in skip):
            raise ConfigurationError(f"{source}: 'skip' must be a list of strings")

        workers = d.get("workers")
        if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
            raise ConfigurationError(f"{source}: 'workers' must be a positive integer")

        return ImpiConfig(
            local=local,
            scheme=scheme,
            ignore_generated=ignore_generated,
            skip=list(skip),
            workers=workers,
        )

    def merged(
        self,
        *,
        local: Optional[str] = None,
        scheme: Optional[VerificationScheme] = None,
        ignore_generated: Optional[bool] = None,
        skip: Optional[List[str]] = None,
        workers: Optional[int] = None,
    ) -> ImpiConfig:
        """Return a copy with the given (command line) values taking precedence."""
        return replace(
            self,
            local=local if local is not None else self.local,
            scheme=scheme if scheme is not None else self.scheme,
            ignore_generated=self.ignore_generated if ignore_generated is None else ignore_generated,
            skip=[*self.skip, *(skip or [])],
            workers=workers if workers is not None else self.workers,
        )

    def to_verify_options(self) -> VerifyOptions:
        if self.local is None:
            raise ConfigurationError("Local prefix is not configured (use --local or 'local' in the config file)")
        if self.scheme is None:
            raise ConfigurationError("Verification scheme is not configured (use --scheme or 'scheme' in the config file)")
        return VerifyOptions(scheme=self.scheme, local_prefix=self.local, ignore_generated=self.ignore_generated)


def load_config(path: Path) -> ImpiConfig:
    """
    Load configuration from a YAML file.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid
    """
    try:
        data = _YAML.load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file {path}: {e}") from e
    except YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    logger.debug(f"Loaded configuration from {path}")
    return ImpiConfig.from_dict(data, source=str(path))


def find_config(root: Path) -> Optional[Path]:
    """Locate the config file in root (no upward search)."""
    candidate = root / CONFIG_FILE_NAME
    return candidate if candidate.is_file() else None


__all__ = ["ImpiConfig", "load_config", "find_config", "CONFIG_FILE_NAME"]
