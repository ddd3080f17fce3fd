from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import ImpiConfig, find_config, load_config
from .errors import ImpiUserError
from .model import VerificationScheme
from .runner import run_verification
from .version import tool_version
from .walker import iter_go_files

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="impi",
        description="Verify that Go imports are grouped and ordered by kind (std, local, third party)",
        add_help=True,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="verbose logging to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "targets",
        nargs="+",
        metavar="TARGET",
        help="file, directory, or directory/... for recursive discovery",
    )
    p.add_argument("--local", metavar="PREFIX", help="import path prefix of the local project")
    p.add_argument(
        "--scheme",
        choices=[s.cli_name for s in VerificationScheme],
        help="accepted order of import groups",
    )
    p.add_argument(
        "--ignore-generated",
        action="store_true",
        default=None,
        help="skip files carrying a 'Code generated ... DO NOT EDIT.' header",
    )
    p.add_argument(
        "--skip",
        action="append",
        metavar="PATTERN",
        help="gitwildmatch pattern of paths to skip (can be repeated)",
    )
    p.add_argument("--config", metavar="PATH", help="configuration file (default: ./.impi.yaml)")
    p.add_argument("--workers", type=int, metavar="N", help="number of parallel workers")
    p.add_argument("--format", choices=["text", "json"], default="text", help="output format")
    return p


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("impi")
    level = logging.DEBUG if verbose or os.environ.get("IMPI_DEBUG") else logging.WARNING
    root.setLevel(level)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _load_base_config(config_arg: Optional[str]) -> ImpiConfig:
    if config_arg:
        return load_config(Path(config_arg))
    found = find_config(Path.cwd())
    return load_config(found) if found else ImpiConfig()


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.workers is not None and ns.workers < 1:
            raise ImpiUserError("--workers must be a positive integer")

        cfg = _load_base_config(ns.config).merged(
            local=ns.local,
            scheme=VerificationScheme.from_name(ns.scheme) if ns.scheme else None,
            ignore_generated=ns.ignore_generated,
            skip=ns.skip,
            workers=ns.workers,
        )
        options = cfg.to_verify_options()
        files = iter_go_files(ns.targets, cfg.skip)
        report = run_verification(files, options, workers=cfg.workers)

    except ImpiUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return EXIT_USAGE

    if ns.format == "json":
        sys.stdout.write(json.dumps(report.model_dump(mode="json"), ensure_ascii=False, indent=2) + "\n")
    else:
        for file_report in report.files:
            for line in file_report.lines():
                sys.stdout.write(line + "\n")

    logger.info(f"Checked {report.checked} file(s), {report.failed} with findings")
    return EXIT_FINDINGS if report.failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
