"""
Shared test infrastructure: file helpers and CLI runners.
"""

from .cli_utils import run_cli
from .file_utils import write, write_go_file

__all__ = ["run_cli", "write", "write_go_file"]
