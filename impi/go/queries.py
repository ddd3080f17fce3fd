"""
Tree-sitter query definitions for Go import scanning.
"""

from __future__ import annotations

QUERIES = {
    # Every import spec, both single-line and parenthesised declarations
    "imports": """
    (import_spec
      path: (_) @import_path) @import_spec
    """,
}
