"""
Go document: Tree-sitter grammar binding for Go sources.
"""

from __future__ import annotations

from typing import Dict

from tree_sitter import Language

from ..errors import ConfigurationError
from ..tree_sitter_support import TreeSitterDocument


def load_go_language() -> Language:
    """
    Load the Go grammar.

    Raises:
        ConfigurationError: If the grammar package is missing or incompatible
    """
    try:
        import tree_sitter_go as tsgo
        return Language(tsgo.language())
    except (ImportError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Failed to load the Go grammar (tree-sitter-go): {e}") from e


class GoDocument(TreeSitterDocument):

    def __init__(self, text: str, language: Language):
        self._language = language
        super().__init__(text)

    def get_language(self) -> Language:
        return self._language

    def get_query_definitions(self) -> Dict[str, str]:
        from .queries import QUERIES
        return QUERIES
