"""
Tree-sitter infrastructure for source scanners.
Provides grammar binding, named queries and node utilities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from tree_sitter import Tree, Node, Parser, Query, Language, QueryCursor


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document with a named query system.
    """

    def __init__(self, text: str):
        self.text = text
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode('utf-8')
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """
        Get Language instance for parsing and queries.

        Returns:
            Language instance
        """
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """
        Get named query definitions for this language.

        Returns:
            Dict mapping query names to query strings
        """
        pass

    def _parse(self):
        parser = Parser(self.get_language())
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        """Get the root node of the parsed tree."""
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Args:
            query_name: Name of the query to execute

        Returns:
            List of (node, capture_name) tuples in document order

        Raises:
            ValueError: If query is not defined for this language
        """
        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])

        results = []
        for _pattern_index, captures in cursor.matches(self.root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        results.sort(key=lambda item: item[0].start_byte)
        return results

    def query_nodes(self, query_name: str, capture_name: str) -> List[Node]:
        """Execute a named query and return only nodes of one capture, deduplicated."""
        seen = set()
        nodes = []
        for node, name in self.query(query_name):
            key = (node.start_byte, node.end_byte)
            if name == capture_name and key not in seen:
                seen.add(key)
                nodes.append(node)
        return nodes

    def find_nodes_by_type(self, node_type: str, start_node: Optional[Node] = None) -> List[Node]:
        """Find all nodes of a specific type (depth-first, document order)."""
        if start_node is None:
            start_node = self.root_node

        results = []

        def visit(node: Node):
            if node.type == node_type:
                results.append(node)
            for child in node.children:
                visit(child)

        visit(start_node)
        return results

    def get_node_text(self, node: Node) -> str:
        """Get text content for a node."""
        return self._text_bytes[node.start_byte:node.end_byte].decode('utf-8')

    @staticmethod
    def get_line_range(node: Node) -> Tuple[int, int]:
        """Get line range (0-based) for a node."""
        return node.start_point[0], node.end_point[0]

    @staticmethod
    def get_parent_of_type(node: Node, node_type: str) -> Optional[Node]:
        """Find the first parent of a specific type."""
        current = node.parent
        while current:
            if current.type == node_type:
                return current
            current = current.parent
        return None

    def has_error(self) -> bool:
        """Check if the tree has any syntax errors."""
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_errors(self) -> List[Node]:
        """Get all error nodes in the tree."""
        return self.find_nodes_by_type("ERROR")

    @staticmethod
    def find_missing(node: Node) -> Optional[Node]:
        """Return the first MISSING node (token inserted by error recovery) under node."""
        if node.is_missing:
            return node
        for child in node.children:
            found = TreeSitterDocument.find_missing(child)
            if found is not None:
                return found
        return None


__all__ = ["TreeSitterDocument", "Node"]
