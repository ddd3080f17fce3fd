"""
Go import scanning and classification using Tree-sitter AST.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional

from tree_sitter import Language

from ..errors import ParseError
from ..model import ImportKind, ImportStatement, ScanResult
from ..tree_sitter_support import Node
from .document import GoDocument, load_go_language

# https://pkg.go.dev/cmd/go#hdr-Generate_Go_files_by_processing_source
GENERATED_MARKER = re.compile(r"^// Code generated .* DO NOT EDIT\.$")


class GoImportClassifier:
    """Go-specific import classifier driven by the local (project) prefix."""

    def __init__(self, local_prefix: str):
        # "github.com/org/repo/" and "github.com/org/repo" denote the same module
        self.local_prefix = local_prefix.rstrip("/")

    def classify(self, module_name: str) -> ImportKind:
        """Determine the kind of a Go import path."""
        if self.is_local(module_name):
            return ImportKind.LOCAL
        if self.is_standard(module_name):
            return ImportKind.STANDARD
        return ImportKind.THIRD_PARTY

    def is_local(self, module_name: str) -> bool:
        """Prefix match on a path segment boundary ("foo" does not match "foobar/x")."""
        if not self.local_prefix:
            return False
        return module_name == self.local_prefix or module_name.startswith(self.local_prefix + "/")

    @staticmethod
    def is_standard(module_name: str) -> bool:
        # Standard library paths never start with a domain name
        return '.' not in module_name.split('/')[0]


def classify(path: str, local_prefix: str) -> ImportKind:
    """Classify a single import path."""
    return GoImportClassifier(local_prefix).classify(path)


class GoImportScanner:
    """
    Extracts the import statements of a Go source file.

    Only the import section and the comments before the package clause
    are inspected; syntax errors elsewhere in the file are ignored.
    """

    def __init__(self, language: Optional[Language] = None):
        self.language = language if language is not None else load_go_language()

    def scan(self, text: str) -> ScanResult:
        """
        Scan Go source text.

        Returns:
            ScanResult with statements in source order (kinds not assigned yet)

        Raises:
            ParseError: If the import section is malformed
        """
        doc = GoDocument(text, self.language)
        self._check_import_placement(doc)
        self._check_import_syntax(doc)

        return ScanResult(
            statements=tuple(self._iter_statements(doc)),
            is_generated=self._is_generated(doc),
        )

    @staticmethod
    def _check_import_placement(doc: GoDocument) -> None:
        # Imports must precede every other top-level declaration
        for node in doc.root_node.children:
            # Terminators are anonymous nodes; broken syntax is left to _check_import_syntax
            if not node.is_named or node.type in ("package_clause", "import_declaration", "comment", "ERROR"):
                continue
            following = node.next_sibling
            while following is not None:
                if following.type == "import_declaration":
                    raise ParseError("Import declaration after other declarations", _line(following))
                following = following.next_sibling
            return

    @staticmethod
    def _check_import_syntax(doc: GoDocument) -> None:
        if not doc.has_error():
            return

        for decl in doc.find_nodes_by_type("import_declaration"):
            if not decl.has_error:
                continue
            bad = doc.find_missing(decl)
            if bad is not None:
                raise ParseError(f"Malformed import declaration: missing '{bad.type}'", _line(bad))
            errors = doc.find_nodes_by_type("ERROR", decl)
            raise ParseError("Malformed import declaration", _line(errors[0] if errors else decl))

        # Error recovery may not produce an import_declaration at all
        for error in doc.get_errors():
            for keyword in doc.find_nodes_by_type("import", error):
                decl = doc.get_parent_of_type(keyword, "import_declaration")
                if decl is None or decl.has_error:
                    raise ParseError("Malformed import declaration", _line(error))

    def _iter_statements(self, doc: GoDocument) -> Iterator[ImportStatement]:
        lines = doc.text.split("\n")
        prev_end: Optional[int] = None

        for spec in doc.query_nodes("imports", "import_spec"):
            path_node = spec.child_by_field_name("path")
            if path_node is None:
                raise ParseError("Import spec without a path", _line(spec))

            start, end = doc.get_line_range(spec)
            yield ImportStatement(
                path=self._parse_path_literal(doc, path_node),
                line=start + 1,
                preceded_by_blank_line=prev_end is not None and _has_blank_line(lines, prev_end, start),
            )
            prev_end = end

    @staticmethod
    def _parse_path_literal(doc: GoDocument, node: Node) -> str:
        text = doc.get_node_text(node)
        if len(text) < 2 or text[0] not in '"`' or text[-1] != text[0]:
            raise ParseError(f"Malformed import path literal {text!r}", _line(node))

        path = text[1:-1]
        if not path:
            raise ParseError("Empty import path", _line(node))
        return path

    @staticmethod
    def _is_generated(doc: GoDocument) -> bool:
        # Only the comments preceding the package clause count
        for node in doc.root_node.children:
            if node.type != "comment":
                break
            for line in doc.get_node_text(node).splitlines():
                if GENERATED_MARKER.match(line.rstrip("\r")):
                    return True
        return False


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _has_blank_line(lines: List[str], after: int, before: int) -> bool:
    """True when a whitespace-only line lies strictly between two 0-based line indexes."""
    return any(not lines[i].strip() for i in range(after + 1, before))


__all__ = ["GoImportClassifier", "GoImportScanner", "classify", "GENERATED_MARKER"]
