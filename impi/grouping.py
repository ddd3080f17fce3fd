"""
Segmentation of import statements into blank-line separated groups.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .model import ImportGroup, ImportStatement


def group_imports(statements: Iterable[ImportStatement]) -> Tuple[ImportGroup, ...]:
    """
    Partition statements (in source order) into groups.

    A new group starts at every statement preceded by a blank line;
    the first statement always opens the first group.
    """
    groups: List[ImportGroup] = []
    current: List[ImportStatement] = []

    for stmt in statements:
        if current and stmt.preceded_by_blank_line:
            groups.append(ImportGroup(tuple(current)))
            current = []
        current.append(stmt)

    if current:
        groups.append(ImportGroup(tuple(current)))

    return tuple(groups)


__all__ = ["group_imports"]
