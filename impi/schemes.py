"""
Matching of import groups against a verification scheme.

Two kinds of violations are produced:
- mixed groups: a group holding imports of more than one kind
  (one violation per statement that differs from the group's first one);
- order: the sequence of group kinds is not allowed by the scheme
  (at most one violation per file).

Ordering inside a group is not checked.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .model import ImportGroup, ImportKind, VerificationScheme, Violation

MIXED_GROUP_MESSAGE = "Imports of different types are not allowed in the same group"
ORDER_MESSAGE = "Import groups are not in the proper order"


def match_scheme(groups: Sequence[ImportGroup], scheme: VerificationScheme) -> Tuple[Violation, ...]:
    """Collect every violation of the given groups against the scheme."""
    violations: List[Violation] = []

    for index, group in enumerate(groups, start=1):
        violations.extend(_mixed_group_violations(index, group))

    order_violation = _order_violation(groups, scheme)
    if order_violation is not None:
        violations.append(order_violation)

    return tuple(violations)


def _mixed_group_violations(index: int, group: ImportGroup) -> List[Violation]:
    if not group.is_mixed:
        return []

    first = group.statements[0]
    result = []
    for stmt in group.statements[1:]:
        if stmt.kind == first.kind:
            continue
        result.append(Violation(
            line=stmt.line,
            path=stmt.path,
            message=(
                f"{stmt.line}: {MIXED_GROUP_MESSAGE} ({index}): "
                f"\"{stmt.path}\" ({_label(stmt.kind)}) != \"{first.path}\" ({_label(first.kind)})"
            ),
        ))
    return result


def _order_violation(groups: Sequence[ImportGroup], scheme: VerificationScheme) -> Optional[Violation]:
    # Distinct kinds in order of appearance, consecutive pure groups collapsed
    observed: List[Tuple[ImportKind, ImportGroup]] = []
    for group in groups:
        if group.is_mixed or group.kind is None:
            continue
        if observed and observed[-1][0] == group.kind:
            continue
        observed.append((group.kind, group))

    last_position = -1
    for kind, group in observed:
        position = scheme.kinds.index(kind)
        if position <= last_position:
            got = " -> ".join(k.label for k, _ in observed)
            first = group.statements[0]
            return Violation(
                line=first.line,
                path=first.path,
                message=f"{first.line}: {ORDER_MESSAGE}: expected {scheme.describe()}, got {got}",
            )
        last_position = position

    return None


def _label(kind: Optional[ImportKind]) -> str:
    return kind.label if kind is not None else "unknown"


__all__ = ["match_scheme", "MIXED_GROUP_MESSAGE", "ORDER_MESSAGE"]
