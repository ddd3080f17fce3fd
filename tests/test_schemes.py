"""
Tests for matching import groups against verification schemes.
"""

import pytest

from impi import ConfigurationError, ImportKind, ImportStatement, VerificationScheme, group_imports, match_scheme
from impi.schemes import MIXED_GROUP_MESSAGE, ORDER_MESSAGE

STD = ImportKind.STANDARD
LOCAL = ImportKind.LOCAL
THIRD = ImportKind.THIRD_PARTY

PATHS = {STD: "fmt", LOCAL: "github.com/pavius/impi/x", THIRD: "github.com/example/foo"}


def groups_of(*layout):
    """
    Build groups from a layout like ([STD, STD], [THIRD]): one inner list per group.
    Line numbers are assigned sequentially with a blank line between groups.
    """
    statements = []
    line = 4
    for group_index, kinds in enumerate(layout):
        for i, kind in enumerate(kinds):
            statements.append(ImportStatement(
                path=f"{PATHS[kind]}{line}",
                line=line,
                preceded_by_blank_line=group_index > 0 and i == 0,
                kind=kind,
            ))
            line += 1
        line += 1
    return group_imports(statements)


class TestOrder:

    @pytest.mark.parametrize("layout", [
        ([STD],),
        ([STD], [LOCAL], [THIRD]),
        ([STD], [THIRD]),
        ([LOCAL], [THIRD]),
        ([THIRD],),
        ([STD, STD], [STD], [THIRD]),
    ])
    def test_accepted_std_local_third_party(self, layout):
        assert match_scheme(groups_of(*layout), VerificationScheme.STD_LOCAL_THIRD_PARTY) == ()

    @pytest.mark.parametrize("layout", [
        ([THIRD], [STD]),
        ([STD], [THIRD], [LOCAL]),
        ([LOCAL], [STD]),
        ([STD], [THIRD], [STD]),
    ])
    def test_rejected_std_local_third_party(self, layout):
        violations = match_scheme(groups_of(*layout), VerificationScheme.STD_LOCAL_THIRD_PARTY)
        assert len(violations) == 1
        assert ORDER_MESSAGE in violations[0].message
        assert "expected std -> local -> third party" in violations[0].message

    def test_std_third_party_local_scheme(self):
        layout = ([STD], [THIRD], [LOCAL])
        assert match_scheme(groups_of(*layout), VerificationScheme.STD_THIRD_PARTY_LOCAL) == ()

        violations = match_scheme(groups_of([STD], [LOCAL], [THIRD]), VerificationScheme.STD_THIRD_PARTY_LOCAL)
        assert len(violations) == 1
        assert "got std -> local -> third party" in violations[0].message

    def test_order_violation_points_at_first_offending_group(self):
        # Lines: 4 (third), blank, 6 (std)
        (violation,) = match_scheme(groups_of([THIRD], [STD]), VerificationScheme.STD_LOCAL_THIRD_PARTY)
        assert violation.line == 6
        assert violation.message.startswith("6: ")


class TestMixedGroups:

    def test_one_violation_per_extraneous_statement(self):
        # Lines 4..7: std, third, std, third
        violations = match_scheme(groups_of([STD, THIRD, STD, THIRD]), VerificationScheme.STD_LOCAL_THIRD_PARTY)

        assert [v.line for v in violations] == [5, 7]
        for v in violations:
            assert MIXED_GROUP_MESSAGE in v.message
            assert "(1)" in v.message
            assert v.path.startswith("github.com/example/foo")

    def test_mixed_groups_do_not_short_circuit_order_check(self):
        groups = groups_of([THIRD], [STD, LOCAL], [STD])
        violations = match_scheme(groups, VerificationScheme.STD_LOCAL_THIRD_PARTY)

        messages = [v.message for v in violations]
        assert sum(MIXED_GROUP_MESSAGE in m for m in messages) == 1
        assert sum(ORDER_MESSAGE in m for m in messages) == 1
        assert "(2)" in messages[0]

    def test_group_number_is_reported(self):
        violations = match_scheme(groups_of([STD], [THIRD, LOCAL]), VerificationScheme.STD_THIRD_PARTY_LOCAL)
        assert len(violations) == 1
        assert f"{MIXED_GROUP_MESSAGE} (2)" in violations[0].message
        assert "(local) != " in violations[0].message


class TestVerificationScheme:

    @pytest.mark.parametrize("name, scheme", [
        ("stdLocalThirdParty", VerificationScheme.STD_LOCAL_THIRD_PARTY),
        ("stdThirdPartyLocal", VerificationScheme.STD_THIRD_PARTY_LOCAL),
        ("STD_LOCAL_THIRD_PARTY", VerificationScheme.STD_LOCAL_THIRD_PARTY),
    ])
    def test_from_name(self, name, scheme):
        assert VerificationScheme.from_name(name) is scheme

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError, match="Unknown verification scheme"):
            VerificationScheme.from_name("thirdPartyFirst")

    def test_every_scheme_lists_each_kind_once(self):
        for scheme in VerificationScheme:
            assert sorted(k.value for k in scheme.kinds) == sorted(k.value for k in ImportKind)
