"""
Tests for Go import path classification.
"""

import pytest

from impi import ImportKind, classify
from impi.go import GoImportClassifier

LOCAL = "github.com/pavius/impi"


class TestClassify:

    @pytest.mark.parametrize("path, expected", [
        ("fmt", ImportKind.STANDARD),
        ("os", ImportKind.STANDARD),
        ("net/http", ImportKind.STANDARD),
        ("encoding/json", ImportKind.STANDARD),
        ("C", ImportKind.STANDARD),
        ("github.com/pavius/impi", ImportKind.LOCAL),
        ("github.com/pavius/impi/pkg/verifier", ImportKind.LOCAL),
        ("github.com/pavius/impix", ImportKind.THIRD_PARTY),
        ("github.com/pavius/impix/util", ImportKind.THIRD_PARTY),
        ("github.com/example/foo", ImportKind.THIRD_PARTY),
        ("github.com/stretchr/testify/suite", ImportKind.THIRD_PARTY),
        ("gopkg.in/yaml.v3", ImportKind.THIRD_PARTY),
        ("golang.org/x/sync/errgroup", ImportKind.THIRD_PARTY),
    ])
    def test_classification_table(self, path, expected):
        assert classify(path, LOCAL) is expected

    def test_prefix_matches_on_segment_boundary_only(self):
        """A prefix "foo" must not claim "foobar/x"."""
        assert classify("example.com/foo/x", "example.com/foo") is ImportKind.LOCAL
        assert classify("example.com/foobar/x", "example.com/foo") is ImportKind.THIRD_PARTY

    def test_trailing_slash_on_prefix_is_ignored(self):
        assert classify("github.com/pavius/impi/x", LOCAL + "/") is ImportKind.LOCAL
        assert classify(LOCAL, LOCAL + "/") is ImportKind.LOCAL

    def test_empty_prefix_never_matches(self):
        assert classify("fmt", "") is ImportKind.STANDARD
        assert classify("github.com/example/foo", "") is ImportKind.THIRD_PARTY

    def test_dotless_module_prefix_is_local(self):
        """Module paths without a domain (e.g. "myproject") are still local when configured."""
        assert classify("myproject", "myproject") is ImportKind.LOCAL
        assert classify("myproject/internal/db", "myproject") is ImportKind.LOCAL
        assert classify("myprojectx/db", "myproject") is ImportKind.STANDARD

    @pytest.mark.parametrize("prefix", ["", "fmt", "myproject", LOCAL, "gopkg.in/yaml.v3", "a/b/c"])
    @pytest.mark.parametrize("path", ["fmt", "net/http", "myproject/x", LOCAL, "gopkg.in/yaml.v3", "x.y", "a/b/c"])
    def test_classification_is_total(self, path, prefix):
        kind = classify(path, prefix)
        assert kind in set(ImportKind)
        if path == prefix.rstrip("/") and prefix:
            assert kind is ImportKind.LOCAL


class TestGoImportClassifier:

    def test_is_standard_uses_first_segment(self):
        assert GoImportClassifier.is_standard("crypto/sha256")
        assert GoImportClassifier.is_standard("internal/x.y")
        assert not GoImportClassifier.is_standard("k8s.io/client-go")

    def test_instance_reused_for_many_paths(self):
        classifier = GoImportClassifier(LOCAL)
        kinds = [classifier.classify(p) for p in ("fmt", LOCAL + "/a", "github.com/x/y")]
        assert kinds == [ImportKind.STANDARD, ImportKind.LOCAL, ImportKind.THIRD_PARTY]
