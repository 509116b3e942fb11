"""Unit tests for tenancy paths and the candidate filters."""

import pytest

from leasing.domain.errors import NoParentError
from leasing.domain.tenancy import (
    ApplicationTenancy,
    PathMatching,
    TenancyPath,
    children_of,
    contains,
    parents_of,
    path_of,
)

# pylint: disable=magic-value-comparison


class TestTenancyPathBasics:
    """Construction, equality and formatting."""

    @staticmethod
    def test_of_none_is_none():
        """`of(None)` returns None instead of a path."""
        assert TenancyPath.of(None) is None

    @staticmethod
    def test_of_wraps_path():
        """`of` wraps a string."""
        assert TenancyPath.of("/it") == TenancyPath("/it")

    @staticmethod
    def test_root():
        """The root path is '/'."""
        assert TenancyPath.root() == TenancyPath("/")
        assert TenancyPath.root().is_root
        assert not TenancyPath("/it").is_root

    @staticmethod
    def test_str_is_path():
        """str() gives back the raw path."""
        assert str(TenancyPath("/it/rome")) == "/it/rome"

    @staticmethod
    def test_hashable_and_equal_by_path():
        """Paths with the same string collapse in a set."""
        assert {TenancyPath("/a"), TenancyPath("/a"), TenancyPath("/b")} == {
            TenancyPath("/a"),
            TenancyPath("/b"),
        }

    @staticmethod
    def test_ordering_is_lexicographic():
        """Sorting orders paths lexicographically."""
        paths = [TenancyPath("/b"), TenancyPath("/a/z"), TenancyPath("/"), TenancyPath("/a")]
        assert [str(p) for p in sorted(paths)] == ["/", "/a", "/a/z", "/b"]

    @staticmethod
    @pytest.mark.parametrize(
        "path, parts",
        [("/", ()), ("/a", ("a",)), ("/a/bb", ("a", "bb")), ("/a/b/", ("a", "b"))],
    )
    def test_parts(path, parts):
        """`parts` drops empty segments."""
        assert TenancyPath(path).parts == parts


class TestParent:
    """Tests for `TenancyPath.parent`."""

    @staticmethod
    @pytest.mark.parametrize(
        "path, expected",
        [("/a/b/c", "/a/b"), ("/a/b", "/a"), ("/a", "/")],
    )
    def test_parent_strips_last_segment(path, expected):
        """The parent drops exactly one segment."""
        assert TenancyPath(path).parent() == TenancyPath(expected)

    @staticmethod
    def test_root_has_no_parent():
        """Asking for the root's parent raises NoParentError."""
        with pytest.raises(NoParentError, match="Tenancy path '/' has no parent."):
            TenancyPath.root().parent()


class TestContainment:
    """Tests for `parent_of`, `child_of` and `contains`."""

    @staticmethod
    def test_root_is_parent_of_everything_else():
        """The root contains every other path."""
        root = TenancyPath.root()
        assert root.parent_of(TenancyPath("/it"))
        assert root.parent_of(TenancyPath("/it/rome"))

    @staticmethod
    def test_parent_of_and_child_of_are_mirrors():
        """`a.parent_of(b)` holds exactly when `b.child_of(a)` does."""
        a, b = TenancyPath("/it"), TenancyPath("/it/rome")
        assert a.parent_of(b)
        assert b.child_of(a)
        assert not b.parent_of(a)
        assert not a.child_of(b)

    @staticmethod
    def test_strict_containment():
        """A path is neither parent nor child of itself."""
        p = TenancyPath("/it/rome")
        assert not p.parent_of(p)
        assert not p.child_of(p)

    @staticmethod
    def test_none_is_never_related():
        """Comparisons against None are always False."""
        p = TenancyPath("/it")
        assert not p.parent_of(None)
        assert not p.child_of(None)

    @staticmethod
    def test_segment_matching_respects_boundaries():
        """'/ab' is not below '/a' when comparing segments."""
        assert not TenancyPath("/ab").child_of(TenancyPath("/a"))
        assert not contains(TenancyPath("/a"), TenancyPath("/ab"))

    @staticmethod
    def test_prefix_matching_ignores_boundaries():
        """'/ab' is below '/a' when comparing raw prefixes."""
        assert TenancyPath("/ab").child_of(TenancyPath("/a"), PathMatching.PREFIX)
        assert contains(TenancyPath("/a"), TenancyPath("/ab"), PathMatching.PREFIX)

    @staticmethod
    def test_prefix_matching_is_still_strict():
        """Prefix matching does not treat a path as its own child."""
        assert not contains(TenancyPath("/a"), TenancyPath("/a"), PathMatching.PREFIX)


class TestCandidateFilters:
    """Tests for `parents_of` and `children_of`."""

    @staticmethod
    def test_parents_of_preserves_order():
        """Only strict ancestors are kept, in input order."""
        candidates = ["/", "/a", "/x", "/a/b", "/a/x", "/a/b/c", "/a/b/c/d"]
        assert parents_of(TenancyPath("/a/b/c"), candidates) == ["/", "/a", "/a/b"]

    @staticmethod
    def test_children_of_preserves_order():
        """Only strict descendants are kept, in input order."""
        candidates = ["/", "/a", "/b", "/b/p", "/a/b", "/a/c", "/a/w/x/y"]
        assert children_of(TenancyPath("/a"), candidates) == ["/a/b", "/a/c", "/a/w/x/y"]

    @staticmethod
    def test_root_has_no_parents():
        """Nothing lies above the root."""
        assert not parents_of(TenancyPath.root(), ["/a", "/a/b", "/z"])

    @staticmethod
    def test_empty_candidates():
        """Filtering nothing yields nothing."""
        assert not parents_of(TenancyPath("/a"), [])
        assert not children_of(TenancyPath("/a"), [])

    @staticmethod
    def test_filters_tenancies_with_default_key():
        """Objects carrying a `path` attribute are filtered as-is."""
        rome = ApplicationTenancy("/it/rome", "Rome")
        paris = ApplicationTenancy("/fr/paris", "Paris")
        assert children_of(TenancyPath("/it"), [rome, paris]) == [rome]

    @staticmethod
    def test_custom_key():
        """A key function extracts the path from arbitrary candidates."""
        candidates = [("rome", "/it/rome"), ("italy", "/it")]
        result = parents_of(TenancyPath("/it/rome"), candidates, key=lambda c: c[1])
        assert result == [("italy", "/it")]

    @staticmethod
    def test_prefix_matching_in_filters():
        """The matching rule is passed through to the comparison."""
        candidates = ["/ab", "/a/b"]
        assert children_of(TenancyPath("/a"), candidates) == ["/a/b"]
        assert children_of(
            TenancyPath("/a"), candidates, matching=PathMatching.PREFIX
        ) == ["/ab", "/a/b"]


class TestPathOf:
    """Tests for the default key function."""

    @staticmethod
    def test_string():
        """Strings are returned unchanged."""
        assert path_of("/it") == "/it"

    @staticmethod
    def test_objects_with_path():
        """Anything with a `path` attribute yields that attribute."""
        assert path_of(TenancyPath("/it")) == "/it"
        assert path_of(ApplicationTenancy("/fr")) == "/fr"

    @staticmethod
    def test_tenancy_level():
        """A tenancy exposes its path as a `TenancyPath`."""
        assert ApplicationTenancy("/fr", "France").level == TenancyPath("/fr")
