"""Tests for memroute.routing.matcher — the strategy callback."""

import pytest

from memroute.routing.descriptor import RouteDescriptor
from memroute.routing.matcher import count_values, params_match, split_pattern, strategy


class TestSplitPattern:
    def test_single_label(self) -> None:
        assert split_pattern("/users/:id") == ("/users/", ["id"])

    def test_labels_over_levels(self) -> None:
        assert split_pattern("/a/:x/:y") == ("/a/", ["x", "y"])

    def test_grouped_labels(self) -> None:
        assert split_pattern("/a/:x:y") == ("/a/", ["x", "y"])

    def test_no_labels(self) -> None:
        assert split_pattern("/about") == ("/about", [])


class TestCountValues:
    def test_ignores_empty_tokens(self) -> None:
        assert count_values("1&&2&") == 2

    def test_empty_remainder(self) -> None:
        assert count_values("") == 0


class TestParamsMatch:
    def test_identical_strings(self) -> None:
        assert params_match("/users/:id", "/users/:id") is True

    def test_count_equal(self) -> None:
        assert params_match("/users/:id", "/users/42") is True

    def test_count_differs(self) -> None:
        assert params_match("/users/:id", "/users/42&43") is False


class TestCatchAll:
    """Declarations without a pattern match unconditionally."""

    @pytest.mark.parametrize("location", ["/", "/anything/at/all", "", None])
    def test_matches_everything(self, location: str | None) -> None:
        assert strategy(RouteDescriptor(), location, 0) is True

    def test_empty_pattern_is_catch_all(self) -> None:
        assert strategy(RouteDescriptor(pattern=""), "/x", 0) is True


class TestExact:
    """exact — full equality, or static-prefix equality for parameterized patterns."""

    def test_equal(self) -> None:
        assert strategy(RouteDescriptor("/about", exact=True), "/about", 0) is True

    def test_longer_location_fails(self) -> None:
        assert strategy(RouteDescriptor("/about", exact=True), "/about/team", 0) is False

    def test_trailing_slash_fails(self) -> None:
        assert strategy(RouteDescriptor("/about", exact=True), "/about/", 0) is False

    def test_params_scenario(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True, exact_params=True)
        assert strategy(descriptor, "/users/42", 0) is True

    def test_params_count_mismatch(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True, exact_params=True)
        assert strategy(descriptor, "/users/42&43", 0) is False

    def test_missing_value_fails_exact_params(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True, exact_params=True)
        assert strategy(descriptor, "/users/", 0) is False

    def test_without_exact_params_any_count(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True)
        assert strategy(descriptor, "/users/42&43", 0) is True
        assert strategy(descriptor, "/users/", 0) is True

    def test_prefix_mismatch(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True)
        assert strategy(descriptor, "/teams/42", 0) is False

    def test_two_labels(self) -> None:
        descriptor = RouteDescriptor("/a/:x/:y", exact=True, exact_params=True)
        assert strategy(descriptor, "/a/1&2", 0) is True
        assert strategy(descriptor, "/a/1", 0) is False

    def test_none_location(self) -> None:
        assert strategy(RouteDescriptor("/about", exact=True), None, 0) is False


class TestNonExact:
    """Non-exact — substring containment for layout-style parents."""

    def test_substring_scenario(self) -> None:
        assert strategy(RouteDescriptor("/dash"), "/dashboard/overview", 0) is True

    def test_contained_anywhere(self) -> None:
        assert strategy(RouteDescriptor("/settings"), "/admin/settings", 0) is True

    def test_not_contained(self) -> None:
        assert strategy(RouteDescriptor("/dash"), "/home", 0) is False

    def test_parameterized_uses_static_prefix(self) -> None:
        descriptor = RouteDescriptor("/users/:id")
        assert strategy(descriptor, "/users/42", 0) is True
        assert strategy(descriptor, "/org/users/42", 0) is True
        assert strategy(descriptor, "/teams/42", 0) is False


class TestIndex:
    def test_index_does_not_change_result(self) -> None:
        descriptor = RouteDescriptor("/about", exact=True)
        assert {strategy(descriptor, "/about", i) for i in range(5)} == {True}

    def test_descriptor_unchanged(self) -> None:
        descriptor = RouteDescriptor("/users/:id", exact=True, exact_params=True)
        strategy(descriptor, "/users/42", 0)
        assert descriptor == RouteDescriptor("/users/:id", exact=True, exact_params=True)
