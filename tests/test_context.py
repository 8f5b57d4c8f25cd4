"""Tests for memroute.context — scoped navigation handles."""

from typing import Any

import pytest

from memroute._errors import ScopeError
from memroute.config import RouterConfig
from memroute.context import HistoryScope, with_history_context
from memroute.controller import RouteController
from memroute.history.api import NavigationAPI


class TestHistoryScope:
    def test_empty_scope_raises(self) -> None:
        with pytest.raises(ScopeError, match="No navigation history"):
            _ = HistoryScope().history

    def test_lookup_returns_none_when_empty(self) -> None:
        assert HistoryScope().child().lookup() is None

    def test_child_inherits_from_parent(self) -> None:
        controller = RouteController()
        grandchild = controller.scope.child().child()
        assert grandchild.history is controller.history

    def test_provided_handle_is_a_navigation_api(self) -> None:
        controller = RouteController()
        assert isinstance(controller.scope.history, NavigationAPI)

    def test_controller_does_not_provide_in_parent(self) -> None:
        root = HistoryScope()
        RouteController(scope=root)
        assert root.lookup() is None


class TestWithHistoryContext:
    def test_injects_history(self) -> None:
        def view(title: str, history: Any) -> tuple[str, str | None]:
            return title, history.location()

        controller = RouteController()
        wrapped = with_history_context(view)
        assert wrapped(controller.scope, "Home") == ("Home", "/")

    def test_looked_up_at_call_time(self) -> None:
        seen: list[Any] = []
        wrapped = with_history_context(lambda history: seen.append(history))
        outer = RouteController()
        inner = RouteController(scope=outer.scope)
        wrapped(outer.scope)
        wrapped(inner.scope)
        assert seen == [outer.history, inner.history]

    def test_preserves_metadata(self) -> None:
        def profile_view(history: Any) -> None:
            """Render a profile."""

        wrapped = with_history_context(profile_view)
        assert wrapped.__name__ == "profile_view"
        assert wrapped.__doc__ == "Render a profile."

    def test_explicit_history_wins(self) -> None:
        def view(history: Any) -> str | None:
            return history.location()

        controller = RouteController()
        other = RouteController(RouterConfig(initial_history="/elsewhere"))
        wrapped = with_history_context(view)
        assert wrapped(controller.scope, history=other.history) == "/elsewhere"

    def test_explicit_history_needs_no_provider(self) -> None:
        controller = RouteController(RouterConfig(initial_history="/solo"))
        wrapped = with_history_context(lambda history: history.location())
        assert wrapped(HistoryScope(), history=controller.history) == "/solo"
