"""Tree-scoped injection of the navigation handle.

A ``HistoryScope`` is an explicit context object with a parent pointer.
Each RouteController provides its handle in its own child scope, so nested
controllers never see each other's state and nothing is process-global.

Lookup walks from the scope towards the root and returns the nearest
provided handle::

    root = HistoryScope()
    outer = RouteController(scope=root)       # provides in root.child()
    inner = RouteController(scope=outer.scope)
    inner.scope.history is inner.history      # True
    outer.scope.history is outer.history      # True

"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from memroute._errors import ScopeError

if TYPE_CHECKING:
    from memroute.history.api import NavigationAPI


class HistoryScope:
    """A node in the scope tree, optionally holding a navigation handle.

    Args:
        parent: Enclosing scope, or ``None`` for a root scope.

    """

    __slots__ = ("_history", "_parent")

    def __init__(self, parent: HistoryScope | None = None) -> None:
        self._parent = parent
        self._history: NavigationAPI | None = None

    @property
    def parent(self) -> HistoryScope | None:
        return self._parent

    def child(self) -> HistoryScope:
        """Create a nested scope."""
        return HistoryScope(parent=self)

    def provide(self, history: NavigationAPI) -> None:
        """Make *history* visible to this scope and its descendants."""
        self._history = history

    def lookup(self) -> NavigationAPI | None:
        """Nearest provided handle, or ``None``."""
        scope: HistoryScope | None = self
        while scope is not None:
            if scope._history is not None:
                return scope._history
            scope = scope._parent
        return None

    @property
    def history(self) -> NavigationAPI:
        """Nearest provided handle.

        Raises:
            ScopeError: No controller provided a handle in this scope chain.

        """
        history = self.lookup()
        if history is None:
            msg = "No navigation history in scope. Create a RouteController first."
            raise ScopeError(msg)
        return history


def with_history_context[R](
    component: Callable[..., R],
) -> Callable[..., R]:
    """Wrap *component* so it receives ``history`` from a scope.

    The wrapped callable takes the scope as its first argument and passes
    the nearest handle, looked up at call time, as the ``history`` keyword.
    A ``history`` the caller passes explicitly is left as is.
    """

    @functools.wraps(component)
    def wrapper(scope: HistoryScope, /, *args: Any, **kwargs: Any) -> R:
        if "history" not in kwargs:
            kwargs["history"] = scope.history
        return component(*args, **kwargs)

    return wrapper
