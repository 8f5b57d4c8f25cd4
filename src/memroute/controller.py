"""Route controller — ties the history stack to route resolution.

The controller owns one ``HistoryStack`` and one ``MemoryHistory`` handle.
Every navigation call is applied synchronously, in call order.  When a call
actually changes the stack the controller:

1. Records a ``NavigationEvent`` (when a collector is attached).
2. Re-resolves its sibling route declarations against the new location.
3. Notifies every subscriber with the new ``Resolution`` before returning.
   A subscriber that raises is logged and the rest are still notified.

No-op calls (pushing the current location, ``back()`` at the first entry,
...) change nothing and notify nobody.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from memroute._memo import memoize_last
from memroute.config import RouterConfig
from memroute.context import HistoryScope
from memroute.history.api import MemoryHistory
from memroute.history.stack import HistoryStack
from memroute.routing.descriptor import RouteDescriptor, descriptor_from_mapping
from memroute.routing.matcher import strategy
from memroute.routing.params import bootstrap
from memroute.routing.render import render_route

if TYPE_CHECKING:
    from memroute._types import Listener, RouteParams
    from memroute.observability.collector import NavigationCollector
    from memroute.observability.events import NavigationOperation

logger = logging.getLogger(__name__)

_OPERATIONS = frozenset({"back", "forward", "go", "push_state", "replace_state"})


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """An active route declaration.

    Attributes:
        index: Position among the sibling declarations.
        descriptor: The bootstrapped copy handed to the renderer.

    """

    index: int
    descriptor: RouteDescriptor

    @property
    def params(self) -> RouteParams:
        return self.descriptor.route_params or {}


@dataclass(frozen=True, slots=True)
class Resolution:
    """Snapshot of the active routes for one location.

    Attributes:
        location: The location that was resolved.
        matches: Active declarations in sibling order.

    """

    location: str | None
    matches: tuple[RouteMatch, ...]

    @property
    def active(self) -> RouteMatch | None:
        """The first active declaration, if any."""
        return self.matches[0] if self.matches else None


class RouteController:
    """In-memory router for a set of sibling route declarations.

    Args:
        config: Construction config; defaults to a stack seeded with ``"/"``.
        routes: Sibling declarations, in priority order.  When empty, the
            routes listed in ``config.routes`` are used.
        scope: Enclosing scope.  The controller provides its handle in a
            child of it, so nested controllers stay independent.
        collector: Optional event collector.

    """

    def __init__(
        self,
        config: RouterConfig | None = None,
        routes: Iterable[RouteDescriptor] = (),
        *,
        scope: HistoryScope | None = None,
        collector: NavigationCollector | None = None,
    ) -> None:
        self._config = config if config is not None else RouterConfig()
        entries = self._config.initial_entries()
        self._stack = HistoryStack(entries, self._config.resolved_position(entries))

        declared = tuple(routes)
        if not declared:
            declared = tuple(descriptor_from_mapping(route) for route in self._config.routes)
        self._routes = declared

        self._collector = collector
        self._listeners: list[Listener] = []
        self._history = MemoryHistory(self)
        self._scope = (scope if scope is not None else HistoryScope()).child()
        self._scope.provide(self._history)
        self._resolve = memoize_last(self._resolve_routes)

    # ----- Accessors -----

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def stack(self) -> HistoryStack:
        return self._stack

    @property
    def routes(self) -> tuple[RouteDescriptor, ...]:
        return self._routes

    @property
    def history(self) -> MemoryHistory:
        """The navigation handle.  Always the same object for this controller."""
        return self._history

    @property
    def scope(self) -> HistoryScope:
        """The scope this controller provides its handle in."""
        return self._scope

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    # ----- Subscriptions -----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every effective navigation change.

        Returns a callable that removes the subscription.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ----- Navigation -----

    def navigate(self, operation: NavigationOperation, *args: Any) -> bool:
        """Apply *operation* to the stack and propagate the change.

        Returns ``True`` when the stack changed.
        """
        if operation not in _OPERATIONS:
            msg = f"Unknown navigation operation {operation!r}"
            raise ValueError(msg)

        before = self._stack.location()
        changed = getattr(self._stack, operation)(*args)
        if not changed:
            logger.debug("%s%r left %r unchanged", operation, args, before)
            return False

        after = self._stack.location()
        logger.debug("%s%r: %r -> %r", operation, args, before, after)
        if self._collector is not None:
            self._collector.record_navigation(
                operation,
                before=before,
                path=after,
                position=self._stack.position,
                length=len(self._stack),
            )

        resolution = self.resolution()
        for listener in list(self._listeners):
            try:
                listener(resolution)
            except Exception:
                logger.exception("Navigation listener %r failed", listener)
        return True

    def location(self) -> str | None:
        return self._stack.location()

    # ----- Resolution -----

    def strategy(self, descriptor: RouteDescriptor, location: str | None, index: int) -> bool:
        """Match-decision callback for the rendering tree."""
        return strategy(descriptor, location, index)

    def bootstrap(self, descriptor: RouteDescriptor, index: int) -> RouteDescriptor:
        """Prop-derivation callback for the rendering tree."""
        return bootstrap(descriptor, index, location=self.location(), history=self._history)

    def resolution(self) -> Resolution:
        """Active routes for the current location.

        Recomputed only when the location differs from the previous call.
        """
        return self._resolve(self.location(), self._routes)

    def _resolve_routes(
        self,
        location: str | None,
        routes: tuple[RouteDescriptor, ...],
    ) -> Resolution:
        matches: list[RouteMatch] = []
        for index, descriptor in enumerate(routes):
            if not self.strategy(descriptor, location, index):
                continue
            derived = bootstrap(descriptor, index, location=location, history=self._history)
            matches.append(RouteMatch(index=index, descriptor=derived))
            if self._config.single_route:
                break

        if self._collector is not None:
            self._collector.record_resolution(
                location,
                [match.descriptor.pattern for match in matches],
                candidates=len(routes),
            )
        return Resolution(location=location, matches=tuple(matches))

    def render(self) -> list[Any]:
        """Render every active declaration, in sibling order.

        Misconfigured declarations render as ``None`` without affecting
        their siblings.
        """
        return [
            render_route(match.descriptor, index=match.index, collector=self._collector)
            for match in self.resolution().matches
        ]

    def __repr__(self) -> str:
        return f"RouteController(location={self.location()!r}, routes={len(self._routes)})"
