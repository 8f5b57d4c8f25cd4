"""Navigation event log.

A bounded ring buffer of ``RouterEvent`` records.  Queries answer the
questions a router user asks: which operations moved the stack, which
locations were visited, and which declarations failed to render.

Thread Safety:
    All methods take a ``threading.Lock``, so one log can be shared by
    several controllers.

"""

import threading
from collections import deque

from memroute.observability.events import (
    NavigationEvent,
    NavigationOperation,
    RouteConfigErrorEvent,
    RouterEvent,
)


def _subject(event: RouterEvent) -> str:
    """The location (or, for config errors, the pattern) an event is about."""
    if isinstance(event, RouteConfigErrorEvent):
        return event.pattern or ""
    return event.path or ""


class EventLog:
    """Bounded store of router events, oldest dropped first.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[RouterEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: RouterEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        operation: NavigationOperation | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[RouterEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only events of this type.
            operation: Only navigation events produced by this operation
                (``"back"``, ``"push_state"``, ...).  Implies
                ``NavigationEvent``.
            since_ns: Only events recorded at or after this timestamp.
            path: Only events whose location (or pattern, for config
                errors) contains this substring.
            limit: Maximum number of events to return.

        """
        with self._lock:
            events = list(self._events)

        results: list[RouterEvent] = []
        for event in reversed(events):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if operation is not None and not (
                isinstance(event, NavigationEvent) and event.operation == operation
            ):
                continue
            if since_ns and event.timestamp_ns < since_ns:
                continue
            if path is not None and path not in _subject(event):
                continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[RouterEvent]:
        """Return the *n* most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def trail(self) -> list[str | None]:
        """Locations reached by recorded navigation changes, in order.

        Each entry is where the stack stood after one effective operation.
        """
        with self._lock:
            return [event.path for event in self._events if isinstance(event, NavigationEvent)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
