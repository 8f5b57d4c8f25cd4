"""Navigation observability — a unified event model for the router.

Records:
- **History**: every navigation operation that changed a stack
- **Routing**: resolution passes and misconfigured declarations

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from memroute.observability import EventLog, NavigationCollector
    >>> log = EventLog()
    >>> collector = NavigationCollector(log)
    >>> # Pass collector to RouteController(collector=...)

"""

from memroute.observability.collector import NavigationCollector
from memroute.observability.events import (
    NavigationEvent,
    RouteConfigErrorEvent,
    RouteResolved,
    RouterEvent,
    now_ns,
)
from memroute.observability.log import EventLog

__all__ = [
    "EventLog",
    "NavigationCollector",
    "NavigationEvent",
    "RouteConfigErrorEvent",
    "RouteResolved",
    "RouterEvent",
    "now_ns",
]
