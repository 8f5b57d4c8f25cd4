"""Event model for navigation observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal

type NavigationOperation = Literal["back", "forward", "go", "push_state", "replace_state"]


# ---------------------------------------------------------------------------
# History events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NavigationEvent:
    """A navigation operation changed a history stack.

    Attributes:
        operation: The navigation operation applied.
        before: Location before the change.
        path: Location after the change.
        position: Stack position after the change.
        length: Stack length after the change.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    operation: NavigationOperation
    before: str | None
    path: str | None
    position: int
    length: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Routing events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RouteResolved:
    """A resolution pass ran against a location.

    Attributes:
        path: The location that was resolved.
        matched: Patterns of the active declarations (``None`` for catch-alls).
        candidates: Number of sibling declarations evaluated.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str | None
    matched: tuple[str | None, ...]
    candidates: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RouteConfigErrorEvent:
    """A terminal declaration had neither children nor a component.

    Attributes:
        pattern: Pattern of the offending declaration.
        index: Sibling index, when known.
        message: The reported error message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    pattern: str | None
    index: int | None
    message: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type RouterEvent = NavigationEvent | RouteResolved | RouteConfigErrorEvent


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
