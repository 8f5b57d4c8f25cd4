"""Navigation collector — records router activity into an event log.

One collector may be shared by several controllers; each call appends a
single frozen event.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from collections.abc import Sequence

from memroute.observability.events import (
    NavigationEvent,
    NavigationOperation,
    RouteConfigErrorEvent,
    RouteResolved,
    now_ns,
)
from memroute.observability.log import EventLog


class NavigationCollector:
    """Event collector for history and routing activity.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- History events -----

    def record_navigation(
        self,
        operation: NavigationOperation,
        *,
        before: str | None,
        path: str | None,
        position: int,
        length: int,
    ) -> None:
        """Record an effective navigation change."""
        self._log.append(
            NavigationEvent(
                operation=operation,
                before=before,
                path=path,
                position=position,
                length=length,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Routing events -----

    def record_resolution(
        self,
        path: str | None,
        matched: Sequence[str | None],
        *,
        candidates: int = 0,
    ) -> None:
        """Record a resolution pass."""
        self._log.append(
            RouteResolved(
                path=path,
                matched=tuple(matched),
                candidates=candidates,
                timestamp_ns=now_ns(),
            )
        )

    def record_config_error(
        self,
        pattern: str | None,
        *,
        index: int | None = None,
        message: str = "",
    ) -> None:
        """Record a misconfigured route declaration."""
        self._log.append(
            RouteConfigErrorEvent(
                pattern=pattern,
                index=index,
                message=message,
                timestamp_ns=now_ns(),
            )
        )
