"""Navigation API handed to descendants of a RouteController.

``MemoryHistory`` is created once per controller and never rebuilt, so a
consumer that captures the handle keeps observing live state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from memroute.controller import RouteController


@runtime_checkable
class NavigationAPI(Protocol):
    """The six operations every navigation handle exposes."""

    def back(self) -> None: ...

    def forward(self) -> None: ...

    def go(self, delta: int) -> None: ...

    def push_state(self, path: str) -> None: ...

    def location(self) -> str | None: ...

    def replace_state(self, path: str) -> None: ...


class MemoryHistory:
    """Stable navigation handle bound to one controller.

    Every call is forwarded to the owning controller, which mutates its
    stack and notifies subscribers before returning.

    Args:
        controller: The RouteController that owns the history stack.

    """

    __slots__ = ("_controller",)

    def __init__(self, controller: RouteController) -> None:
        self._controller = controller

    @property
    def controller(self) -> RouteController:
        return self._controller

    def back(self) -> None:
        self._controller.navigate("back")

    def forward(self) -> None:
        self._controller.navigate("forward")

    def go(self, delta: int) -> None:
        self._controller.navigate("go", delta)

    def push_state(self, path: str) -> None:
        self._controller.navigate("push_state", path)

    def location(self) -> str | None:
        return self._controller.stack.location()

    def replace_state(self, path: str) -> None:
        self._controller.navigate("replace_state", path)

    def __repr__(self) -> str:
        return f"MemoryHistory(location={self.location()!r})"
