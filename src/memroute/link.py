"""MemoryLink — a clickable element that navigates through the scoped handle.

The link never holds its own copy of the stack: a click looks up the
current handle in the scope and calls ``push_state`` on it.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memroute.context import HistoryScope

DEFAULT_LINK_CLASS = "axc-memory-link"


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """Minimal stand-in for a UI click event.

    Attributes:
        default_prevented: Set once the link intercepts the default action.

    """

    default_prevented: bool = False

    def prevent_default(self) -> ClickEvent:
        return ClickEvent(default_prevented=True)


@dataclass(frozen=True, slots=True)
class MemoryLink:
    """Declarative link to an in-memory location.

    Attributes:
        to: Target path pushed on click.
        text: Text appended after the children.
        class_name: CSS class; defaults to ``axc-memory-link``.
        children: Inner markup, rendered before ``text`` (not escaped).

    """

    to: str
    text: str = ""
    class_name: str | None = None
    children: str = ""

    def click(self, scope: HistoryScope, event: ClickEvent | None = None) -> ClickEvent:
        """Intercept the default action and push ``to`` on the scoped handle."""
        handled = (event or ClickEvent()).prevent_default()
        scope.history.push_state(self.to)
        return handled

    def render(self) -> str:
        """Anchor markup for this link.

        ``href`` stays empty; navigation happens in memory only.
        """
        class_name = html.escape(self.class_name or DEFAULT_LINK_CLASS, quote=True)
        return f'<a class="{class_name}" href="">{self.children}{html.escape(self.text)}</a>'
