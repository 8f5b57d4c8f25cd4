"""Parameter extraction ("bootstrap") for matched route declarations.

Labels come from the pattern's parameter group, values from the final
``/``-segment of the location split on ``&``.  They pair up by position:
extra values are dropped, labels without a value stay unset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from memroute.routing.descriptor import derive
from memroute.routing.matcher import split_pattern

if TYPE_CHECKING:
    from memroute._types import RouteParams
    from memroute.routing.descriptor import RouteDescriptor


def extract_params(pattern: str, location: str | None) -> RouteParams:
    """Pair the labels declared in *pattern* with the values in *location*.

    Examples::

        extract_params("/users/:id", "/users/42")  -> {"id": "42"}
        extract_params("/a/:x/:y", "/a/1&2")       -> {"x": "1", "y": "2"}
        extract_params("/a/:x:y", "/a/1")          -> {"x": "1"}

    """
    if ":" not in pattern:
        return {}
    current = location or ""
    values = current[current.rfind("/") + 1 :].split("&")
    _, labels = split_pattern(pattern)
    return dict(zip(labels, values, strict=False))


def bootstrap(
    descriptor: RouteDescriptor,
    index: int = 0,
    *,
    location: str | None,
    history: Any = None,
) -> RouteDescriptor:
    """Derive the descriptor handed to the renderer for a matched route.

    The copy carries the navigation *history* handle and, when the pattern
    declares parameters, the extracted ``route_params``.  *descriptor* itself
    is never modified.
    """
    if not descriptor.has_params:
        return derive(descriptor, history=history)
    return derive(
        descriptor,
        history=history,
        route_params=extract_params(descriptor.pattern or "", location),
    )
