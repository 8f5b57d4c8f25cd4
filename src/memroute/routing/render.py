"""Rendering of a single matched route declaration.

A declaration with children is wrapped in a ``RouteOutlet``; a terminal
declaration calls its component with the bootstrapped props.  A terminal
declaration with neither is a configuration error: it is logged, recorded,
and renders nothing, leaving its siblings unaffected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from memroute._errors import RouteConfigurationError

if TYPE_CHECKING:
    from memroute.observability.collector import NavigationCollector
    from memroute.routing.descriptor import RouteDescriptor

logger = logging.getLogger(__name__)

DEFAULT_OUTLET_CLASS = "axc-router__route"


@dataclass(frozen=True, slots=True)
class RouteOutlet:
    """Wrapper around the nested content of a non-terminal route.

    Attributes:
        class_name: CSS class of the wrapper element.
        children: The nested content, in declaration order.
        descriptor: The (bootstrapped) declaration that produced this outlet.

    """

    class_name: str
    children: tuple[Any, ...]
    descriptor: RouteDescriptor


def render_route(
    descriptor: RouteDescriptor,
    *,
    index: int | None = None,
    collector: NavigationCollector | None = None,
) -> Any:
    """Render *descriptor*, returning ``None`` for a misconfigured route."""
    if descriptor.children:
        return RouteOutlet(
            class_name=descriptor.class_name or DEFAULT_OUTLET_CLASS,
            children=descriptor.children,
            descriptor=descriptor,
        )

    if descriptor.component is not None:
        props = {
            **descriptor.props,
            "class_name": descriptor.class_name or "",
            "history": descriptor.history,
            "path": descriptor.pattern,
            "exact": descriptor.exact,
            "route_params": descriptor.route_params,
        }
        return descriptor.component(**props)

    error = RouteConfigurationError(descriptor.pattern, index)
    logger.error("%s", error)
    if collector is not None:
        collector.record_config_error(descriptor.pattern, index=index, message=str(error))
    return None
