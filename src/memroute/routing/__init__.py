"""Routing — route declarations, matching, parameter extraction, rendering.

``strategy`` and ``bootstrap`` form the two-callback contract the rendering
tree calls into: one decides which siblings are active, the other derives
the props a matched sibling is rendered with.
"""

from memroute.routing.descriptor import RouteDescriptor, derive, descriptor_from_mapping
from memroute.routing.matcher import params_match, split_pattern, strategy
from memroute.routing.params import bootstrap, extract_params
from memroute.routing.render import RouteOutlet, render_route

__all__ = [
    "RouteDescriptor",
    "RouteOutlet",
    "bootstrap",
    "derive",
    "descriptor_from_mapping",
    "extract_params",
    "params_match",
    "render_route",
    "split_pattern",
    "strategy",
]
