"""Route declarations and the derive-with-merged-props operation."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from memroute._errors import ConfigError
from memroute._types import Renderer, RouteParams

# Props with this prefix belong to the router and are never passed on.
INTERNAL_PREFIX = "_"

_FIELD_NAMES = frozenset(
    {"pattern", "exact", "exact_params", "component", "children", "class_name", "route_params", "history"}
)

# Keys accepted when building a descriptor from a config mapping.
_MAPPING_ALIASES = {
    "path": "pattern",
    "exactParams": "exact_params",
    "className": "class_name",
}


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A candidate route declaration.

    Attributes:
        pattern: Route pattern such as ``/users/:id``.  ``None`` or ``""``
            makes a catch-all that matches unconditionally.
        exact: Require the pattern (or its static prefix) to equal the
            location instead of being contained in it.
        exact_params: With ``exact``, also require the number of supplied
            values to equal the number of declared labels.
        component: Renderer for a terminal declaration.
        children: Nested content rendered inside a route wrapper.
        class_name: CSS class passed to the renderer or wrapper.
        props: Extra props forwarded to the renderer.
        route_params: Extracted parameters, set by ``bootstrap``.
        history: Navigation handle, injected by the controller.

    """

    pattern: str | None = None
    exact: bool = False
    exact_params: bool = False
    component: Renderer | None = None
    children: tuple[Any, ...] = ()
    class_name: str | None = None
    props: Mapping[str, Any] = field(default_factory=dict)
    route_params: RouteParams | None = None
    history: Any = field(default=None, compare=False, repr=False)

    @property
    def is_catch_all(self) -> bool:
        return not self.pattern

    @property
    def has_params(self) -> bool:
        return bool(self.pattern) and ":" in self.pattern

    @property
    def is_terminal(self) -> bool:
        return not self.children


def public_props(props: Mapping[str, Any]) -> dict[str, Any]:
    """Copy *props* without internal-only keys."""
    return {k: v for k, v in props.items() if not k.startswith(INTERNAL_PREFIX)}


def derive(descriptor: RouteDescriptor, **props: Any) -> RouteDescriptor:
    """Return a shallow copy of *descriptor* with *props* merged in.

    Keyword arguments naming a descriptor field replace that field; all
    others are merged into ``props``.  The original is left untouched and
    internal-only props are dropped from the copy.
    """
    changes = {k: v for k, v in props.items() if k in _FIELD_NAMES}
    extra = {k: v for k, v in props.items() if k not in _FIELD_NAMES}
    merged = public_props({**descriptor.props, **extra})
    return dataclasses.replace(descriptor, props=merged, **changes)


def descriptor_from_mapping(data: Mapping[str, Any]) -> RouteDescriptor:
    """Build a descriptor from a config-file table.

    Accepts ``pattern`` or ``path``, ``exact``, ``exact_params`` (or
    ``exactParams``), ``class_name`` and nested ``children`` tables.  Any
    other key becomes a prop.
    """
    kwargs: dict[str, Any] = {}
    extra: dict[str, Any] = {}
    for key, value in data.items():
        name = _MAPPING_ALIASES.get(key, key)
        if name == "children":
            if not isinstance(value, list):
                msg = f"Route children must be a list, got {value!r}"
                raise ConfigError(msg)
            kwargs["children"] = tuple(
                descriptor_from_mapping(child) if isinstance(child, Mapping) else child
                for child in value
            )
        elif name in ("pattern", "exact", "exact_params", "class_name"):
            kwargs[name] = value
        else:
            extra[key] = value

    pattern = kwargs.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        msg = f"Route pattern must be a string, got {pattern!r}"
        raise ConfigError(msg)
    for flag in ("exact", "exact_params"):
        if flag in kwargs:
            kwargs[flag] = bool(kwargs[flag])
    return RouteDescriptor(props=extra, **kwargs)
