"""Shared type definitions for memroute."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from memroute.controller import Resolution

# A visited location (opaque path string, e.g. "/users/42")
type HistoryEntry = str

# Label declared after a ":" in a route pattern
type ParamLabel = str

# Value supplied between "&" in the location's final segment
type ParamValue = str

# Extracted label -> value mapping
type RouteParams = dict[ParamLabel, ParamValue]

# Renderer for a terminal route declaration
type Renderer = Callable[..., Any]

# Called after every effective navigation change
type Listener = Callable[[Resolution], None]
