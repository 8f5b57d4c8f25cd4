"""Memroute error hierarchy.

All memroute-specific errors inherit from MemrouteError for easy catching.
"""


class MemrouteError(Exception):
    """Base error for all memroute operations."""


class ConfigError(MemrouteError):
    """Invalid or missing router configuration."""


class RouteConfigurationError(MemrouteError):
    """A terminal route declaration has neither children nor a component.

    Reported and recorded by the render pass, never raised out of it.
    """

    def __init__(self, pattern: str | None, index: int | None = None) -> None:
        self.pattern = pattern
        self.index = index
        super().__init__(
            "The memory route must be provided a component or children, "
            f"else nothing will be rendered (pattern={pattern!r})"
        )


class ScopeError(MemrouteError):
    """No navigation handle has been provided in the scope chain."""
