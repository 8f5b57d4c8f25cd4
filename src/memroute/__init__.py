"""Memroute — an in-memory navigation engine.

Keeps its own navigation history (independent of any browser history) and
decides, for a set of sibling route declarations, which ones are active
for the current location, extracting positional path parameters.

Quick start::

    from memroute import RouteController, RouteDescriptor, RouterConfig

    router = RouteController(
        RouterConfig(initial_history=["/home"]),
        routes=[
            RouteDescriptor("/users/:id", exact=True, exact_params=True),
            RouteDescriptor(),  # catch-all
        ],
    )
    router.history.push_state("/users/42")
    router.resolution().active.params   # {"id": "42"}

The navigation handle (``router.history``) exposes ``back``, ``forward``,
``go``, ``push_state``, ``location`` and ``replace_state``.

"""

__version__ = "0.1.0-dev"
__all__ = [
    "HistoryScope",
    "HistoryStack",
    "MemoryHistory",
    "MemoryLink",
    "Resolution",
    "RouteController",
    "RouteDescriptor",
    "RouterConfig",
    "__version__",
    "bootstrap",
    "load_config",
    "strategy",
    "with_history_context",
]

_LAZY_IMPORTS = {
    "HistoryScope": "memroute.context",
    "with_history_context": "memroute.context",
    "HistoryStack": "memroute.history.stack",
    "MemoryHistory": "memroute.history.api",
    "MemoryLink": "memroute.link",
    "Resolution": "memroute.controller",
    "RouteController": "memroute.controller",
    "RouteDescriptor": "memroute.routing.descriptor",
    "RouterConfig": "memroute.config",
    "bootstrap": "memroute.routing.params",
    "strategy": "memroute.routing.matcher",
    "load_config": "memroute.config_loader",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import memroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
