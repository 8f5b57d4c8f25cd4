"""Shared test fixtures for memroute."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from memroute.config import RouterConfig
from memroute.controller import RouteController
from memroute.observability.collector import NavigationCollector
from memroute.routing.descriptor import RouteDescriptor


def record_props(**props: Any) -> dict[str, Any]:
    """Renderer that returns the props it was called with."""
    return props


@pytest.fixture
def collector() -> NavigationCollector:
    return NavigationCollector()


@pytest.fixture
def routes() -> list[RouteDescriptor]:
    """A typical sibling set: exact home, parameterized users, layout, catch-all."""
    return [
        RouteDescriptor("/home", exact=True, component=record_props),
        RouteDescriptor("/users/:id", exact=True, exact_params=True, component=record_props),
        RouteDescriptor("/dash", component=record_props),
        RouteDescriptor(component=record_props),
    ]


@pytest.fixture
def controller(routes: list[RouteDescriptor], collector: NavigationCollector) -> RouteController:
    return RouteController(
        RouterConfig(initial_history=["/home"]),
        routes,
        collector=collector,
    )


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A directory holding a memroute.yaml with a history and two routes."""
    (tmp_path / "memroute.yaml").write_text(
        "memroute:\n"
        "  initial_history: ['/home', '/users/7']\n"
        "  initial_position: 1\n"
        "  routes:\n"
        "    - pattern: /users/:id\n"
        "      exact: true\n"
        "      exact_params: true\n"
        "    - {}\n"
    )
    return tmp_path
