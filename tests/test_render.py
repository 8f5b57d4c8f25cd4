"""Tests for memroute.routing.render — rendering one matched declaration."""

import logging

import pytest

from memroute.observability.collector import NavigationCollector
from memroute.observability.events import RouteConfigErrorEvent
from memroute.routing.descriptor import RouteDescriptor
from memroute.routing.render import DEFAULT_OUTLET_CLASS, RouteOutlet, render_route
from tests.conftest import record_props


class TestComponent:
    def test_component_receives_route_props(self) -> None:
        history = object()
        descriptor = RouteDescriptor(
            "/users/:id",
            exact=True,
            component=record_props,
            route_params={"id": "42"},
            history=history,
            props={"title": "User"},
        )
        props = render_route(descriptor)
        assert props == {
            "title": "User",
            "class_name": "",
            "history": history,
            "path": "/users/:id",
            "exact": True,
            "route_params": {"id": "42"},
        }

    def test_class_name_forwarded(self) -> None:
        descriptor = RouteDescriptor("/a", component=record_props, class_name="page")
        assert render_route(descriptor)["class_name"] == "page"


class TestChildren:
    def test_children_wrapped_in_outlet(self) -> None:
        child = RouteDescriptor("/dash/stats")
        descriptor = RouteDescriptor("/dash", children=(child,), component=record_props)
        outlet = render_route(descriptor)
        assert isinstance(outlet, RouteOutlet)
        assert outlet.children == (child,)
        assert outlet.class_name == DEFAULT_OUTLET_CLASS
        assert outlet.descriptor is descriptor

    def test_custom_outlet_class(self) -> None:
        outlet = render_route(RouteDescriptor("/dash", children=("x",), class_name="layout"))
        assert outlet.class_name == "layout"


class TestConfigurationError:
    """A terminal declaration without component or children renders nothing."""

    def test_renders_none(self) -> None:
        assert render_route(RouteDescriptor("/broken")) is None

    def test_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="memroute.routing.render"):
            render_route(RouteDescriptor("/broken"), index=3)
        assert "component or children" in caplog.text
        assert "/broken" in caplog.text

    def test_recorded(self, collector: NavigationCollector) -> None:
        render_route(RouteDescriptor("/broken"), index=3, collector=collector)
        events = collector.log.query(event_type=RouteConfigErrorEvent)
        assert len(events) == 1
        assert events[0].pattern == "/broken"
        assert events[0].index == 3
