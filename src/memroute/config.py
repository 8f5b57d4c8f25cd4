"""Router configuration.

RouterConfig is the construction-time configuration of a RouteController,
frozen after creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from memroute._errors import ConfigError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Configuration for a RouteController.

    Attributes:
        initial_history: A single starting location or an ordered list of
            locations to seed the history stack with.  When unset the stack
            starts as ``[starting_route]``.
        initial_position: Index to start at.  Clamped into the seeded range.
        single_route: Render only the first matching declaration.
        starting_route: Fallback location, and the preferred start position
            when it appears in a seeded history list.
        routes: Route declarations loaded from a config file (plain mappings,
            turned into descriptors by ``memroute.routing.descriptor``).

    """

    initial_history: str | tuple[str, ...] | None = None
    initial_position: int | None = None
    single_route: bool = False
    starting_route: str = "/"
    routes: tuple[dict[str, object], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as tuples.
        if isinstance(self.initial_history, list):
            object.__setattr__(self, "initial_history", tuple(self.initial_history))
        if isinstance(self.routes, list):
            object.__setattr__(self, "routes", tuple(self.routes))

        if isinstance(self.initial_history, tuple):
            for entry in self.initial_history:
                if not isinstance(entry, str):
                    msg = f"History entries must be strings, got {entry!r}"
                    raise ConfigError(msg)
        elif self.initial_history is not None and not isinstance(self.initial_history, str):
            msg = f"initial_history must be a string or a list of strings, got {self.initial_history!r}"
            raise ConfigError(msg)

        if self.initial_position is not None:
            if isinstance(self.initial_position, bool) or not isinstance(self.initial_position, int):
                msg = f"initial_position must be an integer, got {self.initial_position!r}"
                raise ConfigError(msg)
            if self.initial_position < 0:
                msg = f"initial_position must be >= 0, got {self.initial_position}"
                raise ConfigError(msg)

        if not isinstance(self.routes, tuple):
            msg = f"routes must be a list of route tables, got {self.routes!r}"
            raise ConfigError(msg)
        for route in self.routes:
            if not isinstance(route, Mapping):
                msg = f"Each route must be a table of descriptor fields, got {route!r}"
                raise ConfigError(msg)

    def initial_entries(self) -> list[str]:
        """The list the history stack is seeded with."""
        if self.initial_history is None:
            return [self.starting_route]
        if isinstance(self.initial_history, str):
            return [self.initial_history]
        return list(self.initial_history)

    def resolved_position(self, entries: list[str]) -> int:
        """Starting position for *entries*.

        Resolution order:
            1. Explicit ``initial_position``, clamped into range.
            2. Index of ``starting_route`` in *entries*, if present.
            3. ``0``.

        """
        if not entries:
            return 0
        if self.initial_position is not None:
            return min(self.initial_position, len(entries) - 1)
        if self.starting_route in entries:
            return entries.index(self.starting_route)
        return 0
