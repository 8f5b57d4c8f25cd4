"""Path matching — decides whether a route declaration is active.

Patterns carry at most one colon-delimited parameter group::

    "/users/:id"      static prefix "/users/",  labels ["id"]
    "/a/:x/:y"        static prefix "/a/",      labels ["x", "y"]
    "/dash"           no parameters

Matching modes:

- ``exact``: the static part must equal the location (truncated to the
  static prefix when the pattern has parameters).
- ``exact`` + ``exact_params``: additionally the number of non-empty
  ``&``-separated values after the prefix must equal the label count.
- neither: the static part only has to occur somewhere in the location,
  which lets layout-style parent routes stay active under nested paths.

Malformed patterns are not validated; they match however the rules above
mechanically apply.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memroute.routing.descriptor import RouteDescriptor


def split_pattern(pattern: str) -> tuple[str, list[str]]:
    """Split *pattern* into its static prefix and declared labels.

    A trailing ``/`` on a label is dropped so labels spread over path
    levels still read as plain names.
    """
    static, *labels = pattern.split(":")
    return static, [label.rstrip("/") for label in labels]


def count_values(remainder: str) -> int:
    """Number of non-empty ``&``-separated tokens in *remainder*."""
    return sum(1 for token in remainder.split("&") if token)


def params_match(pattern: str, location: str) -> bool:
    """True when *location* supplies exactly as many values as *pattern* declares."""
    if pattern == location:
        return True
    static, labels = split_pattern(pattern)
    return count_values(location[len(static):]) == len(labels)


def strategy(descriptor: RouteDescriptor, location: str | None, index: int = 0) -> bool:
    """Decide whether *descriptor* is active for *location*.

    *index* is the declaration's position among its siblings.  It does not
    influence the decision; ordering only matters to the caller when it
    keeps the first match.
    """
    pattern = descriptor.pattern
    if not pattern:
        return True
    current = location or ""

    if ":" in pattern:
        static, _ = split_pattern(pattern)
        candidate = current[: len(static)]
    else:
        static = pattern
        candidate = current

    if descriptor.exact:
        route_matches = static == candidate
        if descriptor.exact_params:
            return route_matches and params_match(pattern, current)
        return route_matches

    return static in current
