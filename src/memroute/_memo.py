"""Last-value memoization.

Recomputes only when the argument tuple differs (by ``==``) from the last
call.  Arguments need not be hashable.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

_MISSING = object()


class memoize_last[R]:  # noqa: N801
    """Cache the most recent ``(args, kwargs) -> result`` pair of *func*.

    Usage::

        @memoize_last
        def resolve(location, routes):
            ...

    """

    def __init__(self, func: Callable[..., R]) -> None:
        self._func = func
        self._key: Any = _MISSING
        self._result: Any = _MISSING
        self.hits = 0
        self.misses = 0
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = (args, kwargs)
        if self._key is not _MISSING and self._key == key:
            self.hits += 1
            return self._result
        result = self._func(*args, **kwargs)
        self._key = key
        self._result = result
        self.misses += 1
        return result

    def clear(self) -> None:
        """Forget the cached pair."""
        self._key = _MISSING
        self._result = _MISSING
