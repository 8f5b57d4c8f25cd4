"""In-memory navigation history.

The stack holds the data, the handle exposes it to descendants.
"""

from memroute.history.api import MemoryHistory, NavigationAPI
from memroute.history.stack import HistoryStack

__all__ = [
    "HistoryStack",
    "MemoryHistory",
    "NavigationAPI",
]
