from __future__ import annotations
from typing import Hashable


class ACSError(Exception):
    """Base class for planner errors."""


class MalformedGraph(ACSError, ValueError):
    """Raised when points or arcs cannot be indexed."""


class UnknownPoint(ACSError, KeyError):
    def __init__(self, point_id: Hashable):
        super().__init__(point_id)
        self.point_id = point_id

    def __str__(self) -> str:
        return f"Unknown point id: {self.point_id!r}"


class PathNotFound(ACSError):
    """No path connects the two points within the reachable structure."""
    def __init__(self, start_id: Hashable, end_id: Hashable):
        super().__init__(f"Could not compute path from {start_id!r} to {end_id!r}")
        self.start_id = start_id
        self.end_id = end_id
