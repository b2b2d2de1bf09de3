"""Bounded breadth-first searches over a GraphIndex.

Both searches trade optimality for bounded work: they explore by hop count,
not by distance, and stop early once their cutoff is reached.
"""
from __future__ import annotations
import math
from collections import deque
from typing import AbstractSet, List, Optional, Sequence

from .errors import PathNotFound
from .graph import GraphIndex, Point, PointId, distance


def path_length(path: Sequence[Point]) -> float:
    return sum(distance(a, b) for a, b in zip(path, path[1:]))


def bounded_path_search(index: GraphIndex, start: Point, end: Point, max_hits: int = 5) -> List[Point]:
    """Return the shortest breadcrumb path among the first arrivals at ``end``.

    The queue holds (point, breadcrumb path, distance so far). Search stops at
    the ``max_hits + 1``-th arrival at ``end``; each other point is expanded
    at most once. Raises PathNotFound if ``end`` is never reached.
    """
    queue = deque([(start, [start], 0.0)])
    expanded = set()
    hits = 0
    closest_path: Optional[List[Point]] = None
    closest_dist = math.inf

    while queue:
        point, path, dist = queue.popleft()
        if point.id == end.id:
            if dist < closest_dist:
                closest_dist = dist
                closest_path = path
            hits += 1
            if hits > max_hits:
                break
            continue
        if point.id in expanded:
            continue
        expanded.add(point.id)
        for nxt in index.neighbours(point.id):
            if nxt.id not in expanded:
                queue.append((nxt, path + [nxt], dist + distance(point, nxt)))

    if closest_path is None:
        raise PathNotFound(start.id, end.id)
    return closest_path


def nearest_unvisited(index: GraphIndex, start: Point, visited: AbstractSet[PointId],
                      max_checks: int = 10) -> Optional[Point]:
    """Closest (Euclidean) unvisited point reachable from ``start``, or None.

    Every reachable point may be expanded, but only unvisited ones are
    candidates. Gives up refining once more than ``max_checks`` improvements
    were accepted, so a closer point further out can be missed.
    """
    closest: Optional[Point] = None
    closest_dist = math.inf
    processed = set()
    checks = 0
    queue = deque(index.neighbours(start.id))

    while queue:
        point = queue.popleft()
        if point.id in processed:
            continue
        if point.id not in visited and point.id != start.id:
            d = distance(start, point)
            if d < closest_dist:
                closest_dist = d
                closest = point
                if checks > max_checks:
                    break
                checks += 1
        processed.add(point.id)
        queue.extend(p for p in index.neighbours(point.id) if p.id not in processed)

    return closest
