from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .errors import MalformedGraph, UnknownPoint

PointId = Hashable


@dataclass(frozen=True)
class Point:
    id: PointId
    x: float
    y: float


def distance(p: Point, q: Point) -> float:
    return math.hypot(q.x - p.x, q.y - p.y)


@dataclass
class Graph:
    """Raw input: ordered points plus undirected arcs given as id pairs."""
    points: List[Point]
    arcs: List[Tuple[PointId, PointId]] = field(default_factory=list)
    name: str = "graph"

    @staticmethod
    def from_coords(coords: Iterable[Tuple[float, float]], arcs: Iterable[Tuple[PointId, PointId]],
                    name: str = "graph") -> "Graph":
        points = [Point(i, float(x), float(y)) for i, (x, y) in enumerate(coords)]
        return Graph(points=points, arcs=list(arcs), name=name)

    @staticmethod
    def complete(coords: Iterable[Tuple[float, float]], name: str = "complete") -> "Graph":
        points = [Point(i, float(x), float(y)) for i, (x, y) in enumerate(coords)]
        arcs = [(points[i].id, points[j].id) for i in range(len(points)) for j in range(i+1, len(points))]
        return Graph(points=points, arcs=arcs, name=name)

    @staticmethod
    def random_geometric(n: int, k: int = 4, seed: Optional[int] = None, square_size: float = 100.0,
                         name: str = "random_geometric") -> "Graph":
        """Random points in a square, each joined to its k nearest neighbours.

        A chain through the points in generation order is added so the graph is connected.
        """
        rng = random.Random(seed)
        points = [Point(i, rng.uniform(0, square_size), rng.uniform(0, square_size)) for i in range(n)]
        arcs = set()
        for p in points:
            nearest = sorted((q for q in points if q.id != p.id), key=lambda q: distance(p, q))[:k]
            for q in nearest:
                arcs.add((min(p.id, q.id), max(p.id, q.id)))
        for i in range(n - 1):
            arcs.add((i, i + 1))
        return Graph(points=points, arcs=sorted(arcs), name=name)


class PheromoneTable:
    """Symmetric arc strengths; every update writes both directions."""

    def __init__(self):
        self._tau: Dict[Tuple[PointId, PointId], float] = {}

    def add_arc(self, a: PointId, b: PointId, tau0: float = 1.0):
        self._tau[(a, b)] = tau0
        self._tau[(b, a)] = tau0

    def __contains__(self, pair) -> bool:
        return pair in self._tau

    def __len__(self) -> int:
        return len(self._tau) // 2

    def strength(self, a: PointId, b: PointId) -> float:
        return self._tau[(a, b)]

    def evaporate(self, a: PointId, b: PointId, rate: float):
        value = self._tau[(a, b)] * rate
        self._tau[(a, b)] = value
        self._tau[(b, a)] = value

    def reinforce(self, a: PointId, b: PointId, amount: float):
        value = self._tau[(a, b)] + amount
        self._tau[(a, b)] = value
        self._tau[(b, a)] = value

    def snapshot(self) -> Dict[Tuple[PointId, PointId], float]:
        return dict(self._tau)


class GraphIndex:
    """Lookup structures derived from a Graph: points by id, adjacency, pheromone."""

    def __init__(self, graph: Graph, tau0: float = 1.0):
        self.graph = graph
        self.points_by_id: Dict[PointId, Point] = {}
        self.adjacency: Dict[PointId, List[Point]] = {}
        self.pheromone = PheromoneTable()

        for p in graph.points:
            if p.id in self.points_by_id:
                raise MalformedGraph(f"Duplicate point id {p.id!r}")
            self.points_by_id[p.id] = p
            self.adjacency[p.id] = []

        for a, b in graph.arcs:
            if a not in self.points_by_id or b not in self.points_by_id:
                raise MalformedGraph(f"Arc ({a!r}, {b!r}) references an unknown point")
            if a == b:
                raise MalformedGraph(f"Self loop on point {a!r}")
            if (a, b) in self.pheromone:
                continue
            self.adjacency[a].append(self.points_by_id[b])
            self.adjacency[b].append(self.points_by_id[a])
            self.pheromone.add_arc(a, b, tau0)

    @property
    def node_count(self) -> int:
        return len(self.points_by_id)

    def point(self, point_id: PointId) -> Point:
        try:
            return self.points_by_id[point_id]
        except KeyError:
            raise UnknownPoint(point_id) from None

    def neighbours(self, point_id: PointId) -> List[Point]:
        return self.adjacency[point_id]

    def is_arc(self, a: PointId, b: PointId) -> bool:
        return (a, b) in self.pheromone
