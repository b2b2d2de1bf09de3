import pytest

from antsalesman import Graph, Point


@pytest.fixture
def unit_square() -> Graph:
    return Graph.complete([(0, 0), (1, 0), (1, 1), (0, 1)], name="unit_square")


@pytest.fixture
def chain() -> Graph:
    points = [Point(i, float(i), 0.0) for i in range(5)]
    return Graph(points=points, arcs=[(i, i + 1) for i in range(4)], name="chain")


@pytest.fixture
def two_components() -> Graph:
    points = [Point("a0", 0, 0), Point("a1", 1, 0), Point("a2", 0, 1),
              Point("b0", 10, 10), Point("b1", 11, 10)]
    arcs = [("a0", "a1"), ("a1", "a2"), ("a2", "a0"), ("b0", "b1")]
    return Graph(points=points, arcs=arcs, name="two_components")
