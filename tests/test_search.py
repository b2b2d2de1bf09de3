"""Tests for the bounded breadth-first searches."""
import pytest

from antsalesman import Graph, GraphIndex, PathNotFound, Point
from antsalesman.search import bounded_path_search, nearest_unvisited, path_length


def _star() -> GraphIndex:
    points = [Point(0, 0, 0), Point(1, 1, 0), Point(2, 3, 0), Point(3, 0, 2)]
    return GraphIndex(Graph(points=points, arcs=[(0, 1), (0, 2), (0, 3)]))


def test_path_search_follows_chain(chain) -> None:
    index = GraphIndex(chain)
    path = bounded_path_search(index, index.point(0), index.point(4))

    assert [p.id for p in path] == [0, 1, 2, 3, 4]
    assert path_length(path) == pytest.approx(4.0)


def test_path_search_adjacent_points_is_direct(unit_square) -> None:
    index = GraphIndex(unit_square)
    path = bounded_path_search(index, index.point(0), index.point(2))

    assert [p.id for p in path] == [0, 2]


def test_path_search_to_self() -> None:
    index = _star()
    path = bounded_path_search(index, index.point(1), index.point(1))

    assert [p.id for p in path] == [1]


def test_path_search_prefers_shorter_of_early_arrivals() -> None:
    # two 2-hop routes from s to t; the one via "near" is shorter
    points = [Point("s", 0, 0), Point("far", 0, 5), Point("near", 1, 0.1), Point("t", 2, 0)]
    arcs = [("s", "far"), ("far", "t"), ("s", "near"), ("near", "t")]
    index = GraphIndex(Graph(points=points, arcs=arcs))
    path = bounded_path_search(index, index.point("s"), index.point("t"))

    assert [p.id for p in path] == ["s", "near", "t"]


def test_path_search_hit_cutoff_limits_refinement() -> None:
    # the "far" route reaches t first; the shorter one only counts from the second arrival
    points = [Point("s", 0, 0), Point("far", 0, 5), Point("near", 1, 0.1), Point("t", 2, 0)]
    arcs = [("s", "far"), ("far", "t"), ("s", "near"), ("near", "t")]
    index = GraphIndex(Graph(points=points, arcs=arcs))
    s, t = index.point("s"), index.point("t")

    assert [p.id for p in bounded_path_search(index, s, t, max_hits=0)] == ["s", "far", "t"]
    assert [p.id for p in bounded_path_search(index, s, t, max_hits=1)] == ["s", "near", "t"]


def test_path_search_disconnected_raises(two_components) -> None:
    index = GraphIndex(two_components)
    with pytest.raises(PathNotFound) as exc:
        bounded_path_search(index, index.point("a0"), index.point("b1"))

    assert exc.value.start_id == "a0"
    assert exc.value.end_id == "b1"
    assert "a0" in str(exc.value) and "b1" in str(exc.value)


def test_nearest_unvisited_picks_closest() -> None:
    index = _star()

    assert nearest_unvisited(index, index.point(0), visited={0}).id == 1
    assert nearest_unvisited(index, index.point(0), visited={0, 1}).id == 3


def test_nearest_unvisited_expands_through_visited_points(chain) -> None:
    index = GraphIndex(chain)
    found = nearest_unvisited(index, index.point(0), visited={0, 1, 2})

    assert found.id == 3


def test_nearest_unvisited_none_when_all_visited(two_components) -> None:
    index = GraphIndex(two_components)
    assert nearest_unvisited(index, index.point("a0"), visited={"a0", "a1", "a2"}) is None


def test_nearest_unvisited_stops_after_cutoff() -> None:
    # each point further along the chain is closer to 0; cutoff 0 keeps the second one
    points = [Point(0, 0, 0)] + [Point(i, 10.0 - i, 0) for i in range(1, 6)]
    arcs = [(i, i + 1) for i in range(5)]
    index = GraphIndex(Graph(points=points, arcs=arcs))
    found = nearest_unvisited(index, index.point(0), visited={0}, max_checks=0)

    assert found.id == 2
    assert nearest_unvisited(index, index.point(0), visited={0}).id == 5
