"""Tests for graph indexing and the pheromone table."""
import pytest

from antsalesman import Graph, GraphIndex, MalformedGraph, Point, UnknownPoint, distance


def test_index_builds_symmetric_adjacency(chain) -> None:
    index = GraphIndex(chain)

    assert index.node_count == 5
    assert [p.id for p in index.neighbours(0)] == [1]
    assert sorted(p.id for p in index.neighbours(2)) == [1, 3]
    assert index.is_arc(3, 2) and index.is_arc(2, 3)
    assert not index.is_arc(0, 2)


def test_pheromone_initialised_both_directions(unit_square) -> None:
    index = GraphIndex(unit_square)

    assert len(index.pheromone) == 6
    for a, b in unit_square.arcs:
        assert index.pheromone.strength(a, b) == 1.0
        assert index.pheromone.strength(b, a) == 1.0


def test_duplicate_arcs_are_indexed_once() -> None:
    graph = Graph.from_coords([(0, 0), (1, 0)], [(0, 1), (1, 0)])
    index = GraphIndex(graph)

    assert len(index.neighbours(0)) == 1
    assert len(index.pheromone) == 1


def test_evaporation_decays_geometrically(unit_square) -> None:
    table = GraphIndex(unit_square).pheromone
    previous = table.strength(0, 1)
    for k in range(1, 6):
        table.evaporate(0, 1, 0.85)
        assert table.strength(0, 1) < previous
        assert table.strength(0, 1) == pytest.approx(0.85 ** k)
        assert table.strength(1, 0) == table.strength(0, 1)
        previous = table.strength(0, 1)


def test_reinforce_is_symmetric(unit_square) -> None:
    table = GraphIndex(unit_square).pheromone
    table.reinforce(2, 3, 0.5)

    assert table.strength(2, 3) == pytest.approx(1.5)
    assert table.strength(3, 2) == pytest.approx(1.5)
    assert table.strength(0, 1) == 1.0


def test_unknown_arc_endpoint_is_malformed() -> None:
    graph = Graph(points=[Point("a", 0, 0)], arcs=[("a", "missing")])
    with pytest.raises(MalformedGraph):
        GraphIndex(graph)


def test_self_loop_and_duplicate_ids_are_malformed() -> None:
    with pytest.raises(MalformedGraph):
        GraphIndex(Graph(points=[Point("a", 0, 0)], arcs=[("a", "a")]))
    with pytest.raises(MalformedGraph):
        GraphIndex(Graph(points=[Point("a", 0, 0), Point("a", 1, 1)]))


def test_unknown_point_lookup(chain) -> None:
    index = GraphIndex(chain)
    with pytest.raises(UnknownPoint) as exc:
        index.point(99)
    assert exc.value.point_id == 99
    assert isinstance(exc.value, KeyError)


def test_random_geometric_is_reproducible_and_connected() -> None:
    g1 = Graph.random_geometric(20, k=3, seed=5)
    g2 = Graph.random_geometric(20, k=3, seed=5)

    assert g1.points == g2.points
    assert g1.arcs == g2.arcs
    assert all((i, i + 1) in g1.arcs for i in range(19))
    assert distance(Point(0, 0, 0), Point(1, 3, 4)) == 5.0
