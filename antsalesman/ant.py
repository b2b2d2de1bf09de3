"""One ant's walk over the graph.

An ant steps to unvisited neighbours, choosing greedily or by roulette wheel
on strength = d^-beta * tau. When every neighbour is visited it is trapped and
bridges to the nearest unvisited point through a bounded path search. Once no
unvisited point is reachable it closes the loop back to where it started.
"""
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import AbstractSet, List, Sequence

from .acs_base import ACSConfig, argmax
from .graph import GraphIndex, Point, distance
from .search import bounded_path_search, nearest_unvisited, path_length

logger = logging.getLogger(__name__)

_MIN_DIST = 1e-12


@dataclass
class AntWalk:
    path: List[Point]
    length: float
    abandoned: bool = False

    @property
    def first(self) -> Point:
        return self.path[0]


def strength(index: GraphIndex, current: Point, p: Point, beta: float) -> float:
    d = max(distance(current, p), _MIN_DIST)
    return d ** (-beta) * index.pheromone.strength(current.id, p.id)


def choose_greedy(index: GraphIndex, current: Point, available: Sequence[Point], beta: float) -> Point:
    return argmax(available, key=lambda p: strength(index, current, p, beta))


def choose_roulette(index: GraphIndex, current: Point, available: Sequence[Point], beta: float,
                    rng: random.Random) -> Point:
    weights = [(p, strength(index, current, p, beta)) for p in available]
    total = sum(w for _, w in weights)
    if total == 0.0:
        return rng.choice(list(available))
    r = rng.random()
    acc = 0.0
    for p, w in weights:
        acc += w / total
        if r < acc:
            return p
    # rounding left the draw above the last bucket
    return weights[-1][0]


def _available(index: GraphIndex, current: Point, visited: AbstractSet) -> List[Point]:
    return [p for p in index.neighbours(current.id) if p.id not in visited]


def walk_ant(index: GraphIndex, first: Point, cfg: ACSConfig, rng: random.Random,
             champion_length: float = math.inf) -> AntWalk:
    """Walk one ant from ``first`` until every reachable point is visited.

    Evaporates pheromone in place on every arc the ant steps along. With
    ``cfg.early_abandon`` the walk stops as soon as its length exceeds
    ``champion_length`` and is returned marked as abandoned.
    """
    visited = set()
    path: List[Point] = []
    length = 0.0
    unvisited = index.node_count
    current = first

    while unvisited > 0:
        available = _available(index, current, visited)

        if not available:
            target = nearest_unvisited(index, current, visited, max_checks=cfg.max_checks)
            if target is None:
                break
            bridge = bounded_path_search(index, current, target, max_hits=cfg.max_hits)
            visited.update(p.id for p in bridge)
            path.extend(bridge)
            length += path_length(bridge)
            current = target
            unvisited -= 1
            continue

        if rng.random() < cfg.determinism:
            nxt = choose_greedy(index, current, available, cfg.beta)
        else:
            nxt = choose_roulette(index, current, available, cfg.beta, rng)

        step = bounded_path_search(index, current, nxt, max_hits=cfg.max_hits)
        visited.update(p.id for p in step)
        path.extend(step)
        length += path_length(step)

        if cfg.early_abandon and length > champion_length:
            logger.debug("Abandoning ant from %r at length %.3f (champion %.3f)",
                         first.id, length, champion_length)
            return AntWalk(path=path, length=length, abandoned=True)

        index.pheromone.evaporate(current.id, nxt.id, cfg.evap_rate)
        current = nxt
        unvisited -= 1

    closing = bounded_path_search(index, current, first, max_hits=cfg.max_hits)
    path.extend(closing)
    length += path_length(closing)
    return AntWalk(path=path, length=length)
