from __future__ import annotations
import logging
import math
import random
import time
from typing import Hashable, List, Optional, Sequence

from .acs_base import ACSConfig, ACSResult
from .ant import AntWalk, walk_ant
from .errors import PathNotFound
from .graph import Graph, GraphIndex, Point

logger = logging.getLogger(__name__)


def sequential_dedupe(ids: Sequence[Hashable]) -> List[Hashable]:
    """Collapse runs of equal consecutive ids into one."""
    out: List[Hashable] = []
    for i in ids:
        if not out or out[-1] != i:
            out.append(i)
    return out


class ColonyOptimizer:
    """Ant Colony System over a sparse graph.

    Owns the GraphIndex (and with it the pheromone table) for the whole run.
    Each round walks ``ant_count`` ants one after the other, each from a random
    point, then reinforces the arcs of the round champion. The best walk over
    all rounds is returned as an id sequence starting at the requested point.
    """
    def __init__(self, graph: Graph, cfg: Optional[ACSConfig] = None):
        self.cfg = (cfg or ACSConfig()).validate()
        self.graph = graph
        self.index = GraphIndex(graph, tau0=self.cfg.tau0)
        self.rng = random.Random(self.cfg.seed)

        self.best_walk: Optional[AntWalk] = None
        self.history_best_lengths: List[float] = []
        self.history_best_tours: List[List[Hashable]] = []

    def _pick_starting_point(self) -> Point:
        return self.rng.choice(self.graph.points)

    def _walk_all_ants(self) -> AntWalk:
        champ: Optional[AntWalk] = None
        champ_length = math.inf
        for _ in range(self.cfg.ant_count):
            walked = walk_ant(self.index, self._pick_starting_point(), self.cfg, self.rng,
                              champion_length=champ_length)
            if walked.abandoned:
                continue
            if walked.length < champ_length:
                champ, champ_length = walked, walked.length
        return champ

    def _reinforce(self, walk: AntWalk):
        if walk.length <= 0:
            return
        amount = self.cfg.pheromone_scalar / walk.length
        for a, b in zip(walk.path, walk.path[1:]):
            if a.id != b.id:
                self.index.pheromone.reinforce(a.id, b.id, amount)

    @staticmethod
    def _format(walk: AntWalk, start_id: Hashable) -> List[Hashable]:
        ids = sequential_dedupe([p.id for p in walk.path])
        if len(ids) > 1 and ids[-1] == ids[0]:
            ids.pop()
        if start_id not in ids:
            raise PathNotFound(walk.first.id, start_id)
        k = ids.index(start_id)
        return ids[k:] + ids[:k]

    def run(self, start_id: Hashable) -> ACSResult:
        start = self.index.point(start_id)
        t0 = time.time()
        self.best_walk = None
        self.history_best_lengths = []
        self.history_best_tours = []

        for walk in range(self.cfg.walk_count):
            champ = self._walk_all_ants()
            self._reinforce(champ)
            if self.best_walk is None or champ.length < self.best_walk.length:
                self.best_walk = champ
            logger.debug("Round %d: round champion %.3f, best %.3f",
                         walk + 1, champ.length, self.best_walk.length)

            self.history_best_lengths.append(self.best_walk.length)
            self.history_best_tours.append(sequential_dedupe([p.id for p in self.best_walk.path]))

        tour = self._format(self.best_walk, start.id)
        elapsed = time.time() - t0
        logger.info("Planned %d points / %d arcs: length %.3f in %.3fs",
                    self.index.node_count, len(self.index.pheromone), self.best_walk.length, elapsed)
        return ACSResult(best_tour=tour, best_length=self.best_walk.length,
                         history_best_lengths=self.history_best_lengths,
                         history_best_tours=self.history_best_tours,
                         config=self.cfg, elapsed_sec=elapsed, rounds=self.cfg.walk_count)


def compute_plan(graph: Graph, start_id: Hashable, cfg: Optional[ACSConfig] = None) -> List[Hashable]:
    """Approximate TSP tour over ``graph`` as a list of point ids beginning at ``start_id``."""
    return ColonyOptimizer(graph, cfg).run(start_id).best_tour
