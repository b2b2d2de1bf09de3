from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable, List, Optional


def argmax(items, key):
    # first item wins ties
    best = None
    best_val = None
    for it in items:
        v = key(it)
        if best is None or v > best_val:
            best, best_val = it, v
    return best


@dataclass
class ACSConfig:
    ant_count: int = 15             # ants per round
    walk_count: int = 5             # rounds
    evap_rate: float = 0.85         # multiplier applied to an arc each time an ant takes it
    determinism: float = 0.2        # probability of the greedy choice
    beta: float = 3.0               # distance exponent in strength = d^-beta * tau
    pheromone_scalar: float = 4.0   # reinforcement = scalar / champion length
    tau0: float = 1.0               # initial pheromone per arc
    max_hits: int = 5               # path search stops at the (max_hits + 1)-th arrival
    max_checks: int = 10            # nearest-unvisited improvements before giving up
    early_abandon: bool = True      # drop an ant once it is longer than the round champion
    seed: Optional[int] = None

    def validate(self) -> "ACSConfig":
        if self.ant_count < 1 or self.walk_count < 1:
            raise ValueError("ant_count and walk_count must be >= 1.")
        if not 0.0 < self.evap_rate <= 1.0:
            raise ValueError("evap_rate must be in (0, 1].")
        if not 0.0 <= self.determinism <= 1.0:
            raise ValueError("determinism must be in [0, 1].")
        if self.pheromone_scalar <= 0 or self.tau0 <= 0:
            raise ValueError("pheromone_scalar and tau0 must be positive.")
        if self.max_hits < 0 or self.max_checks < 0:
            raise ValueError("Search cutoffs must be non-negative.")
        return self


def refined_config(**overrides) -> ACSConfig:
    return ACSConfig(**{"walk_count": 5, **overrides})


def baseline_config(**overrides) -> ACSConfig:
    """Longer schedule: 30 rounds."""
    return ACSConfig(**{"walk_count": 30, **overrides})


@dataclass
class ACSResult:
    best_tour: List[Hashable]
    best_length: float
    history_best_lengths: List[float]
    history_best_tours: List[List[Hashable]]
    config: ACSConfig
    elapsed_sec: float = 0.0
    rounds: int = field(default=0)
