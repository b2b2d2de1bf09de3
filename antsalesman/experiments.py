from __future__ import annotations
import itertools, statistics
from typing import Any, Dict, Hashable, List, Optional
from dataclasses import asdict

from .acs_base import ACSConfig
from .colony import ColonyOptimizer
from .graph import Graph


def run_repeated_trials(graph: Graph, start_id: Hashable, cfg: ACSConfig, n_runs: int = 10,
                        base_seed: int = 42):
    lengths = []
    times = []
    best_tours = []
    for r in range(n_runs):
        cfg_r = ACSConfig(**{**asdict(cfg), "seed": base_seed + r})
        res = ColonyOptimizer(graph, cfg_r).run(start_id)
        lengths.append(res.best_length)
        times.append(res.elapsed_sec)
        best_tours.append(res.best_tour)
    stats = {
        "mean_length": statistics.mean(lengths),
        "std_length": statistics.stdev(lengths) if len(lengths) > 1 else 0.0,
        "min_length": min(lengths),
        "max_length": max(lengths),
        "median_length": statistics.median(lengths),
        "mean_time": statistics.mean(times),
        "n_runs": n_runs,
    }
    return stats, list(zip(lengths, times, best_tours))


def run_parameter_sweep(graph: Graph, start_id: Hashable, param_grid: Dict[str, List[Any]],
                        base_cfg: Optional[ACSConfig] = None, n_runs: int = 5,
                        base_seed: int = 100) -> List[Dict[str, Any]]:
    base_cfg = base_cfg or ACSConfig()
    keys = sorted(param_grid.keys())
    rows = []
    for values in itertools.product(*[param_grid[k] for k in keys]):
        cfg = ACSConfig(**{**asdict(base_cfg), **dict(zip(keys, values))})
        stats, _ = run_repeated_trials(graph, start_id, cfg, n_runs=n_runs, base_seed=base_seed)
        rows.append({**{k: getattr(cfg, k) for k in keys}, **stats})
    return rows
