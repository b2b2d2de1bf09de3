# run_experiments.py
import os, json, argparse, logging
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from antsalesman import Graph, ColonyOptimizer, refined_config, baseline_config
from antsalesman.experiments import run_repeated_trials, run_parameter_sweep
from visualize import draw_tour, make_gif

OUTDIR = os.path.dirname(__file__)
CONFIG_MAP = {"refined": refined_config, "baseline": baseline_config}


def ensure(path: str) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    return path


def plot_scatter(details_by_variant, save_path):
    plt.figure()
    variants = list(details_by_variant.keys())
    for i, name in enumerate(variants, start=1):
        lengths = [L for (L, t, tour) in details_by_variant[name]]
        x = np.random.normal(loc=i, scale=0.03, size=len(lengths))
        plt.plot(x, lengths, "o")
    plt.xticks(range(1, len(variants) + 1), variants)
    plt.ylabel("Best tour length")
    plt.title("Best lengths across runs")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()


def plot_convergence(graph, start_id, name, cfg, save_path):
    solver = ColonyOptimizer(graph, cfg)
    res = solver.run(start_id)
    plt.figure()
    plt.plot(range(1, len(res.history_best_lengths) + 1), res.history_best_lengths, marker="o")
    plt.xlabel("Round")
    plt.ylabel("Best-so-far tour length")
    plt.title(f"{name} convergence")
    ensure(save_path)
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()
    return res


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=40)
    ap.add_argument("--k", type=int, default=4, help="nearest neighbours joined to each point")
    ap.add_argument("--square", type=float, default=100.0)
    ap.add_argument("--runs", type=int, default=5)
    ap.add_argument("--ants", type=int, default=15)
    ap.add_argument("--visualize", action="store_true", help="save a convergence GIF per variant")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    graph = Graph.random_geometric(n=args.n, k=args.k, seed=123, square_size=args.square,
                                   name=f"demo{args.n}")
    start_id = graph.points[0].id
    configs = [(name, build(ant_count=args.ants)) for name, build in CONFIG_MAP.items()]

    records = []
    details_by_variant = {}
    for name, cfg in configs:
        stats, details = run_repeated_trials(graph, start_id, cfg, n_runs=args.runs)
        print(name, json.dumps(stats, indent=2))
        records.append({"variant": name, **stats})
        details_by_variant[name] = details

    df_summary = pd.DataFrame.from_records(records)
    df_summary.to_csv(os.path.join(OUTDIR, "results_summary.csv"), index=False)
    plot_scatter(details_by_variant, os.path.join(OUTDIR, "results_distribution.png"))

    for name, cfg in configs:
        res = plot_convergence(graph, start_id, name, cfg, os.path.join(OUTDIR, f"convergence_{name}.png"))
        fig = draw_tour(graph, res.best_tour, title=f"{name}  length={res.best_length:.2f}")
        fig.savefig(ensure(os.path.join(OUTDIR, f"route_{name}.png")), dpi=150, bbox_inches="tight")
        plt.close(fig)

    grid = {"beta": [2.0, 3.0, 4.0], "determinism": [0.0, 0.2, 0.5], "evap_rate": [0.7, 0.85]}
    rows = run_parameter_sweep(graph, start_id, grid, base_cfg=configs[0][1], n_runs=3, base_seed=500)
    pd.DataFrame.from_records(rows).to_csv(os.path.join(OUTDIR, "acs_grid.csv"), index=False)
    print("Grid search evaluated:", len(rows))

    if args.visualize:
        for name, cfg in configs:
            gif_path = os.path.join(OUTDIR, f"{name}_convergence.gif")
            make_gif(graph, start_id, cfg, gif_path, title=name)
            print("Saved GIF:", gif_path)


if __name__ == "__main__":
    main()
