import os, argparse, shutil, tempfile
import matplotlib.pyplot as plt
import imageio

from antsalesman import Graph, ColonyOptimizer, ACSConfig


def draw_tour(graph, tour, title=""):
    """Figure with every arc in grey and the closed tour on top."""
    by_id = {p.id: p for p in graph.points}
    fig, ax = plt.subplots(figsize=(5, 5))
    for a, b in graph.arcs:
        pa, pb = by_id[a], by_id[b]
        ax.plot([pa.x, pb.x], [pa.y, pb.y], "-", color="0.85", lw=0.8)
    ax.plot([p.x for p in graph.points], [p.y for p in graph.points], "o")
    if tour:
        closed = list(tour) + [tour[0]]
        ax.plot([by_id[i].x for i in closed], [by_id[i].y for i in closed], "-")
        ax.plot(by_id[tour[0]].x, by_id[tour[0]].y, "s", ms=9)
    ax.set_title(title)
    ax.set_aspect("equal")
    fig.tight_layout()
    return fig


def make_gif(graph, start_id, cfg, save_gif, title="ACS", keep_frames=False):
    """Render the best-so-far tour after every round into a GIF."""
    solver = ColonyOptimizer(graph, cfg)
    res = solver.run(start_id)

    frames_dir = tempfile.mkdtemp(prefix="acs_frames_")
    frames = []
    for it, (tour, L) in enumerate(zip(res.history_best_tours, res.history_best_lengths)):
        fig = draw_tour(graph, tour, title=f"{title} best-so-far\nround={it+1}  length={L:.2f}")
        frame_path = os.path.join(frames_dir, f"frame_{it:03d}.png")
        fig.savefig(frame_path, dpi=120, bbox_inches="tight")
        plt.close(fig)
        frames.append(frame_path)

    d = os.path.dirname(save_gif)
    if d:
        os.makedirs(d, exist_ok=True)
    with imageio.get_writer(save_gif, mode="I", duration=0.6) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    if keep_frames:
        print("Frames saved in:", frames_dir)
    else:
        shutil.rmtree(frames_dir, ignore_errors=True)
    return res


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--n", type=int, default=40, help="number of points")
    p.add_argument("--k", type=int, default=4)
    p.add_argument("--rounds", type=int, default=30)
    p.add_argument("--ants", type=int, default=15)
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--keep-frames", action="store_true")
    args = p.parse_args()

    graph = Graph.random_geometric(n=args.n, k=args.k, seed=args.seed, square_size=args.square,
                                   name=f"viz{args.n}")
    cfg = ACSConfig(ant_count=args.ants, walk_count=args.rounds, seed=args.seed)
    gif_path = os.path.join(args.outdir, "acs_convergence.gif")
    make_gif(graph, graph.points[0].id, cfg, gif_path, keep_frames=args.keep_frames)
    print("Saved:", gif_path)

if __name__ == "__main__":
    main()
