from .errors import ACSError, MalformedGraph, PathNotFound, UnknownPoint
from .graph import Graph, GraphIndex, PheromoneTable, Point, distance
from .search import bounded_path_search, nearest_unvisited
from .acs_base import ACSConfig, ACSResult, baseline_config, refined_config
from .ant import AntWalk, walk_ant
from .colony import ColonyOptimizer, compute_plan, sequential_dedupe
from .experiments import run_parameter_sweep, run_repeated_trials
