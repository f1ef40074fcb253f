from .errors import PathStatsError, MalformedRecordError, EmptyGraphError
from .graph import AdjacencyGraph, load_graph
from .traversal import shortest_path_lengths
from .metrics import Denominator, PathLengthReport, build_report

__all__ = [
    "PathStatsError",
    "MalformedRecordError",
    "EmptyGraphError",
    "AdjacencyGraph",
    "load_graph",
    "shortest_path_lengths",
    "Denominator",
    "PathLengthReport",
    "build_report",
]
