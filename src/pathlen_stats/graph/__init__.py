from .store import AdjacencyGraph
from .loader import load_graph, load_graph_from_lines, iter_edge_records
from .summary import graph_summary

__all__ = [
    "AdjacencyGraph",
    "load_graph",
    "load_graph_from_lines",
    "iter_edge_records",
    "graph_summary",
]
