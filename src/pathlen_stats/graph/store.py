from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Set, Tuple

import networkx as nx

# --- Graph Store ---
# Directed adjacency lists keyed by source node.
# Only nodes with at least one out-edge become keys; sinks are
# still reachable through their in-edges.
# ------------------------------------------------

Edge = Tuple[int, int]


class AdjacencyGraph:
    """
    Directed graph as a mapping node -> ordered list of out-neighbours.

    Duplicate edges and self-loops are kept exactly as inserted. The graph is
    built once by sequential `add_edge` calls and then only read.
    """

    def __init__(self) -> None:
        self._edges: Dict[int, List[int]] = {}
        self._seen: Set[int] = set()
        self._n_edges = 0

    def add_edge(self, src: int, dst: int) -> None:
        self._edges.setdefault(src, []).append(dst)
        self._seen.add(src)
        self._seen.add(dst)
        self._n_edges += 1

    def add_edges(self, pairs: Iterable[Edge]) -> int:
        n = 0
        for src, dst in pairs:
            self.add_edge(src, dst)
            n += 1
        return n

    def neighbors(self, node: int) -> Sequence[int]:
        """Out-neighbours of `node` in insertion order (empty if none recorded)."""
        return self._edges.get(node, ())

    def has_out_edges(self, node: int) -> bool:
        return node in self._edges

    def node_count(self) -> int:
        """
        Number of nodes with at least one out-edge.

        Note: sinks are not counted. This is the legacy averaging denominator;
        see metrics.distance_stats.Denominator for the alternatives.
        """
        return len(self._edges)

    def distinct_node_count(self) -> int:
        """Number of distinct ids seen as either end of an edge."""
        return len(self._seen)

    def edge_count(self) -> int:
        return self._n_edges

    def __contains__(self, node: object) -> bool:
        return node in self._seen

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a MultiDiGraph (parallel edges and self-loops preserved)."""
        g = nx.MultiDiGraph()
        g.add_nodes_from(self._seen)
        for src, dsts in self._edges.items():
            for dst in dsts:
                g.add_edge(src, dst)
        return g
