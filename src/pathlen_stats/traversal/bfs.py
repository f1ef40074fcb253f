from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Set, Tuple

from ..graph.store import AdjacencyGraph

DistanceMap = Dict[int, int]


def shortest_path_lengths(graph: AdjacencyGraph, source: int) -> DistanceMap:
    """
    Hop distance from `source` to every node reachable along out-edges.

    Breadth-first frontier expansion: a node's distance is fixed when it is
    first discovered (parent distance + 1). The work-list must be FIFO for
    that discovery-time distance to be the minimum hop count; popping from
    the end (stack order) can discover a node along a longer branch first.

    The source does not need out-edges; it always maps to 0.
    """
    if source < 0:
        raise ValueError("source must be a non-negative node id")

    visited: Set[int] = {source}
    distances: DistanceMap = {}
    queue: Deque[Tuple[int, int]] = deque([(source, 0)])

    while queue:
        node, dist = queue.popleft()
        distances[node] = dist
        for nbr in graph.neighbors(node):
            if nbr not in visited:
                visited.add(nbr)
                queue.append((nbr, dist + 1))

    return distances
