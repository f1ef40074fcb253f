from __future__ import annotations
import enum
import math
import sys
from typing import Dict, Mapping

import numpy as np

from ..errors import EmptyGraphError
from ..graph.store import AdjacencyGraph
from ..traversal.bfs import shortest_path_lengths

# --- Distance-map statistics ---
# Five reducers over one distance map (node -> hop count).
# Average and standard deviation divide by a population size
# chosen by `Denominator`; the rest only look at the map values.
# ------------------------------------------------

# Returned by maximum/minimum for an empty map.
EMPTY_SENTINEL = sys.maxsize


class Denominator(str, enum.Enum):
    """
    Population used when averaging.

    EDGE_SOURCES is the legacy behaviour: number of nodes with out-edges,
    which is neither the reachable set nor the full node set.
    """
    EDGE_SOURCES = "edge_sources"
    REACHABLE = "reachable"
    ALL_NODES = "all_nodes"


def population_size(
    graph: AdjacencyGraph,
    distances: Mapping[int, int],
    denominator: Denominator = Denominator.EDGE_SOURCES,
) -> int:
    denominator = Denominator(denominator)
    if denominator is Denominator.EDGE_SOURCES:
        return graph.node_count()
    if denominator is Denominator.REACHABLE:
        return len(distances)
    # an isolated source is in no edge but still belongs to the population
    return graph.distinct_node_count() + sum(1 for node in distances if node not in graph)


def _check_population(population: int) -> None:
    if population <= 0:
        raise EmptyGraphError("population is zero (graph has no edges); average is undefined")


def average(distances: Mapping[int, int], population: int) -> float:
    _check_population(population)
    total = sum(distances.values())
    return float(total) / population


def standard_deviation(distances: Mapping[int, int], population: int, mean: float | None = None) -> float:
    """Population standard deviation around `mean` (computed if not given)."""
    _check_population(population)
    if mean is None:
        mean = average(distances, population)
    xs = np.fromiter(distances.values(), dtype=np.float64, count=len(distances))
    sq = float(np.sum((xs - mean) ** 2))
    return math.sqrt(sq / population)


def maximum(distances: Mapping[int, int]) -> int:
    return max(distances.values(), default=EMPTY_SENTINEL)


def minimum(distances: Mapping[int, int]) -> int:
    return min(distances.values(), default=EMPTY_SENTINEL)


def median(distances: Mapping[int, int]) -> int:
    """
    Integer median: middle value for odd counts, floor of the mean of the two
    middle values for even counts.
    """
    values = sorted(distances.values())
    n = len(values)
    if n == 0:
        raise EmptyGraphError("median of an empty distance map")
    mid = n // 2
    if n % 2 == 0:
        return (values[mid - 1] + values[mid]) // 2
    return values[mid]


def distribution(distances: Mapping[int, int]) -> Dict[int, int]:
    """Count of nodes per distance, keys in ascending order."""
    if not distances:
        return {}
    xs = np.fromiter(distances.values(), dtype=np.int64, count=len(distances))
    keys, counts = np.unique(xs, return_counts=True)
    return {int(k): int(c) for k, c in zip(keys, counts)}


# Graph-level helpers: each call runs its own traversal.

def average_shortest_path_length(
    graph: AdjacencyGraph,
    source: int,
    denominator: Denominator = Denominator.EDGE_SOURCES,
) -> float:
    d = shortest_path_lengths(graph, source)
    return average(d, population_size(graph, d, denominator))


def shortest_path_length_std(
    graph: AdjacencyGraph,
    source: int,
    denominator: Denominator = Denominator.EDGE_SOURCES,
) -> float:
    d = shortest_path_lengths(graph, source)
    return standard_deviation(d, population_size(graph, d, denominator))


def max_shortest_path_length(graph: AdjacencyGraph, source: int) -> int:
    return maximum(shortest_path_lengths(graph, source))


def min_shortest_path_length(graph: AdjacencyGraph, source: int) -> int:
    return minimum(shortest_path_lengths(graph, source))


def median_shortest_path_length(graph: AdjacencyGraph, source: int) -> int:
    return median(shortest_path_lengths(graph, source))


def shortest_path_length_distribution(graph: AdjacencyGraph, source: int) -> Dict[int, int]:
    return distribution(shortest_path_lengths(graph, source))
