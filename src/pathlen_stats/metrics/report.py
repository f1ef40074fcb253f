from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List

from ..graph.store import AdjacencyGraph
from ..traversal.bfs import shortest_path_lengths
from .distance_stats import (
    Denominator,
    average,
    distribution,
    maximum,
    median,
    minimum,
    population_size,
    standard_deviation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathLengthReport:
    source: int
    denominator: Denominator
    population: int
    reachable: int
    average: float
    std: float
    max_length: int
    min_length: int
    median: int
    distribution: Dict[int, int]


def build_report(
    graph: AdjacencyGraph,
    source: int,
    denominator: Denominator = Denominator.EDGE_SOURCES,
) -> PathLengthReport:
    """
    All statistics for one source from a single traversal.
    Same values as the per-statistic helpers, which each re-traverse.
    """
    denominator = Denominator(denominator)
    distances = shortest_path_lengths(graph, source)
    population = population_size(graph, distances, denominator)
    logger.info(
        "Source %d reaches %d nodes (population=%d, denominator=%s)",
        source, len(distances), population, denominator.value,
    )

    mean = average(distances, population)
    return PathLengthReport(
        source=source,
        denominator=denominator,
        population=population,
        reachable=len(distances),
        average=mean,
        std=standard_deviation(distances, population, mean=mean),
        max_length=maximum(distances),
        min_length=minimum(distances),
        median=median(distances),
        distribution=distribution(distances),
    )


def format_report(report: PathLengthReport, preview: int = 10) -> List[str]:
    """Text lines for the report; only the first `preview` distances are listed."""
    if preview < 0:
        raise ValueError("preview must be >= 0")
    src = report.source
    lines = [
        f"Average Shortest Path Length from Node {src}: {report.average:.2f}",
        f"Standard Deviation of Average Shortest Path Lengths from Node {src}: {report.std:.2f}",
        f"Maximum Shortest Path Length from Node {src}: {report.max_length}",
        f"Minimum Shortest Path Length from Node {src}: {report.min_length}",
        f"Median Shortest Path Length from Node {src}: {report.median}",
        f"Top {preview} Shortest Path Lengths and Their Counts from Node {src}:",
    ]
    for dist in sorted(report.distribution)[:preview]:
        lines.append(f"Distance {dist}: {report.distribution[dist]}")
    return lines
