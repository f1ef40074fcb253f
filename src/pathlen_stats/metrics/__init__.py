from .distance_stats import (
    EMPTY_SENTINEL,
    Denominator,
    population_size,
    average,
    standard_deviation,
    maximum,
    minimum,
    median,
    distribution,
    average_shortest_path_length,
    shortest_path_length_std,
    max_shortest_path_length,
    min_shortest_path_length,
    median_shortest_path_length,
    shortest_path_length_distribution,
)
from .report import PathLengthReport, build_report, format_report

__all__ = [
    "EMPTY_SENTINEL",
    "Denominator",
    "population_size",
    "average",
    "standard_deviation",
    "maximum",
    "minimum",
    "median",
    "distribution",
    "average_shortest_path_length",
    "shortest_path_length_std",
    "max_shortest_path_length",
    "min_shortest_path_length",
    "median_shortest_path_length",
    "shortest_path_length_distribution",
    "PathLengthReport",
    "build_report",
    "format_report",
]
