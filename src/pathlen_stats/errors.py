from __future__ import annotations


class PathStatsError(ValueError):
    """Base class for failures raised by pathlen_stats."""


class MalformedRecordError(PathStatsError):
    """An edge-list record could not be decoded into two node ids."""

    def __init__(self, line_no: int, line: str, reason: str = "expected two non-negative integers"):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")


class EmptyGraphError(PathStatsError):
    """A statistic needs a non-zero population but the graph (or map) is empty."""
