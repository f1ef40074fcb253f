from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from ..config import LoadConfig
from ..errors import MalformedRecordError
from .store import AdjacencyGraph

logger = logging.getLogger(__name__)

# --- Edge-list ingestion ---
# Line-oriented "from<TAB>to" records (SNAP style), a fixed
# number of header lines first. Any undecodable record aborts
# the load.
# ------------------------------------------------


def _parse_node_id(field: str, line: str, line_no: int) -> int:
    # plain ASCII digits only; int() would also take "1_0", "+3" or non-ASCII digits
    if not (field.isascii() and field.isdigit()):
        raise MalformedRecordError(line_no, line, f"node id is not an unsigned integer: {field!r}")
    return int(field)


def parse_edge_record(line: str, line_no: int) -> Tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise MalformedRecordError(line_no, line, f"expected 2 fields, got {len(parts)}")
    return _parse_node_id(parts[0], line, line_no), _parse_node_id(parts[1], line, line_no)


def _decode(raw: str | bytes, line_no: int) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        raise MalformedRecordError(
            line_no, raw.decode("utf-8", errors="replace"), "invalid UTF-8"
        ) from None


def iter_edge_records(lines: Iterable[str | bytes], cfg: LoadConfig = LoadConfig()) -> Iterator[Tuple[int, int]]:
    """
    Yield (from, to) pairs from raw lines (str, or UTF-8 bytes decoded per line).

    The first `cfg.header_lines` lines are skipped unconditionally. After that,
    blank lines and lines starting with `cfg.comment_prefix` are ignored.
    """
    if cfg.header_lines < 0:
        raise ValueError("header_lines must be >= 0")

    for line_no, raw in enumerate(lines, start=1):
        if line_no <= cfg.header_lines:
            continue
        line = _decode(raw, line_no).strip()
        if not line:
            continue
        if cfg.comment_prefix and line.startswith(cfg.comment_prefix):
            continue
        yield parse_edge_record(line, line_no)


def load_graph_from_lines(lines: Iterable[str | bytes], cfg: LoadConfig = LoadConfig()) -> AdjacencyGraph:
    g = AdjacencyGraph()
    n = g.add_edges(iter_edge_records(lines, cfg))
    logger.debug("loaded %d edges, %d source nodes", n, g.node_count())
    return g


def load_graph(path: str | Path, cfg: LoadConfig = LoadConfig()) -> AdjacencyGraph:
    """Read an edge-list file into a fresh AdjacencyGraph."""
    path = Path(path)
    logger.info("Loading edge list from %s", path)
    # binary so an undecodable line fails as a record error with its line number
    with path.open("rb") as f:
        g = load_graph_from_lines(f, cfg)
    logger.info(
        "Loaded %d edges: %d source nodes, %d distinct nodes",
        g.edge_count(), g.node_count(), g.distinct_node_count(),
    )
    return g
