from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from .config import LoadConfig, ReportConfig, RunConfig
from .errors import PathStatsError
from .graph import graph_summary, load_graph
from .metrics import Denominator, PathLengthReport, build_report, format_report
from .metrics.export import export_report_artifacts

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pathlen-stats",
        description="Shortest path length statistics from one source node of a directed edge list.",
    )
    ap.add_argument("edge_file", type=Path, help="Edge list: one 'from<TAB>to' pair per line")
    ap.add_argument("--source", type=int, default=0, help="Source node id")
    ap.add_argument("--header-lines", type=int, default=4, help="Leading lines to skip")
    ap.add_argument("--preview", type=int, default=10, help="Distribution rows to print")
    ap.add_argument(
        "--denominator",
        choices=[d.value for d in Denominator],
        default=Denominator.EDGE_SOURCES.value,
        help="Population for average/std (edge_sources reproduces the legacy numbers)",
    )
    ap.add_argument("--summary", action="store_true", help="Print a whole-graph summary first")
    ap.add_argument("--outdir", type=Path, default=None, help="Write CSV/plot artifacts here")
    ap.add_argument("--no-plot", action="store_true", help="Skip the distribution plot when exporting")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        load=LoadConfig(header_lines=args.header_lines),
        report=ReportConfig(source=args.source, preview=args.preview, denominator=args.denominator),
    )


def run(edge_file: Path, cfg: RunConfig, show_summary: bool = False) -> Tuple[List[str], PathLengthReport]:
    g = load_graph(edge_file, cfg.load)
    out: List[str] = []
    if show_summary:
        out.append("=== Graph summary ===")
        for k, v in graph_summary(g).items():
            out.append(f"{k}: {v}")
        out.append("")
    if not g.has_out_edges(cfg.report.source):
        logger.warning("Source %d has no out-edges; only the source itself is reachable", cfg.report.source)
    report = build_report(g, cfg.report.source, Denominator(cfg.report.denominator))
    out.extend(format_report(report, preview=cfg.report.preview))
    return out, report


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.preview < 0:
        ap.error("--preview must be >= 0")
    if args.source < 0:
        ap.error("--source must be a non-negative node id")
    if args.header_lines < 0:
        ap.error("--header-lines must be >= 0")
    _configure_logging(args.verbose)
    cfg = config_from_args(args)

    try:
        lines, report = run(args.edge_file, cfg, show_summary=args.summary)
    except (PathStatsError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)

    if args.outdir is not None:
        outdir = export_report_artifacts(report, args.outdir, plot=not args.no_plot)
        logger.info("Artifacts written to %s", outdir)
        print(f"\nArtifacts: {outdir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
