from __future__ import annotations
from datetime import datetime
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from .report import PathLengthReport


def summary_frame(report: PathLengthReport) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "source": report.source,
                "denominator": report.denominator.value,
                "population": report.population,
                "reachable": report.reachable,
                "average": report.average,
                "std": report.std,
                "max": report.max_length,
                "min": report.min_length,
                "median": report.median,
            }
        ]
    )


def distribution_frame(report: PathLengthReport) -> pd.DataFrame:
    """One row per distance, ascending, with count and share of reachable nodes."""
    df = pd.DataFrame(
        sorted(report.distribution.items()),
        columns=["distance", "count"],
    )
    df["fraction"] = df["count"] / report.reachable if report.reachable else 0.0
    return df


def _savefig(fig: "plt.Figure", outpath: Path) -> None:
    outpath.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(outpath.with_suffix(".png"), dpi=300)
    fig.savefig(outpath.with_suffix(".pdf"))
    plt.close(fig)


def plot_distribution(report: PathLengthReport, outpath: Path) -> None:
    df = distribution_frame(report)
    fig = plt.figure(figsize=(10, 5.5))
    ax = fig.add_subplot(111)
    ax.bar(df["distance"], df["count"])
    ax.set_xlabel("Shortest path length (hops)")
    ax.set_ylabel("Nodes")
    ax.set_title(f"Shortest path length distribution from node {report.source}")
    ax.grid(True, axis="y", alpha=0.3)
    _savefig(fig, outpath)


def export_report_artifacts(
    report: PathLengthReport,
    outdir: Path | None = None,
    plot: bool = True,
) -> Path:
    if outdir is None:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        outdir = Path("results") / f"pathlen_{report.source}_{stamp}"
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    summary_frame(report).to_csv(outdir / "summary.csv", index=False)
    distribution_frame(report).to_csv(outdir / "distribution.csv", index=False)

    if plot:
        plot_distribution(report, outdir / "plots" / "distribution")

    return outdir
