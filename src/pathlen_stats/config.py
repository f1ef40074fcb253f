from dataclasses import dataclass, field

@dataclass(frozen=True)
class LoadConfig:
    header_lines: int = 4 # leading lines skipped before edge records (SNAP header)
    comment_prefix: str = "#" # ignored after the header block

@dataclass(frozen=True)
class ReportConfig:
    source: int = 0 # source node for the traversal
    preview: int = 10 # distribution rows shown in the text report
    denominator: str = "edge_sources"  # edge_sources | reachable | all_nodes

@dataclass(frozen=True)
class RunConfig:
    load: LoadConfig = field(default_factory=LoadConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
