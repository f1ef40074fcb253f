from __future__ import annotations
import networkx as nx

from .store import AdjacencyGraph
# Whole-graph summary for the loaded edge list.
# Uses the NetworkX export so component analysis matches the
# library's definitions (weak connectivity for directed graphs).


def graph_summary(graph: AdjacencyGraph) -> dict:
    g = graph.to_networkx()
    n = g.number_of_nodes()
    e = g.number_of_edges()

    weakly_connected = nx.is_weakly_connected(g) if n else False
    comp_size = n
    if n and not weakly_connected:
        comp_size = len(max(nx.weakly_connected_components(g), key=len))

    out_degrees = [d for _, d in g.out_degree()]
    deg_min = min(out_degrees) if out_degrees else 0
    deg_max = max(out_degrees) if out_degrees else 0
    deg_avg = (sum(out_degrees) / len(out_degrees)) if out_degrees else 0.0

    return {
        "nodes": n,
        "edges": e,
        "edge_sources": graph.node_count(),
        "sinks": n - graph.node_count(),
        "self_loops": nx.number_of_selfloops(g),
        "weakly_connected": weakly_connected,
        "largest_wcc_size": comp_size if n else 0,
        "out_degree_min": deg_min,
        "out_degree_avg": float(deg_avg),
        "out_degree_max": deg_max,
    }
