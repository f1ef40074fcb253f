from .bfs import DistanceMap, shortest_path_lengths

__all__ = ["DistanceMap", "shortest_path_lengths"]
