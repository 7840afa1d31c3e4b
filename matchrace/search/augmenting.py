# -*- coding: utf-8 -*-
"""Single augmenting path search used by the naive greedy and the Ford-Fulkerson strategies.

Each call finds at most one augmenting path with a plain depth first search. There is no guarantee on the
length of the path, it is simply the first one found when trying the unmatched left vertices and their
neighbors in order:

>>> graph = BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)])
>>> matching = Matching()
>>> path = find_augmenting_path(graph, matching)
>>> path
(L0, R0)
>>> matching.augment(path)
>>> find_augmenting_path(graph, matching)
(L1, R0, L0, R1)

The "Ford-Fulkerson" strategy does exactly the same as the naive greedy one: on a bipartite graph with unit
capacities, every augmenting path in the flow network is an alternating path, so both find one path per
iteration. `find_augmenting_path_ford_fulkerson` is therefore the very same function, and the two strategies
only differ in name when they are compared.
"""
from typing import Optional, Set

from ..graph import BipartiteGraph, Vertex
from ..matching import AugmentingPath, Matching
from ._common import search_alternating_path

__all__ = ['find_augmenting_path', 'find_augmenting_path_ford_fulkerson']


def find_augmenting_path(graph: BipartiteGraph, matching: Matching) -> Optional[AugmentingPath]:
    """Finds one augmenting path for the matching.

    The unmatched left vertices are tried in order, and all searches of one call share the same set of visited
    vertices.

    Returns:
        The first augmenting path found or ``None`` if the matching is already maximum.
    """
    visited = set()  # type: Set[Vertex]
    for left_vertex in graph.left_vertices():
        if matching.is_left_matched(left_vertex):
            continue
        path = search_alternating_path(graph, matching, left_vertex, visited)
        if path is not None:
            return path
    return None


find_augmenting_path_ford_fulkerson = find_augmenting_path
