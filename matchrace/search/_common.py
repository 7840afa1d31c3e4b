# -*- coding: utf-8 -*-
"""This module contains the alternating path depth first search shared by all search strategies."""
from typing import Callable, List, Optional, Set

from ..graph import BipartiteGraph, Vertex
from ..matching import AugmentingPath, Matching

__all__ = ['search_alternating_path', 'EdgeFilter']

EdgeFilter = Callable[[Vertex, Vertex], bool]


def search_alternating_path(graph: BipartiteGraph, matching: Matching, root: Vertex, visited: Set[Vertex],
                            admissible: Optional[EdgeFilter]=None) -> Optional[AugmentingPath]:
    """Searches an augmenting path starting at the unmatched left vertex `root`.

    From a left vertex, the search follows every (unmatched) edge to a right vertex. If that right vertex is
    unmatched, an augmenting path has been found. Otherwise the search continues at the left vertex it is
    matched to. Neighbors are tried in adjacency order and the first path found is returned.

    Every vertex the search reaches is added to `visited` and vertices already in there are skipped, so
    sharing the set between several calls makes their paths vertex-disjoint.

    The search is iterative, so the length of the path is not limited by the recursion limit.

    Args:
        graph:
            The bipartite graph.
        matching:
            The current matching. It is not changed.
        root:
            The left vertex to start from.
        visited:
            The vertices that must not be used. It is updated with all vertices reached by this search.
        admissible:
            Optional predicate ``admissible(left, right)`` restricting which edges the search may follow.

    Returns:
        The augmenting path as a tuple of vertices or ``None`` if there is none.
    """
    if root in visited:
        return None
    visited.add(root)
    path = [root]  # type: List[Vertex]
    branches = [iter(graph.neighbors(root))]
    while branches:
        left_vertex = path[-1]
        for right_vertex in branches[-1]:
            if right_vertex in visited:
                continue
            if admissible is not None and not admissible(left_vertex, right_vertex):
                continue
            visited.add(right_vertex)
            partner = matching.partner_of_right(right_vertex)
            if partner is None:
                path.append(right_vertex)
                return tuple(path)
            if partner not in visited:
                visited.add(partner)
                path.extend((right_vertex, partner))
                branches.append(iter(graph.neighbors(partner)))
                break
        else:
            # Dead end, go back to the previous left vertex
            branches.pop()
            del path[-2:]
    return None
