# -*- coding: utf-8 -*-
"""Phase search of the Hopcroft-Karp algorithm.

Every phase first layers the graph with a breadth first search starting at all unmatched left vertices at once
and then extracts a maximal set of vertex-disjoint shortest augmenting paths with a depth first search that only
moves forward one layer at a time. Applying all paths of a phase grows the matching by their number. When a phase
finds no path at all, the matching is maximum.

>>> graph = BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)])
>>> matching = Matching()
>>> find_phase(graph, matching)
[(L0, R0)]
>>> matching.augment((left(0), right(0)))
>>> find_phase(graph, matching)
[(L1, R0, L0, R1)]
"""
import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

from ..graph import BipartiteGraph, Vertex, left, right  # pylint: disable=unused-import
from ..matching import AugmentingPath, Matching
from ._common import search_alternating_path

__all__ = ['HopcroftKarp', 'Layering', 'build_layering', 'extract_paths', 'find_phase']

logger = logging.getLogger(__name__)


class Layering(Dict[Vertex, int]):
    """The breadth first search layers of one phase, mapping each reached vertex to its distance.

    Unmatched left vertices have layer 0. A right vertex lies one layer behind the left vertex it was first reached
    from, and the left vertex it is matched to lies one layer behind that.

    Attributes:
        free_layer (Optional[int]):
            The layer of the closest unmatched right vertex, which is also the number of edges of the shortest
            augmenting paths. ``None`` if no unmatched right vertex can be reached.
    """

    def __init__(self) -> None:
        super(Layering, self).__init__()
        self.free_layer = None  # type: Optional[int]

    def __repr__(self):
        return 'Layering({}, free_layer={!r})'.format(dict.__repr__(self), self.free_layer)


def build_layering(graph: BipartiteGraph, matching: Matching) -> Layering:
    """Layers the graph by the alternating path distance from the unmatched left vertices."""
    layering = Layering()
    vertex_queue = deque()  # type: Deque[Vertex]
    for left_vertex in graph.left_vertices():
        if not matching.is_left_matched(left_vertex):
            layering[left_vertex] = 0
            vertex_queue.append(left_vertex)

    while vertex_queue:
        left_vertex = vertex_queue.popleft()
        layer = layering[left_vertex]
        # Nothing behind the closest unmatched right vertex can be part of a shortest augmenting path
        if layering.free_layer is not None and layer > layering.free_layer:
            continue
        for right_vertex in graph.neighbors(left_vertex):
            if right_vertex not in layering:
                layering[right_vertex] = layer + 1
            other_left = matching.partner_of_right(right_vertex)
            if other_left is None:
                if layering.free_layer is None:
                    layering.free_layer = layer + 1
            elif other_left not in layering:
                layering[other_left] = layer + 2
                vertex_queue.append(other_left)

    return layering


def extract_paths(graph: BipartiteGraph, matching: Matching, layering: Layering) -> List[AugmentingPath]:
    """Extracts a maximal set of vertex-disjoint shortest augmenting paths from the layered graph.

    The unmatched left vertices are tried in order. Each search may only go from a vertex to one in the next
    layer and only end at an unmatched right vertex in the layer `Layering.free_layer`. Every vertex reached by
    any of the searches is used up for the rest of the phase, whether it ended up on a path or not.
    """
    free_layer = layering.free_layer
    if free_layer is None:
        return []

    def admissible(left_vertex: Vertex, right_vertex: Vertex) -> bool:
        layer = layering[left_vertex] + 1
        if layering.get(right_vertex) != layer:
            return False
        other_left = matching.partner_of_right(right_vertex)
        if other_left is None:
            return layer == free_layer
        return layer < free_layer and layering.get(other_left) == layer + 1

    used = set()  # type: Set[Vertex]
    paths = []  # type: List[AugmentingPath]
    for left_vertex in graph.left_vertices():
        if matching.is_left_matched(left_vertex):
            continue
        path = search_alternating_path(graph, matching, left_vertex, used, admissible)
        if path is not None:
            paths.append(path)
    return paths


def _search_phase(graph: BipartiteGraph, matching: Matching) -> Tuple[Layering, List[AugmentingPath]]:
    layering = build_layering(graph, matching)
    paths = extract_paths(graph, matching, layering)
    if paths:
        logger.debug('Phase found %d augmenting path(s) with %d edge(s)', len(paths), layering.free_layer)
    else:
        logger.debug('Phase found no augmenting path, matching of size %d is maximum', len(matching))
    return layering, paths


def find_phase(graph: BipartiteGraph, matching: Matching) -> List[AugmentingPath]:
    """Runs one phase and returns the augmenting paths found, without changing the matching.

    The paths are pairwise vertex-disjoint and all have the same, shortest possible length, so all of them can be
    applied to the matching in any order. An empty list means that the matching is maximum.
    """
    return _search_phase(graph, matching)[1]


class HopcroftKarp(object):
    """Implementation of the Hopcroft-Karp algorithm on a bipartite graph.

    The constructor accepts the graph and optionally a matching to start from, which is grown in place.
    A maximum matching may be returned by ``.get_maximum_matching()``, while ``.get_maximum_matching_num()``
    returns both the number of pairs added and the matching.

    Single phases can be run with ``.find_phase()`` and applied with ``.apply()`` to inspect the algorithm
    between phases. The layering of the last phase is kept in ``.layering``.
    """

    def __init__(self, graph: BipartiteGraph, matching: Matching=None) -> None:
        self._graph = graph
        self._matching = matching if matching is not None else Matching()
        self.layering = None  # type: Optional[Layering]
        self.phases = 0

    @property
    def graph(self) -> BipartiteGraph:
        return self._graph

    @property
    def matching(self) -> Matching:
        return self._matching

    def find_phase(self) -> List[AugmentingPath]:
        """Runs one phase on the current matching and returns its augmenting paths (see `find_phase`)."""
        self.phases += 1
        self.layering, paths = _search_phase(self._graph, self._matching)
        return paths

    def apply(self, paths: List[AugmentingPath]) -> None:
        """Augments the matching along all the given disjoint paths."""
        for path in paths:
            self._matching.augment(path)

    def _run_hopcroft_karp(self) -> int:
        matchings = 0
        while True:
            paths = self.find_phase()
            if not paths:
                break
            self.apply(paths)
            matchings += len(paths)
        return matchings

    def get_maximum_matching(self) -> Dict[Vertex, Vertex]:
        """Find an instance of maximum matching for the given bipartite graph.

        Returns:
            A dictionary representing an instance of maximum matching.

        """
        matchings, maximum_matching = self.get_maximum_matching_num()
        return maximum_matching

    def get_maximum_matching_num(self) -> Tuple[int, Dict[Vertex, Vertex]]:
        """Find an instance of maximum matching and the number of matchings
        found.

        Returns:
            A tuple containing the number of matchings found and a dictionary
            representing an instance of maximum matching on the given
            bipartite graph.

        """
        matchings = self._run_hopcroft_karp()
        return matchings, dict(self._matching.items())
