# -*- coding: utf-8 -*-
"""Contains the bipartite graph the matching strategies operate on.

A `BipartiteGraph` has a fixed number of vertices on each side and a list of edges, each connecting one
`LEFT` vertex to one `RIGHT` vertex. Vertices are plain `Vertex` tuples of a side tag and an index:

>>> graph = BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)])
>>> graph.neighbors(left(0))
(R0, R1)
>>> graph.left_vertices()
(L0, L1)

The graph is never modified after construction, all the search algorithms only change a
:class:`~matchrace.matching.Matching`.
"""
from typing import Dict, Iterable, Iterator, List, NamedTuple, Sequence, Set, Tuple

from hopcroftkarp import HopcroftKarp

__all__ = ['LEFT', 'RIGHT', 'Vertex', 'left', 'right', 'BipartiteGraph', 'InvalidGraphError']

LEFT = 0
RIGHT = 1

_SIDE_NAMES = {LEFT: 'L', RIGHT: 'R'}


class InvalidGraphError(ValueError):
    """Raised when a graph is constructed with invalid vertex counts or edge indices."""


class Vertex(NamedTuple):
    """A vertex of a bipartite graph, identified by its side (`LEFT` or `RIGHT`) and its index on that side."""
    side: int
    index: int

    def __repr__(self):
        return '{}{:d}'.format(_SIDE_NAMES.get(self.side, '?'), self.index)


def left(index: int) -> Vertex:
    """Shortcut for ``Vertex(LEFT, index)``."""
    return Vertex(LEFT, index)


def right(index: int) -> Vertex:
    """Shortcut for ``Vertex(RIGHT, index)``."""
    return Vertex(RIGHT, index)


Edge = Tuple[Vertex, Vertex]


def _check_count(name, count):
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise InvalidGraphError('{} must be a non-negative integer, got {!r}'.format(name, count))


def _check_index(index, count, side):
    if not isinstance(index, int) or isinstance(index, bool):
        raise InvalidGraphError('{} vertex index must be an integer, got {!r}'.format(side, index))
    if not 0 <= index < count:
        raise InvalidGraphError('{} vertex index {:d} out of range [0, {:d})'.format(side, index, count))


class BipartiteGraph(object):
    """An immutable bipartite graph with `left_count` vertices on the left side and `right_count` on the right.

    The edges are given as pairs of indices ``(left_index, right_index)``. The order in which the edges are given
    is preserved in the adjacency of each left vertex, and it determines which augmenting path a search finds
    first when several are equally good. Duplicate edges are ignored.

    Args:
        left_count:
            Number of vertices in the left part.
        right_count:
            Number of vertices in the right part.
        edges:
            The edges as ``(left_index, right_index)`` pairs.

    Raises:
        InvalidGraphError:
            If a count is negative or an edge refers to a vertex outside of the declared range.
    """

    __slots__ = ('_left_count', '_right_count', '_adjacency', '_edges', '_edge_set')

    def __init__(self, left_count: int, right_count: int, edges: Iterable[Tuple[int, int]]=()) -> None:
        _check_count('left_count', left_count)
        _check_count('right_count', right_count)
        self._left_count = left_count
        self._right_count = right_count
        adjacency = [[] for _ in range(left_count)]  # type: List[List[Vertex]]
        self._edges = []  # type: List[Edge]
        self._edge_set = set()  # type: Set[Edge]
        for edge in edges:
            try:
                left_index, right_index = edge
            except (TypeError, ValueError):
                raise InvalidGraphError('An edge must be a pair of vertex indices, got {!r}'.format(edge)) from None
            _check_index(left_index, left_count, 'Left')
            _check_index(right_index, right_count, 'Right')
            pair = (Vertex(LEFT, left_index), Vertex(RIGHT, right_index))
            if pair in self._edge_set:
                continue
            self._edge_set.add(pair)
            self._edges.append(pair)
            adjacency[left_index].append(pair[1])
        self._adjacency = tuple(tuple(neighbors) for neighbors in adjacency)

    @classmethod
    def from_adjacency(cls, adjacency: Sequence[Sequence[int]], right_count: int=None) -> 'BipartiteGraph':
        """Creates a graph from a list that contains the right neighbor indices for every left vertex.

        If `right_count` is omitted, it is one more than the largest right index used.

        >>> BipartiteGraph.from_adjacency([[1], [0, 1]])
        BipartiteGraph(2, 2, [(0, 1), (1, 0), (1, 1)])
        """
        if right_count is None:
            right_count = max((max(neighbors) + 1 for neighbors in adjacency if neighbors), default=0)
        edges = ((i, j) for i, neighbors in enumerate(adjacency) for j in neighbors)
        return cls(len(adjacency), right_count, edges)

    @property
    def left_count(self) -> int:
        return self._left_count

    @property
    def right_count(self) -> int:
        return self._right_count

    def left_vertices(self) -> Tuple[Vertex, ...]:
        """All left vertices ordered by index."""
        return tuple(Vertex(LEFT, i) for i in range(self._left_count))

    def right_vertices(self) -> Tuple[Vertex, ...]:
        """All right vertices ordered by index."""
        return tuple(Vertex(RIGHT, i) for i in range(self._right_count))

    def neighbors(self, vertex: Vertex) -> Tuple[Vertex, ...]:
        """Returns the right vertices adjacent to the given left vertex in edge insertion order."""
        side, index = vertex
        if side != LEFT:
            raise ValueError('Only left vertices have an adjacency list, got {!r}'.format(vertex))
        _check_index(index, self._left_count, 'Left')
        return self._adjacency[index]

    def edges(self) -> Tuple[Edge, ...]:
        """All edges as ``(left_vertex, right_vertex)`` pairs in insertion order."""
        return tuple(self._edges)

    def has_edge(self, left_vertex: Vertex, right_vertex: Vertex) -> bool:
        return (left_vertex, right_vertex) in self._edge_set

    def __contains__(self, edge) -> bool:
        return edge in self._edge_set

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self):
        return len(self._edges)

    def __eq__(self, other):
        if not isinstance(other, BipartiteGraph):
            return NotImplemented
        return (self._left_count == other._left_count and self._right_count == other._right_count and
                self._edges == other._edges)

    def __hash__(self):
        return hash((self._left_count, self._right_count, tuple(self._edges)))

    def __repr__(self):
        edges = ', '.join('({:d}, {:d})'.format(tail.index, head.index) for tail, head in self._edges)
        return '{}({:d}, {:d}, [{}])'.format(type(self).__name__, self._left_count, self._right_count, edges)

    def find_matching(self) -> Dict[Vertex, Vertex]:
        """Finds a maximum matching independently of the strategies in this package.

        This is done using the Hopcroft-Karp algorithm with an implementation from the
        `hopcroftkarp` package. It serves as a reference to check the results of the other strategies.

        Returns:
            A dictionary where each edge of the matching is represented by a key-value pair
            with the key being from the left part of the graph and the value from the right part.
        """
        # Only one direction of each edge is needed for the HopcroftKarp class. Since the vertices carry
        # their side, the returned matching can be filtered down to the left-to-right pairs.
        directed_graph = {}  # type: Dict[Vertex, Set[Vertex]]
        for tail, head in self._edges:
            directed_graph.setdefault(tail, set()).add(head)

        if not directed_graph:
            return {}

        matching = HopcroftKarp(directed_graph).maximum_matching()

        return dict((tail, head) for tail, head in matching.items() if tail.side == LEFT)
