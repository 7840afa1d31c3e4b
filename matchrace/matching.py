# -*- coding: utf-8 -*-
"""Contains the `Matching` state that the search strategies grow one augmenting path at a time.

A matching is stored as two dictionaries, one from left to right and one from right to left, which are always
updated together. That way the partner of a right vertex can be found without scanning all matched pairs.

>>> matching = Matching()
>>> matching.augment((left(0), right(1)))
>>> matching.partner_of_right(right(1))
L0
>>> matching.augment((left(1), right(1), left(0), right(0)))
>>> sorted(matching.items())
[(L0, R0), (L1, R1)]
"""
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .graph import LEFT, RIGHT, BipartiteGraph, Vertex, left, right  # pylint: disable=unused-import

__all__ = ['Matching', 'AugmentingPath', 'InvalidPathError', 'path_edges']

AugmentingPath = Tuple[Vertex, ...]


class InvalidPathError(ValueError):
    """Raised when trying to augment a matching along something that is not an augmenting path for it."""


def path_edges(path: Sequence[Vertex]) -> Iterator[Tuple[Vertex, Vertex]]:
    """Yields the consecutive vertex pairs of a path, i.e. the edges it uses.

    The pairs at even positions are the ones that become matched when the path is applied.

    >>> list(path_edges((left(0), right(1), left(1), right(0))))
    [(L0, R1), (R1, L1), (L1, R0)]
    """
    for i in range(len(path) - 1):
        yield path[i], path[i + 1]


class Matching(object):
    """A matching in a bipartite graph, i.e. an injective partial mapping from left to right vertices.

    The matching only grows via `augment` and only shrinks via `reset`.
    """

    __slots__ = ('_pair_left', '_pair_right')

    def __init__(self, pairs: Mapping[Vertex, Vertex]=None) -> None:
        self._pair_left = {}  # type: Dict[Vertex, Vertex]
        self._pair_right = {}  # type: Dict[Vertex, Vertex]
        if pairs:
            for left_vertex, right_vertex in pairs.items():
                if right_vertex in self._pair_right:
                    raise ValueError('{!r} cannot be matched to more than one vertex'.format(right_vertex))
                self._pair_left[left_vertex] = right_vertex
                self._pair_right[right_vertex] = left_vertex

    def is_left_matched(self, vertex: Vertex) -> bool:
        return vertex in self._pair_left

    def is_right_matched(self, vertex: Vertex) -> bool:
        return vertex in self._pair_right

    def partner_of_left(self, vertex: Vertex) -> Optional[Vertex]:
        return self._pair_left.get(vertex)

    def partner_of_right(self, vertex: Vertex) -> Optional[Vertex]:
        return self._pair_right.get(vertex)

    def partner(self, vertex: Vertex) -> Optional[Vertex]:
        """Returns the partner of the vertex regardless of which side it is on."""
        if vertex.side == LEFT:
            return self._pair_left.get(vertex)
        return self._pair_right.get(vertex)

    def check_path(self, path: Sequence[Vertex]) -> None:
        """Checks that the given path is an augmenting path for this matching.

        Raises:
            InvalidPathError:
                If the vertices do not alternate between left and right starting on the left, the path does not
                start at an unmatched left and end at an unmatched right vertex, a right vertex inside the path
                is not matched to its successor, or a vertex occurs twice.
        """
        if len(path) < 2 or len(path) % 2 != 0:
            raise InvalidPathError('An augmenting path needs an even number of vertices, got {:d}'.format(len(path)))
        for i, vertex in enumerate(path):
            expected_side = LEFT if i % 2 == 0 else RIGHT
            if vertex.side != expected_side:
                raise InvalidPathError('Vertex {!r} at position {:d} is on the wrong side'.format(vertex, i))
        if len(set(path)) != len(path):
            raise InvalidPathError('Augmenting path visits a vertex more than once')
        if path[0] in self._pair_left:
            raise InvalidPathError('Augmenting path must start at an unmatched vertex, {!r} is matched'.format(path[0]))
        if path[-1] in self._pair_right:
            raise InvalidPathError('Augmenting path must end at an unmatched vertex, {!r} is matched'.format(path[-1]))
        for i in range(1, len(path) - 1, 2):
            if self._pair_right.get(path[i]) != path[i + 1]:
                raise InvalidPathError('{!r} is not matched to {!r}'.format(path[i], path[i + 1]))

    def augment(self, path: Sequence[Vertex]) -> None:
        """Flips the edges along the augmenting path, so that the matching grows by one pair.

        Every left vertex of the path gets matched to the right vertex following it. The path is checked
        before anything is changed, so the matching is left untouched if the path is invalid.

        Raises:
            InvalidPathError:
                If the path is not an augmenting path for this matching (see `check_path`).
        """
        self.check_path(path)
        for i in range(0, len(path), 2):
            left_vertex, right_vertex = path[i], path[i + 1]
            self._pair_left[left_vertex] = right_vertex
            self._pair_right[right_vertex] = left_vertex

    def is_valid(self, graph: BipartiteGraph) -> bool:
        """Checks whether this is a valid matching for the graph.

        That is the case if both directions of the mapping agree, no right vertex is matched twice and every
        matched pair is an edge of the graph.
        """
        if len(self._pair_left) != len(self._pair_right):
            return False
        for left_vertex, right_vertex in self._pair_left.items():
            if self._pair_right.get(right_vertex) != left_vertex:
                return False
            if not graph.has_edge(left_vertex, right_vertex):
                return False
        return True

    def size(self) -> int:
        return len(self._pair_left)

    def reset(self) -> None:
        self._pair_left.clear()
        self._pair_right.clear()

    def copy(self) -> 'Matching':
        new_matching = type(self)()
        new_matching._pair_left = self._pair_left.copy()
        new_matching._pair_right = self._pair_right.copy()
        return new_matching

    __copy__ = copy

    @property
    def pairs(self) -> Mapping[Vertex, Vertex]:
        """A read-only view on the matched pairs from left to right."""
        return MappingProxyType(self._pair_left)

    def items(self):
        return self._pair_left.items()

    def edges(self):
        """Returns a view on the matched ``(left, right)`` pairs."""
        return self._pair_left.items()

    def __contains__(self, edge) -> bool:
        try:
            left_vertex, right_vertex = edge
        except (TypeError, ValueError):
            return False
        return left_vertex in self._pair_left and self._pair_left[left_vertex] == right_vertex

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._pair_left)

    def __len__(self):
        return len(self._pair_left)

    def __eq__(self, other):
        if isinstance(other, Matching):
            return self._pair_left == other._pair_left
        elif isinstance(other, dict):
            return self._pair_left == other
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        pairs = ', '.join('{!r}: {!r}'.format(tail, head) for tail, head in sorted(self._pair_left.items()))
        return '{}({{{}}})'.format(type(self).__name__, pairs)
