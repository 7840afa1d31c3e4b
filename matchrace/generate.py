# -*- coding: utf-8 -*-
"""Random bipartite graphs for trying out and benchmarking the strategies."""
import random

from .graph import BipartiteGraph

__all__ = ['random_graph']


def random_graph(left_count: int, right_count: int, min_degree: int=2, max_degree: int=4,
                 seed: int=None) -> BipartiteGraph:
    """Creates a random bipartite graph.

    Every left vertex is connected to between `min_degree` and `max_degree` distinct right vertices chosen at
    random (but never to more than there are). The same seed always gives the same graph.

    >>> random_graph(3, 3, seed=42) == random_graph(3, 3, seed=42)
    True
    """
    if min_degree < 0 or max_degree < min_degree:
        raise ValueError('Invalid degree range [{:d}, {:d}]'.format(min_degree, max_degree))
    rng = random.Random(seed)
    edges = []
    for i in range(left_count):
        degree = min(rng.randint(min_degree, max_degree), right_count)
        edges.extend((i, j) for j in rng.sample(range(right_count), degree))
    return BipartiteGraph(left_count, right_count, edges)
