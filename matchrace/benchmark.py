# -*- coding: utf-8 -*-
"""Compares the matching strategies on the same graph.

There are three strategies:

``naive-greedy``
    Augments along one arbitrary augmenting path per iteration (see `find_augmenting_path`).
``ford-fulkerson``
    Exactly the same search as ``naive-greedy``. Without capacities, Ford-Fulkerson on the flow network of a
    bipartite graph is a search for one augmenting path per iteration, so both are expected to take the same
    number of iterations.
``hopcroft-karp``
    Augments along a maximal set of disjoint shortest augmenting paths per iteration (see `find_phase`).

An iteration is one call of the strategy's search, including the final one that finds nothing.

>>> graph = BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)])
>>> results = run(graph)
>>> [(r.strategy, r.iterations, r.size) for r in results.values()]
[('naive-greedy', 3, 2), ('ford-fulkerson', 3, 2), ('hopcroft-karp', 3, 2)]
"""
import logging
import time
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .graph import BipartiteGraph
from .matching import AugmentingPath, Matching
from .search.augmenting import find_augmenting_path, find_augmenting_path_ford_fulkerson
from .search.hopcroft_karp import find_phase

__all__ = [
    'STRATEGIES', 'BenchmarkResult', 'StrategyRunner', 'VerificationError', 'run', 'race', 'speedup',
    'naive_greedy', 'ford_fulkerson'
]

logger = logging.getLogger(__name__)

Search = Callable[[BipartiteGraph, Matching], List[AugmentingPath]]

BenchmarkResult = NamedTuple(
    'BenchmarkResult', [('strategy', str), ('iterations', int), ('elapsed', float), ('size', int)]
)


class VerificationError(AssertionError):
    """Raised when a strategy did not find a valid maximum matching."""


def naive_greedy(graph: BipartiteGraph, matching: Matching) -> List[AugmentingPath]:
    path = find_augmenting_path(graph, matching)
    return [] if path is None else [path]


def ford_fulkerson(graph: BipartiteGraph, matching: Matching) -> List[AugmentingPath]:
    path = find_augmenting_path_ford_fulkerson(graph, matching)
    return [] if path is None else [path]


STRATEGIES = {
    'naive-greedy': naive_greedy,
    'ford-fulkerson': ford_fulkerson,
    'hopcroft-karp': find_phase,
}  # type: Dict[str, Search]


class StrategyRunner(object):
    """Runs one strategy on its own matching, one iteration at a time.

    Attributes:
        name (str):
            The name of the strategy.
        graph (BipartiteGraph):
            The graph, which is shared with other runners and never changed.
        matching (Matching):
            The matching of this runner. It starts out empty.
        iterations (int):
            The number of iterations performed so far.
        elapsed (float):
            The time spent in the iterations so far in seconds.
        last_paths (List[AugmentingPath]):
            The paths applied in the last iteration.
    """

    def __init__(self, name: str, graph: BipartiteGraph, search: Search=None) -> None:
        if search is None:
            try:
                search = STRATEGIES[name]
            except KeyError:
                raise ValueError('Unknown strategy {!r}'.format(name)) from None
        self.name = name
        self.graph = graph
        self.matching = Matching()
        self.iterations = 0
        self.elapsed = 0.0
        self.last_paths = []  # type: List[AugmentingPath]
        self._search = search
        # Without vertices on one side there is nothing to search for
        self._complete = graph.left_count == 0 or graph.right_count == 0

    @property
    def is_complete(self) -> bool:
        return self._complete

    def step(self) -> List[AugmentingPath]:
        """Performs one iteration and returns the paths that were applied to the matching."""
        if self._complete:
            return []
        start = time.perf_counter()
        paths = self._search(self.graph, self.matching)
        for path in paths:
            self.matching.augment(path)
        self.elapsed += time.perf_counter() - start
        self.iterations += 1
        self.last_paths = paths
        if not paths:
            self._complete = True
            logger.debug('%s finished after %d iteration(s) with a matching of size %d', self.name, self.iterations,
                         len(self.matching))
        return paths

    def run(self) -> BenchmarkResult:
        """Performs iterations until the matching is maximum."""
        while not self._complete:
            self.step()
        return self.result()

    def result(self) -> BenchmarkResult:
        return BenchmarkResult(self.name, self.iterations, self.elapsed, len(self.matching))

    def verify(self, expected_size: int=None) -> None:
        """Checks that the matching is valid and, if given, has the expected size.

        Raises:
            VerificationError:
                If the check fails.
        """
        if not self.matching.is_valid(self.graph):
            raise VerificationError('{} produced an invalid matching: {!r}'.format(self.name, self.matching))
        if expected_size is not None and len(self.matching) != expected_size:
            raise VerificationError(
                '{} found a matching of size {:d}, but the maximum is {:d}'.format(
                    self.name, len(self.matching), expected_size
                )
            )


def _runners(graph: BipartiteGraph, strategies: Optional[Iterable[str]]) -> List[StrategyRunner]:
    if strategies is None:
        strategies = STRATEGIES
    return [StrategyRunner(name, graph) for name in strategies]


def run(graph: BipartiteGraph, strategies: Iterable[str]=None, verify: bool=False) -> Dict[str, BenchmarkResult]:
    """Runs every strategy to completion on the graph, each one on its own fresh matching.

    Args:
        graph:
            The graph to find a maximum matching for.
        strategies:
            The names of the strategies to run, defaults to all of `STRATEGIES`.
        verify:
            If true, every resulting matching is checked against a maximum matching computed by
            `BipartiteGraph.find_matching`.

    Returns:
        A dictionary mapping each strategy name to its `BenchmarkResult`, in the order the strategies were run.

    Raises:
        ValueError:
            If an unknown strategy is requested.
        VerificationError:
            If `verify` is true and a strategy did not find a valid maximum matching.
    """
    runners = _runners(graph, strategies)
    expected_size = len(graph.find_matching()) if verify else None
    results = {}
    for runner in runners:
        results[runner.name] = runner.run()
        if verify:
            runner.verify(expected_size)
        logger.debug('%s: %r', runner.name, results[runner.name])
    return results


def race(graph: BipartiteGraph, strategies: Iterable[str]=None) -> Iterator[Tuple[str, StrategyRunner]]:
    """Advances all strategies side by side, one iteration each in turn, until all of them are done.

    After every single iteration the name and runner of the strategy that just moved are yielded, so the caller
    can look at all the matchings in between.
    """
    runners = _runners(graph, strategies)
    while True:
        pending = [runner for runner in runners if not runner.is_complete]
        if not pending:
            break
        for runner in pending:
            runner.step()
            yield runner.name, runner


def speedup(results: Dict[str, BenchmarkResult], baseline: str='naive-greedy',
            contender: str='hopcroft-karp') -> Optional[float]:
    """Returns how many times faster the contender was than the baseline or ``None`` if it cannot be told."""
    contender_time = results[contender].elapsed
    if contender_time <= 0:
        return None
    return results[baseline].elapsed / contender_time
