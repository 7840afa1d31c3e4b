# -*- coding: utf-8 -*-
from hypothesis import given
import pytest

from matchrace.benchmark import STRATEGIES, BenchmarkResult, StrategyRunner, VerificationError, race, run, speedup
from matchrace.generate import random_graph
from matchrace.graph import BipartiteGraph
from .common import SCENARIO_GRAPH, bipartite_graphs, left, right


class TestRun:
    def test_scenario(self):
        results = run(SCENARIO_GRAPH, verify=True)

        assert list(results) == ['naive-greedy', 'ford-fulkerson', 'hopcroft-karp']
        for name, result in results.items():
            assert result.strategy == name
            assert result.iterations == 3
            assert result.size == 2
            assert result.elapsed >= 0

    @pytest.mark.parametrize('graph', [BipartiteGraph(0, 3), BipartiteGraph(3, 0), BipartiteGraph(0, 0)])
    def test_no_vertices_on_one_side(self, graph):
        results = run(graph, verify=True)

        for result in results.values():
            assert result.iterations == 0
            assert result.size == 0

    def test_no_edges(self):
        results = run(BipartiteGraph(4, 4), verify=True)

        for result in results.values():
            assert result.iterations == 1
            assert result.size == 0

    def test_selected_strategies(self):
        results = run(SCENARIO_GRAPH, ['hopcroft-karp'])

        assert list(results) == ['hopcroft-karp']

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            run(SCENARIO_GRAPH, ['bogo-match'])

    def test_hopcroft_karp_needs_fewer_iterations(self):
        graph = random_graph(200, 200, 3, 6, seed=1)

        results = run(graph, verify=True)

        assert results['hopcroft-karp'].iterations < results['naive-greedy'].iterations
        assert results['naive-greedy'].iterations == results['naive-greedy'].size + 1

    def test_ford_fulkerson_equals_naive_greedy(self):
        # Both strategies are intentionally the same search, not a bug
        graph = random_graph(50, 40, seed=7)

        naive = StrategyRunner('naive-greedy', graph)
        ford = StrategyRunner('ford-fulkerson', graph)
        naive.run()
        ford.run()

        assert naive.iterations == ford.iterations
        assert naive.matching == ford.matching

    @given(bipartite_graphs())
    def test_all_strategies_find_maximum(self, graph):
        results = run(graph, verify=True)

        expected_size = len(graph.find_matching())
        for result in results.values():
            assert result.size == expected_size
            assert result.iterations <= expected_size + 1
        assert results['hopcroft-karp'].iterations <= results['naive-greedy'].iterations


class TestStrategyRunner:
    def test_step(self, search):
        runner = StrategyRunner('test', SCENARIO_GRAPH, search)

        sizes = []
        while not runner.is_complete:
            paths = runner.step()
            sizes.append(len(runner.matching))
            assert runner.last_paths == paths
            assert runner.matching.is_valid(SCENARIO_GRAPH)

        assert sizes == [1, 2, 2]
        assert runner.iterations == 3
        assert runner.step() == []
        assert runner.iterations == 3

    def test_own_matching(self):
        first = StrategyRunner('naive-greedy', SCENARIO_GRAPH)
        second = StrategyRunner('naive-greedy', SCENARIO_GRAPH)

        first.run()

        assert first.matching is not second.matching
        assert len(second.matching) == 0

    def test_result(self):
        runner = StrategyRunner('hopcroft-karp', SCENARIO_GRAPH)

        result = runner.run()

        assert result == BenchmarkResult('hopcroft-karp', 3, runner.elapsed, 2)

    def test_verify_fails_for_wrong_size(self):
        runner = StrategyRunner('lazy', SCENARIO_GRAPH, lambda graph, matching: [])
        runner.run()

        assert runner.iterations == 1
        runner.verify()
        with pytest.raises(VerificationError):
            runner.verify(2)

    def test_verify_fails_for_invalid_matching(self):
        runner = StrategyRunner('naive-greedy', SCENARIO_GRAPH)
        runner.matching.augment((left(1), right(1)))

        with pytest.raises(VerificationError):
            runner.verify()

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            StrategyRunner('bogo-match', SCENARIO_GRAPH)


class TestRace:
    def test_scenario(self):
        moves = [(name, runner.iterations, len(runner.matching)) for name, runner in race(SCENARIO_GRAPH)]

        assert moves == [
            ('naive-greedy', 1, 1),
            ('ford-fulkerson', 1, 1),
            ('hopcroft-karp', 1, 1),
            ('naive-greedy', 2, 2),
            ('ford-fulkerson', 2, 2),
            ('hopcroft-karp', 2, 2),
            ('naive-greedy', 3, 2),
            ('ford-fulkerson', 3, 2),
            ('hopcroft-karp', 3, 2),
        ]

    def test_finished_strategies_stop(self):
        graph = BipartiteGraph(3, 3, [(0, 0), (1, 1), (2, 2)])

        names = [name for name, _ in race(graph)]

        assert names.count('hopcroft-karp') == 2
        assert names.count('naive-greedy') == 4

    def test_no_vertices(self):
        assert list(race(BipartiteGraph(0, 2))) == []

    @given(bipartite_graphs())
    def test_same_results_as_run(self, graph):
        finished = {}
        for name, runner in race(graph):
            finished[name] = runner

        results = run(graph)
        for name, runner in finished.items():
            assert runner.iterations == results[name].iterations
            assert len(runner.matching) == results[name].size


class TestSpeedup:
    def test_ratio(self):
        results = {
            'naive-greedy': BenchmarkResult('naive-greedy', 10, 3.0, 9),
            'hopcroft-karp': BenchmarkResult('hopcroft-karp', 3, 1.5, 9),
        }

        assert speedup(results) == 2.0

    def test_no_measurable_time(self):
        results = {
            'naive-greedy': BenchmarkResult('naive-greedy', 0, 0.0, 0),
            'hopcroft-karp': BenchmarkResult('hopcroft-karp', 0, 0.0, 0),
        }

        assert speedup(results) is None


def test_strategy_names():
    assert list(STRATEGIES) == ['naive-greedy', 'ford-fulkerson', 'hopcroft-karp']
