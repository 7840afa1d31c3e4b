# -*- coding: utf-8 -*-
from hypothesis import given
import pytest

from matchrace.graph import BipartiteGraph
from matchrace.matching import Matching
from matchrace.search.hopcroft_karp import HopcroftKarp
from matchrace.stepper import (
    ControllerCompleteError, ControllerNotInitializedError, State, StepController, StepControllerError
)
from .common import SCENARIO_GRAPH, bipartite_graphs, left, right


class TestStepController:
    def test_scenario(self):
        controller = StepController(SCENARIO_GRAPH)

        assert controller.state is State.INIT
        assert controller.current_phase == 0
        assert controller.current_iteration == 0
        assert controller.current_path is None
        assert controller.layering is None

        assert controller.step() is State.APPLYING_PATH
        assert controller.current_phase == 1
        assert controller.current_paths == ((left(0), right(0)), )
        assert controller.path_index == 0
        assert controller.current_path == (left(0), right(0))
        assert controller.current_match_size == 0
        assert controller.layering.free_layer == 1

        assert controller.step() is State.NEXT_PHASE_PENDING
        assert controller.current_match_size == 1
        assert controller.last_applied_path == (left(0), right(0))
        assert controller.current_path is None
        assert dict(controller.matching) == {left(0): right(0)}

        assert controller.step() is State.APPLYING_PATH
        assert controller.current_phase == 2
        assert controller.current_path == (left(1), right(0), left(0), right(1))

        assert controller.step() is State.NEXT_PHASE_PENDING
        assert controller.current_match_size == 2

        assert controller.step() is State.COMPLETE
        assert controller.is_complete
        assert controller.current_phase == 3
        assert controller.current_iteration == 5
        assert controller.current_match_size == 2
        assert dict(controller.matching) == {left(0): right(1), left(1): right(0)}

    def test_several_paths_per_phase(self):
        controller = StepController(BipartiteGraph(3, 3, [(0, 0), (1, 1), (2, 2)]))

        states = [controller.step() for _ in range(5)]

        assert states == [
            State.APPLYING_PATH, State.APPLYING_PATH, State.APPLYING_PATH, State.NEXT_PHASE_PENDING, State.COMPLETE
        ]
        assert controller.current_phase == 2
        assert controller.current_match_size == 3

    def test_no_edges(self):
        controller = StepController(BipartiteGraph(2, 2))

        assert controller.step() is State.COMPLETE
        assert controller.current_match_size == 0
        assert controller.current_iteration == 1

    def test_not_initialized(self):
        controller = StepController()

        assert controller.state is None
        assert not controller.is_initialized
        assert not controller.is_complete
        assert controller.graph is None
        assert dict(controller.matching) == {}
        with pytest.raises(ControllerNotInitializedError):
            controller.step()
        with pytest.raises(ControllerNotInitializedError):
            controller.reset()

    def test_step_after_complete(self):
        controller = StepController(SCENARIO_GRAPH)
        controller.run()

        with pytest.raises(ControllerCompleteError):
            controller.step()

        assert controller.current_match_size == 2

    def test_misuse_errors(self):
        assert issubclass(ControllerNotInitializedError, StepControllerError)
        assert issubclass(ControllerCompleteError, StepControllerError)
        assert issubclass(StepControllerError, RuntimeError)

    def test_reset(self):
        controller = StepController(SCENARIO_GRAPH)
        controller.run()

        controller.reset()

        assert controller.state is State.INIT
        assert controller.current_match_size == 0
        assert controller.current_iteration == 0
        assert controller.current_phase == 0
        assert dict(controller.matching) == {}
        assert controller.run() == 2

    def test_reset_with_new_graph(self):
        controller = StepController()
        graph = BipartiteGraph(1, 3, [(0, 2), (0, 0)])

        controller.reset(graph)

        assert controller.is_initialized
        assert controller.graph is graph
        assert controller.run() == 1
        assert dict(controller.matching) == {left(0): right(2)}

    def test_starts_from_given_matching(self):
        matching = Matching({left(0): right(0)})
        controller = StepController(SCENARIO_GRAPH, matching)

        assert controller.current_match_size == 1
        assert controller.run() == 2
        assert matching == {left(0): right(1), left(1): right(0)}

    def test_matching_is_read_only(self):
        controller = StepController(SCENARIO_GRAPH)
        controller.step()
        controller.step()

        with pytest.raises(TypeError):
            controller.matching[left(1)] = right(1)

    def test_steps(self):
        controller = StepController(SCENARIO_GRAPH)

        states = list(controller.steps())

        assert states[-1] is State.COMPLETE
        assert len(states) == 5
        assert list(controller.steps()) == []

    @given(bipartite_graphs())
    def test_same_result_as_hopcroft_karp(self, graph):
        controller = StepController(graph)

        size = controller.run()

        hk = HopcroftKarp(graph)
        matchings, _ = hk.get_maximum_matching_num()
        assert size == matchings
        assert controller.current_phase == hk.phases
        # One step per phase search plus one step per applied path
        assert controller.current_iteration == controller.current_phase + size
        assert Matching(controller.matching).is_valid(graph)
