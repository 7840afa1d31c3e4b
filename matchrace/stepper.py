# -*- coding: utf-8 -*-
"""Contains the `StepController` that runs the Hopcroft-Karp algorithm one step at a time.

Every call of `StepController.step` performs exactly one transition of a small state machine, so a caller can
inspect (or draw) the matching and the current augmenting paths in between and pace the algorithm however it
likes. The controller itself never waits for anything.

>>> controller = StepController(BipartiteGraph(2, 2, [(0, 0), (0, 1), (1, 0)]))
>>> controller.step()
<State.APPLYING_PATH: 'applying path'>
>>> controller.current_path
(L0, R0)
>>> list(controller.steps())
[<State.NEXT_PHASE_PENDING: 'next phase pending'>, <State.APPLYING_PATH: 'applying path'>, \
<State.NEXT_PHASE_PENDING: 'next phase pending'>, <State.COMPLETE: 'complete'>]
>>> controller.current_match_size
2
"""
import logging
from enum import Enum
from typing import Iterator, Mapping, Optional, Tuple

from .graph import BipartiteGraph, Vertex
from .matching import AugmentingPath, Matching
from .search.hopcroft_karp import HopcroftKarp, Layering

__all__ = [
    'State', 'StepController', 'StepControllerError', 'ControllerNotInitializedError', 'ControllerCompleteError'
]

logger = logging.getLogger(__name__)


class StepControllerError(RuntimeError):
    """Base class for using a `StepController` the wrong way."""


class ControllerNotInitializedError(StepControllerError):
    """Raised when stepping a controller that has no graph to run on."""


class ControllerCompleteError(StepControllerError):
    """Raised when stepping a controller that has already found a maximum matching."""


class State(Enum):
    """The states of a `StepController`.

    In `INIT` and `NEXT_PHASE_PENDING`, the next step runs the search of a phase. In `APPLYING_PATH`, the next
    step applies one of the paths found by that search. `COMPLETE` is final.
    """
    INIT = 'init'
    APPLYING_PATH = 'applying path'
    NEXT_PHASE_PENDING = 'next phase pending'
    COMPLETE = 'complete'


class StepController(object):
    """Drives the phases of the Hopcroft-Karp algorithm step by step.

    The transitions are:

    - ``INIT`` or ``NEXT_PHASE_PENDING``: search the next phase. If no augmenting path is found, the matching is
      maximum and the controller goes to ``COMPLETE``, otherwise to ``APPLYING_PATH`` for the first path.
    - ``APPLYING_PATH``: augment the matching along the current path. Stay in ``APPLYING_PATH`` while there are
      paths left in this phase, otherwise go to ``NEXT_PHASE_PENDING``.

    Args:
        graph:
            The graph to find a maximum matching for. Without it, the controller has to be initialized with
            `reset` before it can step.
        matching:
            An optional matching to start from. It is changed in place.
    """

    def __init__(self, graph: BipartiteGraph=None, matching: Matching=None) -> None:
        self._search = None  # type: Optional[HopcroftKarp]
        self._state = None  # type: Optional[State]
        self._iteration = 0
        self._match_size = 0
        self._paths = ()  # type: Tuple[AugmentingPath, ...]
        self._path_index = 0
        self._last_applied_path = None  # type: Optional[AugmentingPath]
        if graph is not None:
            self.reset(graph, matching)

    def reset(self, graph: BipartiteGraph=None, matching: Matching=None) -> None:
        """Starts over from ``INIT`` with an empty (or the given) matching.

        If no graph is given, the one from before is used again.

        Raises:
            ControllerNotInitializedError:
                If there is neither a new nor a previous graph.
        """
        if graph is None:
            if self._search is None:
                raise ControllerNotInitializedError('The controller needs a graph to run on')
            graph = self._search.graph
        self._search = HopcroftKarp(graph, matching if matching is not None else Matching())
        self._state = State.INIT
        self._iteration = 0
        self._match_size = len(self._search.matching)
        self._paths = ()
        self._path_index = 0
        self._last_applied_path = None

    def step(self) -> State:
        """Performs a single transition and returns the new state.

        Raises:
            ControllerNotInitializedError:
                If the controller was never given a graph.
            ControllerCompleteError:
                If the controller is already ``COMPLETE``.
        """
        if self._state is None:
            raise ControllerNotInitializedError('Cannot step before the controller has been given a graph')
        if self._state is State.COMPLETE:
            raise ControllerCompleteError('Cannot step any further, the matching is already maximum')

        self._iteration += 1
        if self._state is State.APPLYING_PATH:
            self._apply_current_path()
        else:
            self._search_phase()
        logger.debug('Step %d: %s (phase %d, matching size %d)', self._iteration, self._state.value,
                     self.current_phase, self._match_size)
        return self._state

    def steps(self) -> Iterator[State]:
        """Steps until the matching is maximum, yielding the state after every step."""
        while not self.is_complete:
            yield self.step()

    def run(self) -> int:
        """Steps until the matching is maximum and returns its size."""
        for _ in self.steps():
            pass
        return self._match_size

    def _search_phase(self):
        paths = self._search.find_phase()
        self._paths = tuple(paths)
        self._path_index = 0
        if paths:
            self._state = State.APPLYING_PATH
        else:
            self._state = State.COMPLETE

    def _apply_current_path(self):
        path = self._paths[self._path_index]
        self._search.matching.augment(path)
        self._last_applied_path = path
        self._match_size += 1
        self._path_index += 1
        if self._path_index >= len(self._paths):
            self._state = State.NEXT_PHASE_PENDING

    @property
    def state(self) -> Optional[State]:
        """The current state, ``None`` if the controller was never given a graph."""
        return self._state

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def is_complete(self) -> bool:
        return self._state is State.COMPLETE

    @property
    def graph(self) -> Optional[BipartiteGraph]:
        return self._search.graph if self._search is not None else None

    @property
    def matching(self) -> Mapping[Vertex, Vertex]:
        """A read-only view on the matched pairs from left to right."""
        if self._search is None:
            return {}
        return self._search.matching.pairs

    @property
    def current_phase(self) -> int:
        """The number of phases searched so far, i.e. the number of the current phase."""
        return self._search.phases if self._search is not None else 0

    @property
    def current_iteration(self) -> int:
        """The number of steps performed so far."""
        return self._iteration

    @property
    def current_match_size(self) -> int:
        return self._match_size

    @property
    def current_paths(self) -> Tuple[AugmentingPath, ...]:
        """All augmenting paths found in the current phase."""
        return self._paths

    @property
    def path_index(self) -> int:
        """The index of the path in `current_paths` that the next step applies."""
        return self._path_index

    @property
    def current_path(self) -> Optional[AugmentingPath]:
        """The path that the next step applies, ``None`` unless in ``APPLYING_PATH``."""
        if self._state is State.APPLYING_PATH:
            return self._paths[self._path_index]
        return None

    @property
    def last_applied_path(self) -> Optional[AugmentingPath]:
        return self._last_applied_path

    @property
    def layering(self) -> Optional[Layering]:
        """The layering of the current phase, ``None`` before the first search."""
        return self._search.layering if self._search is not None else None
