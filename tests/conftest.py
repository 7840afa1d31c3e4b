# -*- coding: utf-8 -*-
import pytest

from matchrace.benchmark import STRATEGIES, StrategyRunner
from matchrace.matching import Matching
from matchrace.stepper import StepController


def pytest_generate_tests(metafunc):
    if 'solve' in metafunc.fixturenames:
        metafunc.parametrize('solve', list(STRATEGIES) + ['stepwise'], indirect=True)
    if 'search' in metafunc.fixturenames:
        metafunc.parametrize('search', list(STRATEGIES), indirect=True)


def solve_with_strategy(name):
    def solve(graph):
        runner = StrategyRunner(name, graph)
        runner.run()
        return runner.matching
    return solve


def solve_stepwise(graph):
    controller = StepController(graph)
    controller.run()
    return Matching(controller.matching)


@pytest.fixture
def solve(request):
    if request.param in STRATEGIES:
        return solve_with_strategy(request.param)
    elif request.param == 'stepwise':
        return solve_stepwise
    else:
        raise ValueError("Invalid internal test config")


@pytest.fixture
def search(request):
    if request.param in STRATEGIES:
        return STRATEGIES[request.param]
    else:
        raise ValueError("Invalid internal test config")
