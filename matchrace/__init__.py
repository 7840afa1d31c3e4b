# -*- coding: utf-8 -*-
"""Maximum matchings in bipartite graphs with three competing augmenting path strategies."""

from importlib.metadata import PackageNotFoundError, version

# pylint: disable=wildcard-import
from . import graph
from . import matching
from . import search
from . import stepper
from . import benchmark
from . import generate

from .graph import *
from .matching import *
from .search import *
from .stepper import *
from .benchmark import *
from .generate import *

__all__ = (
    graph.__all__ + matching.__all__ + search.__all__ + stepper.__all__ + benchmark.__all__ + generate.__all__
)

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'dev'
