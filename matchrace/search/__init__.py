# -*- coding: utf-8 -*-
"""Contains the augmenting path search algorithms in the submodules."""

from . import augmenting
from . import hopcroft_karp

# pylint: disable=wildcard-import
from .augmenting import *
from .hopcroft_karp import *

__all__ = augmenting.__all__ + hopcroft_karp.__all__
