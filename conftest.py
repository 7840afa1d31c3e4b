# -*- coding: utf-8 -*-
import pytest

import matchrace


@pytest.fixture(autouse=True)
def add_default_names(doctest_namespace):
    for name in matchrace.__all__:
        doctest_namespace[name] = getattr(matchrace, name)
