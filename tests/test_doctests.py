"""Run the examples embedded in dmyparse docstrings."""

from __future__ import annotations

import doctest
import importlib

import pytest

MODULES = [
    "dmyparse",
    "dmyparse._internal.calendar",
    "dmyparse.core.date",
    "dmyparse.core.datetime",
    "dmyparse.core.time",
    "dmyparse.parse",
    "dmyparse.parse._tokens",
    "dmyparse.parse.dmy",
]


@pytest.mark.parametrize("module_name", MODULES)
def test_docstring_examples(module_name: str) -> None:
    """Every docstring example produces its documented output."""
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.failed == 0
