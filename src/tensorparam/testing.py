"""
pytest helpers for typed test suites.

Typed tests are ordinary pytest functions parametrized over a type list:

    @parametrize_types("param", INT_TEST_TYPES)
    def test_abs(param):
        buf = random_buffer(param.storage, (2, 3))
"""

from typing import Any, Iterable

import pytest

from .params import param_name


def parametrize_types(argname: str, types: Iterable[Any]):
    """
    Parametrize a test over a type list, naming each case after its parameter.

    Args:
        argname: Name of the test argument receiving the parameter
        types: Type list (tuple of parameters)

    Returns:
        pytest parametrize marker
    """
    return pytest.mark.parametrize(argname, list(types), ids=param_name)
