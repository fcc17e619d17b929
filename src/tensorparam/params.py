"""Typed test parameter tags and the names given to generated test cases."""

import functools
import warnings
from dataclasses import dataclass
from typing import Any, Optional

import torch

from .config import get_config
from .dtypes import DataType, to_string


@dataclass(frozen=True)
class TestParam:
    """
    Bundles the data types a typed test runs with.

    A plain parameter carries only a storage type. Quantized parameters also
    carry the expressed type the stored values stand for.
    """
    __test__ = False  # not a pytest test class

    storage: DataType
    expressed: Optional[DataType] = None

    def __post_init__(self):
        for t in self.types:
            if not isinstance(t, DataType):
                raise TypeError(f"Expected a DataType, got {t!r}")

    @property
    def types(self):
        if self.expressed is None:
            return (self.storage,)
        return (self.storage, self.expressed)

    @property
    def storage_dtype(self) -> torch.dtype:
        return self.storage.storage_dtype

    @property
    def expressed_dtype(self) -> Optional[torch.dtype]:
        if self.expressed is None:
            return None
        return self.expressed.storage_dtype

    @property
    def is_quantized(self) -> bool:
        return self.expressed is not None


def _check_param(param):
    if not isinstance(param, TestParam):
        raise TypeError(f"Expected a TestParam, got {param!r}")


@dataclass(frozen=True)
class PerTensor:
    """Typed test parameter tag to ask for a per-tensor quantized tensor."""
    param: TestParam

    def __post_init__(self):
        _check_param(self.param)


@dataclass(frozen=True)
class PerAxis:
    """Typed test parameter tag to ask for a per-channel quantized tensor."""
    param: TestParam
    axis: int = 0

    def __post_init__(self):
        _check_param(self.param)
        if not isinstance(self.axis, int) or isinstance(self.axis, bool):
            raise TypeError(f"Expected an int axis, got {self.axis!r}")


def per_axis(axis: int):
    """Return a tag factory wrapping parameters in ``PerAxis`` for ``axis``."""
    def wrap(param: TestParam) -> PerAxis:
        return PerAxis(param, axis)
    wrap.__name__ = f"PerAxis{axis}"
    return wrap


per_axis0 = per_axis(0)


def _join_types(param: TestParam) -> str:
    return "_".join(to_string(t) for t in param.types)


@functools.singledispatch
def param_name(param: Any) -> str:
    """
    Name of a typed test parameter, used as the pytest id of a test case.

    Test files register names for their own op tags with
    ``@param_name.register``.
    """
    if isinstance(param, type):
        return param.__name__
    if get_config().warn_on_unnamed:
        warnings.warn(f"No name registered for test parameter {param!r}, using str()")
    return str(param)


@param_name.register
def _(param: DataType) -> str:
    return to_string(param)


@param_name.register
def _(param: TestParam) -> str:
    return _join_types(param)


@param_name.register
def _(param: PerTensor) -> str:
    return f"PerTensor[{_join_types(param.param)}]"


@param_name.register
def _(param: PerAxis) -> str:
    return f"PerAxis[{_join_types(param.param)}:{param.axis}]"


@param_name.register
def _(param: tuple) -> str:
    return ":".join(param_name(p) for p in param)


class TestParamNames:
    """Naming hook for parametrized typed test suites."""
    __test__ = False  # not a pytest test class

    @staticmethod
    def get_name(param: Any, index: int = 0) -> str:
        return param_name(param)
