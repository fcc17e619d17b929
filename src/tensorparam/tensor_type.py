"""Tensor types built from typed test parameters."""

import functools
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
import torch

from .buffers import Distribution
from .config import make_rng
from .dtypes import DataType
from .params import PerAxis, PerTensor, TestParam
from .shape import Shape, ShapeLike, as_shape

Scale = float
ZeroPoint = int


@dataclass(frozen=True)
class TensorType:
    shape: Shape
    element_type: DataType


@dataclass(frozen=True)
class QuantizedTensorElementType:
    storage_type: DataType
    expressed_type: DataType
    scales: Tuple[Scale, ...]
    zero_points: Tuple[ZeroPoint, ...]
    quantized_dimension: Optional[int] = None  # None for per-tensor quantization

    @classmethod
    def per_tensor(cls, storage_type: DataType, expressed_type: DataType,
                   scale: Scale, zero_point: ZeroPoint) -> "QuantizedTensorElementType":
        return cls(storage_type, expressed_type, (scale,), (zero_point,))

    @classmethod
    def per_axis(cls, storage_type: DataType, expressed_type: DataType,
                 scales, zero_points, axis: int) -> "QuantizedTensorElementType":
        return cls(storage_type, expressed_type, tuple(scales), tuple(zero_points), axis)

    @property
    def is_per_tensor(self) -> bool:
        return self.quantized_dimension is None

    @property
    def is_per_axis(self) -> bool:
        return self.quantized_dimension is not None

    @property
    def scale(self) -> Scale:
        """Scale of a per-tensor quantized type."""
        if not self.is_per_tensor:
            raise ValueError("Per-axis quantized types have one scale per channel")
        return self.scales[0]

    @property
    def zero_point(self) -> ZeroPoint:
        """Zero point of a per-tensor quantized type."""
        if not self.is_per_tensor:
            raise ValueError("Per-axis quantized types have one zero point per channel")
        return self.zero_points[0]


@dataclass(frozen=True)
class QuantizedTensorType:
    shape: Shape
    element_type: QuantizedTensorElementType


TensorTypeVariant = Union[TensorType, QuantizedTensorType]


def _quantized_param(param: TestParam) -> TestParam:
    if not param.is_quantized:
        raise TypeError(f"{param} has no expressed type and cannot be quantized")
    return param


@functools.singledispatch
def tensor_type_for(param, shape: ShapeLike,
                    rng: Optional[np.random.Generator] = None) -> TensorTypeVariant:
    """
    Build the tensor type a typed test parameter asks for.

    Args:
        param: ``TestParam``, ``PerTensor`` or ``PerAxis`` tag
        shape: Tensor shape
        rng: Random generator for per-tensor quantization parameters

    Returns:
        ``TensorType`` or ``QuantizedTensorType``
    """
    raise TypeError(f"No tensor type for test parameter {param!r}")


@tensor_type_for.register
def _(param: TestParam, shape: ShapeLike,
      rng: Optional[np.random.Generator] = None) -> TensorTypeVariant:
    return TensorType(shape=as_shape(shape), element_type=param.storage)


@tensor_type_for.register
def _(param: PerTensor, shape: ShapeLike,
      rng: Optional[np.random.Generator] = None) -> TensorTypeVariant:
    # Random quantization parameters: scale in [0.5, 1.5], zero point in [-5, 5]
    p = _quantized_param(param.param)
    rng = rng if rng is not None else make_rng()
    scale_dist = Distribution(p.expressed, 0.5, 1.5)
    zero_point_dist = Distribution(p.storage, -5, 5)
    scale = torch.tensor(scale_dist(rng), dtype=p.expressed_dtype).item()
    zero_point = zero_point_dist(rng)
    return QuantizedTensorType(
        shape=as_shape(shape),
        element_type=QuantizedTensorElementType.per_tensor(
            p.storage, p.expressed, scale, zero_point),
    )


@tensor_type_for.register
def _(param: PerAxis, shape: ShapeLike,
      rng: Optional[np.random.Generator] = None) -> TensorTypeVariant:
    # Scales and zero points are left empty
    p = _quantized_param(param.param)
    return QuantizedTensorType(
        shape=as_shape(shape),
        element_type=QuantizedTensorElementType.per_axis(
            p.storage, p.expressed, scales=(), zero_points=(), axis=param.axis),
    )
