"""Random and sequential input buffers for op tests."""

from typing import Optional, Union

import numpy as np
import torch

from .config import make_rng
from .dtypes import DataType
from .shape import ShapeLike, as_shape

Scalar = Union[bool, int, float]


class Distribution:
    """
    Uniform distribution over values of a storage type.

    Booleans and integers are drawn from a closed integer range. Floats are
    drawn in double precision and narrowed when stored.
    """

    def __init__(self, storage_type: DataType, low: Scalar, high: Scalar):
        if not isinstance(storage_type, DataType):
            raise TypeError(f"Expected a DataType, got {storage_type!r}")
        self.storage_type = storage_type
        if storage_type.is_float:
            self.low, self.high = float(low), float(high)
        else:
            self.low, self.high = int(low), int(high)
        if self.low > self.high:
            raise ValueError(
                f"Empty range [{low}, {high}] for {storage_type.name}"
            )

    def sample(self, n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        """
        Draw ``n`` values.

        Args:
            n: Number of values
            rng: Random generator, a configured one is created when omitted

        Returns:
            Array of ``n`` values (int64 or float64)
        """
        rng = rng if rng is not None else make_rng()
        if self.storage_type.is_float:
            # high - low stays finite in float64 even for the full F32 range
            return rng.uniform(self.low, self.high, size=n)
        return rng.integers(self.low, self.high, size=n, endpoint=True, dtype=np.int64)

    def __call__(self, rng: Optional[np.random.Generator] = None) -> Scalar:
        return self.storage_type.cast(self.sample(1, rng)[0])


def _to_tensor(values: np.ndarray, storage_type: DataType) -> torch.Tensor:
    return torch.from_numpy(values).to(storage_type.storage_dtype)


def random_buffer(storage_type: DataType,
                  shape: ShapeLike,
                  min: Optional[Scalar] = None,
                  max: Optional[Scalar] = None,
                  rng: Optional[np.random.Generator] = None) -> torch.Tensor:
    """
    Fill a buffer with uniformly distributed values.

    Bounds outside the representable range of ``storage_type`` are clamped
    to it. Bounds are converted to the storage type, so fractional bounds
    truncate for integer types.

    Args:
        storage_type: Element type of the buffer
        shape: Shape whose element count sizes the buffer
        min: Lower bound (defaults to the type's lowest value)
        max: Upper bound (defaults to the type's highest value)
        rng: Random generator

    Returns:
        1-D tensor of ``storage_type.storage_dtype``
    """
    if not isinstance(storage_type, DataType):
        raise TypeError(f"Expected a DataType, got {storage_type!r}")
    num_elements = as_shape(shape).num_elements
    min_val = storage_type.min_value
    if min is not None and min > min_val:
        min_val = storage_type.cast(min)
    max_val = storage_type.max_value
    if max is not None and max < max_val:
        max_val = storage_type.cast(max)

    dist = Distribution(storage_type, min_val, max_val)
    return _to_tensor(dist.sample(num_elements, rng), storage_type)


def iota_buffer(storage_type: DataType,
                shape: ShapeLike,
                start: Optional[Scalar] = None,
                min: Optional[Scalar] = None,
                max: Optional[Scalar] = None) -> torch.Tensor:
    """
    Fill a buffer with a counter that wraps back to ``min`` past ``max``.

    ``start``, ``min`` and ``max`` are first converted to the storage
    container, so integers it cannot hold wrap around (``start=200`` for SI8
    counts from -56).

    Args:
        storage_type: Element type of the buffer
        shape: Shape whose element count sizes the buffer
        start: First value (defaults to the type's lowest value)
        min: Value the counter wraps to (defaults to the type's lowest value)
        max: Highest value before wrapping (defaults to the type's highest value)

    Returns:
        1-D tensor of ``storage_type.storage_dtype``
    """
    if not isinstance(storage_type, DataType):
        raise TypeError(f"Expected a DataType, got {storage_type!r}")
    num_elements = as_shape(shape).num_elements
    min_val = storage_type.min_value if min is None else storage_type.narrow(min)
    max_val = storage_type.max_value if max is None else storage_type.narrow(max)
    v = storage_type.min_value if start is None else storage_type.narrow(start)

    # Count in Python numbers: bool and narrow ints would overflow before wrapping
    v = float(v) if storage_type.is_float else int(v)
    values = []
    for _ in range(num_elements):
        values.append(v)
        v += 1
        if v > max_val:
            v = min_val

    dtype = np.float64 if storage_type.is_float else np.int64
    return _to_tensor(np.asarray(values, dtype=dtype), storage_type)
