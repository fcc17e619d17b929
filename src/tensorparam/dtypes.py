"""Element data types used by typed tests and their storage configuration."""

from enum import Enum
from typing import Any, Union

import torch


class DataType(Enum):
    """Supported tensor element types."""
    I1 = "i1"
    SI4 = "si4"
    SI8 = "si8"
    SI16 = "si16"
    SI32 = "si32"
    BF16 = "bf16"
    F16 = "f16"
    F32 = "f32"

    @property
    def is_bool(self) -> bool:
        return self is DataType.I1

    @property
    def is_integer(self) -> bool:
        """Check if this is a signed integer type (I1 is not an integer)."""
        return self in [DataType.SI4, DataType.SI8, DataType.SI16, DataType.SI32]

    @property
    def is_float(self) -> bool:
        return self in [DataType.BF16, DataType.F16, DataType.F32]

    @property
    def bits(self) -> int:
        """Number of bits of the logical element."""
        mapping = {
            DataType.I1: 1,
            DataType.SI4: 4,
            DataType.SI8: 8,
            DataType.SI16: 16,
            DataType.SI32: 32,
            DataType.BF16: 16,
            DataType.F16: 16,
            DataType.F32: 32,
        }
        return mapping[self]

    @property
    def storage_dtype(self) -> torch.dtype:
        """Torch dtype used to hold elements of this type."""
        return _STORAGE_DTYPES[self]

    @property
    def min_value(self) -> Union[bool, int, float]:
        """Lowest representable value."""
        if self.is_bool:
            return False
        if self.is_integer:
            return -(1 << (self.bits - 1))
        return torch.finfo(self.storage_dtype).min

    @property
    def max_value(self) -> Union[bool, int, float]:
        """Highest representable value."""
        if self.is_bool:
            return True
        if self.is_integer:
            return (1 << (self.bits - 1)) - 1
        return torch.finfo(self.storage_dtype).max

    def cast(self, value: Any) -> Union[bool, int, float]:
        """Convert a Python scalar to the storage type's Python representation."""
        if self.is_bool:
            return bool(value)
        if self.is_integer:
            return int(value)
        return float(value)

    def narrow(self, value: Any) -> Union[bool, int, float]:
        """
        Convert a Python scalar to a value the storage container holds.

        Integers outside the container's range wrap around (two's complement),
        so 200 stored as SI8 becomes -56. SI4 lives in a byte and only wraps
        outside [-128, 127].
        """
        value = self.cast(value)
        if self.is_integer:
            bits = torch.iinfo(self.storage_dtype).bits
            half = 1 << (bits - 1)
            return (value + half) % (1 << bits) - half
        return value

    @classmethod
    def from_string(cls, name: str) -> "DataType":
        """Parse a short type name such as ``"SI8"`` or ``"bf16"``."""
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown data type name: {name!r}") from None

    def __str__(self) -> str:
        return to_string(self)


_STORAGE_DTYPES = {
    DataType.I1: torch.bool,
    DataType.SI4: torch.int8,  # 4 bit values live in a byte
    DataType.SI8: torch.int8,
    DataType.SI16: torch.int16,
    DataType.SI32: torch.int32,
    DataType.BF16: torch.bfloat16,
    DataType.F16: torch.float16,
    DataType.F32: torch.float32,
}


def to_string(t: Any) -> str:
    """
    Short name of a data type, as used in generated test names.

    Args:
        t: Data type to name

    Returns:
        "I1", "SI4", ..., "F32", or "Unknown data type" for anything else
    """
    if isinstance(t, DataType):
        return t.name
    return "Unknown data type"
