"""Predefined typed test parameter lists and per-op storage type selection."""

from typing import Any, Dict, List, Optional

from .dtypes import DataType
from .params import PerTensor, TestParam, param_name, per_axis0
from .typelist import concat_types, map_types

# Use these with parametrize_types for boolean testing.
BOOL_TEST_TYPES = (TestParam(DataType.I1),)

# Non quantized integer testing.
INT_TEST_TYPES = (
    TestParam(DataType.SI4),
    TestParam(DataType.SI8),
    TestParam(DataType.SI16),
    TestParam(DataType.SI32),
)

# Non quantized floating point testing.
FLOAT_TEST_TYPES = (
    TestParam(DataType.BF16),
    TestParam(DataType.F16),
    TestParam(DataType.F32),
)

# Non quantized testing.
ARITHMETIC_TEST_TYPES = concat_types(INT_TEST_TYPES, FLOAT_TEST_TYPES)

# Unspecified quantized testing.
QUANTIZED_TEST_TYPES = (
    TestParam(DataType.SI4, DataType.F32),
    TestParam(DataType.SI8, DataType.F32),
    TestParam(DataType.SI16, DataType.F32),
    TestParam(DataType.SI4, DataType.BF16),
    TestParam(DataType.SI8, DataType.BF16),
    TestParam(DataType.SI4, DataType.F16),
    TestParam(DataType.SI8, DataType.F16),
)

# Quantized per tensor testing.
PER_TENSOR_QUANTIZED_TEST_TYPES = map_types(PerTensor, QUANTIZED_TEST_TYPES)

# Quantized per axis testing.
PER_AXIS_QUANTIZED_TEST_TYPES = map_types(per_axis0, QUANTIZED_TEST_TYPES)

SUITES = {
    "bool": BOOL_TEST_TYPES,
    "int": INT_TEST_TYPES,
    "float": FLOAT_TEST_TYPES,
    "arithmetic": ARITHMETIC_TEST_TYPES,
    "quantized": QUANTIZED_TEST_TYPES,
    "per_tensor_quantized": PER_TENSOR_QUANTIZED_TEST_TYPES,
    "per_axis_quantized": PER_AXIS_QUANTIZED_TEST_TYPES,
}


def list_suites() -> Dict[str, List[str]]:
    """List predefined suites with the names of their parameters."""
    return {name: [param_name(p) for p in types] for name, types in SUITES.items()}


class SupportedDataTypeRegistry:
    """
    Storage types generic tests use to build a tensor for an op.

    Generic tests that need some supported tensor for an op, but don't care
    which, ask this registry. F32 is used unless the test file registered
    another storage type for the op.
    """

    def __init__(self, default: DataType = DataType.F32):
        self.default = default
        self.data_types: Dict[Any, DataType] = {}

    def register(self, op: Any, data_type: DataType):
        """
        Register the storage type to use for an op.

        Args:
            op: Op tag (usually a class)
            data_type: Storage type supported by the op
        """
        if not isinstance(data_type, DataType):
            raise TypeError(f"Expected a DataType, got {data_type!r}")
        self.data_types[op] = data_type

    def unregister(self, op: Any) -> Optional[DataType]:
        return self.data_types.pop(op, None)

    def storage_type_for(self, op: Any) -> DataType:
        return self.data_types.get(op, self.default)


# Global registry instance
_global_registry = SupportedDataTypeRegistry()


def get_supported_registry() -> SupportedDataTypeRegistry:
    """Get the global supported data type registry."""
    return _global_registry


def register_supported_data_type(op: Any, data_type: DataType):
    """Register the storage type generic tests should use for ``op``."""
    _global_registry.register(op, data_type)


def supported_op_data_type(op: Any) -> DataType:
    """Storage type generic tests should use for ``op`` (F32 by default)."""
    return _global_registry.storage_type_for(op)
