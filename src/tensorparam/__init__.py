"""
tensorparam - typed test parameters and input buffers for tensor op tests.

Build data type x expressed type x quantization layout combinations, name the
generated test cases, and fill random or iota input buffers.
"""

__version__ = "0.1.0"

# Data types
from .dtypes import DataType, to_string
from .shape import Shape, as_shape

# Configuration
from .config import TestUtilConfig, get_config, set_config, make_rng

# Typed test parameters
from .params import (
    TestParam,
    PerTensor,
    PerAxis,
    per_axis,
    per_axis0,
    param_name,
    TestParamNames,
)
from .typelist import (
    map_types,
    concat_types,
    with_op_types,
    cross_product_types,
    filter_types,
    same_types,
    negate_pred,
)
from .suites import (
    BOOL_TEST_TYPES,
    INT_TEST_TYPES,
    FLOAT_TEST_TYPES,
    ARITHMETIC_TEST_TYPES,
    QUANTIZED_TEST_TYPES,
    PER_TENSOR_QUANTIZED_TEST_TYPES,
    PER_AXIS_QUANTIZED_TEST_TYPES,
    SupportedDataTypeRegistry,
    get_supported_registry,
    register_supported_data_type,
    supported_op_data_type,
    list_suites,
)

# Buffers and tensor types
from .buffers import Distribution, random_buffer, iota_buffer
from .tensor_type import (
    TensorType,
    QuantizedTensorElementType,
    QuantizedTensorType,
    tensor_type_for,
)
from .testing import parametrize_types

__all__ = [
    # Data types
    'DataType',
    'to_string',
    'Shape',
    'as_shape',

    # Configuration
    'TestUtilConfig',
    'get_config',
    'set_config',
    'make_rng',

    # Parameters and naming
    'TestParam',
    'PerTensor',
    'PerAxis',
    'per_axis',
    'per_axis0',
    'param_name',
    'TestParamNames',

    # Type list algebra
    'map_types',
    'concat_types',
    'with_op_types',
    'cross_product_types',
    'filter_types',
    'same_types',
    'negate_pred',

    # Suites
    'BOOL_TEST_TYPES',
    'INT_TEST_TYPES',
    'FLOAT_TEST_TYPES',
    'ARITHMETIC_TEST_TYPES',
    'QUANTIZED_TEST_TYPES',
    'PER_TENSOR_QUANTIZED_TEST_TYPES',
    'PER_AXIS_QUANTIZED_TEST_TYPES',
    'SupportedDataTypeRegistry',
    'get_supported_registry',
    'register_supported_data_type',
    'supported_op_data_type',
    'list_suites',

    # Buffers and tensor types
    'Distribution',
    'random_buffer',
    'iota_buffer',
    'TensorType',
    'QuantizedTensorElementType',
    'QuantizedTensorType',
    'tensor_type_for',

    # pytest
    'parametrize_types',

    # Version
    '__version__',
]
