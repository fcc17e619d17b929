from tensorparam import (
    ARITHMETIC_TEST_TYPES,
    BOOL_TEST_TYPES,
    FLOAT_TEST_TYPES,
    INT_TEST_TYPES,
    PER_AXIS_QUANTIZED_TEST_TYPES,
    PER_TENSOR_QUANTIZED_TEST_TYPES,
    QUANTIZED_TEST_TYPES,
    DataType,
    PerAxis,
    PerTensor,
    SupportedDataTypeRegistry,
    list_suites,
    register_supported_data_type,
    get_supported_registry,
    supported_op_data_type,
)
import pytest


def test_suite_contents():
    assert [p.storage for p in BOOL_TEST_TYPES] == [DataType.I1]
    assert [p.storage for p in INT_TEST_TYPES] == [
        DataType.SI4, DataType.SI8, DataType.SI16, DataType.SI32,
    ]
    assert [p.storage for p in FLOAT_TEST_TYPES] == [DataType.BF16, DataType.F16, DataType.F32]
    assert ARITHMETIC_TEST_TYPES == INT_TEST_TYPES + FLOAT_TEST_TYPES


def test_quantized_suites():
    assert len(QUANTIZED_TEST_TYPES) == 7
    assert all(p.is_quantized for p in QUANTIZED_TEST_TYPES)
    assert all(isinstance(p, PerTensor) for p in PER_TENSOR_QUANTIZED_TEST_TYPES)
    assert all(isinstance(p, PerAxis) and p.axis == 0 for p in PER_AXIS_QUANTIZED_TEST_TYPES)
    assert [p.param for p in PER_AXIS_QUANTIZED_TEST_TYPES] == list(QUANTIZED_TEST_TYPES)


def test_list_suites():
    suites = list_suites()
    assert suites["int"] == ["SI4", "SI8", "SI16", "SI32"]
    assert suites["quantized"][0] == "SI4_F32"
    assert suites["per_tensor_quantized"][-1] == "PerTensor[SI8_F16]"
    assert suites["per_axis_quantized"][1] == "PerAxis[SI8_F32:0]"


def test_supported_op_data_type_defaults_to_f32():
    class Cosine:
        pass

    assert supported_op_data_type(Cosine) is DataType.F32


def test_supported_op_data_type_override():
    class Popcnt:
        pass

    register_supported_data_type(Popcnt, DataType.SI32)
    try:
        assert supported_op_data_type(Popcnt) is DataType.SI32
    finally:
        get_supported_registry().unregister(Popcnt)
    assert supported_op_data_type(Popcnt) is DataType.F32


def test_registry_rejects_non_data_types():
    registry = SupportedDataTypeRegistry()
    with pytest.raises(TypeError):
        registry.register(object, "si32")
