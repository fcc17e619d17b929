import numpy as np
import pytest
import torch

from tensorparam import (
    ARITHMETIC_TEST_TYPES,
    DataType,
    Distribution,
    Shape,
    iota_buffer,
    parametrize_types,
    random_buffer,
)


@parametrize_types("param", ARITHMETIC_TEST_TYPES)
def test_random_buffer_size_and_dtype(param, rng):
    buf = random_buffer(param.storage, (2, 3, 4), rng=rng)
    assert buf.shape == (24,)
    assert buf.dtype == param.storage_dtype


@parametrize_types("param", ARITHMETIC_TEST_TYPES)
def test_random_buffer_respects_bounds(param, rng):
    buf = random_buffer(param.storage, Shape((64,)), min=-3, max=5, rng=rng)
    values = buf.to(torch.float64)
    assert values.min() >= -3
    assert values.max() <= 5


def test_random_buffer_clamps_to_type_range(rng):
    buf = random_buffer(DataType.SI4, (256,), min=-1000, max=1000, rng=rng)
    assert int(buf.min()) >= -8
    assert int(buf.max()) <= 7


def test_random_buffer_default_range_stays_finite(rng):
    for t in (DataType.BF16, DataType.F16, DataType.F32):
        buf = random_buffer(t, (128,), rng=rng)
        assert torch.isfinite(buf).all()


def test_random_bool_buffer(rng):
    buf = random_buffer(DataType.I1, (100,), rng=rng)
    assert buf.dtype == torch.bool
    assert buf.numel() == 100


def test_random_buffer_single_value_range(rng):
    buf = random_buffer(DataType.SI8, (5,), min=4, max=4, rng=rng)
    assert buf.tolist() == [4] * 5


def test_random_buffer_empty_range_raises(rng):
    with pytest.raises(ValueError):
        random_buffer(DataType.SI8, (5,), min=10, max=2, rng=rng)


def test_random_buffer_is_reproducible_with_seed():
    a = random_buffer(DataType.SI32, (16,), rng=np.random.default_rng(7))
    b = random_buffer(DataType.SI32, (16,), rng=np.random.default_rng(7))
    assert torch.equal(a, b)


def test_random_buffer_rejects_non_data_type():
    with pytest.raises(TypeError):
        random_buffer(torch.int8, (4,))


def test_scalar_and_empty_shapes(rng):
    assert random_buffer(DataType.F32, (), rng=rng).numel() == 1
    assert random_buffer(DataType.F32, (3, 0), rng=rng).numel() == 0
    assert iota_buffer(DataType.SI8, (0,)).numel() == 0


def test_iota_wraps_to_min():
    buf = iota_buffer(DataType.SI8, (7,), start=2, min=1, max=4)
    assert buf.tolist() == [2, 3, 4, 1, 2, 3, 4]


def test_iota_defaults_start_at_type_min():
    buf = iota_buffer(DataType.SI4, (18,))
    assert buf.tolist() == list(range(-8, 8)) + [-8, -7]


def test_iota_bool_alternates():
    buf = iota_buffer(DataType.I1, (5,))
    assert buf.tolist() == [False, True, False, True, False]


def test_iota_float():
    buf = iota_buffer(DataType.F32, (4,), start=0.5, min=0, max=2)
    assert buf.tolist() == [0.5, 1.5, 0.0, 1.0]


def test_iota_start_above_max_wraps_immediately():
    buf = iota_buffer(DataType.SI16, (3,), start=10, min=0, max=5)
    assert buf.tolist() == [10, 0, 1]


def test_iota_narrows_values_to_the_storage_container():
    assert iota_buffer(DataType.SI8, (2,), start=200).tolist() == [-56, -55]
    assert iota_buffer(DataType.SI8, (3,), start=126, min=-200, max=127).tolist() == [126, 127, 56]
    assert iota_buffer(DataType.SI4, (2,), start=100).tolist() == [100, -8]
    assert DataType.SI16.narrow(40000) == -25536
    assert DataType.F16.narrow(3) == 3.0


def test_distribution_draws_within_range(rng):
    dist = Distribution(DataType.BF16, 0.5, 1.5)
    values = dist.sample(50, rng)
    assert values.min() >= 0.5 and values.max() <= 1.5
    assert isinstance(dist(rng), float)
    assert isinstance(Distribution(DataType.SI8, -5, 5)(rng), int)
