import pytest

from tensorparam import TestUtilConfig, make_rng, random_buffer, set_config, DataType
import torch


def test_from_env_reads_seed(monkeypatch):
    monkeypatch.setenv("TENSORPARAM_SEED", "1234")
    monkeypatch.setenv("TENSORPARAM_WARN_UNNAMED", "0")
    config = TestUtilConfig.from_env()
    assert config.seed == 1234
    assert config.warn_on_unnamed is False


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("TENSORPARAM_SEED", raising=False)
    monkeypatch.delenv("TENSORPARAM_WARN_UNNAMED", raising=False)
    config = TestUtilConfig.from_env()
    assert config.seed is None
    assert config.warn_on_unnamed is True


def test_from_env_rejects_bad_seed(monkeypatch):
    monkeypatch.setenv("TENSORPARAM_SEED", "abc")
    with pytest.raises(ValueError):
        TestUtilConfig.from_env()


def test_configured_seed_makes_buffers_reproducible():
    previous = set_config(TestUtilConfig(seed=42))
    try:
        a = random_buffer(DataType.F32, (8,))
        b = random_buffer(DataType.F32, (8,))
        assert torch.equal(a, b)
        assert make_rng().integers(0, 100) == make_rng().integers(0, 100)
    finally:
        set_config(previous)
