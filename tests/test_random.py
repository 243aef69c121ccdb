"""Tests for seeded random sources."""

import zlib

import pytest
from py_sector.utils.random import create_rng, seed_to_int


class TestSeedToInt:
    """Test seed normalization."""

    def test_string_seed_is_crc32(self):
        assert seed_to_int("sector-7") == zlib.crc32(b"sector-7")

    def test_int_seed_passthrough(self):
        assert seed_to_int(42) == 42

    def test_negative_seed_rejected(self):
        with pytest.raises(ValueError):
            seed_to_int(-1)


def test_same_seed_same_stream():
    a = create_rng("abc").uniform(size=5)
    b = create_rng("abc").uniform(size=5)
    assert list(a) == list(b)


def test_different_seeds_differ():
    assert list(create_rng(1).uniform(size=5)) != list(create_rng(2).uniform(size=5))
