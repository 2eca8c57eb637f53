"""Tests for the Alea random source."""

import pytest
from py_heightmap.core.alea_prng import AleaPRNG


class TestAleaPRNG:
    """Test seeding and output of the Alea PRNG."""

    def test_values_in_unit_interval(self):
        prng = AleaPRNG(1234)
        for _ in range(1000):
            value = prng.random()
            assert 0.0 <= value < 1.0

    def test_same_seed_same_sequence(self):
        a = AleaPRNG(42)
        b = AleaPRNG(42)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_different_seeds_differ(self):
        a = AleaPRNG(1)
        b = AleaPRNG(2)
        assert [a.random() for _ in range(5)] != [b.random() for _ in range(5)]

    def test_reseed_rewinds_sequence(self):
        prng = AleaPRNG(7)
        first = [prng.random() for _ in range(10)]
        prng.seed(7)
        assert [prng.random() for _ in range(10)] == first

    def test_call_count_resets_on_seed(self):
        prng = AleaPRNG("heightmap")
        for _ in range(3):
            prng.random()
        assert prng.call_count == 3
        prng.seed("heightmap")
        assert prng.call_count == 0

    def test_integer_and_string_seeds_agree(self):
        # Seeds are mashed through their string form
        a = AleaPRNG(99)
        b = AleaPRNG("99")
        assert a.random() == pytest.approx(b.random())

    def test_independent_instances(self):
        a = AleaPRNG(5)
        b = AleaPRNG(5)
        a.random()
        a.random()
        fresh = AleaPRNG(5)
        assert b.random() == fresh.random()
