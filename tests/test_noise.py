"""
Tests for the noise sources.
"""

import numpy as np
import pytest

from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.noise import FixedNoise, make_noise, spawn_noises


class TestMakeNoise:
    """Seeded generators."""

    def test_same_seed_same_draws(self):
        """Two generators with one seed draw the same values."""
        a = make_noise(7).standard_normal(50)
        b = make_noise(7).standard_normal(50)
        assert np.array_equal(a, b)

    def test_different_seeds_differ(self):
        """Different seeds give different draws."""
        a = make_noise(7).standard_normal(50)
        b = make_noise(8).standard_normal(50)
        assert not np.array_equal(a, b)


class TestSpawnNoises:
    """One independent stream per repetition."""

    def test_count_and_reproducibility(self):
        """Spawning twice from one seed gives the same streams."""
        first = [rng.standard_normal(5) for rng in spawn_noises(3, 4)]
        second = [rng.standard_normal(5) for rng in spawn_noises(3, 4)]
        assert len(first) == 4
        for a, b in zip(first, second):
            assert np.array_equal(a, b)

    def test_streams_are_distinct(self):
        """Sibling streams do not repeat each other."""
        draws = [rng.standard_normal(5) for rng in spawn_noises(3, 3)]
        assert not np.array_equal(draws[0], draws[1])
        assert not np.array_equal(draws[1], draws[2])

    def test_rejects_zero_count(self):
        """At least one stream must be requested."""
        with pytest.raises(InvalidArgumentError):
            spawn_noises(3, 0)


class TestFixedNoise:
    """Replay of a fixed sequence."""

    def test_replays_in_order(self):
        """Values come out in the order they were given."""
        noise = FixedNoise([1.0, 2.0, 3.0, 4.0])
        assert list(noise.standard_normal(2)) == [1.0, 2.0]
        assert list(noise.standard_normal(2)) == [3.0, 4.0]
        assert noise.remaining == 0

    def test_shape(self):
        """A tuple size gives an array of that shape."""
        noise = FixedNoise(np.arange(6))
        assert noise.standard_normal((3, 2)).shape == (3, 2)

    def test_exhausted(self):
        """Asking for more draws than left raises."""
        noise = FixedNoise([1.0])
        with pytest.raises(InvalidArgumentError):
            noise.standard_normal(2)
