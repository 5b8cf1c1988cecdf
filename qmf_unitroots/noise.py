#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Noise sources for the simulations.

Any object with a ``standard_normal(size)`` method returning independent
N(0, 1) draws can be used, so a ``numpy.random.Generator`` works as is.
In the course we first used ``np.random.normal(0, 1, 1)`` in a loop; here the
generator is passed explicitly so that a seed fixes the whole experiment.
"""

from typing import Protocol

import numpy as np

from qmf_unitroots.errors import InvalidArgumentError


class NoiseSource(Protocol):
    def standard_normal(self, size): ...


def make_noise(seed=None):
    """Return a seeded ``numpy.random.Generator``."""
    return np.random.default_rng(seed)


def spawn_noises(seed, count):
    """
    Independent generators derived from a single seed.

    Each Monte Carlo repetition gets its own stream, so that the result does
    not depend on the order in which repetitions are computed.

    Parameters
    ----------
    seed : int, SeedSequence or None
        Root of the streams. None draws fresh entropy from the OS.
    count : int
        Number of generators to create.

    Returns
    -------
    list[numpy.random.Generator]
    """
    if count < 1:
        raise InvalidArgumentError(f"count must be at least 1, got {count}")
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(count)]


class FixedNoise:
    """
    Replays a fixed sequence of draws.

    Useful to check a computation by hand: the values come out in order and
    an error is raised when the sequence is exhausted.
    """

    def __init__(self, values):
        self._values = np.asarray(values, dtype=float).ravel()
        self._position = 0

    @property
    def remaining(self):
        return len(self._values) - self._position

    def standard_normal(self, size):
        n = int(np.prod(size))
        if n > self.remaining:
            raise InvalidArgumentError(
                f"FixedNoise exhausted: {n} draws requested, {self.remaining} left"
            )
        out = self._values[self._position:self._position + n]
        self._position += n
        return out.reshape(size).copy()
