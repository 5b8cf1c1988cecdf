#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Spurious regression, the Granger and Newbold (1974) experiment.

We simulate two independent random walks, regress one on the other in levels
and record the slope, the R² and the t-statistic of the slope. Repeated M
times, the classical |t| > 2 rule "finds" a relationship far more often than
the 5% we would expect: the estimator variance is artificially low because
the denominator of the OLS estimator, sum x_t (x_t - mean(x)), explodes with
a unit root.

License: MIT
"""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
import scipy.stats
from joblib import Parallel, delayed

from qmf_unitroots import config
from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.noise import spawn_noises
from qmf_unitroots.regression import fit_ols
from qmf_unitroots.simulate import independent_random_walks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationRun:
    slope: float
    rsquared: float
    tstat: float


def t_critical_value(n_obs, significance=config.SIGNIFICANCE, n_params=2):
    """Two-sided Student-t critical value with n_obs - n_params degrees of freedom."""
    degreeoffreedom = n_obs - n_params
    if degreeoffreedom < 1:
        raise InvalidArgumentError(
            f"{n_obs} observations leave no degree of freedom for {n_params} parameters"
        )
    return float(scipy.stats.t.ppf(1 - significance / 2, degreeoffreedom))


@dataclass(frozen=True, eq=False)
class SpuriousRegressionResult:
    """The three statistics of every repetition, in repetition order."""

    slopes: np.ndarray
    rsquared: np.ndarray
    tstats: np.ndarray
    n_obs: int

    def __len__(self):
        return len(self.tstats)

    def __eq__(self, other):
        if not isinstance(other, SpuriousRegressionResult):
            return NotImplemented
        return (
            self.n_obs == other.n_obs
            and np.array_equal(self.slopes, other.slopes, equal_nan=True)
            and np.array_equal(self.rsquared, other.rsquared, equal_nan=True)
            and np.array_equal(self.tstats, other.tstats, equal_nan=True)
        )

    @classmethod
    def from_runs(cls, runs, n_obs):
        return cls(
            slopes=np.array([r.slope for r in runs], dtype=float),
            rsquared=np.array([r.rsquared for r in runs], dtype=float),
            tstats=np.array([r.tstat for r in runs], dtype=float),
            n_obs=n_obs,
        )

    def rejection_rate(self, critical_value=config.CRITICAL_VALUE):
        """Fraction of repetitions where |t| exceeds ``critical_value``."""
        if critical_value < 0:
            raise InvalidArgumentError(f"critical_value must be non-negative, got {critical_value}")
        return float(np.mean(np.abs(self.tstats) > critical_value))

    def records(self):
        return [
            SimulationRun(float(b), float(r2), float(t))
            for b, r2, t in zip(self.slopes, self.rsquared, self.tstats)
        ]

    def to_frame(self):
        return pd.DataFrame({'slope': self.slopes, 'rsquared': self.rsquared, 'tstat': self.tstats})

    def summary(self):
        """
        Headline numbers of the experiment.

        We expect the R² to be close to zero, but we find that this is not
        the case; and the rejection rate at the exact Student-t critical value
        is nowhere near the nominal 5%.
        """
        # two observations leave no degree of freedom for the Student quantile
        student_rate = (self.rejection_rate(t_critical_value(self.n_obs))
                        if self.n_obs > 2 else float('nan'))
        return {
            'repetitions': len(self),
            'n_obs': self.n_obs,
            'mean_rsquared': float(np.mean(self.rsquared)),
            'max_rsquared': float(np.max(self.rsquared)),
            'mean_abs_tstat': float(np.mean(np.abs(self.tstats))),
            'rejection_rate': self.rejection_rate(),
            'rejection_rate_student_5pct': student_rate,
        }


def _one_repetition(n_obs, noise, regress):
    yt, xt = independent_random_walks(n_obs, noise)
    # regress one series on the other, with an intercept
    fitted = regress(yt, xt)
    return SimulationRun(
        slope=float(fitted.slope),
        rsquared=float(fitted.rsquared),
        tstat=float(fitted.slope_tstat),
    )


class SpuriousRegressionExperiment:
    """
    M regressions of a random walk on an independent random walk.

    Parameters
    ----------
    repetitions : int
        Number of Monte Carlo repetitions M, at least 1.
    n_obs : int
        Length N of each simulated series, at least 2.
    regress : callable
        ``regress(y, x)`` returning an object with ``slope``, ``rsquared``
        and ``slope_tstat``. Defaults to OLS with an intercept.
    """

    def __init__(self, repetitions, n_obs, regress=fit_ols):
        if repetitions <= 0:
            raise InvalidArgumentError(f"repetitions must be positive, got {repetitions}")
        if n_obs <= 1:
            raise InvalidArgumentError(f"n_obs must be at least 2, got {n_obs}")
        self.repetitions = int(repetitions)
        self.n_obs = int(n_obs)
        self.regress = regress

    def __repr__(self):
        return f"SpuriousRegressionExperiment(repetitions={self.repetitions}, n_obs={self.n_obs})"

    def run(self, noise=None, seed=None, n_jobs=None):
        """
        Run all repetitions.

        Parameters
        ----------
        noise : NoiseSource, optional
            Single source consumed repetition after repetition.
        seed : int, optional
            Root seed; each repetition then draws from its own spawned
            stream. Used when ``noise`` is not given.
        n_jobs : int, optional
            Number of joblib workers. Only valid without ``noise``, since a
            shared source cannot be split between workers.

        Returns
        -------
        SpuriousRegressionResult
        """
        parallel = n_jobs not in (None, 1)
        if noise is not None and seed is not None:
            raise InvalidArgumentError("give either noise or seed, not both")
        if noise is not None and parallel:
            raise InvalidArgumentError("a shared noise source cannot be used with n_jobs > 1, pass a seed")

        logger.debug("spurious regression: %d repetitions of length %d", self.repetitions, self.n_obs)

        if noise is not None:
            runs = [_one_repetition(self.n_obs, noise, self.regress) for _ in range(self.repetitions)]
        else:
            noises = spawn_noises(seed, self.repetitions)
            if parallel:
                runs = Parallel(n_jobs=n_jobs)(
                    delayed(_one_repetition)(self.n_obs, rng, self.regress) for rng in noises
                )
            else:
                runs = [_one_repetition(self.n_obs, rng, self.regress) for rng in noises]

        result = SpuriousRegressionResult.from_runs(runs, self.n_obs)
        logger.debug("spurious regression done: |t| > %.1f in %.1f%% of repetitions",
                     config.CRITICAL_VALUE, 100 * result.rejection_rate())
        return result


def simulate_spurious_regressions(repetitions, n_obs, noise=None, seed=None, n_jobs=None):
    """Build a ``SpuriousRegressionExperiment`` and run it."""
    return SpuriousRegressionExperiment(repetitions, n_obs).run(noise=noise, seed=seed, n_jobs=n_jobs)
