#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Synthetic time series used throughout the lecture.

- Random walk: y_t = y_{t-1} + e_t, a unit root, shocks never vanish
- Two independent random walks: the raw material of a spurious regression
- A cointegrated pair: y_t = alpha + beta * x_t + e_t with x_t a random walk
- An error-correcting system: y_t = beta_y * y_{t-1} + beta_coint * x_t + v_t

All functions take the noise source as an argument and never touch the
global numpy random state.
"""

import numpy as np
import pandas as pd

from qmf_unitroots import config
from qmf_unitroots.errors import InvalidArgumentError


def _check_length(n_obs, minimum=1):
    if n_obs < minimum:
        raise InvalidArgumentError(f"n_obs must be at least {minimum}, got {n_obs}")


def random_walk(n_obs, noise, start=0.0):
    """
    Cumulative sum of ``n_obs`` standard normal draws, shifted by ``start``.

    Parameters
    ----------
    n_obs : int
        Length of the series.
    noise : NoiseSource
        Provides the N(0, 1) shocks.
    start : float
        Level before the first shock.

    Returns
    -------
    numpy.ndarray
    """
    _check_length(n_obs)
    return start + np.cumsum(noise.standard_normal(n_obs))


def independent_random_walks(n_obs, noise):
    """Two random walks with independent shocks, returned as (y, x)."""
    y = random_walk(n_obs, noise)
    x = random_walk(n_obs, noise)
    return y, x


def cointegrated_pair(n_obs, noise, alpha=config.COINT_ALPHA, beta=config.COINT_BETA,
                      noise_scale=1.0):
    """
    x is a random walk and y = alpha + beta * x + e with e stationary.

    Both series are I(1) but y - beta * x is I(0): they are cointegrated by
    construction, with cointegrating vector (1, -beta).
    """
    _check_length(n_obs)
    x = random_walk(n_obs, noise)
    y = alpha + beta * x + noise_scale * noise.standard_normal(n_obs)
    return y, x


def error_correcting_system(n_obs, noise, beta_y=config.ECM_BETA_Y,
                            beta_coint=config.ECM_BETA_COINT):
    """
    Two I(1) processes cointegrated by construction.

    x_t = x_{t-1} + u_t
    y_t = beta_y * y_{t-1} + beta_coint * x_t + v_t

    Both start at 0. With |beta_y| < 1, y is pulled back towards
    beta_coint / (1 - beta_y) * x: this is the "force of recall".
    """
    _check_length(n_obs)
    shocks = noise.standard_normal((n_obs, 2))
    xt = np.zeros(n_obs)
    yt = np.zeros(n_obs)
    for i in range(1, n_obs):
        xt[i] = xt[i - 1] + shocks[i, 0]
        yt[i] = beta_y * yt[i - 1] + beta_coint * xt[i] + shocks[i, 1]
    return yt, xt


def to_frame(y, x):
    """Put a pair of series in a DataFrame with columns 'yt' and 'xt'."""
    y = np.asarray(y, dtype=float)
    x = np.asarray(x, dtype=float)
    if len(y) != len(x):
        raise InvalidArgumentError(f"series lengths differ: {len(y)} and {len(x)}")
    return pd.DataFrame({'yt': y, 'xt': x})
