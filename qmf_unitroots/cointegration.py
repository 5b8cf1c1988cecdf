#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cointegration: Engle-Granger two-step procedure.

Two I(1) series are cointegrated when a linear combination of them is I(0).
  1. Regress y on x in levels: y_t = alpha + beta * x_t + e_t
  2. Test the residuals e_t for a unit root
     H0: there is a unit root in the residuals, i.e. no cointegration

If the residuals are stationary, beta is the long run relation and e_t the
deviation from equilibrium that an error correction model pulls back.

License: MIT
"""

import logging
from dataclasses import dataclass

import numpy as np
from statsmodels.tsa.stattools import coint

from qmf_unitroots import config
from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.regression import as_series, fit_ols
from qmf_unitroots.unit_root import min_adf_length, residual_adf_test

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CointegrationOutcome:
    statistic: float
    pvalue: float
    cointegrated: bool
    significance: float
    lags: int
    intercept: float
    slope: float
    resid: np.ndarray
    critical_values: dict

    def __eq__(self, other):
        if not isinstance(other, CointegrationOutcome):
            return NotImplemented
        return (
            (self.statistic, self.pvalue, self.cointegrated, self.significance,
             self.lags, self.intercept, self.slope, self.critical_values)
            == (other.statistic, other.pvalue, other.cointegrated, other.significance,
                other.lags, other.intercept, other.slope, other.critical_values)
            and np.array_equal(self.resid, other.resid)
        )


def _check_pair(y, x, lags, regression):
    if len(y) != len(x):
        raise InvalidArgumentError(f"series lengths differ: y has {len(y)}, x has {len(x)}")
    if regression not in config.ADF_REGRESSIONS:
        raise InvalidArgumentError(
            f"regression must be one of {config.ADF_REGRESSIONS}, got {regression!r}"
        )
    # None leaves the lag order to the unit root test (AIC selection)
    if lags is not None and lags < 0:
        raise InvalidArgumentError(f"lags must be non-negative, got {lags}")
    min_lags = 0 if lags is None else lags
    minimum = min_adf_length(min_lags, regression)
    if len(y) < minimum:
        raise InvalidArgumentError(
            f"series of length {len(y)} is too short for {min_lags} lag(s): the unit root "
            f"regression on the residuals needs at least {minimum} observations"
        )


def cointegration_test(y, x, lags=config.RESIDUAL_LAGS, significance=config.SIGNIFICANCE,
                       regression="n", unit_root_test=residual_adf_test):
    """
    Are y and x cointegrated?

    Parameters
    ----------
    y, x : array-like
        Series in levels, same length.
    lags : int or None
        Lag order of the unit root test on the residuals. None lets the
        unit root test choose it (AIC for the default test).
    significance : float
        The pair is declared cointegrated when the p-value is below it.
    regression : str
        Deterministic terms of the unit root regression on the residuals,
        'n' since OLS residuals with an intercept have zero mean.
    unit_root_test : callable
        ``unit_root_test(series, regression=..., lags=...)`` returning
        a ``UnitRootOutcome``; ``statistic``, ``pvalue``, ``lags`` and
        ``critical_values`` are read.

    Returns
    -------
    CointegrationOutcome
    """
    y = as_series(y, "y")
    x = as_series(x, "x")
    _check_pair(y, x, lags, regression)
    if not 0 < significance < 1:
        raise InvalidArgumentError(f"significance must be in (0, 1), got {significance}")

    # step 1: cointegrating regression in levels
    model_coint = fit_ols(y, x)
    # step 2: unit root test on the residuals
    outcome = unit_root_test(model_coint.resid, regression=regression, lags=lags)

    cointegrated = bool(outcome.pvalue < significance)
    logger.debug("cointegration test: beta=%.4f stat=%.3f p=%.4f cointegrated=%s",
                 model_coint.slope, outcome.statistic, outcome.pvalue, cointegrated)
    return CointegrationOutcome(
        statistic=float(outcome.statistic),
        pvalue=float(outcome.pvalue),
        cointegrated=cointegrated,
        significance=significance,
        lags=int(outcome.lags),
        intercept=model_coint.intercept,
        slope=model_coint.slope,
        resid=model_coint.resid,
        critical_values=dict(outcome.critical_values),
    )


def engle_granger(y, x, trend="c", maxlag=None, autolag="aic"):
    """
    Engle-Granger test as implemented by statsmodels.

    H0: no cointegration.

    Returns
    -------
    dict
        statistic, pvalue and the 1%, 5%, 10% critical values.
    """
    y = as_series(y, "y")
    x = as_series(x, "x")
    if len(y) != len(x):
        raise InvalidArgumentError(f"series lengths differ: y has {len(y)}, x has {len(x)}")
    if trend not in config.ADF_REGRESSIONS:
        raise InvalidArgumentError(f"trend must be one of {config.ADF_REGRESSIONS}, got {trend!r}")

    stat, pval, crit = coint(y, x, trend=trend, maxlag=maxlag, autolag=autolag)
    return {
        'statistic': float(stat),
        'pvalue': float(pval),
        'critical_values': {
            '1%': float(crit[0]),
            '5%': float(crit[1]),
            '10%': float(crit[2]),
        },
    }


def half_life(resid):
    """
    Mean reversion half-life of the residuals, in number of observations.

    Fits e_t = phi * e_{t-1} + u_t and returns -ln(2) / ln(phi).
    Returns inf when phi is not in (0, 1): no decay.
    """
    e = as_series(resid, "resid")
    if len(e) < 3:
        raise InvalidArgumentError(f"at least 3 residuals are needed, got {len(e)}")
    lagged = e[:-1]
    denominator = np.dot(lagged, lagged)
    if denominator == 0:
        return float('inf')
    phi = np.dot(lagged, e[1:]) / denominator
    if phi <= 0 or phi >= 1:
        return float('inf')
    return float(-np.log(2) / np.log(phi))
