#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Unit root tests: Dickey-Fuller and Augmented Dickey-Fuller.

H0: the series has a unit root (it is I(1)).
A low p-value means we reject H0 and treat the series as stationary.

Deterministic terms in the test regression:
 - 'n'   : no constant, no trend, the alternative is a zero-mean stationary process
 - 'c'   : constant, the null is a random walk (possibly with a drift)
 - 'ct'  : constant + linear trend, trend-stationary alternative
 - 'ctt' : constant + linear + quadratic trend

Every test here follows the same contract, ``test(series, regression, lags)``
returning a ``UnitRootOutcome``, so the cointegration tester can use any of
them without knowing how statsmodels is called.

Residuals of an estimated cointegrating regression must not be judged with
the usual ADF p-values: the OLS step already picks the combination that
looks the most stationary (Phillips and Ouliaris, 1990). ``residual_adf_test``
reads the same ADF statistic against MacKinnon's residual-based
(Engle-Granger) distribution instead.

License: MIT
"""

import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np
import pandas as pd
import scipy.stats
import statsmodels.formula.api as smf
from statsmodels.tsa.adfvalues import mackinnoncrit, mackinnonp
from statsmodels.tsa.stattools import adfuller

from qmf_unitroots import config
from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.regression import as_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnitRootOutcome:
    statistic: float
    pvalue: float
    lags: int
    nobs: int
    regression: str
    critical_values: dict

    def rejects(self, significance=config.SIGNIFICANCE):
        """True when H0 (unit root) is rejected at ``significance``."""
        return self.pvalue < significance


class UnitRootTest(Protocol):
    def __call__(self, series, regression, lags) -> UnitRootOutcome: ...


def min_adf_length(lags, regression):
    """
    Shortest series whose ADF regression keeps a residual degree of freedom.

    The regression of Delta y_t on y_{t-1}, ``lags`` lagged differences and
    the deterministic terms uses len - 1 - lags observations.
    """
    ntrend = 0 if regression == "n" else len(regression)
    return 2 * lags + 3 + ntrend


def _check_arguments(series, regression, lags):
    if regression not in config.ADF_REGRESSIONS:
        raise InvalidArgumentError(
            f"regression must be one of {config.ADF_REGRESSIONS}, got {regression!r}"
        )
    if lags is not None and lags < 0:
        raise InvalidArgumentError(f"lags must be non-negative, got {lags}")
    min_lags = 0 if lags is None else lags
    minimum = min_adf_length(min_lags, regression)
    if len(series) < minimum:
        raise InvalidArgumentError(
            f"series of length {len(series)} is too short for {min_lags} lag(s) "
            f"with regression={regression!r}: at least {minimum} observations are needed"
        )


def _critical_dict(values):
    return {'1%': float(values[0]), '5%': float(values[1]), '10%': float(values[2])}


def _adfuller(x, regression, lags):
    # a fixed lag order switches off the automatic selection
    if lags is None:
        return adfuller(x, regression=regression, autolag='AIC')
    return adfuller(x, regression=regression, maxlag=lags, autolag=None)


def adf_test(series, regression="c", lags=None):
    """
    Augmented Dickey-Fuller test.

    Parameters
    ----------
    series : array-like
        Series to test.
    regression : {'n', 'c', 'ct', 'ctt'}
        Deterministic terms in the test regression.
    lags : int or None
        Number of lagged differences. None selects it by AIC.

    Returns
    -------
    UnitRootOutcome
    """
    x = as_series(series)
    _check_arguments(x, regression, lags)

    # statsmodels returns 5 or 6 elements depending on autolag,
    # the tuple return is pinned through the statsmodels bound in pyproject.toml
    out = _adfuller(x, regression, lags)
    return UnitRootOutcome(
        statistic=float(out[0]),
        pvalue=float(out[1]),
        lags=int(out[2]),
        nobs=int(out[3]),
        regression=regression,
        critical_values={k: float(v) for k, v in out[4].items()},
    )


def residual_adf_test(series, regression="n", lags=config.RESIDUAL_LAGS, n_vars=2, trend="c"):
    """
    ADF test on the residuals of a cointegrating regression.

    The statistic is the usual ADF t-statistic. The p-value and the critical
    values come from MacKinnon's tables for residuals of a regression on
    ``n_vars`` variables with deterministic terms ``trend``, which is what
    ``statsmodels.tsa.stattools.coint`` does.

    Parameters
    ----------
    series : array-like
        Residuals of the levels regression.
    regression : str
        Deterministic terms of the ADF regression itself. The residuals have
        zero mean by construction, so 'n' is the usual choice.
    lags : int or None
        Number of lagged differences, None selects it by AIC.
    n_vars : int
        Number of variables in the cointegrating regression (y and the x's).
    trend : {'n', 'c', 'ct', 'ctt'}
        Deterministic terms of the cointegrating regression. 'c' when the
        levels regression has an intercept.
    """
    x = as_series(series)
    _check_arguments(x, regression, lags)
    if trend not in config.ADF_REGRESSIONS:
        raise InvalidArgumentError(
            f"trend must be one of {config.ADF_REGRESSIONS}, got {trend!r}"
        )
    if n_vars < 1:
        raise InvalidArgumentError(f"n_vars must be at least 1, got {n_vars}")

    out = _adfuller(x, regression, lags)
    statistic = float(out[0])
    nobs = int(out[3])
    return UnitRootOutcome(
        statistic=statistic,
        pvalue=float(mackinnonp(statistic, regression=trend, N=n_vars)),
        lags=int(out[2]),
        nobs=nobs,
        regression=regression,
        critical_values=_critical_dict(mackinnoncrit(N=n_vars, regression=trend, nobs=nobs)),
    )


def has_unit_root(series, significance=config.SIGNIFICANCE, regression="n", lags=None):
    """True when the ADF test does not reject H0 at ``significance``."""
    return not adf_test(series, regression=regression, lags=lags).rejects(significance)


@dataclass(frozen=True)
class DickeyFullerRegression:
    rho: float
    tstat: float
    nobs: int
    t_critical: float
    df_critical: float

    @property
    def rejects_with_student(self):
        """Naive reading: compare the t-statistic to the Student-t quantile."""
        return abs(self.tstat) > self.t_critical

    @property
    def rejects_with_dickey_fuller(self):
        """Correct reading: compare it to the Dickey-Fuller 5% critical value."""
        return self.tstat < self.df_critical


def dickey_fuller_regression(series):
    """
    Dickey-Fuller regression by hand: Delta y_t = rho * y_{t-1} + e_t.

    H0 is rho = 0 (unit root). Under H0 the t-statistic of rho does not follow
    a Student distribution, so the function returns both the one-sided 5%
    Student quantile and the Dickey-Fuller 5% critical value.

    Returns
    -------
    DickeyFullerRegression
    """
    x = as_series(series)
    if len(x) < 3:
        raise InvalidArgumentError(f"at least 3 observations are needed, got {len(x)}")

    dfdata = pd.DataFrame({'y': x})
    dfdata['Deltay'] = dfdata['y'].diff()
    dfdata['y1'] = dfdata['y'].shift(1)
    dfdata = dfdata.dropna()

    # OLS of the delta y on the lagged level, no constant
    dickeyfuller_reg = smf.ols('Deltay ~ y1 - 1', data=dfdata).fit()

    nobs = len(dfdata)
    # we estimate one coefficient, the degrees of freedom of the course are nobs - 1
    degreeoffreedom = nobs - 1
    return DickeyFullerRegression(
        rho=float(dickeyfuller_reg.params['y1']),
        tstat=float(dickeyfuller_reg.tvalues['y1']),
        nobs=nobs,
        t_critical=float(scipy.stats.t.ppf(0.95, degreeoffreedom)),
        df_critical=float(mackinnoncrit(N=1, regression='n', nobs=nobs)[1]),
    )


def integration_order(series, regression="c", significance=config.SIGNIFICANCE,
                      max_order=2, lags=None):
    """
    Smallest d such that the series differenced d times rejects a unit root.

    Returns ``max_order + 1`` when the unit root is still not rejected after
    ``max_order`` differences, e.g. 3 for a series we cannot classify as
    I(0), I(1) or I(2).
    """
    x = as_series(series)
    if max_order < 0:
        raise InvalidArgumentError(f"max_order must be non-negative, got {max_order}")

    for d in range(max_order + 1):
        outcome = adf_test(np.diff(x, n=d), regression=regression, lags=lags)
        logger.debug("ADF on %d-th difference: stat=%.3f p=%.3f", d, outcome.statistic, outcome.pvalue)
        if outcome.rejects(significance):
            return d
    return max_order + 1
