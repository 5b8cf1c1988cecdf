#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ordinary least squares with an intercept: y = a + b * x + e.

Thin wrapper around ``statsmodels.api.OLS``. The fitted model is reduced to
the few numbers the unit root exercises read (params, standard errors,
t-statistics, residuals, R²) so that the rest of the package does not
depend on the statsmodels results object.
"""

from dataclasses import dataclass

import numpy as np
import statsmodels.api as sm

from qmf_unitroots.errors import InvalidArgumentError


@dataclass(frozen=True, eq=False)
class RegressionResult:
    intercept: float
    slope: float
    params: np.ndarray
    bse: np.ndarray
    tvalues: np.ndarray
    resid: np.ndarray
    rsquared: float
    nobs: int

    @property
    def slope_tstat(self):
        """t-statistic of the slope: coefficient divided by its standard error."""
        return float(self.tvalues[1])

    @property
    def rsquared_adj(self):
        # two observations leave no residual degree of freedom
        df_resid = self.nobs - 2
        if df_resid <= 0:
            return float('nan')
        return 1 - (self.nobs - 1) / df_resid * (1 - self.rsquared)

    def __eq__(self, other):
        if not isinstance(other, RegressionResult):
            return NotImplemented
        return (
            self.nobs == other.nobs
            and np.array_equal(self.params, other.params)
            and np.array_equal(self.bse, other.bse, equal_nan=True)
            and np.array_equal(self.tvalues, other.tvalues, equal_nan=True)
            and np.array_equal(self.resid, other.resid)
            and np.array_equal([self.rsquared], [other.rsquared], equal_nan=True)
        )


def as_series(values, name="series"):
    """Convert a list, array or pandas Series to a 1-D float array."""
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def fit_ols(y, x):
    """
    Regress y on x with an intercept.

    Parameters
    ----------
    y : array-like
        Response series.
    x : array-like
        Regressor, same length as y.

    Returns
    -------
    RegressionResult
    """
    y = as_series(y, "y")
    x = as_series(x, "x")
    if len(y) != len(x):
        raise InvalidArgumentError(f"series lengths differ: y has {len(y)}, x has {len(x)}")
    if len(y) < 2:
        raise InvalidArgumentError(f"at least 2 observations are needed, got {len(y)}")

    # has_constant='add' so that a constant x still gets its own intercept column
    exog = sm.add_constant(x, has_constant='add')
    results = sm.OLS(y, exog).fit()

    params = np.asarray(results.params)
    return RegressionResult(
        intercept=float(params[0]),
        slope=float(params[1]),
        params=params,
        bse=np.asarray(results.bse),
        tvalues=np.asarray(results.tvalues),
        resid=np.asarray(results.resid),
        rsquared=float(results.rsquared),
        nobs=int(results.nobs),
    )
