#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error correction model (ECM) for a cointegrated pair.

Once y_t = alpha + beta * x_t + e_t is a cointegrating relation, the
deviation from equilibrium e_{t-1} enters the short run dynamics:

    Dy_t = c + gamma_y * e_{t-1} + sum a_i Dy_{t-i} + sum b_i Dx_{t-i} + u_t
    Dx_t = c + gamma_x * e_{t-1} + sum a_i Dy_{t-i} + sum b_i Dx_{t-i} + v_t

gamma is the "force of recall": a negative gamma_y means y moves back
towards the long run relation after a shock.

License: MIT
"""

from dataclasses import dataclass

import pandas as pd
import statsmodels.formula.api as smf

from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.regression import as_series, fit_ols


@dataclass(frozen=True)
class ErrorCorrectionResult:
    y_equation: object
    x_equation: object
    intercept: float
    slope: float
    lags: int

    @property
    def adjustment_y(self):
        return float(self.y_equation.params['cointerr1'])

    @property
    def adjustment_x(self):
        return float(self.x_equation.params['cointerr1'])

    @property
    def adjustment_y_tstat(self):
        return float(self.y_equation.tvalues['cointerr1'])

    @property
    def adjustment_x_tstat(self):
        return float(self.x_equation.tvalues['cointerr1'])


def _formula(lhs, lags):
    terms = ['cointerr1']
    for i in range(1, lags + 1):
        terms += [f'Dyt{i}', f'Dxt{i}']
    return f"{lhs} ~ " + " + ".join(terms)


def fit_error_correction(y, x, outcome=None, lags=1):
    """
    Fit both ECM equations.

    Parameters
    ----------
    y, x : array-like
        Series in levels, same length.
    outcome : CointegrationOutcome, optional
        Result of the cointegration test; its residuals are reused. When
        missing the levels regression y ~ x is fitted here.
    lags : int
        Number of lagged differences of y and x in each equation.

    Returns
    -------
    ErrorCorrectionResult
    """
    y = as_series(y, "y")
    x = as_series(x, "x")
    if len(y) != len(x):
        raise InvalidArgumentError(f"series lengths differ: y has {len(y)}, x has {len(x)}")
    if lags < 0:
        raise InvalidArgumentError(f"lags must be non-negative, got {lags}")
    # one observation lost to the difference, lags more to the lagged differences
    if len(y) <= 3 * lags + 3:
        raise InvalidArgumentError(
            f"series of length {len(y)} is too short for an ECM with {lags} lag(s)"
        )

    if outcome is None:
        model_coint = fit_ols(y, x)
        intercept, slope, resid = model_coint.intercept, model_coint.slope, model_coint.resid
    else:
        if len(outcome.resid) != len(y):
            raise InvalidArgumentError("the cointegration outcome was computed on other series")
        intercept, slope, resid = outcome.intercept, outcome.slope, outcome.resid

    dfcoint = pd.DataFrame({'yt': y, 'xt': x, 'cointerr': resid})
    dfcoint['Dyt'] = dfcoint['yt'].diff()
    dfcoint['Dxt'] = dfcoint['xt'].diff()
    dfcoint['cointerr1'] = dfcoint['cointerr'].shift(1)
    for i in range(1, lags + 1):
        dfcoint[f'Dyt{i}'] = dfcoint['Dyt'].shift(i)
        dfcoint[f'Dxt{i}'] = dfcoint['Dxt'].shift(i)
    dfcoint = dfcoint.dropna()

    ecm1 = smf.ols(_formula('Dyt', lags), data=dfcoint).fit()
    ecm2 = smf.ols(_formula('Dxt', lags), data=dfcoint).fit()
    return ErrorCorrectionResult(
        y_equation=ecm1,
        x_equation=ecm2,
        intercept=float(intercept),
        slope=float(slope),
        lags=lags,
    )
