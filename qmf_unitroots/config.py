#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Default values shared across the package.

These are the numbers used in the lecture notes; every function takes them as
keyword arguments so that students can change them one call at a time.
"""

# |t| above this value is read as "significant" in the spurious regression exercise
CRITICAL_VALUE = 2.0

# threshold on the p-value of the unit root test, H0: there is a unit root
SIGNIFICANCE = 0.05

# lag order of the ADF regression run on cointegrating residuals
RESIDUAL_LAGS = 1

# y = alpha + beta * x + noise, x a random walk
COINT_ALPHA = 0.22
COINT_BETA = 0.75

# y_t = beta_y * y_{t-1} + beta_coint * x_t + noise, x_t a random walk
ECM_BETA_Y = 0.9
ECM_BETA_COINT = 0.3

# deterministic terms accepted by the ADF regression:
# 'n'   : no constant, no trend (random walk)
# 'c'   : constant (random walk with a drift)
# 'ct'  : constant + linear trend
# 'ctt' : constant + linear and quadratic trend
ADF_REGRESSIONS = ("n", "c", "ct", "ctt")
