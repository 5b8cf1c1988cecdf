#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QMF — Quantitative Methods in Finance
Unit roots, spurious regression, cointegration and error correction on simulated data

This script accompanies the section on non-stationary time series of the
lecture notes. All the computations live in the `qmf_unitroots` package; the
cells below call it step by step and print or plot what matters.

Pedagogical objectives:
- See why a random walk keeps every shock forever
- Run the Dickey–Fuller regression by hand, then the ADF test
- Reproduce the Granger and Newbold (1974) spurious regression with a Monte Carlo
- Test two simulated series for cointegration (Engle–Granger)
- Estimate an error correction model and read the "force of recall"

Usage
-----
- pip install -e ".[plot]"
- Set `ploton = True` to display figures (and save them as PDFs in `fig/`).
- Change `seed` to draw another world.

License: MIT (code)
Year: 2026
"""

import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

import qmf_unitroots as qu
from qmf_unitroots.simulate import to_frame

logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

# to plot, set ploton to True
ploton = False

# one seed for the whole script, change it to draw another world
seed = 2026
noise = qu.make_noise(seed)

#%% Presenting the concept of unit root

# a random walk: y_t = y_{t-1} + e_t
lent = 1000
yt = qu.random_walk(lent, noise, start=100.0)
dfy = pd.DataFrame({'yt': yt})

if ploton:
    ax = dfy.yt.plot(title='time series with a unit root')
    fig = ax.get_figure()
    fig.savefig('fig/unitroot.pdf')
    plt.close()

# Augmented Dickey-Fuller test: is there a unit root?
# H0: there is a unit root
print(qu.adf_test(dfy.yt, regression='n', lags=1))
print(qu.adf_test(dfy.yt, regression='c', lags=1))
# imposing 'n' to regression mean that we assume a random walk
# imposing 'c' means you assume a random walk with a drift
# p-value high in any case: we do not reject H0, we assume there is a unit root
print(qu.adf_test(dfy.yt.diff().dropna(), regression='n', lags=1))

del dfy, yt

#%% Unit Root test - Dickey-Fuller regression by hand
walk = qu.random_walk(lent, noise)
dfreg = qu.dickey_fuller_regression(walk)
print(dfreg)
# the t-statistic of rho does not follow a Student distribution under H0:
# compare it with the Dickey-Fuller critical value, not with the t quantile
print("Student reading rejects H0:", dfreg.rejects_with_student)
print("Dickey-Fuller reading rejects H0:", dfreg.rejects_with_dickey_fuller)

# order of integration: how many differences until the unit root disappears?
print("walk is I(%d)" % qu.integration_order(walk, lags=1))
print("cumulated walk is I(%d)" % qu.integration_order(np.cumsum(walk), lags=1))

del walk, dfreg

#%% Illustration of a spurious regression

yt, xt = qu.independent_random_walks(lent, noise)
dfspur = to_frame(yt, xt)

# regress one series on the other
results_spur = qu.fit_ols(dfspur['yt'], dfspur['xt'])
print("slope = %.3f, t = %.2f, R2 = %.3f" % (results_spur.slope, results_spur.slope_tstat, results_spur.rsquared))

if ploton:
    ax = dfspur.plot(title='Two independent time series, with both a unit root')
    fig = ax.get_figure()
    #fig.savefig('fig/spuriousillustration.pdf')

del yt, xt, dfspur, results_spur

#%% Before regressing, a spurious regression: Monte Carlo

# we loop over several model generations and record the slope, R2 and t-statistic
experiment = qu.SpuriousRegressionExperiment(repetitions=1000, n_obs=260)
mc = experiment.run(seed=seed)

# we expect |t| > 2 in about 5% of the cases, we find that this is not the case
print(mc.summary())

if ploton:
    ax = mc.to_frame()['tstat'].plot.hist(bins=50, title='t-statistics of spurious regressions')
    fig = ax.get_figure()
    fig.savefig('fig/spurious_tstats.pdf')
    plt.close()

del experiment, mc

#%% Cointegration: two series cointegrated by construction

yt, xt = qu.cointegrated_pair(260, noise, alpha=0.22, beta=0.75)
dfcoint = to_frame(yt, xt)

if ploton:
    ax = dfcoint.plot(title='Two cointegrated time series, with both a unit root')
    fig = ax.get_figure()
    #fig.savefig('fig/cointillustration.pdf')

# Cointegration test
# H0: no cointegration
outcome = qu.cointegration_test(dfcoint['yt'], dfcoint['xt'], lags=1)
print("beta = %.3f, stat = %.2f, p-value = %.4f, cointegrated: %s"
      % (outcome.slope, outcome.statistic, outcome.pvalue, outcome.cointegrated))
# the same with statsmodels' coint
print(qu.engle_granger(dfcoint['yt'], dfcoint['xt']))

# two independent random walks should not pass the test
yt, xt = qu.independent_random_walks(260, noise)
print("independent walks, p-value = %.4f" % qu.cointegration_test(yt, xt).pvalue)

del yt, xt, dfcoint, outcome

#%% Error correction model

yt, xt = qu.error_correcting_system(lent, noise, beta_y=0.9, beta_coint=0.3)
outcome = qu.cointegration_test(yt, xt)
ecm = qu.fit_error_correction(yt, xt, outcome=outcome, lags=1)

print(ecm.y_equation.summary())
print(ecm.x_equation.summary())
# a negative coefficient on the lagged error: y is pulled back to the long run relation
print("speed of adjustment of y: %.3f (t = %.2f)" % (ecm.adjustment_y, ecm.adjustment_y_tstat))
print("half-life of a deviation: %.1f periods" % qu.half_life(outcome.resid))

if ploton:
    dfecm = to_frame(yt, xt)
    dfecm['y_predicted'] = ecm.intercept + ecm.slope * dfecm['xt']
    ax = dfecm.loc[:, ['yt', 'y_predicted']].plot(title='Forces de rappel')
    fig = ax.get_figure()
    #fig.savefig('fig/cointforcesrappel.pdf')

# exercise: set beta_y to 1 and check that the error correction disappears
