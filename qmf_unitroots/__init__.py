#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
qmf_unitroots: unit roots, spurious regression and cointegration on synthetic data.

Companion library to the QMF lecture on non-stationary time series:
- spurious: Monte Carlo experiment of Granger and Newbold (1974)
- cointegration: Engle-Granger residual test, half-life of deviations
- ecm: error correction model for a cointegrated pair
- unit_root: Dickey-Fuller and Augmented Dickey-Fuller tests
- simulate / noise: synthetic series with an explicit noise source

License: MIT
"""

import logging

from qmf_unitroots.cointegration import (
    CointegrationOutcome,
    cointegration_test,
    engle_granger,
    half_life,
)
from qmf_unitroots.ecm import ErrorCorrectionResult, fit_error_correction
from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.noise import FixedNoise, make_noise, spawn_noises
from qmf_unitroots.regression import RegressionResult, fit_ols
from qmf_unitroots.simulate import (
    cointegrated_pair,
    error_correcting_system,
    independent_random_walks,
    random_walk,
)
from qmf_unitroots.spurious import (
    SimulationRun,
    SpuriousRegressionExperiment,
    SpuriousRegressionResult,
    simulate_spurious_regressions,
    t_critical_value,
)
from qmf_unitroots.unit_root import (
    UnitRootOutcome,
    adf_test,
    dickey_fuller_regression,
    has_unit_root,
    integration_order,
    residual_adf_test,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
