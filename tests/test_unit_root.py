"""
Tests for the Dickey-Fuller and Augmented Dickey-Fuller wrappers.

H0: unit root. A random walk should not reject, white noise should.
"""

import warnings

import numpy as np
import pytest
import statsmodels

from qmf_unitroots.errors import InvalidArgumentError
from qmf_unitroots.noise import make_noise
from qmf_unitroots.unit_root import (
    adf_test,
    dickey_fuller_regression,
    has_unit_root,
    integration_order,
    min_adf_length,
    residual_adf_test,
)


def _walk(seed, n_obs=500):
    return np.cumsum(make_noise(seed).standard_normal(n_obs))


@pytest.fixture
def walk():
    return _walk(1)


@pytest.fixture
def white_noise():
    return make_noise(2).standard_normal(500)


class TestAdfTest:
    """ADF test with fixed or AIC-selected lags."""

    def test_white_noise_rejects(self, white_noise):
        """White noise rejects the unit root at 1%."""
        outcome = adf_test(white_noise, regression='c', lags=1)
        assert outcome.pvalue < 0.01
        assert outcome.rejects()

    def test_random_walk_does_not_reject(self):
        """Most random walks keep the unit root."""
        # about 5% of walks reject by construction, most must not
        pvalues = [adf_test(_walk(seed), regression='n', lags=1).pvalue for seed in range(10)]
        assert sum(p > 0.05 for p in pvalues) >= 7

    def test_fixed_lags(self, white_noise):
        """A fixed lag order is used as given."""
        outcome = adf_test(white_noise, regression='n', lags=3)
        assert outcome.lags == 3
        # one observation lost to the difference, three to the lags
        assert outcome.nobs == 500 - 1 - 3
        assert set(outcome.critical_values) == {'1%', '5%', '10%'}

    def test_autolag(self, white_noise):
        """No lag order: AIC picks one."""
        outcome = adf_test(white_noise, regression='c')
        assert outcome.lags >= 0
        assert outcome.regression == 'c'

    def test_deterministic(self, walk):
        """Same series, same outcome."""
        assert adf_test(walk, lags=2) == adf_test(walk, lags=2)

    def test_plain_python_numbers(self, walk):
        """Outcome fields are floats and ints, not numpy scalars."""
        outcome = adf_test(walk, lags=1)
        assert type(outcome.statistic) is float
        assert type(outcome.pvalue) is float
        assert type(outcome.lags) is int
        assert type(outcome.nobs) is int
        assert all(type(v) is float for v in outcome.critical_values.values())

    def test_no_future_warning(self, walk):
        """Reading the adfuller result raises no deprecation notice."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", FutureWarning)
            adf_test(walk, lags=1)
            adf_test(walk)
            residual_adf_test(walk, lags=1)

    def test_unknown_regression(self, walk):
        """Regression codes outside n, c, ct, ctt are refused."""
        with pytest.raises(InvalidArgumentError):
            adf_test(walk, regression='nc')

    def test_negative_lags(self, walk):
        """Negative lag orders are refused."""
        with pytest.raises(InvalidArgumentError):
            adf_test(walk, lags=-1)

    def test_too_short_for_lags(self):
        """Four points cannot carry two lagged differences."""
        with pytest.raises(InvalidArgumentError):
            adf_test([1.0, 2.0, 0.5, 1.5], lags=2)

    @pytest.mark.parametrize("regression", ['n', 'c'])
    @pytest.mark.parametrize("lags", [1, 2])
    def test_no_residual_degree_of_freedom(self, regression, lags):
        """lags + 3 points leave the ADF regression without residual."""
        series = make_noise(5).standard_normal(lags + 3)
        with pytest.raises(InvalidArgumentError):
            adf_test(series, regression=regression, lags=lags)

    @pytest.mark.parametrize("lags", [1, 2])
    def test_one_short_of_minimum(self, lags):
        """2 * lags + 2 points are one short without deterministic term."""
        series = make_noise(5).standard_normal(2 * lags + 2)
        with pytest.raises(InvalidArgumentError):
            adf_test(series, regression='n', lags=lags)

    def test_shortest_accepted_series(self):
        """2 * lags + 3 points leave one residual degree of freedom."""
        series = make_noise(5).standard_normal(5)
        outcome = adf_test(series, regression='n', lags=1)
        assert outcome.lags == 1
        assert outcome.nobs == 3
        assert np.isfinite(outcome.statistic)

    def test_constant_series_error_propagates(self):
        """statsmodels' error on a constant series is passed on."""
        with pytest.raises(ValueError):
            adf_test(np.ones(100), lags=1)


class TestMinAdfLength:
    """Shortest usable series per lag order and deterministic terms."""

    @pytest.mark.parametrize("lags, regression, expected", [
        (0, 'n', 3),
        (1, 'n', 5),
        (2, 'n', 7),
        (1, 'c', 6),
        (1, 'ct', 7),
        (0, 'ctt', 6),
    ])
    def test_values(self, lags, regression, expected):
        """One residual degree of freedom left after lags and trend terms."""
        assert min_adf_length(lags, regression) == expected


class TestResidualAdfTest:
    """Same statistic, Engle-Granger distribution."""

    def test_same_statistic_as_adf(self, white_noise):
        """The statistic is the plain ADF one."""
        plain = adf_test(white_noise, regression='n', lags=1)
        resid = residual_adf_test(white_noise, regression='n', lags=1)
        assert resid.statistic == pytest.approx(plain.statistic)

    def test_pvalue_is_more_conservative(self, walk):
        """Residual-based p-values are larger than the plain ones."""
        # Engle-Granger critical values lie left of the Dickey-Fuller ones
        resid = walk - walk.mean()
        plain = adf_test(resid, regression='n', lags=1)
        eg = residual_adf_test(resid, regression='n', lags=1)
        assert eg.pvalue >= plain.pvalue
        assert eg.critical_values['5%'] < plain.critical_values['5%']

    def test_unknown_trend(self, walk):
        """Unknown trend codes are refused."""
        with pytest.raises(InvalidArgumentError):
            residual_adf_test(walk, trend='x')

    def test_too_short_for_lags(self):
        """The length rule applies to residuals too."""
        with pytest.raises(InvalidArgumentError):
            residual_adf_test(make_noise(5).standard_normal(4), regression='n', lags=1)


class TestHasUnitRoot:
    """Boolean reading of the ADF test."""

    def test_walk(self):
        """Most walks have a unit root."""
        verdicts = [has_unit_root(_walk(seed), lags=1) for seed in range(10)]
        assert sum(verdicts) >= 7

    def test_white_noise(self, white_noise):
        """White noise does not."""
        assert not has_unit_root(white_noise, lags=1)


class TestDickeyFullerRegression:
    """Dickey-Fuller regression by hand."""

    def test_white_noise_rho_near_minus_one(self, white_noise):
        """rho = phi - 1 is close to -1 for white noise."""
        res = dickey_fuller_regression(white_noise)
        # Delta y_t = (phi - 1) y_{t-1} + e_t with phi = 0
        assert res.rho == pytest.approx(-1.0, abs=0.15)
        assert res.rejects_with_dickey_fuller
        assert res.nobs == 499

    def test_critical_values(self, walk):
        """Student 5% quantile and Dickey-Fuller 5% critical value."""
        res = dickey_fuller_regression(walk)
        assert res.t_critical == pytest.approx(1.648, abs=0.01)
        assert res.df_critical == pytest.approx(-1.94, abs=0.02)

    def test_too_short(self):
        """Two points leave nothing to regress."""
        with pytest.raises(InvalidArgumentError):
            dickey_fuller_regression([1.0, 2.0])


class TestIntegrationOrder:
    """Number of differences until the unit root goes away."""

    def test_stationary(self, white_noise):
        """White noise is I(0)."""
        assert integration_order(white_noise, lags=1) == 0

    def test_random_walk(self):
        """A random walk is I(1)."""
        orders = [integration_order(_walk(seed), lags=1) for seed in range(10)]
        assert orders.count(1) >= 7
        # the first difference is white noise, never I(2)
        assert max(orders) == 1

    def test_integrated_twice(self):
        """A cumulated walk is I(2)."""
        orders = [integration_order(np.cumsum(_walk(seed)), lags=1) for seed in range(10)]
        assert orders.count(2) >= 7

    def test_negative_max_order(self, walk):
        """max_order must be non-negative."""
        with pytest.raises(InvalidArgumentError):
            integration_order(walk, max_order=-1)


def test_statsmodels_within_supported_range():
    """The installed statsmodels is below the 0.16 bound."""
    major, minor = (int(part) for part in statsmodels.__version__.split('.')[:2])
    assert (0, 14) <= (major, minor) < (0, 16)
