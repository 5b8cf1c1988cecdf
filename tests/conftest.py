import numpy as np
import pytest

from qmf_unitroots.noise import make_noise


@pytest.fixture
def noise():
    return make_noise(42)


@pytest.fixture
def cointegrated_series(noise):
    """y = 0.22 + 0.75 x + e with x a random walk, 260 observations."""
    x = np.cumsum(noise.standard_normal(260))
    y = 0.22 + 0.75 * x + noise.standard_normal(260)
    return y, x
