# tests/conftest.py
import numpy as np
import pytest

from objectives.assets import sample_assets
from objectives.linear import LinearObjectiveModel


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def model():
    return LinearObjectiveModel(sample_assets())
