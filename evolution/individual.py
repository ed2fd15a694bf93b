# evolution/individual.py
import numpy as np

from evolution.errors import DegenerateSample, InvalidInput
from utils.logger import get_logger

logger = get_logger("individual", logfile="logs/individual.log")

# consecutive zero-sum draws tolerated before giving up
MAX_RESAMPLES = 100
SUM_TOLERANCE = 1e-9


def normalize(vector):
    """
    Scale `vector` so its elements sum to 1. Returns a new float array.
    Raises DegenerateSample when the sum is zero.
    """
    vector = np.asarray(vector, dtype=float)
    total = vector.sum()
    if total == 0:
        raise DegenerateSample("cannot normalize a zero-sum weight vector")
    return vector / total


class Portfolio:
    """
    One weight per asset. Owns its array; never shares it with another
    Portfolio. Weights sum to 1 except for a raw crossover offspring that
    has not been mutated yet.
    """

    def __init__(self, weights):
        self.weights = np.array(weights, dtype=float)
        if self.weights.ndim != 1 or self.weights.size == 0:
            raise InvalidInput("portfolio weights must be a non-empty flat sequence")

    def __len__(self):
        return self.weights.size

    def __repr__(self):
        return "Portfolio(%s)" % np.array2string(self.weights, precision=4, separator=", ")

    def copy(self):
        return Portfolio(self.weights)

    def is_normalized(self, tol=SUM_TOLERANCE):
        return bool(np.all(self.weights >= 0)) and abs(self.weights.sum() - 1.0) <= tol


def random_portfolio(n, rng):
    """
    n uniform(0,1) draws divided by their sum.
    A zero-sum draw is resampled up to MAX_RESAMPLES times.
    """
    if n < 1:
        raise InvalidInput("a portfolio needs at least one asset, got n=%d" % n)

    for attempt in range(MAX_RESAMPLES):
        try:
            return Portfolio(normalize(rng.random(n)))
        except DegenerateSample:
            logger.warning("Zero-sum initial draw (attempt %d), resampling", attempt + 1)

    raise DegenerateSample("%d consecutive zero-sum draws for n=%d" % (MAX_RESAMPLES, n))
