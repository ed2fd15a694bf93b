# objectives/linear.py
from collections import namedtuple

import numpy as np

from evolution.errors import InvalidInput
from utils.logger import get_logger

logger = get_logger("linear_obj", logfile="logs/linear_obj.log")

ObjectiveVector = namedtuple("ObjectiveVector", ["return_value", "risk_value"])


class AssetModel:
    """
    Read-only table of (expected_return, risk) pairs, one per asset.
    """

    def __init__(self, returns, risks, names=None):
        returns = np.array(returns, dtype=float)
        risks = np.array(risks, dtype=float)

        if returns.ndim != 1 or risks.ndim != 1:
            raise InvalidInput("returns and risks must be flat sequences")
        if len(returns) == 0:
            raise InvalidInput("asset model needs at least one asset")
        if len(returns) != len(risks):
            raise InvalidInput(
                "returns has %d assets but risks has %d" % (len(returns), len(risks))
            )

        if names is None:
            names = ["asset_%d" % i for i in range(len(returns))]
        elif len(names) != len(returns):
            raise InvalidInput("expected %d asset names, got %d" % (len(returns), len(names)))

        returns.flags.writeable = False
        risks.flags.writeable = False
        self.returns = returns
        self.risks = risks
        self.names = tuple(names)

    def __len__(self):
        return len(self.returns)

    def __repr__(self):
        return "AssetModel(n_assets=%d)" % len(self)


def _weights_for(portfolio, n_assets):
    weights = getattr(portfolio, "weights", portfolio)
    weights = np.asarray(weights, dtype=float)
    if weights.shape != (n_assets,):
        raise InvalidInput(
            "portfolio has %d weights, asset model has %d assets" % (weights.size, n_assets)
        )
    return weights


def expected_return(portfolio, assets):
    """Sum of weight * expected return over all assets."""
    weights = _weights_for(portfolio, len(assets))
    return float(np.dot(weights, assets.returns))


def portfolio_risk(portfolio, assets):
    """Sum of weight * risk coefficient over all assets."""
    weights = _weights_for(portfolio, len(assets))
    return float(np.dot(weights, assets.risks))


class LinearObjectiveModel:
    """
    Both objectives as linear combinations of the per-asset coefficients.
    Calling the model maps a portfolio (or a bare weight vector) to its
    ObjectiveVector; this is the only thing the engine relies on.
    """

    def __init__(self, assets):
        self.assets = assets

    def objective1(self, portfolio):
        return expected_return(portfolio, self.assets)

    def objective2(self, portfolio):
        return portfolio_risk(portfolio, self.assets)

    def evaluate(self, portfolio):
        vec = ObjectiveVector(self.objective1(portfolio), self.objective2(portfolio))
        logger.debug("Objectives: return=%.6f risk=%.6f", vec.return_value, vec.risk_value)
        return vec

    __call__ = evaluate
