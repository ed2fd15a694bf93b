# tests/test_objectives.py
import pytest

from evolution.errors import InvalidInput
from evolution.individual import Portfolio
from objectives.assets import SAMPLE_RETURNS, sample_assets
from objectives.linear import AssetModel, LinearObjectiveModel, expected_return, portfolio_risk


def test_two_asset_example():
    assets = AssetModel([0.08, 0.12], [0.1, 0.2])
    portfolio = Portfolio([0.5, 0.5])

    assert expected_return(portfolio, assets) == pytest.approx(0.10)
    assert portfolio_risk(portfolio, assets) == pytest.approx(0.15)

    vec = LinearObjectiveModel(assets)(portfolio)
    assert vec.return_value == pytest.approx(0.10)
    assert vec.risk_value == pytest.approx(0.15)


def test_model_accepts_bare_weights():
    model = LinearObjectiveModel(AssetModel([0.08, 0.12], [0.1, 0.2]))
    assert model.objective1([1.0, 0.0]) == pytest.approx(0.08)
    assert model.objective2([0.0, 1.0]) == pytest.approx(0.2)


def test_length_mismatch_is_invalid_input():
    model = LinearObjectiveModel(sample_assets())
    with pytest.raises(InvalidInput):
        model(Portfolio([0.5, 0.5]))


def test_asset_model_validation():
    with pytest.raises(InvalidInput):
        AssetModel([], [])
    with pytest.raises(InvalidInput):
        AssetModel([0.1, 0.2], [0.1])
    with pytest.raises(InvalidInput):
        AssetModel([0.1], [0.1], names=["a", "b"])


def test_asset_model_is_read_only():
    assets = sample_assets()
    assert len(assets) == len(SAMPLE_RETURNS)
    assert assets.names[0] == "asset_0"
    with pytest.raises(ValueError):
        assets.returns[0] = 1.0


def test_objective_functions_are_unannotated():
    for fn in (expected_return, portfolio_risk, LinearObjectiveModel.__init__,
               LinearObjectiveModel.evaluate):
        assert fn.__annotations__ == {}
    assert not hasattr(LinearObjectiveModel, "n_assets")
