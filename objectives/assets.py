# objectives/assets.py
from objectives.linear import AssetModel

# Sample five-asset universe: expected returns and risk (standard deviation)
SAMPLE_RETURNS = (0.08, 0.12, 0.10, 0.15, 0.09)
SAMPLE_RISKS = (0.1, 0.2, 0.15, 0.25, 0.18)


def sample_assets():
    return AssetModel(SAMPLE_RETURNS, SAMPLE_RISKS)
