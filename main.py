# main.py
from evolution.config import MOGAConfig
from evolution.moga import MOGA
from objectives.assets import sample_assets
from objectives.linear import LinearObjectiveModel
from utils.logger import get_logger
from utils.report import format_allocation, format_snapshot

logger = get_logger("main", logfile="logs/main.log")


def main():
    logger.info("Starting portfolio MOGA experiment")

    assets = sample_assets()
    engine = MOGA(LinearObjectiveModel(assets), len(assets), MOGAConfig())

    for snapshot in engine.run():
        for line in format_snapshot(snapshot):
            logger.info(line)

    front = engine.front()
    logger.info("Final Pareto set size: %d", len(front))

    for i, (portfolio, vec) in enumerate(front):
        logger.info(
            "Portfolio %d: return=%.4f risk=%.4f | %s",
            i,
            vec.return_value,
            vec.risk_value,
            format_allocation(portfolio, assets.names)
        )

if __name__ == "__main__":
    main()
