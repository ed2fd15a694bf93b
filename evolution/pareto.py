# evolution/pareto.py
from utils.logger import get_logger

logger = get_logger("pareto", logfile="logs/pareto.log")


def dominates(a, b):
    """
    True if a Pareto-dominates b.
    a, b: ObjectiveVectors; return is maximized, risk minimized.
    """
    better_or_equal = a.return_value >= b.return_value and a.risk_value <= b.risk_value
    strictly_better = a.return_value > b.return_value or a.risk_value < b.risk_value
    return better_or_equal and strictly_better


def pareto_front(evaluated, key=None):
    """
    Returns the non-dominated elements of `evaluated`, in input order.
    `key` maps an element to its ObjectiveVector (identity by default).
    Pairwise scan, O(M^2); duplicates and mutually non-dominated
    elements are all kept.
    """
    if key is None:
        key = lambda item: item

    vectors = [key(item) for item in evaluated]
    front = []
    for i, vec_i in enumerate(vectors):
        dominated = False
        for j, vec_j in enumerate(vectors):
            if i != j and dominates(vec_j, vec_i):
                dominated = True
                break
        if not dominated:
            front.append(evaluated[i])

    logger.debug("Pareto front size: %d / %d", len(front), len(vectors))
    return front
