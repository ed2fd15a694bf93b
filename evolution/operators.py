# evolution/operators.py
import numpy as np

from evolution.errors import DegenerateSample, InvalidInput
from evolution.individual import MAX_RESAMPLES, Portfolio, normalize
from utils.logger import get_logger

logger = get_logger("operators", logfile="logs/operators.log")


def crossover(parent1, parent2, rng, cut=None):
    """
    One-point crossover. Genes before `cut` come from parent1, the rest
    from parent2. A random cut is drawn from [0, N), so the child can be a
    copy of parent2 but never of parent1 alone; an explicit cut may be N.

    The child is not renormalized: it must go through mutate() before it
    is a valid portfolio.
    """
    n = len(parent1)
    if len(parent2) != n:
        raise InvalidInput("parents differ in length: %d vs %d" % (n, len(parent2)))

    if cut is None:
        cut = int(rng.integers(0, n))
    elif not 0 <= cut <= n:
        raise InvalidInput("cut point %d outside [0, %d]" % (cut, n))

    child = np.concatenate((parent1.weights[:cut], parent2.weights[cut:]))
    logger.debug("Crossover at cut=%d of %d", cut, n)
    return Portfolio(child)


def mutate(portfolio, rng):
    """
    Redraw one weight from uniform(0,1) and renormalize, in place.
    If the redraw leaves an all-zero vector it is repeated, at most
    MAX_RESAMPLES times.
    """
    index = int(rng.integers(0, len(portfolio)))
    weights = portfolio.weights.copy()

    for attempt in range(MAX_RESAMPLES):
        weights[index] = rng.random()
        try:
            portfolio.weights = normalize(weights)
        except DegenerateSample:
            logger.warning("Zero-sum mutation at index %d (attempt %d), redrawing",
                           index, attempt + 1)
            continue
        logger.debug("Mutated index %d", index)
        return portfolio

    raise DegenerateSample("%d consecutive zero-sum mutations at index %d"
                           % (MAX_RESAMPLES, index))
