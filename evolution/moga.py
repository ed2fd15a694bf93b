# evolution/moga.py
from collections import namedtuple
from contextlib import contextmanager
from enum import Enum
from operator import itemgetter

import numpy as np

from evolution.config import MOGAConfig
from evolution.errors import EvolutionAborted, InvalidInput, MOGAError
from evolution.individual import random_portfolio
from evolution.operators import crossover, mutate
from evolution.pareto import pareto_front
from objectives.linear import LinearObjectiveModel
from utils.logger import get_logger

logger = get_logger("moga", logfile="logs/moga.log")

# objectives: (return, risk) pairs of the new population, in population order
# front_size: number of survivors the offspring were bred from
GenerationSnapshot = namedtuple("GenerationSnapshot", ["generation", "objectives", "front_size"])


class EngineState(Enum):
    INITIALIZING = "initializing"
    EVALUATING = "evaluating"
    SELECTING = "selecting"
    REPRODUCING = "reproducing"
    REPLACED = "replaced"
    DONE = "done"


class MOGA:
    """
    Multi-objective GA over portfolio weights.

    Every generation the whole population is evaluated, the non-dominated
    individuals become the parent pool, and `population_size` offspring
    (crossover then mutate, parents drawn uniformly with replacement)
    replace the population. There is no elitism: the front found in one
    generation can be lost in the next.
    """

    def __init__(self, objective_model, n_assets, config=None, rng=None):
        if n_assets < 1:
            raise InvalidInput("n_assets must be positive, got %d" % n_assets)

        self.objective_model = objective_model
        self.n_assets = n_assets
        self.config = config if config is not None else MOGAConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.state = EngineState.INITIALIZING
        self.population = []

    @contextmanager
    def _stage(self, state, generation=None):
        self.state = state
        try:
            yield
        except EvolutionAborted:
            raise
        except MOGAError as e:
            logger.error("Run aborted while %s (generation %s): %s", state.value, generation, e)
            raise EvolutionAborted(state.value, generation, str(e)) from e

    def initial_population(self):
        return [random_portfolio(self.n_assets, self.rng)
                for _ in range(self.config.population_size)]

    def evaluate(self, population):
        return [(portfolio, self.objective_model(portfolio)) for portfolio in population]

    def select(self, evaluated):
        return [portfolio for portfolio, _ in pareto_front(evaluated, key=itemgetter(1))]

    def reproduce(self, pool):
        offspring = []
        while len(offspring) < self.config.population_size:
            parent1 = pool[self.rng.integers(len(pool))]
            parent2 = pool[self.rng.integers(len(pool))]
            child = crossover(parent1, parent2, self.rng)
            offspring.append(mutate(child, self.rng))
        return offspring

    def front(self):
        """Non-dominated (portfolio, objectives) pairs of the current population."""
        return pareto_front(self.evaluate(self.population), key=itemgetter(1))

    def run(self):
        """
        Lazily yields one GenerationSnapshot per generation,
        exactly `max_generations` of them.
        """
        with self._stage(EngineState.INITIALIZING):
            self.population = self.initial_population()
        logger.info("Starting MOGA: population=%d generations=%d assets=%d",
                    self.config.population_size, self.config.max_generations, self.n_assets)

        for generation in range(self.config.max_generations):
            with self._stage(EngineState.EVALUATING, generation):
                evaluated = self.evaluate(self.population)

            with self._stage(EngineState.SELECTING, generation):
                pool = self.select(evaluated)

            with self._stage(EngineState.REPRODUCING, generation):
                offspring = self.reproduce(pool)

            with self._stage(EngineState.REPLACED, generation):
                self.population = offspring
                objectives = [vec for _, vec in self.evaluate(self.population)]

            logger.info("Generation %d: %d survivors -> %d offspring",
                        generation, len(pool), len(offspring))
            yield GenerationSnapshot(generation, objectives, len(pool))

        self.state = EngineState.DONE
        logger.info("MOGA finished after %d generations", self.config.max_generations)


def run_moga(assets, population_size=10, max_generations=50, seed=None, objective_model=None):
    """
    Build an engine over `assets` and return its snapshot generator.
    `objective_model` defaults to the linear return/risk model.
    """
    config = MOGAConfig(population_size=population_size,
                        max_generations=max_generations,
                        seed=seed)
    if objective_model is None:
        objective_model = LinearObjectiveModel(assets)
    engine = MOGA(objective_model, len(assets), config)
    return engine.run()
