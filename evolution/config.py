# evolution/config.py
from dataclasses import dataclass
from typing import Optional

from evolution.errors import InvalidInput


@dataclass(frozen=True)
class MOGAConfig:
    """Run constants, fixed at construction time."""
    population_size: int = 10
    max_generations: int = 50
    seed: Optional[int] = None  # None -> fresh random sequence

    def __post_init__(self):
        if isinstance(self.population_size, bool) or not isinstance(self.population_size, int):
            raise InvalidInput("population_size must be an int, got %r" % (self.population_size,))
        if self.population_size < 1:
            raise InvalidInput("population_size must be positive, got %d" % self.population_size)
        if isinstance(self.max_generations, bool) or not isinstance(self.max_generations, int):
            raise InvalidInput("max_generations must be an int, got %r" % (self.max_generations,))
        if self.max_generations < 0:
            raise InvalidInput("max_generations must be >= 0, got %d" % self.max_generations)
