# evolution/errors.py


class MOGAError(Exception):
    """Base class for every error raised by the search."""


class InvalidInput(MOGAError, ValueError):
    """Caller contract violation: bad lengths, cut points or counts."""


class DegenerateSample(MOGAError, ArithmeticError):
    """A weight vector summed to zero and could not be resampled."""


class EvolutionAborted(MOGAError):
    """
    Fatal failure inside the generational loop.
    `stage` is the engine state that failed, `generation` the 0-based index
    (None while initializing). The original error is chained as __cause__.
    """

    def __init__(self, stage, generation, message):
        self.stage = stage
        self.generation = generation
        where = stage if generation is None else "%s (generation %d)" % (stage, generation)
        super().__init__("%s failed: %s" % (where, message))
