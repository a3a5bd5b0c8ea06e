"""
Injectable randomness for recombination.

Recombination consumes two kinds of draws: one fair coin per gamete to pick the
starting strand, and one uniform value per inter-locus gap. RandomSource bundles
both behind a numpy Generator so callers can seed runs, hand independent
streams to parallel workers, or subclass it in tests to replay fixed sequences.
"""

from typing import List, Optional

import numpy


class RandomSource:
    """
    Uniform and fair-coin sampler backed by a numpy Generator.

    Not thread safe. Give each worker its own source, for example via spawn().
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        generator: Optional[numpy.random.Generator] = None,
    ):
        """
        Args:
            seed: Seed for numpy.random.default_rng. None draws fresh OS entropy.
            generator: Existing Generator to wrap instead of creating one.

        Raises:
            ValueError: If both seed and generator are given
        """
        if seed is not None and generator is not None:
            raise ValueError("Provide either seed or generator, not both")
        self._generator = generator if generator is not None else numpy.random.default_rng(seed)

    @property
    def generator(self) -> numpy.random.Generator:
        return self._generator

    def coin(self) -> bool:
        """Fair coin flip."""
        return bool(self._generator.random() < 0.5)

    def uniform(self, size: int) -> numpy.ndarray:
        """Return size independent draws in [0, 1)."""
        return self._generator.random(size)

    def spawn(self, n: int) -> List["RandomSource"]:
        """
        Derive n statistically independent sources.

        Use one per worker when breeding independent pairs in parallel.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        return [RandomSource(generator=child) for child in self._generator.spawn(n)]


def resolve_random_source(random_source: Optional[RandomSource]) -> RandomSource:
    """Return random_source, or a fresh unseeded source when None."""
    return random_source if random_source is not None else RandomSource()
