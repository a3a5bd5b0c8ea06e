import numpy
import pytest

from src.genedrop.genetics.randomness import RandomSource


class ScriptedSource(RandomSource):
    """Test subclass replaying fixed coin flips and uniform draws."""

    def __init__(
        self,
        coins,
        draws=(),
    ):
        super().__init__(seed=0)
        self._coins = iter(coins)
        self._draws = list(draws)
        self.uniform_calls = 0

    @property
    def remaining_draws(self):
        return list(self._draws)

    def coin(self):
        return next(self._coins)

    def uniform(self, size):
        self.uniform_calls += 1
        taken, self._draws = self._draws[:size], self._draws[size:]
        assert len(taken) == size, "script ran out of uniform draws"
        return numpy.array(taken, dtype=float)


@pytest.fixture
def scripted_source():
    """Factory building a ScriptedSource from coin flips and uniform draws."""
    return ScriptedSource
