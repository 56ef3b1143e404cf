import random
import typing

import pytest


class CountingRandom (random.Random):

	"""Seeded random source that counts ``random()`` draws and records ``sample`` calls."""

	def __init__ (self, seed: int = 0) -> None:

		"""Seed the generator and reset the counters."""

		super().__init__(seed)
		self.draws = 0
		self.samples: typing.List[typing.List[int]] = []


	def random (self) -> float:

		"""Count and delegate."""

		self.draws += 1
		return super().random()


	def sample (self, population: typing.Any, k: int, **kwargs: typing.Any) -> list:

		"""Record each sample so tests can inspect chosen positions."""

		result = super().sample(population, k, **kwargs)
		self.samples.append(list(result))
		return result


@pytest.fixture
def rng () -> random.Random:

	"""A fixed-seed random source."""

	return random.Random(1234)


@pytest.fixture
def counting_rng () -> CountingRandom:

	"""A fixed-seed random source that counts its draws."""

	return CountingRandom(1234)
