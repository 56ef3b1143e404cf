import random

import pytest

import clipgen.pattern_builders
import clipgen.sequence_utils


def test_evenly_trim_string () -> None:

	"""Each half keeps its first two characters."""

	assert clipgen.sequence_utils.evenly_trim("abcdefgh", 4, 2) == "abef"


def test_evenly_trim_list () -> None:

	"""Lists are trimmed the same way and stay lists."""

	assert clipgen.sequence_utils.evenly_trim([1, 2, 3, 4, 5, 6], 4, 2) == [1, 2, 4, 5]


def test_evenly_trim_tuple () -> None:

	"""Tuples stay tuples."""

	assert clipgen.sequence_utils.evenly_trim((1, 2, 3, 4), 2, 1) == (1, 2)


def test_evenly_trim_exact_lengths () -> None:

	"""With exact division the output length equals the desired length and order is kept."""

	rng = random.Random(3)

	for _ in range(200):
		partitions = rng.randint(1, 6)
		length = partitions * rng.randint(1, 10)
		desired = partitions * rng.randint(0, length // partitions)
		sequence = list(range(length))

		trimmed = clipgen.sequence_utils.evenly_trim(sequence, desired, partitions)

		assert len(trimmed) == desired
		assert trimmed == sorted(trimmed)

		size = length // partitions
		keep = desired // partitions
		for index in range(partitions):
			assert trimmed[index * keep:(index + 1) * keep] == sequence[index * size:index * size + keep]


def test_evenly_trim_inexact_drops_remainders () -> None:

	"""Partition and keep sizes are floored; trailing items are dropped."""

	assert clipgen.sequence_utils.evenly_trim("abcdefg", 5, 2) == "abde"


def test_evenly_trim_longer_than_input () -> None:

	"""Asking for more than a partition holds keeps the whole partition without bleeding into the next."""

	assert clipgen.sequence_utils.evenly_trim("abcd", 8, 2) == "abcd"


def test_evenly_trim_invalid_partitions () -> None:

	"""Partition count must be positive."""

	with pytest.raises(ValueError):
		clipgen.sequence_utils.evenly_trim("abcd", 2, 0)


def test_trim_notes_matches_trimmed_onsets () -> None:

	"""Notes trimmed against a trimmed pattern match its onset count."""

	pattern = clipgen.pattern_builders.normal_pattern(8)
	notes = list("abcdefgh")

	trimmed_pattern = clipgen.sequence_utils.trim_pattern(pattern, 8, 2)
	trimmed_notes = clipgen.sequence_utils.trim_notes(notes, trimmed_pattern, 2)

	assert trimmed_pattern == "x_x_x_x_"
	assert trimmed_notes == ["a", "b", "e", "f"]
	assert clipgen.sequence_utils.count_onsets(trimmed_pattern) == len(trimmed_notes)


def test_trim_notes_markov_blocks (rng: random.Random) -> None:

	"""Block-repeated patterns trimmed by block keep onsets and notes in step."""

	for _ in range(20):
		pattern = clipgen.pattern_builders.markov_pattern(16, 2, [[0.5, 0.5], [0.5, 0.5]], rng)
		block = len(pattern) // 2
		budget = 2 * rng.randint(1, block)

		trimmed_pattern = clipgen.sequence_utils.trim_pattern(pattern, budget, 2)
		trimmed_notes = clipgen.sequence_utils.trim_notes(list(range(16)), trimmed_pattern, 2)

		assert len(trimmed_pattern) == budget
		assert clipgen.sequence_utils.count_onsets(trimmed_pattern) == len(trimmed_notes)


def test_repeat_to_length () -> None:

	"""Cycling wraps around to the exact length."""

	assert clipgen.sequence_utils.repeat_to_length(["a", "b", "c"], 7) == ["a", "b", "c", "a", "b", "c", "a"]

	with pytest.raises(ValueError):
		clipgen.sequence_utils.repeat_to_length([], 3)


def test_rand_int_range (rng: random.Random) -> None:

	"""Values fall in [low, high); an empty range yields low."""

	values = {clipgen.sequence_utils.rand_int(rng, 2, 5) for _ in range(500)}

	assert values == {2, 3, 4}
	assert clipgen.sequence_utils.rand_int(rng, 3, 3) == 3
	assert clipgen.sequence_utils.rand_int(rng, 3, 1) == 3
