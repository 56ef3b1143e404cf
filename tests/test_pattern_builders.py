import random

import pytest

import clipgen.errors
import clipgen.pattern_builders


def test_normal_pattern () -> None:

	"""Every note is held for one extra slot."""

	assert clipgen.pattern_builders.normal_pattern(3) == "x_x_x_"


def test_swing_pattern_alternates_rests () -> None:

	"""Rests after each note alternate 1, 0, 1, 0 ..."""

	assert clipgen.pattern_builders.swing_pattern(5) == "x-xx-xx-"


def test_random_pattern_bounds (rng: random.Random) -> None:

	"""Each note gets fewer than max_hold holds and fewer than max_rest rests."""

	pattern = clipgen.pattern_builders.random_pattern(50, 3, 2, rng)

	assert pattern.count("x") == 50
	assert pattern.startswith("x")
	assert "___" not in pattern
	assert "--" not in pattern
	assert "-_" not in pattern


def test_random_pattern_empty_ranges (rng: random.Random) -> None:

	"""Zero-width hold and rest ranges give bare onsets."""

	assert clipgen.pattern_builders.random_pattern(4, 0, 0, rng) == "xxxx"
	assert clipgen.pattern_builders.random_pattern(4, 1, 1, rng) == "xxxx"


def test_markov_pattern_single_state () -> None:

	"""A one-state matrix with no rests: 6 notes in 2 blocks of 3."""

	pattern = clipgen.pattern_builders.markov_pattern(6, 2, [[1.0]], random.Random(0))

	assert pattern == "xxx" + "xxx"


def test_markov_pattern_always_one_rest () -> None:

	"""A chain that always moves to the one-rest state puts a rest after every note."""

	pattern = clipgen.pattern_builders.markov_pattern(4, 1, [[0.0, 1.0], [0.0, 1.0]], random.Random(0))

	assert pattern == "x-" * 4


def test_markov_pattern_repeats_block_verbatim (rng: random.Random) -> None:

	"""The sampled block is repeated exactly, not re-sampled."""

	pattern = clipgen.pattern_builders.markov_pattern(12, 3, rng=rng)
	block_length = len(pattern) // 3

	assert len(pattern) % 3 == 0
	assert pattern == pattern[:block_length] * 3
	assert pattern.count("x") == 12


def test_markov_pattern_uneven_blocks_raises () -> None:

	"""Notes must split evenly into the pattern count."""

	with pytest.raises(clipgen.errors.ConfigurationError):
		clipgen.pattern_builders.markov_pattern(5, 2)


def test_markov_pattern_bad_matrix_raises () -> None:

	"""The chain rejects an invalid matrix before generating anything."""

	with pytest.raises(clipgen.errors.ConfigurationError):
		clipgen.pattern_builders.markov_pattern(4, 1, [[0.3, 0.3], [0.5, 0.5]])


def test_manual_pattern_is_literal () -> None:

	"""The manual strategy passes its input through."""

	assert clipgen.pattern_builders.build_pattern("manual", 10, manual="x_x_") == "x_x_"


def test_build_pattern_dispatch (rng: random.Random) -> None:

	"""Each type reaches its builder."""

	assert clipgen.pattern_builders.build_pattern(clipgen.pattern_builders.PatternType.NORMAL, 2) == "x_x_"
	assert clipgen.pattern_builders.build_pattern("Swing", 2) == "x-x"
	assert clipgen.pattern_builders.build_pattern("markov", 4, repeat_count=2, matrix=[[1.0]], rng=rng) == "xxxx"
	assert clipgen.pattern_builders.build_pattern("random", 3, max_hold=0, max_rest=0, rng=rng) == "xxx"


def test_unknown_pattern_type_raises () -> None:

	"""An unrecognised selector is a configuration error."""

	with pytest.raises(clipgen.errors.ConfigurationError):
		clipgen.pattern_builders.build_pattern("bossa", 4)

	with pytest.raises(clipgen.errors.ConfigurationError):
		clipgen.pattern_builders.PatternType.parse(None)
