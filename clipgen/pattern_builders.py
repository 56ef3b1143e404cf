"""Rhythm pattern strategies.

A pattern is a string over ``x`` (start a note), ``_`` (hold the previous note
for one more slot) and ``-`` (rest for one slot). Each builder takes the number
of notes the pattern must carry and returns a pattern with exactly that many
onsets, except the manual builder which passes a literal through.
"""

import enum
import logging
import random
import typing

import clipgen.constants
import clipgen.errors
import clipgen.markov_chain
import clipgen.sequence_utils


logger = logging.getLogger(__name__)

ONSET = clipgen.constants.NOTE_ONSET
HOLD = clipgen.constants.HOLD_BEAT
REST = clipgen.constants.REST_BEAT


class PatternType (enum.Enum):

	"""
	Selects a pattern builder.
	"""

	NORMAL = "normal"
	SWING = "swing"
	RANDOM = "random"
	MARKOV = "markov"
	MANUAL = "manual"

	@classmethod
	def parse (cls, value: typing.Union["PatternType", str]) -> "PatternType":

		"""
		Accept a member or its case-insensitive name.
		"""

		if isinstance(value, cls):
			return value

		if isinstance(value, str):
			try:
				return cls(value.strip().lower())
			except ValueError:
				pass

		raise clipgen.errors.ConfigurationError(
			f"Unrecognized pattern type: {value!r}. Available: {[member.value for member in cls]}"
		)


def _repeat_builder (note_count: int, build_step: typing.Callable[[], str]) -> str:

	return "".join(build_step() for _ in range(note_count))


def normal_pattern (note_count: int) -> str:

	"""Hold every note for one extra slot."""

	return (ONSET + HOLD) * note_count


def swing_pattern (note_count: int) -> str:

	"""Alternate one rest and no rest after each note, starting with a rest."""

	return "".join(ONSET + REST * (step % 2) for step in range(1, note_count + 1))


def random_pattern (note_count: int, max_hold: int, max_rest: int, rng: typing.Optional[random.Random] = None) -> str:

	"""
	Follow each note with a random number of holds in ``[0, max_hold)`` and
	rests in ``[0, max_rest)``.
	"""

	rng = rng or random.Random()

	return _repeat_builder(note_count, lambda: (
		ONSET
		+ HOLD * clipgen.sequence_utils.rand_int(rng, 0, max_hold)
		+ REST * clipgen.sequence_utils.rand_int(rng, 0, max_rest)
	))


def markov_pattern (
	note_count: int,
	pattern_count: int,
	matrix: typing.Optional[clipgen.markov_chain.Matrix] = None,
	rng: typing.Optional[random.Random] = None
) -> str:

	"""Generate a block of notes with rest counts from a Markov chain, then repeat it.

	The chain starts on the zero-rest state. One block of
	``note_count // pattern_count`` notes is sampled and repeated verbatim
	``pattern_count`` times, so every repetition has the same rhythm.

	Parameters:
		note_count: Total number of notes; must divide evenly by ``pattern_count``.
		pattern_count: Number of times the sampled block is played.
		matrix: Rest-count transition matrix. Defaults to
			``clipgen.constants.DEFAULT_TRANSITION_MATRIX``.
		rng: Random source for the chain.
	"""

	if pattern_count < 1:
		raise clipgen.errors.ConfigurationError(f"Pattern count must be at least 1, got {pattern_count}")

	if note_count % pattern_count != 0:
		raise clipgen.errors.ConfigurationError(
			f"Number of notes ({note_count}) does not evenly fit in to the pattern count ({pattern_count})"
		)

	if matrix is None:
		matrix = clipgen.constants.DEFAULT_TRANSITION_MATRIX

	chain = clipgen.markov_chain.TransitionChain(matrix, initial_state=0, rng=rng)

	block = _repeat_builder(note_count // pattern_count, lambda: ONSET + REST * chain.step())

	return block * pattern_count


def manual_pattern (pattern: str) -> str:

	"""Use a literal pattern unchanged."""

	return pattern


def build_pattern (
	pattern_type: typing.Union[PatternType, str],
	note_count: int,
	repeat_count: int = 1,
	matrix: typing.Optional[clipgen.markov_chain.Matrix] = None,
	manual: str = "",
	max_hold: int = 2,
	max_rest: int = 1,
	rng: typing.Optional[random.Random] = None
) -> str:

	"""
	Build a pattern for ``note_count`` notes with the selected strategy.

	Raises:
		ConfigurationError: For an unrecognised ``pattern_type``, or when the
			Markov strategy cannot split ``note_count`` into ``repeat_count``
			equal blocks.
	"""

	pattern_type = PatternType.parse(pattern_type)

	if pattern_type is PatternType.NORMAL:
		pattern = normal_pattern(note_count)

	elif pattern_type is PatternType.SWING:
		pattern = swing_pattern(note_count)

	elif pattern_type is PatternType.RANDOM:
		pattern = random_pattern(note_count, max_hold, max_rest, rng)

	elif pattern_type is PatternType.MARKOV:
		pattern = markov_pattern(note_count, repeat_count, matrix, rng)

	else:
		pattern = manual_pattern(manual)

	logger.debug(f"Built {pattern_type.value} pattern of {len(pattern)} slots for {note_count} notes")

	return pattern
