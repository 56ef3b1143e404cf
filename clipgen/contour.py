"""Sine-contour melody generation.

A melody is read off the curve ``y = sin(pi * x) + 1``. The curve's range
``[0, 2]`` is divided into ``len(palette) - 1`` equal intervals and each ``y``
selects the palette entry at the nearest interval boundary. How ``x`` moves
between notes is up to a *driving sequence*: linear steps give periodic,
predictable lines, while growing or irregular steps give less predictable ones.

Leaps larger than ``max_distance`` palette steps are pulled back toward the
previous note by a random offset. The offset chosen for a given leap is
remembered for the rest of the run, so the same leap shape is always corrected
the same way and repeated contours stay recognisable.
"""

import logging
import math
import random
import typing

import clipgen.errors
import clipgen.sequence_utils


logger = logging.getLogger(__name__)

NoteT = typing.TypeVar("NoteT")

MAX_Y = 2.0
PRECISION = 10


@typing.runtime_checkable
class DrivingSequence (typing.Protocol):

	"""
	Anything that produces the next increment of ``x`` on demand.
	"""

	def next_value (self) -> float:
		...


class ConstantStep:

	"""Advance ``x`` by the same amount every note."""

	def __init__ (self, step: float) -> None:

		self.step = step


	def next_value (self) -> float:

		return self.step


class LinearStep:

	"""
	Yield ``start``, ``start + increment``, ``start + 2 * increment``, ...

	Increments that grow linearly make the contour speed up steadily.
	"""

	def __init__ (self, start: float = 0.0, increment: float = 0.05) -> None:

		self.value = start
		self.increment = increment


	def next_value (self) -> float:

		result = self.value
		self.value += self.increment
		return result


class SquaredDoublingStep:

	"""
	Yield ``x ** 2`` and then double ``x``.

	Steps grow very quickly, so successive notes land on effectively
	unrelated parts of the curve.
	"""

	def __init__ (self, start: float = 0.14) -> None:

		self.x = start


	def next_value (self) -> float:

		result = self.x ** 2
		self.x += self.x
		return result


class SineContour:

	"""
	Step along ``y = sin(pi * x) + 1``, pulling increments of ``x`` from a driving sequence.
	"""

	def __init__ (self, driving: DrivingSequence) -> None:

		self.driving = driving
		self.x = 0.0
		self._started = False


	def next_value (self) -> float:

		"""
		Return the next ``y``. The first call reads the curve at ``x = 0``.
		"""

		if self._started:
			self.x += self.driving.next_value()

		self._started = True

		return math.sin(math.pi * self.x) + 1


def contour_index (y: float, palette_size: int) -> int:

	"""
	Map a curve value onto the nearest palette index.

	The quotient is rounded to ``PRECISION`` decimal places before rounding
	half up, so values such as ``sin(pi) + 1`` that land a hair off a boundary
	pick the same index as the exact value.
	"""

	if palette_size < 2:
		raise clipgen.errors.ConfigurationError(
			f"Palette needs at least 2 entries for contour mapping, got {palette_size}"
		)

	interval = MAX_Y / (palette_size - 1)

	return math.floor(round(y / interval, PRECISION) + 0.5)


def generate_notes (
	driving: DrivingSequence,
	palette: typing.Sequence[NoteT],
	note_count: int,
	max_distance: typing.Optional[int] = None,
	rng: typing.Optional[random.Random] = None
) -> typing.List[NoteT]:

	"""Generate a melody by following a sine contour across a palette.

	Parameters:
		driving: Source of ``x`` increments between notes.
		palette: Ordered notes or chords to choose from (at least two).
		note_count: Number of notes to produce.
		max_distance: Largest allowed jump between consecutive palette
			indices. Defaults to the palette length, which never triggers a
			correction.
		rng: Random source for jump corrections.

	Returns:
		``note_count`` palette entries.

	Example:
		```python
		scale = clipgen.notes.multi_octave_scale("F#", "minor", 4, 6)
		melody = generate_notes(LinearStep(0, 0.05), scale, 8)
		```
	"""

	if len(palette) < 2:
		raise clipgen.errors.ConfigurationError(
			f"Palette needs at least 2 entries for contour mapping, got {len(palette)}"
		)

	if note_count < 0:
		raise ValueError(f"note_count cannot be negative, got {note_count}")

	if max_distance is None:
		max_distance = len(palette)

	if max_distance < 1:
		raise clipgen.errors.ConfigurationError(f"max_distance must be at least 1, got {max_distance}")

	rng = rng or random.Random()
	contour = SineContour(driving)

	# Raw jump -> signed replacement offset, fixed for the whole run.
	replacements: typing.Dict[int, int] = {}

	notes: typing.List[NoteT] = []
	previous_index: typing.Optional[int] = None

	for _ in range(note_count):

		index = contour_index(contour.next_value(), len(palette))

		if previous_index is not None:

			diff = index - previous_index

			if abs(diff) > max_distance:

				if diff not in replacements:
					offset = clipgen.sequence_utils.rand_int(rng, 1, max_distance)
					replacements[diff] = offset if diff > 0 else -offset
					logger.debug(f"Jump of {diff} will be replaced by {replacements[diff]}")

				index = previous_index + replacements[diff]

		notes.append(palette[index])
		previous_index = index

	return notes
