import logging
import random
import typing

import clipgen.errors


logger = logging.getLogger(__name__)

NoteT = typing.TypeVar("NoteT")


def _palette_index (palette: typing.Sequence[NoteT], note: NoteT) -> int:

	try:
		return palette.index(note)
	except ValueError:
		raise clipgen.errors.ConfigurationError(f"Note {note!r} is not in the alteration palette") from None


def replacement_range (left: int, current: int, right: int, palette_size: int) -> range:

	"""
	Return the palette indices that keep a note's shape relative to its neighbours.

	A local maximum may become anything above both neighbours, a local minimum
	anything below both, and any other note anything strictly between them.
	"""

	if current > left and current > right:
		return range(max(left, right) + 1, palette_size)

	if current < left and current < right:
		return range(0, min(left, right))

	return range(min(left, right) + 1, max(left, right))


def alter_notes (
	notes: typing.Sequence[NoteT],
	palette: typing.Sequence[NoteT],
	replace_count: int,
	rng: typing.Optional[random.Random] = None
) -> typing.List[NoteT]:

	"""Replace random notes without changing where the melody rises and falls.

	Every replacement is judged against the original notes, so one
	substitution never changes the neighbours another substitution sees. Each
	position is replaced at most once per call; ``replace_count`` beyond the
	number of notes is capped. A note whose shape leaves no other palette
	index to choose from is kept as it is.

	For the first note the missing left neighbour counts as palette index 0,
	and for the last note the missing right neighbour counts as index
	``len(notes) - 1``.

	Parameters:
		notes: Melody to alter. Not modified.
		palette: Notes to choose replacements from. Its order defines pitch
			order; every note in ``notes`` must appear in it.
		replace_count: Number of positions to replace.
		rng: Random source.

	Returns:
		A new list of notes.
	"""

	if replace_count < 0:
		raise ValueError(f"replace_count cannot be negative, got {replace_count}")

	altered = list(notes)

	if not notes or replace_count == 0:
		return altered

	rng = rng or random.Random()
	last = len(notes) - 1
	positions = rng.sample(range(len(notes)), min(replace_count, len(notes)))

	for position in positions:

		current = _palette_index(palette, notes[position])
		left = _palette_index(palette, notes[position - 1]) if position > 0 else 0
		right = _palette_index(palette, notes[position + 1]) if position < last else last

		choices = replacement_range(left, current, right, len(palette))

		if not choices:
			logger.debug(f"No replacement keeps the shape at position {position}, leaving {notes[position]!r}")
			continue

		altered[position] = palette[rng.choice(choices)]

	return altered
