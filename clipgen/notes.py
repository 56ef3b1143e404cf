"""Note names, scales and chords for building palettes.

Palettes are plain lists. An entry is a note name such as ``"F#4"``, a MIDI
note number, or a tuple of either for a chord. Octave numbers follow the
convention where middle C is ``C4`` (MIDI 60).

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g. `"C"`, `"F#"`, `"Bb"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to sharp note names
- `SCALE_INTERVALS`: Maps scale and mode names to semitone offsets from the root
- `CHORD_INTERVALS`: Maps chord quality names to semitone offsets from the root
"""

import re
import typing


Note = typing.Union[str, int, typing.Tuple[typing.Union[str, int], ...]]

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

SCALE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 2, 4, 5, 7, 9, 11],
	"ionian": [0, 2, 4, 5, 7, 9, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"minor": [0, 2, 3, 5, 7, 8, 10],
	"aeolian": [0, 2, 3, 5, 7, 8, 10],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"blues": [0, 3, 5, 6, 7, 10],
	"whole_tone": [0, 2, 4, 6, 8, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"bebop_harmonic_minor": [0, 1, 3, 5, 7, 8, 10, 11],
}

CHORD_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 4, 7],
	"minor": [0, 3, 7],
	"diminished": [0, 3, 6],
	"augmented": [0, 4, 8],
	"dominant_7th": [0, 4, 7, 10],
	"major_7th": [0, 4, 7, 11],
	"minor_7th": [0, 3, 7, 10],
	"half_diminished_7th": [0, 3, 6, 10],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
}

_NOTE_PATTERN = re.compile(r"([A-Ga-g])([#b]?)(-?\d+)")


def note_to_midi (note: typing.Union[str, int]) -> int:

	"""Convert a note name such as ``"F#4"`` into a MIDI note number.

	Integers are passed through after a range check.

	Raises:
		ValueError: If the name is malformed or the result is outside 0-127.

	Example:
		```python
		note_to_midi("C4")    # → 60
		note_to_midi("f#4")   # → 66
		```
	"""

	if isinstance(note, int):
		pitch = note

	else:
		match = _NOTE_PATTERN.fullmatch(note.strip())

		if match is None:
			raise ValueError(f"Invalid note name: {note!r}. Expected e.g. 'C4', 'F#3', 'Bb5'.")

		letter, accidental, octave = match.groups()
		pitch_class = NOTE_NAME_TO_PC[letter.upper() + accidental]
		pitch = (int(octave) + 1) * 12 + pitch_class

	if not 0 <= pitch <= 127:
		raise ValueError(f"Note {note!r} is outside the MIDI range 0-127")

	return pitch


def midi_to_note (pitch: int) -> str:

	"""Convert a MIDI note number into a sharp note name, e.g. ``66`` → ``"F#4"``."""

	if not 0 <= pitch <= 127:
		raise ValueError(f"MIDI note {pitch} is outside the range 0-127")

	return f"{PC_TO_NOTE_NAME[pitch % 12]}{pitch // 12 - 1}"


def note_pitches (note: Note) -> typing.Tuple[int, ...]:

	"""Return the MIDI pitches of a palette entry (one for a note, several for a chord)."""

	if isinstance(note, (tuple, list, set, frozenset)):
		return tuple(sorted(note_to_midi(member) for member in note))

	return (note_to_midi(note),)


def freeze_note (note: typing.Any) -> typing.Any:

	"""Return chords as tuples so they compare equal however they were written."""

	if isinstance(note, (list, tuple)):
		return tuple(note)

	return note


def register_scale (name: str, intervals: typing.List[int]) -> None:

	"""
	Register a custom scale or mode for :func:`scale`.

	Parameters:
		name: Scale name.
		intervals: Ascending semitone offsets from the root, starting at 0.
	"""

	if not intervals or intervals[0] != 0:
		raise ValueError("Scale intervals must start at 0")

	if any(b <= a for a, b in zip(intervals, intervals[1:])):
		raise ValueError("Scale intervals must be strictly ascending")

	SCALE_INTERVALS[name] = list(intervals)


def _root_pitch (root: str, octave: int) -> int:

	if root not in NOTE_NAME_TO_PC and root.capitalize() not in NOTE_NAME_TO_PC:
		raise ValueError(f"Unknown root note: {root!r}. Expected e.g. 'C', 'F#', 'Bb'.")

	return note_to_midi(f"{root}{octave}")


def scale (root: str, mode: str, octave: int = 4) -> typing.List[str]:

	"""
	Return one octave of a scale as note names, starting at ``root`` in ``octave``.

	Example:
		```python
		scale("F#", "minor", 4)   # ["F#4", "G#4", "A4", "B4", "C#5", "D5", "E5"]
		```
	"""

	if mode not in SCALE_INTERVALS:
		raise ValueError(f"Unknown mode '{mode}'. Available: {sorted(SCALE_INTERVALS)}")

	base = _root_pitch(root, octave)

	return [midi_to_note(base + interval) for interval in SCALE_INTERVALS[mode]]


def multi_octave_scale (root: str, mode: str, low: int, high: int) -> typing.List[str]:

	"""Return a scale spanning octaves ``low`` (inclusive) to ``high`` (exclusive)."""

	notes: typing.List[str] = []

	for octave in range(low, high):
		notes.extend(scale(root, mode, octave))

	return notes


def chord (root: str, quality: str = "major", octave: int = 4) -> typing.Tuple[str, ...]:

	"""
	Return a chord as a tuple of note names.

	Example:
		```python
		chord("C", "major", 4)   # ("C4", "E4", "G4")
		```
	"""

	if quality not in CHORD_INTERVALS:
		raise ValueError(f"Unknown chord quality: {quality}")

	base = _root_pitch(root, octave)

	return tuple(midi_to_note(base + interval) for interval in CHORD_INTERVALS[quality])
