import pytest

import clipgen.notes


def test_note_to_midi () -> None:

	"""Middle C is C4 = 60; accidentals and lower case are accepted."""

	assert clipgen.notes.note_to_midi("C4") == 60
	assert clipgen.notes.note_to_midi("f#4") == 66
	assert clipgen.notes.note_to_midi("Bb3") == 58
	assert clipgen.notes.note_to_midi("C-1") == 0
	assert clipgen.notes.note_to_midi(72) == 72


def test_note_to_midi_invalid () -> None:

	"""Malformed names and out-of-range pitches raise ValueError."""

	for bad in ("H4", "C", "C#x", "G10"):
		with pytest.raises(ValueError):
			clipgen.notes.note_to_midi(bad)

	with pytest.raises(ValueError):
		clipgen.notes.note_to_midi(128)


def test_midi_to_note () -> None:

	"""MIDI numbers map back to sharp names."""

	assert clipgen.notes.midi_to_note(60) == "C4"
	assert clipgen.notes.midi_to_note(66) == "F#4"
	assert clipgen.notes.midi_to_note(0) == "C-1"


def test_scale () -> None:

	"""One octave of F# minor crosses into octave 5 at C#."""

	assert clipgen.notes.scale("F#", "minor", 4) == ["F#4", "G#4", "A4", "B4", "C#5", "D5", "E5"]


def test_multi_octave_scale () -> None:

	"""Octaves low (inclusive) to high (exclusive) are concatenated in ascending order."""

	palette = clipgen.notes.multi_octave_scale("f#", "minor", 4, 6)
	pitches = [clipgen.notes.note_to_midi(note) for note in palette]

	assert len(palette) == 14
	assert palette[7] == "F#5"
	assert pitches == sorted(pitches)


def test_bebop_harmonic_minor_registered () -> None:

	"""The eight-note bebop harmonic minor mode is available."""

	assert len(clipgen.notes.scale("C", "bebop_harmonic_minor", 4)) == 8


def test_unknown_mode_raises () -> None:

	"""Modes must be registered."""

	with pytest.raises(ValueError):
		clipgen.notes.scale("C", "nonexistent", 4)


def test_register_scale (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Custom scales become available to scale()."""

	# Removed again on teardown.
	monkeypatch.setitem(clipgen.notes.SCALE_INTERVALS, "test_fourths", [])
	clipgen.notes.register_scale("test_fourths", [0, 5, 10])

	assert clipgen.notes.scale("C", "test_fourths", 4) == ["C4", "F4", "A#4"]

	with pytest.raises(ValueError):
		clipgen.notes.register_scale("bad", [2, 4])

	with pytest.raises(ValueError):
		clipgen.notes.register_scale("bad", [0, 4, 4])


def test_chord () -> None:

	"""Chords are tuples of note names."""

	assert clipgen.notes.chord("C", "major", 4) == ("C4", "E4", "G4")
	assert clipgen.notes.chord("A", "minor_7th", 3) == ("A3", "C4", "E4", "G4")

	with pytest.raises(ValueError):
		clipgen.notes.chord("C", "mystery", 4)

	with pytest.raises(ValueError):
		clipgen.notes.chord("X", "major", 4)


def test_note_pitches () -> None:

	"""Single notes give one pitch, chords give sorted pitches."""

	assert clipgen.notes.note_pitches("C4") == (60,)
	assert clipgen.notes.note_pitches(("G4", "C4", "E4")) == (60, 64, 67)
	assert clipgen.notes.note_pitches(["A4", 48]) == (48, 69)


def test_freeze_note () -> None:

	"""Lists become tuples; other notes pass through."""

	assert clipgen.notes.freeze_note(["C4", "E4"]) == ("C4", "E4")
	assert clipgen.notes.freeze_note("C4") == "C4"
