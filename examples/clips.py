import logging
import random

import clipgen
import clipgen.notes

logging.basicConfig(level=logging.INFO)

rng = random.Random(7)

# Notes can mix single notes and chords.
mixed = ["G4", "B5", "E6", "F#6", ("G4", "B5"), ("E6", "F#6"), ("B5", "E6")]

clipgen.render_clip(mixed, 8, clipgen.ClipConfig(
	note_length="1/8",
	pattern_type="swing",
	filename="mixed.mid",
), rng=rng)

# Rapidly growing steps give an unpredictable line; leaps are held to 2 scale steps.
scale = clipgen.multi_octave_scale("F#", "minor", 4, 6)
notes = clipgen.generate_notes(clipgen.SquaredDoublingStep(0.14), scale, 8, max_distance=2, rng=rng)

# Rerunning with another seed changes the Markov rhythm and the altered notes.
clipgen.render_clip(notes, 8, clipgen.ClipConfig(
	note_length="1/16",
	pattern_type="markov",
	alter_count=2,
	alter_note_count=2,
	alter_scale=scale,
	filename="music.mid",
), rng=rng)

# Small linear steps closely follow the scale.
scale = clipgen.multi_octave_scale("F#", "minor", 2, 6)
notes = clipgen.generate_notes(clipgen.LinearStep(0, 0.05), scale, 8, rng=rng)

clipgen.render_clip(notes, 8, clipgen.ClipConfig(
	note_length="1/16",
	repeat_notes=True,
	filename="music2.mid",
), rng=rng)

# Drum parts: one preset, one single-note palette per voice.
drums = clipgen.preset_clip(4, times_to_play_clip=4, repeat_notes=True, note_length="1/8", pattern_type="markov")

drums(["G4"], rng=rng, filename="bass.mid", note_length="1/4")
drums(["B4"], rng=rng, filename="snare.mid")
drums(["F#4"], rng=rng, filename="hihat.mid", note_length="1/16")
drums([clipgen.notes.chord("C", "major", 4)], rng=rng, filename="stab.mid")
