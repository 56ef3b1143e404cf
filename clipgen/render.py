"""Turn a (notes, pattern) pair into MIDI.

Each pattern character is one slot of the clip's note length: ``x`` starts the
next note, ``_`` stretches whatever came before it (note or rest) by one slot,
and ``-`` rests for one slot. Notes are used in order and wrap around when the
pattern has more onsets than there are notes.

Rendering is split in two so callers can repeat the *rendered* clip:
:func:`clip_events` produces a flat event list, :func:`repeat_events` loops it,
and :func:`write_midi` saves any event list as a Standard MIDI File.
"""

import dataclasses
import fractions
import json
import logging
import pathlib
import typing

import mido

import clipgen.constants
import clipgen.constants.velocity
import clipgen.note_length
import clipgen.notes


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ClipEvent:

	"""
	One rendered step. An empty ``pitches`` tuple is a rest.
	"""

	pitches: typing.Tuple[int, ...]
	duration: fractions.Fraction	# beats

	@property
	def is_rest (self) -> bool:

		return not self.pitches


def clip_events (notes: typing.Sequence[clipgen.notes.Note], pattern: str, note_length: str) -> typing.List[ClipEvent]:

	"""
	Render a pattern against notes into a list of timed events.

	Raises:
		ValueError: If the pattern contains an unknown character, or has onsets
			but no notes are given.
	"""

	step = clipgen.note_length.slot_beats(note_length)
	events: typing.List[ClipEvent] = []
	note_index = 0

	for position, char in enumerate(pattern):

		if char == clipgen.constants.NOTE_ONSET:

			if not notes:
				raise ValueError("Pattern has note onsets but no notes were given")

			pitches = clipgen.notes.note_pitches(notes[note_index % len(notes)])
			events.append(ClipEvent(pitches=pitches, duration=step))
			note_index += 1

		elif char == clipgen.constants.HOLD_BEAT:

			if events:
				events[-1].duration += step
			else:
				events.append(ClipEvent(pitches=(), duration=step))

		elif char == clipgen.constants.REST_BEAT:

			if events and events[-1].is_rest:
				events[-1].duration += step
			else:
				events.append(ClipEvent(pitches=(), duration=step))

		else:
			raise ValueError(f"Unknown pattern character {char!r} at position {position}")

	return events


def repeat_events (events: typing.List[ClipEvent], times: int) -> typing.List[ClipEvent]:

	"""Loop a rendered clip ``times`` times."""

	if times < 1:
		raise ValueError(f"times must be at least 1, got {times}")

	return [dataclasses.replace(event) for _ in range(times) for event in events]


def write_midi (events: typing.List[ClipEvent], path: typing.Union[str, pathlib.Path], bpm: float = 120) -> pathlib.Path:

	"""
	Save events to a single-track Standard MIDI File at ``TICKS_PER_BEAT`` resolution.
	"""

	path = pathlib.Path(path)
	ticks_per_beat = clipgen.constants.TICKS_PER_BEAT

	mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(bpm), time=0))

	# Ticks of silence waiting to be attached to the next message.
	pending = 0

	for event in events:

		ticks = int(event.duration * ticks_per_beat)

		if event.is_rest:
			pending += ticks
			continue

		if len(event.pitches) > 1:
			velocity = clipgen.constants.velocity.DEFAULT_CHORD_VELOCITY
		else:
			velocity = clipgen.constants.velocity.DEFAULT_VELOCITY

		for i, pitch in enumerate(event.pitches):
			track.append(mido.Message("note_on", note=pitch, velocity=velocity, time=pending if i == 0 else 0))

		for i, pitch in enumerate(event.pitches):
			track.append(mido.Message("note_off", note=pitch, velocity=0, time=ticks if i == 0 else 0))

		pending = 0

	track.append(mido.MetaMessage("end_of_track", time=pending))

	path.parent.mkdir(parents=True, exist_ok=True)

	try:
		mid.save(str(path))
	except OSError:
		logger.exception(f"Failed to save MIDI file {path}")
		raise

	logger.info(f"Saved {path} ({len(events)} events)")

	return path


def write_backup (
	path: typing.Union[str, pathlib.Path],
	notes: typing.Sequence[clipgen.notes.Note],
	pattern: str,
	note_length: str
) -> pathlib.Path:

	"""
	Save the material a clip was rendered from as JSON so it can be reloaded and tweaked.
	"""

	path = pathlib.Path(path)
	path.parent.mkdir(parents=True, exist_ok=True)

	payload = {
		"notes": [list(note) if isinstance(note, tuple) else note for note in notes],
		"pattern": pattern,
		"noteLength": note_length,
	}

	path.write_text(json.dumps(payload), encoding="utf-8")
	logger.info(f"Saved backup {path}")

	return path


def load_backup (path: typing.Union[str, pathlib.Path]) -> typing.Tuple[typing.List[clipgen.notes.Note], str, str]:

	"""
	Read a backup written by :func:`write_backup` as ``(notes, pattern, note_length)``.
	"""

	payload = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))

	notes = [clipgen.notes.freeze_note(note) for note in payload["notes"]]

	return notes, payload["pattern"], payload["noteLength"]
