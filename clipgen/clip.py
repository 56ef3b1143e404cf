"""Clip assembly.

:func:`make_clip` runs the generation pipeline for one clip:

1. Work out how many pattern slots fit in the length budget.
2. Optionally cycle the input notes so there are enough to fill it.
3. Build a rhythm pattern with the configured strategy.
4. Trim the pattern to the budget, then trim the notes to the pattern's
   onsets. Both are trimmed per rhythm repetition so block boundaries hold.
5. Produce ``alter_count + 1`` independently altered copies of the trimmed
   notes, join them, and repeat the pattern to match.

:func:`write_clip` renders the result, loops the rendered clip
``times_to_play_clip`` times, and writes the MIDI file and a JSON backup.
"""

import dataclasses
import logging
import math
import pathlib
import random
import typing

import clipgen.alteration
import clipgen.config
import clipgen.note_length
import clipgen.notes
import clipgen.pattern_builders
import clipgen.render
import clipgen.sequence_utils


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Clip:

	"""
	The material handed to the renderer: notes, pattern, and slot length token.
	"""

	notes: typing.Tuple[clipgen.notes.Note, ...]
	pattern: str
	note_length: str


def make_clip (
	notes: typing.Sequence[clipgen.notes.Note],
	pattern_length: typing.Optional[float],
	config: clipgen.config.ClipConfig,
	rng: typing.Optional[random.Random] = None
) -> Clip:

	"""Assemble the notes and pattern for one clip.

	Parameters:
		notes: Melody to play (see :func:`clipgen.contour.generate_notes`).
		pattern_length: Length budget in beats (quarter notes). ``None`` skips
			trimming and note repetition.
		config: Clip options. Validated before anything is generated.
		rng: Random source for pattern building and alteration.

	Trimming keeps the same number of notes from each rhythm repetition. A
	pattern whose repetitions are not identical (the random strategy with
	``times_to_play_rhythm`` above 1) can carry a different number of onsets in
	each repetition, so it may end with up to ``times_to_play_rhythm - 1`` more
	onsets than there are notes. The renderer cycles notes across spare onsets,
	so later alteration passes drift against their copies of the pattern.

	Returns:
		The assembled :class:`Clip`.

	Raises:
		ConfigurationError: If the config is invalid or the pattern strategy
			cannot honour it.
	"""

	config.validate()
	rng = rng or random.Random()

	notes = [clipgen.notes.freeze_note(note) for note in notes]
	repeat_count = config.times_to_play_rhythm

	if pattern_length is not None:

		slot_count = clipgen.note_length.slot_count(pattern_length, config.note_length)

		if config.repeat_notes:
			# Round up to whole rhythm blocks so block-based patterns can split the notes.
			target = math.ceil(slot_count / repeat_count) * repeat_count
			notes = clipgen.sequence_utils.repeat_to_length(notes, max(target, len(notes)))

	elif config.repeat_notes:
		logger.debug("repeat_notes ignored: no pattern length to fill")

	pattern = clipgen.pattern_builders.build_pattern(
		config.pattern_type,
		len(notes),
		repeat_count = repeat_count,
		matrix = config.transition_matrix,
		manual = config.manual_pattern,
		max_hold = config.max_hold,
		max_rest = config.max_rest,
		rng = rng
	)

	if pattern_length is not None:
		pattern = clipgen.sequence_utils.trim_pattern(pattern, slot_count, repeat_count)
		notes = clipgen.sequence_utils.trim_notes(notes, pattern, repeat_count)

	passes = config.alter_count + 1
	extended: typing.List[clipgen.notes.Note] = []

	for _ in range(passes):
		extended.extend(clipgen.alteration.alter_notes(notes, config.alter_scale, config.alter_note_count, rng))

	pattern = pattern * passes

	logger.info(f"Assembled clip: {len(extended)} notes, {len(pattern)} slots of {config.note_length}")

	return Clip(notes=tuple(extended), pattern=pattern, note_length=config.note_length)


def write_clip (clip: Clip, config: clipgen.config.ClipConfig) -> pathlib.Path:

	"""
	Render a clip to MIDI, looping it ``times_to_play_clip`` times, and save a JSON backup.

	Returns:
		Path of the MIDI file.
	"""

	events = clipgen.render.clip_events(clip.notes, clip.pattern, clip.note_length)
	events = clipgen.render.repeat_events(events, config.times_to_play_clip)

	midi_path = pathlib.Path(config.output_dir) / config.filename
	backup_path = pathlib.Path(config.backup_dir) / (midi_path.stem + ".json")

	clipgen.render.write_backup(backup_path, clip.notes, clip.pattern, clip.note_length)

	return clipgen.render.write_midi(events, midi_path, bpm=config.bpm)


def render_clip (
	notes: typing.Sequence[clipgen.notes.Note],
	pattern_length: typing.Optional[float],
	config: clipgen.config.ClipConfig,
	rng: typing.Optional[random.Random] = None
) -> Clip:

	"""Assemble a clip and write it out. Returns the assembled clip."""

	clip = make_clip(notes, pattern_length, config, rng)
	write_clip(clip, config)

	return clip


def load_clip (path: typing.Union[str, pathlib.Path]) -> Clip:

	"""Reload a clip from a JSON backup."""

	notes, pattern, note_length = clipgen.render.load_backup(path)

	return Clip(notes=tuple(notes), pattern=pattern, note_length=note_length)


def preset_clip (pattern_length: typing.Optional[float], **defaults: typing.Any) -> typing.Callable[..., Clip]:

	"""Pre-bind clip options shared by several clips.

	Returns a function ``(notes, rng=None, **overrides)`` that renders a clip
	with ``defaults`` updated by ``overrides``. The defaults are never changed
	by a call.

	Example:
		```python
		drums = preset_clip(4, repeat_notes=True, note_length="1/8", pattern_type="markov")
		drums(["G4"], filename="bass.mid", note_length="1/4")
		drums(["B4"], filename="snare.mid")
		```
	"""

	# Fail fast on bad defaults.
	clipgen.config.ClipConfig.from_dict(defaults)

	def render (
		notes: typing.Sequence[clipgen.notes.Note],
		rng: typing.Optional[random.Random] = None,
		**overrides: typing.Any
	) -> Clip:

		config = clipgen.config.ClipConfig.from_dict({**defaults, **overrides})
		return render_clip(notes, pattern_length, config, rng)

	return render
