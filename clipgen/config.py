"""Clip settings and YAML loading.

:class:`ClipConfig` holds every option that shapes one clip. It is immutable;
use :func:`dataclasses.replace` (or :meth:`ClipConfig.from_dict` with extra
keys) to derive variations. Keys may be given in snake_case or in the
camelCase spelling used by older clip scripts (``timesToPlayClip``).
"""

import dataclasses
import logging
import os
import re
import typing

import yaml

import clipgen.constants
import clipgen.errors
import clipgen.markov_chain
import clipgen.note_length
import clipgen.notes
import clipgen.pattern_builders


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ClipConfig:

	"""Options for assembling and rendering one clip.

	Attributes:
		times_to_play_clip: How many times the rendered clip is played.
		times_to_play_rhythm: How many times the rhythm block repeats. Patterns
			and notes are trimmed in this many partitions, and the Markov
			pattern samples one block and repeats it this many times.
		alter_count: Extra alteration passes beyond the first.
		alter_note_count: Notes replaced in each pass.
		alter_scale: Palette that alteration replacements are chosen from.
		note_length: Length of one pattern slot, e.g. ``"1/16"``.
		filename: Name of the MIDI file to write.
		repeat_notes: Cycle the input notes to fill the pattern length.
		pattern_type: Which pattern builder to use.
		manual_pattern: Literal pattern for ``PatternType.MANUAL``.
		transition_matrix: Rest-count matrix for ``PatternType.MARKOV``.
		max_hold: Upper bound (exclusive) on holds per note for ``PatternType.RANDOM``.
		max_rest: Upper bound (exclusive) on rests per note for ``PatternType.RANDOM``.
		output_dir: Directory the MIDI file is written to.
		backup_dir: Directory the JSON backup is written to.
		bpm: Tempo written into the MIDI file.
		seed: Seed for the random source created by the command entry point.
	"""

	times_to_play_clip: int = 1
	times_to_play_rhythm: int = 1
	alter_count: int = 0
	alter_note_count: int = 0
	alter_scale: typing.Tuple[typing.Any, ...] = ()
	note_length: str = "1/4"
	filename: str = "music.mid"
	repeat_notes: bool = False
	pattern_type: clipgen.pattern_builders.PatternType = clipgen.pattern_builders.PatternType.NORMAL
	manual_pattern: str = ""
	transition_matrix: typing.Tuple[typing.Tuple[float, ...], ...] = tuple(
		tuple(row) for row in clipgen.constants.DEFAULT_TRANSITION_MATRIX
	)
	max_hold: int = 2
	max_rest: int = 1
	output_dir: str = "midi"
	backup_dir: str = "json_backups"
	bpm: float = 120
	seed: typing.Optional[int] = None

	def __post_init__ (self) -> None:

		# Normalise containers so the record stays hashable and immutable.
		object.__setattr__(self, "alter_scale", tuple(clipgen.notes.freeze_note(note) for note in self.alter_scale))
		object.__setattr__(self, "transition_matrix", tuple(tuple(row) for row in self.transition_matrix))
		object.__setattr__(self, "pattern_type", clipgen.pattern_builders.PatternType.parse(self.pattern_type))


	@classmethod
	def from_dict (cls, data: typing.Mapping[str, typing.Any]) -> "ClipConfig":

		"""
		Build a config from a mapping with snake_case or camelCase keys.

		Raises:
			ConfigurationError: For keys that are not clip options.
		"""

		known = {field.name for field in dataclasses.fields(cls)}
		kwargs: typing.Dict[str, typing.Any] = {}

		for key, value in data.items():

			name = option_name(key)

			if name not in known:
				raise clipgen.errors.ConfigurationError(f"Unknown clip option: {key!r}")

			kwargs[name] = value

		return cls(**kwargs)


	def validate (self) -> None:

		"""
		Check every option, raising ``ConfigurationError`` for the first problem found.
		"""

		for name in ("times_to_play_clip", "times_to_play_rhythm"):
			if getattr(self, name) < 1:
				raise clipgen.errors.ConfigurationError(f"{name} must be at least 1, got {getattr(self, name)}")

		for name in ("alter_count", "alter_note_count", "max_hold", "max_rest"):
			if getattr(self, name) < 0:
				raise clipgen.errors.ConfigurationError(f"{name} cannot be negative, got {getattr(self, name)}")

		if self.alter_note_count > 0 and not self.alter_scale:
			raise clipgen.errors.ConfigurationError("alter_scale is required when alter_note_count is above 0")

		clipgen.note_length.parse_note_length(self.note_length)

		if self.pattern_type is clipgen.pattern_builders.PatternType.MANUAL and not self.manual_pattern:
			raise clipgen.errors.ConfigurationError("manual_pattern is required for the manual pattern type")

		unknown = sorted(set(self.manual_pattern) - set(clipgen.constants.PATTERN_MARKERS))

		if unknown:
			raise clipgen.errors.ConfigurationError(
				f"manual_pattern may only contain {''.join(clipgen.constants.PATTERN_MARKERS)!r}, found {''.join(unknown)!r}"
			)

		if self.pattern_type is clipgen.pattern_builders.PatternType.MARKOV:
			clipgen.markov_chain.validate_matrix(self.transition_matrix)

		if self.bpm <= 0:
			raise clipgen.errors.ConfigurationError(f"bpm must be positive, got {self.bpm}")

		if not self.filename:
			raise clipgen.errors.ConfigurationError("filename cannot be empty")


def option_name (key: str) -> str:

	"""Return the snake_case field name for a snake_case or camelCase key."""

	return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def load_config (config_path: str = "clip.yaml") -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		return yaml.safe_load(f) or {}
