import logging
import random
import sys
import typing

import clipgen.clip
import clipgen.config
import clipgen.contour
import clipgen.errors
import clipgen.notes


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


DRIVING_SEQUENCES: typing.Dict[str, typing.Callable[..., clipgen.contour.DrivingSequence]] = {
	"constant": clipgen.contour.ConstantStep,
	"linear": clipgen.contour.LinearStep,
	"squared": clipgen.contour.SquaredDoublingStep,
}


def build_driving_sequence (section: typing.Mapping[str, typing.Any]) -> clipgen.contour.DrivingSequence:

	"""
	Create a driving sequence from a ``contour`` config section, e.g. ``{type: linear, increment: 0.05}``.
	"""

	options = dict(section)
	kind = options.pop("type", "linear")

	if kind not in DRIVING_SEQUENCES:
		raise clipgen.errors.ConfigurationError(f"Unknown contour type {kind!r}. Available: {sorted(DRIVING_SEQUENCES)}")

	return DRIVING_SEQUENCES[kind](**options)


def run (config: typing.Mapping[str, typing.Any]) -> clipgen.clip.Clip:

	"""
	Generate and write one clip from a loaded config document.
	"""

	palette_section = config.get("palette") or {}
	palette = clipgen.notes.multi_octave_scale(
		palette_section.get("root", "C"),
		palette_section.get("mode", "major"),
		palette_section.get("low", 4),
		palette_section.get("high", 6),
	)

	clip_options = {clipgen.config.option_name(key): value for key, value in (config.get("clip") or {}).items()}
	clip_options.setdefault("alter_scale", palette)
	clip_config = clipgen.config.ClipConfig.from_dict(clip_options)

	rng = random.Random(clip_config.seed)

	notes = clipgen.contour.generate_notes(
		build_driving_sequence(config.get("contour") or {}),
		palette,
		config.get("note_count", 8),
		max_distance = config.get("max_distance"),
		rng = rng
	)

	logger.info(f"Generated notes: {notes}")

	return clipgen.clip.render_clip(notes, config.get("pattern_length", 8), clip_config, rng)


def main () -> None:

	"""
	Main entry point: ``python -m clipgen [config.yaml]``.
	"""

	config_path = sys.argv[1] if len(sys.argv) > 1 else "clip.yaml"
	config = clipgen.config.load_config(config_path)

	try:
		run(config)
	except clipgen.errors.ConfigurationError as e:
		logger.error(f"Invalid configuration: {e}")
		sys.exit(1)


if __name__ == "__main__":
	main()
