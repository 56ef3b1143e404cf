"""Note-length tokens.

A token names the length of one pattern slot as a fraction of a whole note,
written ``numerator/denominator`` (``"1/4"``, ``"1/16"``, ``"3/8"``). Tokens are
parsed with a fixed grammar and never evaluated.
"""

import fractions
import re
import typing

import clipgen.constants.durations
import clipgen.errors


_TOKEN = re.compile(r"\s*(\d+)\s*/\s*(\d+)\s*")


def parse_note_length (token: str) -> fractions.Fraction:

	"""
	Parse a ``numerator/denominator`` token into a fraction of a whole note.

	Raises:
		ConfigurationError: If the token does not match the grammar or either
			part is zero.

	Example:
		```python
		parse_note_length("1/16")   # Fraction(1, 16)
		```
	"""

	if not isinstance(token, str):
		raise clipgen.errors.ConfigurationError(f"Note length must be a string like '1/4', got {token!r}")

	match = _TOKEN.fullmatch(token)

	if match is None:
		raise clipgen.errors.ConfigurationError(f"Invalid note length {token!r}. Expected e.g. '1/4' or '1/16'.")

	numerator, denominator = (int(part) for part in match.groups())

	if numerator == 0 or denominator == 0:
		raise clipgen.errors.ConfigurationError(f"Note length {token!r} must be a positive fraction")

	return fractions.Fraction(numerator, denominator)


def slot_beats (token: str) -> fractions.Fraction:

	"""Return the length of one pattern slot in beats (quarter notes)."""

	return parse_note_length(token) * clipgen.constants.durations.BEATS_PER_WHOLE_NOTE


def slot_count (pattern_length: typing.Union[int, float, fractions.Fraction], token: str) -> int:

	"""
	Return how many slots fit in ``pattern_length`` beats, rounded down.
	"""

	return int(fractions.Fraction(pattern_length) / slot_beats(token))
