"""Constants for clipgen.

- ``clipgen.constants`` - Pattern markers and the default rest-count transition matrix
- ``clipgen.constants.durations`` - Beats per whole note, for converting note-length tokens
- ``clipgen.constants.velocity`` - MIDI velocity constants
"""

import typing


# Pattern alphabet. One character is one slot of the clip's note length.
NOTE_ONSET = "x"
HOLD_BEAT = "_"
REST_BEAT = "-"

PATTERN_MARKERS = (NOTE_ONSET, HOLD_BEAT, REST_BEAT)

# Row and column indexes are rest counts: row 1, column 2 is the probability
# that a step with 1 rest is followed by a step with 2 rests.
DEFAULT_TRANSITION_MATRIX: typing.List[typing.List[float]] = [
	[0.70, 0.20, 0.07, 0.03],
	[0.30, 0.50, 0.15, 0.05],
	[0.20, 0.40, 0.20, 0.20],
	[0.10, 0.20, 0.50, 0.20],
]

# Rendered MIDI resolution.
TICKS_PER_BEAT = 480
