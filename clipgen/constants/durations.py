"""Beat-based durations.

All values are in **beats**, where 1.0 = one quarter note. A note-length token
such as ``"1/16"`` is a fraction of a whole note, so one pattern slot lasts
``fraction * BEATS_PER_WHOLE_NOTE`` beats.
"""

BEATS_PER_WHOLE_NOTE = 4
