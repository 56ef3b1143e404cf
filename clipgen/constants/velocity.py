"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127).
"""

DEFAULT_VELOCITY = 100          # Single notes
DEFAULT_CHORD_VELOCITY = 90     # Chords (softer)
