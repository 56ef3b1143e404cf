"""
clipgen - procedural melody and rhythm clips rendered to MIDI.

A clip is a melody plus a rhythm pattern. Melodies are read off a sine
contour: an abstract *driving sequence* moves along ``sin(pi * x) + 1`` and each
point selects the nearest note in a palette, with oversized leaps pulled back
consistently. Rhythms come from one of five pattern builders, including a
weighted Markov chain over rest counts. The two are trimmed to a beat budget,
varied by direction-preserving note alteration, and written as a Standard
MIDI File with a JSON backup of the material.

Minimal example:

    ```python
    import random

    import clipgen

    scale = clipgen.multi_octave_scale("F#", "minor", 4, 6)
    notes = clipgen.generate_notes(clipgen.LinearStep(0, 0.05), scale, 8)

    config = clipgen.ClipConfig(
        note_length="1/16",
        pattern_type="markov",
        alter_count=2,
        alter_note_count=2,
        alter_scale=scale,
    )

    clipgen.render_clip(notes, 8, config, rng=random.Random(42))
    ```

Package-level exports: ``ClipConfig``, ``Clip``, ``ConfigurationError``,
``PatternType``, ``generate_notes``, ``make_clip``, ``render_clip``,
``preset_clip``, ``multi_octave_scale``, ``ConstantStep``, ``LinearStep``,
``SquaredDoublingStep``.
"""

import clipgen.clip
import clipgen.config
import clipgen.contour
import clipgen.errors
import clipgen.notes
import clipgen.pattern_builders


Clip = clipgen.clip.Clip
ClipConfig = clipgen.config.ClipConfig
ConfigurationError = clipgen.errors.ConfigurationError
PatternType = clipgen.pattern_builders.PatternType

generate_notes = clipgen.contour.generate_notes
make_clip = clipgen.clip.make_clip
render_clip = clipgen.clip.render_clip
preset_clip = clipgen.clip.preset_clip
multi_octave_scale = clipgen.notes.multi_octave_scale

ConstantStep = clipgen.contour.ConstantStep
LinearStep = clipgen.contour.LinearStep
SquaredDoublingStep = clipgen.contour.SquaredDoublingStep
