"""Millisecond timing constants for the generators.

All values are in **milliseconds**.  Ranges are inclusive ``(low, high)``
pairs passed straight to :meth:`seedtone.rng.ParkMillerRandom.draw`; tuples of
choices are picked with a single index draw.

The device plays at 120 BPM, so a quarter note is 500 ms::

    import seedtone.constants.timing as timing

    timing.EIGHTH_NOTE_MS        # 250 - one hybrid-beat slot
"""

QUARTER_NOTE_MS = 500
EIGHTH_NOTE_MS = QUARTER_NOTE_MS // 2

# Single random sound
SOUND_DURATION_RANGE_MS = (100, 400)

# Random rhythm
RHYTHM_NOTE_COUNT = 4
RHYTHM_PAUSES_MS = (125, 200, 300, 400)

# Full song
SONG_DURATION_RANGE_MS = (12000, 120000)
SONG_STEP_DURATIONS_MS = (125, 250, 375, 500, 750)

# Hold time before the visualizer is cleared at the end of a song
VISUALIZER_SETTLE_MS = 1000
