"""Reference pitches and display ranges, in Hz.

``BASE_FREQUENCY_HZ`` is scale step 0 for every generated note
(A3 = 220 Hz).  ``REFERENCE_TONE_HZ`` is the fixed middle C the hybrid beat
plays on each onset.
"""

BASE_FREQUENCY_HZ = 220.0
REFERENCE_TONE_HZ = 262

# Octave spread of a random sound's start/end pitches
SOUND_MAX_OCTAVES = 2

# Octave spread of each riff step
RIFF_MAX_OCTAVES = 4

# Visualizer frequency -> magnitude mapping
VISUALIZER_MIN_HZ = 110.0
VISUALIZER_MAX_HZ = 2000.0
VISUALIZER_MIN_MAGNITUDE = 5.0
VISUALIZER_MAX_MAGNITUDE = 60.0
