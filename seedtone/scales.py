"""Scale tables and the scale-step to frequency mapping.

Pitches are expressed as integer **scale steps**: a semitone offset taken from
one of the two seven-degree scales, plus twelve semitones per octave.  A step
becomes a frequency with ``base * 2 ** (step / 12)``, so every note the
generators produce sits on the equal-tempered grid above ``base``.
"""

import math
import typing

import seedtone.rng


SCALE_DEFINITIONS: typing.Dict[str, typing.Tuple[int, ...]] = {
	"major": (0, 2, 4, 5, 7, 9, 11),
	"minor": (0, 2, 3, 5, 7, 8, 10),
}

MAJOR_SCALE = SCALE_DEFINITIONS["major"]
MINOR_SCALE = SCALE_DEFINITIONS["minor"]

SEMITONES_PER_OCTAVE = 12

A4_FREQUENCY_HZ = 440.0
A4_MIDI_NOTE = 69


def scale_intervals (is_major: bool) -> typing.Tuple[int, ...]:

	"""Return the semitone offsets of the major or minor scale."""

	return MAJOR_SCALE if is_major else MINOR_SCALE


def step_to_frequency (base_hz: float, step: int) -> float:

	"""Convert a scale step (semitones above ``base_hz``) to Hz."""

	return base_hz * math.pow(2, step / SEMITONES_PER_OCTAVE)


def draw_scale_step (rng: seedtone.rng.ParkMillerRandom, scale: typing.Sequence[int], max_octaves: int) -> int:

	"""
	Draw one scale step: octave offset first, then the scale degree.

	Both draws are always made, in that order, so callers can rely on each
	step consuming exactly two values from ``rng``.

	Parameters:
		rng: The shared generator.
		scale: Semitone offsets of the active scale (7 entries).
		max_octaves: Highest octave offset (inclusive).

	Returns:
		``scale[degree] + 12 * octave``.
	"""

	octave = rng.draw(0, max_octaves)
	degree = rng.draw(0, len(scale) - 1)

	return scale[degree] + SEMITONES_PER_OCTAVE * octave


def next_scale_frequency (rng: seedtone.rng.ParkMillerRandom, is_major: bool, base_hz: float, max_octaves: int) -> float:

	"""Draw a scale step in the active key and return its frequency."""

	step = draw_scale_step(rng, scale_intervals(is_major), max_octaves)

	return step_to_frequency(base_hz, step)


def frequency_to_step (base_hz: float, frequency_hz: float) -> int:

	"""
	Recover the nearest integer scale step for a frequency.

	Inverse of :func:`step_to_frequency` for frequencies that came from it;
	used to check logged notes against a scale.
	"""

	if frequency_hz <= 0 or base_hz <= 0:
		raise ValueError(f"Frequencies must be positive (got {base_hz}, {frequency_hz})")

	return round(SEMITONES_PER_OCTAVE * math.log2(frequency_hz / base_hz))


def frequency_to_midi (frequency_hz: float) -> typing.Tuple[int, float]:

	"""
	Split a frequency into the nearest MIDI note and a remainder in semitones.

	Example:
		```python
		frequency_to_midi(440.0)   # → (69, 0.0)
		frequency_to_midi(262.0)   # → (60, ~0.03)
		```
	"""

	if frequency_hz <= 0:
		raise ValueError(f"Frequency must be positive (got {frequency_hz})")

	exact = A4_MIDI_NOTE + SEMITONES_PER_OCTAVE * math.log2(frequency_hz / A4_FREQUENCY_HZ)
	note = max(0, min(127, round(exact)))

	return note, exact - note
