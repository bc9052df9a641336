"""Single-note and short-phrase generators.

Both generators log the start frequency of every note they play into
``state.note_log`` and block on the output sink until each note or pause has
finished.
"""

import typing

import seedtone.constants.frequencies
import seedtone.constants.timing
import seedtone.events
import seedtone.scales
import seedtone.sinks
import seedtone.state


def random_sound (
	state: seedtone.state.EngineState,
	output: seedtone.sinks.OutputSink,
	visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
) -> seedtone.events.NoteEvent:

	"""
	Play one gliding note between two random pitches of the active scale.

	Draws, in order: the start pitch (octave, degree), the end pitch (octave,
	degree) and the duration in ``SOUND_DURATION_RANGE_MS``.

	Returns:
		The event that was played.
	"""

	base = seedtone.constants.frequencies.BASE_FREQUENCY_HZ
	max_octaves = seedtone.constants.frequencies.SOUND_MAX_OCTAVES

	frequency_start = seedtone.scales.next_scale_frequency(state.rng, state.is_major, base, max_octaves)
	frequency_end = seedtone.scales.next_scale_frequency(state.rng, state.is_major, base, max_octaves)
	duration_ms = state.rng.draw(*seedtone.constants.timing.SOUND_DURATION_RANGE_MS)

	event = seedtone.events.NoteEvent(
		frequency_start = frequency_start,
		frequency_end = frequency_end,
		duration_ms = duration_ms,
		waveform = state.instrument
	)

	state.note_log.append(frequency_start)

	if visualizer is not None:
		visualizer.on_frequency(frequency_start)

	output.play(event)

	return event


def random_rhythm (
	state: seedtone.state.EngineState,
	output: seedtone.sinks.OutputSink,
	visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
) -> None:

	"""Play four random sounds, each followed by a pause picked from ``RHYTHM_PAUSES_MS``."""

	for _ in range(seedtone.constants.timing.RHYTHM_NOTE_COUNT):
		random_sound(state, output, visualizer)
		output.rest(state.rng.choice(seedtone.constants.timing.RHYTHM_PAUSES_MS))
