import pytest

import seedtone.constants.frequencies
import seedtone.constants.timing
import seedtone.events
import seedtone.patterns
import seedtone.rng
import seedtone.sinks
import seedtone.state


Slot = seedtone.patterns.Slot


def test_templates_have_eight_slots () -> None:

	"""All three built-in templates are eight slots long."""

	assert len(seedtone.patterns.BEAT_TEMPLATES) == 3

	for template in seedtone.patterns.BEAT_TEMPLATES:
		assert len(template) == 8


def test_parse_and_format_template () -> None:

	"""Templates read and write as x/- strings."""

	slots = seedtone.patterns.parse_template("x--xx--x")

	assert slots[0] is Slot.ONSET
	assert slots[1] is Slot.REST
	assert seedtone.patterns.format_beat(slots) == "x--xx--x"


def test_parse_template_wrong_length () -> None:

	"""Templates must have exactly eight slots."""

	with pytest.raises(ValueError):
		seedtone.patterns.parse_template("x-x-")


def test_mutate_beat_seed_1 () -> None:

	"""
	Seed 1 picks template 1 (xx-x-xx-), re-rolls slot 3 to an onset and
	slot 6 to a rest, using eleven draws in total.
	"""

	rng = seedtone.rng.ParkMillerRandom(1)

	slots = seedtone.patterns.mutate_beat(rng)

	assert seedtone.patterns.format_beat(slots) == "xx-x-x--"
	assert rng.seed == 823564440


def test_mutate_beat_always_eight_slots () -> None:

	"""Mutation never changes the beat length."""

	rng = seedtone.rng.ParkMillerRandom(31337)

	for _ in range(200):
		slots = seedtone.patterns.mutate_beat(rng)
		assert len(slots) == 8
		assert all(slot in (Slot.ONSET, Slot.REST) for slot in slots)


def test_hybrid_beat_plays_reference_tone () -> None:

	"""Onsets play middle C for an eighth note; rests pause for the same time."""

	state = seedtone.state.EngineState(instrument=seedtone.events.Waveform.SQUARE)
	state.rng.reseed(1)
	sink = seedtone.sinks.RecordingSink()

	slots = seedtone.patterns.hybrid_beat(state, sink)

	assert seedtone.patterns.format_beat(slots) == "xx-x-x--"
	assert len(sink.timeline) == 8
	assert sink.elapsed_ms == 8 * seedtone.constants.timing.EIGHTH_NOTE_MS

	for slot, (kind, item) in zip(slots, sink.timeline):
		if slot is Slot.ONSET:
			assert kind == "note"
			assert item.frequency_start == seedtone.constants.frequencies.REFERENCE_TONE_HZ
			assert item.frequency_end == seedtone.constants.frequencies.REFERENCE_TONE_HZ
			assert item.duration_ms == seedtone.constants.timing.EIGHTH_NOTE_MS
			assert item.waveform is seedtone.events.Waveform.SQUARE
		else:
			assert (kind, item) == ("rest", seedtone.constants.timing.EIGHTH_NOTE_MS)


def test_hybrid_beat_pings_visualizer_per_onset () -> None:

	"""The visualizer sees the reference frequency once per onset."""

	state = seedtone.state.EngineState()
	state.rng.reseed(1)
	visualizer = seedtone.sinks.RecordingVisualizer()

	slots = seedtone.patterns.hybrid_beat(state, seedtone.sinks.RecordingSink(), visualizer)

	onsets = sum(1 for slot in slots if slot is Slot.ONSET)
	assert visualizer.frequencies == [seedtone.constants.frequencies.REFERENCE_TONE_HZ] * onsets


def test_hybrid_beat_does_not_touch_note_log () -> None:

	"""Beat onsets are not logged."""

	state = seedtone.state.EngineState()

	seedtone.patterns.hybrid_beat(state, seedtone.sinks.RecordingSink())

	assert state.note_log == []
