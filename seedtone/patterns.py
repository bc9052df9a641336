"""Eight-slot beat templates and the hybrid beat.

A hybrid beat starts from one of three fixed templates and gives every slot a
40% chance of being re-rolled as a fresh onset/rest coin flip.  Onsets play a
middle C for an eighth note; rests are silent for the same length, so a beat
always lasts eight eighth notes.

Draw order is fixed: the template index first, then for each slot in order a
``draw(0, 99)`` mutation roll, followed immediately by a ``draw(0, 1)`` coin
flip when the roll mutates that slot.
"""

import enum
import logging
import typing

import seedtone.constants.frequencies
import seedtone.constants.timing
import seedtone.events
import seedtone.rng
import seedtone.sinks
import seedtone.state


logger = logging.getLogger(__name__)


class Slot (enum.Enum):

	"""One step of a beat."""

	ONSET = "x"
	REST = "-"


BEAT_LENGTH = 8
MUTATION_PERCENT = 40


def parse_template (text: str) -> typing.Tuple[Slot, ...]:

	"""Build a template from ``x`` (onset) and ``-`` (rest) characters."""

	if len(text) != BEAT_LENGTH:
		raise ValueError(f"Beat templates have {BEAT_LENGTH} slots, got {len(text)}: {text!r}")

	return tuple(Slot(char) for char in text)


BEAT_TEMPLATES: typing.Tuple[typing.Tuple[Slot, ...], ...] = (
	parse_template("x-x-x-x-"),
	parse_template("xx-x-xx-"),
	parse_template("x--xx--x"),
)


def format_beat (slots: typing.Sequence[Slot]) -> str:

	"""Render slots back to their ``x``/``-`` string form."""

	return "".join(slot.value for slot in slots)


def mutate_beat (rng: seedtone.rng.ParkMillerRandom) -> typing.List[Slot]:

	"""Choose a template and apply the per-slot mutation rule."""

	template = rng.choice(BEAT_TEMPLATES)
	slots: typing.List[Slot] = []

	for slot in template:

		if rng.draw(0, 99) < MUTATION_PERCENT:
			slots.append(Slot.ONSET if rng.draw(0, 1) == 0 else Slot.REST)
		else:
			slots.append(slot)

	return slots


def hybrid_beat (
	state: seedtone.state.EngineState,
	output: seedtone.sinks.OutputSink,
	visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
) -> typing.List[Slot]:

	"""
	Build a hybrid beat and play it slot by slot.

	Parameters:
		state: Engine state supplying the random source and the onset waveform.
		output: Sink for the onset tones and rests.
		visualizer: Pinged with the reference tone on each onset, if given.

	Returns:
		The eight slots that were played.
	"""

	slots = mutate_beat(state.rng)
	logger.debug(f"Hybrid beat: {format_beat(slots)}")

	tone = seedtone.events.NoteEvent(
		frequency_start = seedtone.constants.frequencies.REFERENCE_TONE_HZ,
		frequency_end = seedtone.constants.frequencies.REFERENCE_TONE_HZ,
		duration_ms = seedtone.constants.timing.EIGHTH_NOTE_MS,
		waveform = state.instrument
	)

	for slot in slots:

		if slot is Slot.ONSET:
			if visualizer is not None:
				visualizer.on_frequency(seedtone.constants.frequencies.REFERENCE_TONE_HZ)
			output.play(tone)
		else:
			output.rest(seedtone.constants.timing.EIGHTH_NOTE_MS)

	return slots
