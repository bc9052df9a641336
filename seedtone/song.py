"""Full-song assembly from a riff, rhythms and hybrid beats.

A song is built in four stages:

1. **Init** - clear the note log, draw an instrument, clear the visualizer and
   draw a target length in ``SONG_DURATION_RANGE_MS``.
2. **Riff** - draw 8-16 scale steps, each up to four octaves above the base.
3. **Loop** - until the nominal elapsed time reaches the target: pick a riff
   step at random (steps may repeat or be skipped), log it, draw a step
   duration and one of three actions, then rest for the step duration.
4. **Done** - let the visualizer settle, then clear it.

Only the step duration is added to the elapsed counter.  The rhythm and
hybrid-beat actions play for longer than that, so a finished song is usually
longer in real time than its nominal length.
"""

import collections
import dataclasses
import enum
import logging
import typing

import seedtone.composer
import seedtone.constants.frequencies
import seedtone.constants.timing
import seedtone.events
import seedtone.patterns
import seedtone.rng
import seedtone.scales
import seedtone.sinks
import seedtone.state


logger = logging.getLogger(__name__)


RIFF_LENGTH_RANGE = (8, 16)


class SongAction (enum.Enum):

	"""What a loop iteration plays; the value is the drawn choice."""

	SUSTAIN = 0
	RHYTHM = 1
	HYBRID_BEAT = 2


@dataclasses.dataclass
class SongSummary:

	"""
	What a finished song did, for logging and inspection.

	Attributes:
		instrument: Waveform drawn at song start.
		target_ms: Nominal length the loop was aiming for.
		riff: The scale steps sampled by the loop.
		elapsed_ms: Nominal elapsed time when the loop stopped.
		iterations: Number of loop iterations.
		actions: How often each action was chosen.
	"""

	instrument: seedtone.events.Waveform
	target_ms: int
	riff: typing.Tuple[int, ...]
	elapsed_ms: int = 0
	iterations: int = 0
	actions: typing.Dict[SongAction, int] = dataclasses.field(default_factory=collections.Counter)


def build_riff (rng: seedtone.rng.ParkMillerRandom, scale: typing.Sequence[int]) -> typing.Tuple[int, ...]:

	"""Draw the riff length, then one scale step (octave, degree) per entry."""

	length = rng.draw(*RIFF_LENGTH_RANGE)

	return tuple(
		seedtone.scales.draw_scale_step(rng, scale, seedtone.constants.frequencies.RIFF_MAX_OCTAVES)
		for _ in range(length)
	)


def play_full_random_song (
	state: seedtone.state.EngineState,
	output: seedtone.sinks.OutputSink,
	visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
) -> SongSummary:

	"""
	Compose and play a complete song.  Blocks until the song has finished.

	Parameters:
		state: Engine state.  The note log is reset and the instrument is
			replaced by a random one.
		output: Sink for every note and rest.
		visualizer: Notified of each riff note, rhythm note and beat onset.

	Returns:
		A summary of the song that was played.
	"""

	rng = state.rng

	state.note_log.clear()
	state.instrument = rng.choice(seedtone.events.WAVEFORM_PALETTE)

	if visualizer is not None:
		visualizer.clear()

	target_ms = rng.draw(*seedtone.constants.timing.SONG_DURATION_RANGE_MS)
	riff = build_riff(rng, state.scale)

	summary = SongSummary(instrument=state.instrument, target_ms=target_ms, riff=riff)

	logger.info(
		f"Song: target {target_ms / 1000:.1f}s, riff of {len(riff)} steps, instrument {state.instrument.value}"
	)

	nested: typing.Dict[SongAction, typing.Callable[..., typing.Any]] = {
		SongAction.RHYTHM: seedtone.composer.random_rhythm,
		SongAction.HYBRID_BEAT: seedtone.patterns.hybrid_beat,
	}

	while summary.elapsed_ms < target_ms:

		step = riff[rng.draw(0, len(riff) - 1)]
		frequency = seedtone.scales.step_to_frequency(seedtone.constants.frequencies.BASE_FREQUENCY_HZ, step)

		state.note_log.append(frequency)

		if visualizer is not None:
			visualizer.on_frequency(frequency)

		duration_ms = rng.choice(seedtone.constants.timing.SONG_STEP_DURATIONS_MS)
		action = SongAction(rng.draw(0, len(SongAction) - 1))

		logger.debug(f"Step {summary.iterations}: {frequency:.1f} Hz, {duration_ms} ms, {action.name.lower()}")

		if action is SongAction.SUSTAIN:
			output.play(seedtone.events.NoteEvent(
				frequency_start = frequency,
				frequency_end = frequency,
				duration_ms = duration_ms,
				waveform = state.instrument
			))
		else:
			nested[action](state, output, visualizer)

		output.rest(duration_ms)

		summary.elapsed_ms += duration_ms
		summary.iterations += 1
		summary.actions[action] += 1

	if visualizer is not None:
		output.rest(seedtone.constants.timing.VISUALIZER_SETTLE_MS)
		visualizer.clear()

	logger.info(f"Song finished: {summary.iterations} steps, {summary.elapsed_ms / 1000:.1f}s nominal")

	return summary
