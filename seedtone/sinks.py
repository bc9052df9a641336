"""Output and visualizer sink contracts, plus in-memory implementations.

Output sinks follow play-to-completion semantics: ``play()`` and ``rest()``
return only once the tone or pause is over, so two notes never overlap.
Offline sinks (``RecordingSink``, ``seedtone.midi.MidiFileSink``) advance a
simulated clock instead of waiting.

Visualizer sinks are best-effort and must never block playback.
"""

import logging
import time
import typing

import seedtone.constants.frequencies
import seedtone.events


logger = logging.getLogger(__name__)


@typing.runtime_checkable
class OutputSink (typing.Protocol):

	"""
	Protocol for anything that can play note events.
	"""

	def play (self, event: seedtone.events.NoteEvent) -> None:

		"""
		Play one event and return when it has finished sounding.
		"""

		...

	def rest (self, duration_ms: int) -> None:

		"""
		Stay silent for ``duration_ms`` and return when the pause is over.
		"""

		...


@typing.runtime_checkable
class VisualizerSink (typing.Protocol):

	"""
	Protocol for displays that react to played frequencies.
	"""

	def on_frequency (self, frequency_hz: float) -> None:

		"""
		Show a frequency.  Must not block.
		"""

		...

	def clear (self) -> None:

		"""
		Blank the display.
		"""

		...

	def set_mode (self, mode: seedtone.events.VisualizerMode) -> None:

		"""
		Switch drawing style.
		"""

		...


def scale_clamp (value: float, in_min: float, in_max: float, out_min: float = 0.0, out_max: float = 1.0) -> float:

	"""Scale a value from an input range to an output range and clamp the result.

	Maps a value from [in_min, in_max] to [out_min, out_max]. If the result
	falls outside the output range, it is clamped to the nearest bound.
	Correctly handles reversed ranges (where min > max).

	Example:
		```python
		# A4 on the default visualizer range
		scale_clamp(440.0, 110.0, 2000.0, 5.0, 60.0)   # → ~14.6
		```
	"""

	if in_min == in_max:
		raise ValueError(f"Input range cannot be zero-width ({in_min} == {in_max})")

	percentage = (value - in_min) / (in_max - in_min)
	scaled = out_min + percentage * (out_max - out_min)

	if out_min < out_max:
		return max(out_min, min(out_max, scaled))
	else:
		return max(out_max, min(out_min, scaled))


def frequency_to_magnitude (frequency_hz: float) -> float:

	"""Map a frequency onto the visualizer's magnitude range."""

	return scale_clamp(
		frequency_hz,
		seedtone.constants.frequencies.VISUALIZER_MIN_HZ,
		seedtone.constants.frequencies.VISUALIZER_MAX_HZ,
		seedtone.constants.frequencies.VISUALIZER_MIN_MAGNITUDE,
		seedtone.constants.frequencies.VISUALIZER_MAX_MAGNITUDE,
	)


TimelineEntry = typing.Tuple[str, typing.Union[seedtone.events.NoteEvent, int]]


class RecordingSink:

	"""
	Output sink that keeps every note and rest in a timeline.

	With ``realtime=True`` each call also blocks for its duration, which makes
	the sink a silent stand-in for a real device.
	"""

	def __init__ (self, realtime: bool = False) -> None:

		"""Start with an empty timeline."""

		self.realtime = realtime
		self.timeline: typing.List[TimelineEntry] = []
		self.elapsed_ms: int = 0

	@property
	def events (self) -> typing.List[seedtone.events.NoteEvent]:

		"""Played note events, in order."""

		return [item for kind, item in self.timeline if kind == "note" and isinstance(item, seedtone.events.NoteEvent)]

	def play (self, event: seedtone.events.NoteEvent) -> None:

		"""Record the event and advance the clock by its duration."""

		logger.debug(
			f"{event.waveform.value} {event.frequency_start:.1f}->{event.frequency_end:.1f} Hz for {event.duration_ms} ms"
		)

		self.timeline.append(("note", event))
		self._advance(event.duration_ms)

	def rest (self, duration_ms: int) -> None:

		"""Record a pause and advance the clock."""

		self.timeline.append(("rest", duration_ms))
		self._advance(duration_ms)

	def _advance (self, duration_ms: int) -> None:

		self.elapsed_ms += duration_ms

		if self.realtime:
			time.sleep(duration_ms / 1000.0)


class RecordingVisualizer:

	"""Visualizer sink that stores what it was asked to show."""

	def __init__ (self, mode: seedtone.events.VisualizerMode = seedtone.events.VisualizerMode.BAR) -> None:

		self.mode = mode
		self.frequencies: typing.List[float] = []
		self.clear_count = 0

	def on_frequency (self, frequency_hz: float) -> None:
		self.frequencies.append(frequency_hz)

	def clear (self) -> None:
		self.clear_count += 1

	def set_mode (self, mode: seedtone.events.VisualizerMode) -> None:
		self.mode = mode
