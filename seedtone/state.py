"""Mutable engine state owned by a single :class:`~seedtone.engine.Engine`.

Everything the generators read or change between calls lives here: the
random source, the active key, the current instrument, the visualizer
settings and the note log.  Generators receive the state explicitly, so two
engines never share a random stream.
"""

import dataclasses
import typing

import seedtone.events
import seedtone.rng
import seedtone.scales


@dataclasses.dataclass
class EngineState:

	"""
	Attributes:
		rng: The only source of randomness for this engine.
		is_major: Selects the major (True) or minor (False) scale.
		instrument: Waveform used for every emitted note until changed.
		visualizer_enabled: When False no visualizer is notified.
		visualizer_mode: How an attached visualizer draws frequencies.
		note_log: Start frequency of every emitted note, in order.
	"""

	rng: seedtone.rng.ParkMillerRandom = dataclasses.field(default_factory=seedtone.rng.ParkMillerRandom)
	is_major: bool = True
	instrument: seedtone.events.Waveform = seedtone.events.Waveform.SINE
	visualizer_enabled: bool = False
	visualizer_mode: seedtone.events.VisualizerMode = seedtone.events.VisualizerMode.BAR
	note_log: typing.List[float] = dataclasses.field(default_factory=list)

	@property
	def scale (self) -> typing.Tuple[int, ...]:

		"""Semitone offsets of the active key."""

		return seedtone.scales.scale_intervals(self.is_major)
