"""Public entry point: configure an engine and play generated music.

```python
import seedtone
import seedtone.sinks

engine = seedtone.Engine(output=seedtone.sinks.RecordingSink())
engine.set_seed(42)
engine.set_key(is_major=False)
engine.play_full_random_song()

print(engine.note_log[:8])
```

Each play method blocks until everything it generated has been played and
returns nothing; results are observable through the output sink, the
visualizer and :attr:`Engine.note_log`.
"""

import logging
import typing

import seedtone.composer
import seedtone.events
import seedtone.patterns
import seedtone.rng
import seedtone.sinks
import seedtone.song
import seedtone.state

if typing.TYPE_CHECKING:
	import seedtone.config


logger = logging.getLogger(__name__)


class Engine:

	"""Owns one engine state and the sinks it plays into."""

	def __init__ (
		self,
		output: typing.Optional[seedtone.sinks.OutputSink] = None,
		visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
		seed: int = 1,
	) -> None:

		"""
		Parameters:
			output: Where notes are played.  Defaults to an offline
				:class:`~seedtone.sinks.RecordingSink`.
			visualizer: Optional display.  Only notified while the
				visualizer is enabled with :meth:`enable_visualizer`.
			seed: Initial random seed.
		"""

		self.output: seedtone.sinks.OutputSink = output if output is not None else seedtone.sinks.RecordingSink()
		self.visualizer = visualizer

		self._state = seedtone.state.EngineState()
		self.set_seed(seed)

		self.last_song: typing.Optional[seedtone.song.SongSummary] = None


	@classmethod
	def from_config (
		cls,
		config: "seedtone.config.EngineConfig",
		output: typing.Optional[seedtone.sinks.OutputSink] = None,
		visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None,
	) -> "Engine":

		"""Create an engine with every setting taken from ``config``."""

		engine = cls(output=output, visualizer=visualizer, seed=config.seed)
		engine.set_key(config.major)
		engine.set_instrument(config.instrument)
		engine.set_visualizer_mode(config.visualizer_mode)
		engine.enable_visualizer(config.visualizer)

		return engine


	@property
	def state (self) -> seedtone.state.EngineState:
		return self._state

	@property
	def note_log (self) -> typing.List[float]:

		"""Copy of the start frequencies logged so far."""

		return list(self._state.note_log)

	@property
	def instrument (self) -> seedtone.events.Waveform:
		return self._state.instrument

	# ------------------------------------------------------------------
	# Configuration
	# ------------------------------------------------------------------

	def set_seed (self, seed: int) -> None:

		"""
		Reseed the random source.  Replaying the same calls after the same
		seed reproduces the same notes.
		"""

		if isinstance(seed, bool) or not isinstance(seed, int):
			raise TypeError(f"Seed must be an int, got {type(seed).__name__}")

		self._state.rng.reseed(seed)

	def set_key (self, is_major: bool) -> None:

		"""Select the major (True) or minor (False) scale."""

		if not isinstance(is_major, bool):
			raise TypeError(f"Key must be a bool, got {type(is_major).__name__}")

		self._state.is_major = is_major

	def set_instrument (self, waveform: typing.Union[seedtone.events.Waveform, str]) -> None:

		"""Use ``waveform`` until the next song picks a random one."""

		self._state.instrument = seedtone.events.Waveform.parse(waveform)

	def enable_visualizer (self, enabled: bool = True) -> None:

		"""Turn visualizer notifications on or off."""

		if not isinstance(enabled, bool):
			raise TypeError(f"Visualizer flag must be a bool, got {type(enabled).__name__}")

		self._state.visualizer_enabled = enabled

	def set_visualizer_mode (self, mode: typing.Union[seedtone.events.VisualizerMode, str]) -> None:

		"""Choose how the attached visualizer draws."""

		self._state.visualizer_mode = seedtone.events.VisualizerMode.parse(mode)

		if self.visualizer is not None:
			self.visualizer.set_mode(self._state.visualizer_mode)

	# ------------------------------------------------------------------
	# Playback
	# ------------------------------------------------------------------

	def play_random_sound (self) -> None:

		"""Play a single gliding note."""

		seedtone.composer.random_sound(self._state, self.output, self._active_visualizer())

	def play_random_rhythm (self) -> None:

		"""Play four random notes separated by random pauses."""

		seedtone.composer.random_rhythm(self._state, self.output, self._active_visualizer())

	def play_hybrid_beat (self) -> None:

		"""Play one mutated eight-slot beat."""

		seedtone.patterns.hybrid_beat(self._state, self.output, self._active_visualizer())

	def play_full_random_song (self) -> None:

		"""Play a complete song of 12 seconds to 2 minutes nominal length."""

		self.last_song = seedtone.song.play_full_random_song(self._state, self.output, self._active_visualizer())

	def _active_visualizer (self) -> typing.Optional[seedtone.sinks.VisualizerSink]:

		if self._state.visualizer_enabled:
			return self.visualizer

		return None
