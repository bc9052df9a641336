"""Terminal visualizer.

Draws each played frequency on a single, continuously rewritten line of the
terminal.  The frequency is mapped from 110-2000 Hz onto a magnitude of 5-60
and shown in one of three styles::

	bar       |#################                      |  440.0 Hz
	wave      |__..--~~^^~~--..__.-~^                 |  440.0 Hz
	particle  |          * . * . * . *                |  440.0 Hz

Enable it on an engine with a visualizer attached:

```python
engine = seedtone.Engine(visualizer=seedtone.display.TerminalVisualizer())
engine.enable_visualizer()
```
"""

import collections
import shutil
import sys
import typing

import seedtone.constants.frequencies
import seedtone.events
import seedtone.sinks


_LEVEL_CHARS = "_.-~^"
_LABEL_WIDTH = 12
_MIN_TERMINAL_WIDTH = 40


class TerminalVisualizer:

	"""Single-line ASCII visualizer with bar, wave and particle styles."""

	def __init__ (
		self,
		mode: seedtone.events.VisualizerMode = seedtone.events.VisualizerMode.BAR,
		stream: typing.Optional[typing.TextIO] = None,
		width: typing.Optional[int] = None,
	) -> None:

		"""
		Parameters:
			mode: Initial drawing style.
			stream: Where to draw (default ``sys.stderr``).
			width: Drawing width in characters.  Defaults to what fits in the
				terminal, up to the largest magnitude.
		"""

		self.mode = mode
		self._stream = stream
		self._width = width if width is not None else self._fit_width()
		self._history: typing.Deque[float] = collections.deque(maxlen=self._width)
		self.last_line: str = ""

	@property
	def stream (self) -> typing.TextIO:
		return self._stream if self._stream is not None else sys.stderr

	def on_frequency (self, frequency_hz: float) -> None:

		"""Redraw the line for a new frequency."""

		magnitude = seedtone.sinks.frequency_to_magnitude(frequency_hz)
		self._history.append(magnitude)

		self.last_line = f"{self.mode.value:<{_LABEL_WIDTH - 2}}|{self.render(magnitude)}| {frequency_hz:7.1f} Hz"

		self.stream.write(f"\r\033[K{self.last_line}")
		self.stream.flush()

	def clear (self) -> None:

		"""Erase the line and forget the wave history."""

		self._history.clear()
		self.last_line = ""

		self.stream.write("\r\033[K")
		self.stream.flush()

	def set_mode (self, mode: seedtone.events.VisualizerMode) -> None:
		self.mode = mode

	def render (self, magnitude: float) -> str:

		"""Return the drawing area for ``magnitude`` in the current mode."""

		if self.mode is seedtone.events.VisualizerMode.BAR:
			cells = self._bar(magnitude)
		elif self.mode is seedtone.events.VisualizerMode.WAVE:
			cells = self._wave()
		else:
			cells = self._particles(magnitude)

		return cells[:self._width].ljust(self._width)

	# ------------------------------------------------------------------
	# Styles
	# ------------------------------------------------------------------

	def _bar (self, magnitude: float) -> str:
		return "#" * self._columns(magnitude)

	def _wave (self) -> str:

		"""One character per remembered magnitude, oldest first."""

		return "".join(self._level_char(m) for m in self._history)

	def _particles (self, magnitude: float) -> str:

		"""A symmetric burst around the centre; louder notes spread wider."""

		cells = [" "] * self._width
		centre = self._width // 2
		spread = max(1, self._columns(magnitude) // 4)

		for k in range(spread):
			char = "*" if k % 2 == 0 else "."
			for column in (centre - 2 * k, centre + 2 * k):
				if 0 <= column < self._width:
					cells[column] = char

		return "".join(cells)

	# ------------------------------------------------------------------
	# Helpers
	# ------------------------------------------------------------------

	def _columns (self, magnitude: float) -> int:

		"""Scale a magnitude to a column count within the drawing width."""

		return round(seedtone.sinks.scale_clamp(
			magnitude,
			0.0,
			seedtone.constants.frequencies.VISUALIZER_MAX_MAGNITUDE,
			0.0,
			float(self._width),
		))

	@staticmethod
	def _level_char (magnitude: float) -> str:

		index = int(seedtone.sinks.scale_clamp(
			magnitude,
			seedtone.constants.frequencies.VISUALIZER_MIN_MAGNITUDE,
			seedtone.constants.frequencies.VISUALIZER_MAX_MAGNITUDE,
			0.0,
			len(_LEVEL_CHARS) - 1,
		))

		return _LEVEL_CHARS[index]

	@staticmethod
	def _fit_width () -> int:

		"""Columns available after the label and the frequency readout."""

		term_width = shutil.get_terminal_size(fallback=(80, 24)).columns
		available = max(term_width, _MIN_TERMINAL_WIDTH) - _LABEL_WIDTH - 12

		return max(8, min(int(seedtone.constants.frequencies.VISUALIZER_MAX_MAGNITUDE), available))
