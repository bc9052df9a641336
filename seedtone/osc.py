"""OSC visualizer sink.

Forwards played frequencies to an external renderer (a lighting rig, a
Processing sketch, a TouchDesigner patch) over UDP.

Sent Messages
─────────────
- ``/seedtone/frequency <float>``: Frequency of the note being played, in Hz
- ``/seedtone/magnitude <float>``: The same note mapped onto 5-60
- ``/seedtone/mode <string>``: Drawing style (``bar``, ``wave``, ``particle``)
- ``/seedtone/clear``: Blank the display
"""

import logging
import typing

import pythonosc.udp_client

import seedtone.events
import seedtone.sinks


logger = logging.getLogger(__name__)


ADDRESS_PREFIX = "/seedtone"


class OscVisualizer:

	"""Best-effort visualizer that sends OSC messages and never raises."""

	def __init__ (
		self,
		host: str = "127.0.0.1",
		port: int = 9001,
		mode: seedtone.events.VisualizerMode = seedtone.events.VisualizerMode.BAR,
	) -> None:

		self._host = host
		self._port = port
		self.mode = mode
		self._client = pythonosc.udp_client.SimpleUDPClient(host, port)

		logger.info(f"OSC visualizer sending to {host}:{port}")

	def on_frequency (self, frequency_hz: float) -> None:

		"""Send the frequency and its magnitude."""

		self.send("frequency", float(frequency_hz))
		self.send("magnitude", seedtone.sinks.frequency_to_magnitude(frequency_hz))

	def clear (self) -> None:
		self.send("clear")

	def set_mode (self, mode: seedtone.events.VisualizerMode) -> None:
		self.mode = mode
		self.send("mode", mode.value)

	def send (self, name: str, *args: typing.Any) -> None:

		"""Send an OSC message under the seedtone prefix."""

		try:
			self._client.send_message(f"{ADDRESS_PREFIX}/{name}", list(args))
		except OSError as e:
			logger.warning(f"OSC send error: {e}")
