import typing

import mido
import pytest

import seedtone.engine
import seedtone.midi
import seedtone.sinks


class FakeMidiOut:

	"""MIDI output stub that keeps every message it is sent."""

	def __init__ (self) -> None:

		self.sent: typing.List[mido.Message] = []
		self.closed = False


	def send (self, message: mido.Message) -> None:

		"""Store outgoing MIDI messages."""

		self.sent.append(message)


	def close (self) -> None:

		"""Mark the fake device closed."""

		self.closed = True


def _fake_get_output_names () -> list[str]:

	"""Return a fixed list of MIDI output names for tests."""

	return ["Dummy MIDI"]


def _fake_open_output (name: str) -> FakeMidiOut:

	"""Return a fake MIDI output regardless of the name."""

	return FakeMidiOut()


@pytest.fixture
def patch_midi (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Patch mido to use fake MIDI outputs for all tests that need it."""

	monkeypatch.setattr(mido, "get_output_names", _fake_get_output_names)
	monkeypatch.setattr(mido, "open_output", _fake_open_output)


@pytest.fixture
def no_sleep (monkeypatch: pytest.MonkeyPatch) -> typing.List[float]:

	"""Replace real-time waits with a recorder; returns the requested sleeps in seconds."""

	sleeps: typing.List[float] = []

	monkeypatch.setattr(seedtone.midi.time, "sleep", sleeps.append)
	monkeypatch.setattr(seedtone.sinks.time, "sleep", sleeps.append)

	return sleeps


@pytest.fixture
def sink () -> seedtone.sinks.RecordingSink:

	"""An offline sink with an empty timeline."""

	return seedtone.sinks.RecordingSink()


@pytest.fixture
def visualizer () -> seedtone.sinks.RecordingVisualizer:

	"""A visualizer that remembers every frequency it was shown."""

	return seedtone.sinks.RecordingVisualizer()


@pytest.fixture
def engine (sink: seedtone.sinks.RecordingSink, visualizer: seedtone.sinks.RecordingVisualizer) -> seedtone.engine.Engine:

	"""An engine playing into the recording sink, visualizer attached but disabled."""

	return seedtone.engine.Engine(output=sink, visualizer=visualizer)
