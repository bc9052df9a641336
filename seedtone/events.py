"""Note events and the closed sets of waveforms and visualizer modes."""

import dataclasses
import enum
import typing


class Waveform (enum.Enum):

	"""Oscillator shapes the output device can play."""

	TRIANGLE = "triangle"
	SAWTOOTH = "sawtooth"
	SQUARE = "square"
	SINE = "sine"
	NOISE = "noise"

	@classmethod
	def parse (cls, value: typing.Union["Waveform", str]) -> "Waveform":

		"""Accept a ``Waveform`` or its name (case-insensitive)."""

		return _parse_enum(cls, value)


class VisualizerMode (enum.Enum):

	"""Ways a visualizer can draw incoming frequencies."""

	BAR = "bar"
	WAVE = "wave"
	PARTICLE = "particle"

	@classmethod
	def parse (cls, value: typing.Union["VisualizerMode", str]) -> "VisualizerMode":

		"""Accept a ``VisualizerMode`` or its name (case-insensitive)."""

		return _parse_enum(cls, value)


# Index order matters: the song draws an index into this tuple.
WAVEFORM_PALETTE: typing.Tuple[Waveform, ...] = (
	Waveform.TRIANGLE,
	Waveform.SAWTOOTH,
	Waveform.SQUARE,
	Waveform.SINE,
	Waveform.NOISE,
)


E = typing.TypeVar("E", bound=enum.Enum)


def _parse_enum (cls: typing.Type[E], value: typing.Union[E, str]) -> E:

	if isinstance(value, cls):
		return value

	if isinstance(value, str):
		try:
			return cls(value.strip().lower())
		except ValueError:
			pass

	valid = [member.value for member in cls]
	raise ValueError(f"Unknown {cls.__name__} {value!r}. Available: {valid}")


@dataclasses.dataclass(frozen=True)
class NoteEvent:

	"""
	A single tone handed to an output sink.

	``frequency_start`` and ``frequency_end`` differ for a pitch glide and are
	equal for a sustained tone.
	"""

	frequency_start: float
	frequency_end: float
	duration_ms: int
	waveform: Waveform
