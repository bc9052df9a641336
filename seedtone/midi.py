"""MIDI output sinks.

The device has oscillators, MIDI has notes, so each :class:`NoteEvent` is
translated as:

- a program change whenever the waveform changes (General MIDI leads),
- a pitch bend for the distance between the start frequency and the nearest
  MIDI note,
- note on, then a stepped pitch-bend glide toward the end frequency,
- note off after the event's duration.

Glides are limited by the receiver's bend range (assumed ±2 semitones);
wider glides stop at the edge of the range.

:class:`MidiPortSink` plays in real time on an open port and blocks like a
hardware tone generator.  :class:`MidiFileSink` renders to a Standard MIDI File
without waiting.
"""

import logging
import math
import time
import typing

import mido

import seedtone.events
import seedtone.scales


logger = logging.getLogger(__name__)


GM_PROGRAMS: typing.Dict[seedtone.events.Waveform, int] = {
	seedtone.events.Waveform.SQUARE: 80,		# Lead 1 (square)
	seedtone.events.Waveform.SAWTOOTH: 81,		# Lead 2 (sawtooth)
	seedtone.events.Waveform.TRIANGLE: 82,		# Lead 3 (calliope)
	seedtone.events.Waveform.SINE: 79,			# Ocarina
	seedtone.events.Waveform.NOISE: 122,		# Seashore
}

BEND_RANGE_SEMITONES = 2.0
GLIDE_STEPS = 8
DEFAULT_VELOCITY = 100

TimedMessage = typing.Tuple[float, mido.Message]


def bend_value (semitones: float) -> int:

	"""Convert a semitone offset to a clamped 14-bit signed pitch-bend value."""

	value = round(semitones / BEND_RANGE_SEMITONES * 8191)

	return max(-8192, min(8191, value))


def event_messages (
	event: seedtone.events.NoteEvent,
	channel: int = 0,
	current_program: typing.Optional[int] = None,
) -> typing.List[TimedMessage]:

	"""
	Translate one note event into ``(offset_ms, message)`` pairs.

	Parameters:
		event: The note to translate.
		channel: MIDI channel (0-15).
		current_program: Program already selected on the channel; a program
			change is only emitted when the event needs a different one.
	"""

	messages: typing.List[TimedMessage] = []
	program = GM_PROGRAMS[event.waveform]

	if program != current_program:
		messages.append((0.0, mido.Message("program_change", channel=channel, program=program)))

	note, offset = seedtone.scales.frequency_to_midi(event.frequency_start)

	messages.append((0.0, mido.Message("pitchwheel", channel=channel, pitch=bend_value(offset))))
	messages.append((0.0, mido.Message("note_on", channel=channel, note=note, velocity=DEFAULT_VELOCITY)))

	if event.frequency_end != event.frequency_start:

		for i in range(1, GLIDE_STEPS):
			fraction = i / GLIDE_STEPS
			frequency = event.frequency_start + (event.frequency_end - event.frequency_start) * fraction
			semitones = 12 * math.log2(frequency / event.frequency_start) + offset
			messages.append((
				event.duration_ms * fraction,
				mido.Message("pitchwheel", channel=channel, pitch=bend_value(semitones))
			))

	messages.append((float(event.duration_ms), mido.Message("note_off", channel=channel, note=note, velocity=0)))

	return messages


def open_output_port (device_name: str) -> typing.Optional[typing.Any]:

	"""
	Open the MIDI output port called ``device_name``.

	Returns None, after logging the ports that do exist, when the name is
	unknown or the port cannot be opened.
	"""

	try:
		outputs = mido.get_output_names()
	except ImportError as e:
		logger.error(f"No MIDI backend available: {e}")
		return None

	if device_name not in outputs:
		logger.error(f"MIDI output '{device_name}' not found. Available: {outputs}")
		return None

	try:
		port = mido.open_output(device_name)
	except OSError as e:
		logger.error(f"Failed to open MIDI output '{device_name}': {e}")
		return None

	logger.info(f"Opened MIDI output: {device_name}")

	return port


class MidiPortSink:

	"""Real-time output sink that plays into an open mido output port."""

	def __init__ (self, port: typing.Any, channel: int = 0) -> None:

		"""
		Parameters:
			port: An open mido output port (anything with ``send()``).
			channel: MIDI channel to play on.
		"""

		self._port = port
		self.channel = channel
		self._program: typing.Optional[int] = None

	def play (self, event: seedtone.events.NoteEvent) -> None:

		"""Send the event's messages on schedule; returns after note off."""

		started = time.monotonic()

		for offset_ms, message in event_messages(event, self.channel, self._program):

			wait = offset_ms / 1000.0 - (time.monotonic() - started)
			if wait > 0:
				time.sleep(wait)

			self._port.send(message)

			if message.type == "program_change":
				self._program = message.program

	def rest (self, duration_ms: int) -> None:
		time.sleep(duration_ms / 1000.0)

	def close (self) -> None:

		"""Silence the channel and close the port."""

		self._port.send(mido.Message("control_change", channel=self.channel, control=123, value=0))
		self._port.close()


class MidiFileSink:

	"""
	Offline output sink that renders to a Standard MIDI File.

	Nothing blocks: every note and rest just advances an internal millisecond
	clock.  Call :meth:`save` when done.
	"""

	def __init__ (self, tempo_bpm: int = 120, channel: int = 0) -> None:

		self.tempo = mido.bpm2tempo(tempo_bpm)
		self.channel = channel
		self.elapsed_ms: float = 0.0
		self.recorded_events: typing.List[TimedMessage] = []
		self._program: typing.Optional[int] = None

	def play (self, event: seedtone.events.NoteEvent) -> None:

		"""Record the event's messages at the current clock position."""

		for offset_ms, message in event_messages(event, self.channel, self._program):

			self.recorded_events.append((self.elapsed_ms + offset_ms, message))

			if message.type == "program_change":
				self._program = message.program

		self.elapsed_ms += event.duration_ms

	def rest (self, duration_ms: int) -> None:
		self.elapsed_ms += duration_ms

	def to_midi_file (self) -> mido.MidiFile:

		"""Build a type-1 file at 480 ticks per beat from the recorded messages."""

		mid = mido.MidiFile(type=1)
		mid.ticks_per_beat = 480
		track = mido.MidiTrack()
		mid.tracks.append(track)

		track.append(mido.MetaMessage("set_tempo", tempo=self.tempo, time=0))

		last_tick = 0

		# Absolute ticks first, so rounding never accumulates across deltas.
		for ms, message in sorted(self.recorded_events, key=lambda item: item[0]):
			tick = self._ms_to_tick(ms, mid.ticks_per_beat)
			track.append(message.copy(time=tick - last_tick))
			last_tick = tick

		end_tick = self._ms_to_tick(self.elapsed_ms, mid.ticks_per_beat)
		track.append(mido.MetaMessage("end_of_track", time=max(0, end_tick - last_tick)))

		return mid

	def save (self, filename: str) -> None:

		"""Write the rendering to ``filename``."""

		logger.info(f"Saving MIDI rendering ({len(self.recorded_events)} events) to {filename}...")
		self.to_midi_file().save(filename)
		logger.info(f"Saved {filename}")

	def _ms_to_tick (self, ms: float, ticks_per_beat: int) -> int:
		return round(mido.second2tick(ms / 1000.0, ticks_per_beat, self.tempo))
