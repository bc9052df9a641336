import logging
import pathlib
import typing

import mido
import pytest

import seedtone.engine
import seedtone.events
import seedtone.midi


def _event (start: float = 440.0, end: typing.Optional[float] = None, duration: int = 200, waveform: seedtone.events.Waveform = seedtone.events.Waveform.SQUARE) -> seedtone.events.NoteEvent:

	"""Build a note event with test defaults."""

	return seedtone.events.NoteEvent(
		frequency_start = start,
		frequency_end = start if end is None else end,
		duration_ms = duration,
		waveform = waveform
	)


# ---------------------------------------------------------------------------
# Message translation
# ---------------------------------------------------------------------------

def test_bend_value_clamps () -> None:

	"""Bends are scaled to +-2 semitones and clamped to 14 bits."""

	assert seedtone.midi.bend_value(0.0) == 0
	assert seedtone.midi.bend_value(2.0) == 8191
	assert seedtone.midi.bend_value(-5.0) == -8192


def test_sustained_event_messages () -> None:

	"""A sustained A4 is program change, zero bend, note on, note off."""

	messages = seedtone.midi.event_messages(_event(), channel=2)
	types = [message.type for _, message in messages]

	assert types == ["program_change", "pitchwheel", "note_on", "note_off"]
	assert messages[0][1].program == 80
	assert messages[1][1].pitch == 0
	assert messages[2][1].note == 69
	assert messages[2][1].channel == 2
	assert messages[-1][0] == 200.0


def test_program_change_skipped_when_current () -> None:

	"""No program change when the channel already has the right program."""

	messages = seedtone.midi.event_messages(_event(waveform=seedtone.events.Waveform.SINE), current_program=79)

	assert all(message.type != "program_change" for _, message in messages)


def test_glide_messages () -> None:

	"""A glide adds stepped pitch bends that rise toward the end frequency."""

	messages = seedtone.midi.event_messages(_event(start=440.0, end=466.16), current_program=80)
	bends = [(offset, message.pitch) for offset, message in messages if message.type == "pitchwheel"]

	assert len(bends) == seedtone.midi.GLIDE_STEPS
	assert bends[0] == (0.0, 0)

	offsets = [offset for offset, _ in bends]
	pitches = [pitch for _, pitch in bends]

	assert offsets == sorted(offsets)
	assert pitches == sorted(pitches)
	assert 0 < pitches[-1] <= 8191
	assert max(offsets) < 200


# ---------------------------------------------------------------------------
# Device selection
# ---------------------------------------------------------------------------

def test_open_named_port (patch_midi: None) -> None:

	"""A known device name is opened."""

	assert seedtone.midi.open_output_port("Dummy MIDI") is not None


def test_open_unknown_port_lists_available (patch_midi: None, caplog: pytest.LogCaptureFixture) -> None:

	"""An unknown name returns None and logs the ports that exist."""

	with caplog.at_level(logging.ERROR):
		assert seedtone.midi.open_output_port("Nope") is None

	assert "Dummy MIDI" in caplog.text


def test_open_port_failure (patch_midi: None, monkeypatch: pytest.MonkeyPatch) -> None:

	"""A port that exists but cannot be opened returns None."""

	def _refuse (name: str) -> None:
		raise OSError("port busy")

	monkeypatch.setattr(mido, "open_output", _refuse)

	assert seedtone.midi.open_output_port("Dummy MIDI") is None


# ---------------------------------------------------------------------------
# Port sink
# ---------------------------------------------------------------------------

def test_port_sink_sends_and_blocks (patch_midi: None, no_sleep: typing.List[float]) -> None:

	"""Messages go to the port and the sink waits for the note to end."""

	port = seedtone.midi.open_output_port("Dummy MIDI")
	sink = seedtone.midi.MidiPortSink(port)

	sink.play(_event(duration=300))
	sink.play(_event(duration=300))
	sink.rest(125)

	types = [message.type for message in port.sent]

	assert types.count("program_change") == 1
	assert types.count("note_on") == 2
	assert types.count("note_off") == 2
	assert no_sleep[-1] == pytest.approx(0.125)
	assert sum(no_sleep) > 0.3


def test_port_sink_close (patch_midi: None) -> None:

	"""Closing silences the channel and closes the port."""

	port = seedtone.midi.open_output_port("Dummy MIDI")
	sink = seedtone.midi.MidiPortSink(port)

	sink.close()

	assert port.sent[-1].type == "control_change"
	assert port.sent[-1].control == 123
	assert port.closed


# ---------------------------------------------------------------------------
# File sink
# ---------------------------------------------------------------------------

def test_file_sink_clock () -> None:

	"""Notes and rests advance the clock without waiting."""

	sink = seedtone.midi.MidiFileSink()

	sink.play(_event(duration=250))
	sink.rest(500)

	assert sink.elapsed_ms == 750


def test_file_sink_round_trip (tmp_path: pathlib.Path) -> None:

	"""A rendered song reloads with matching note count and length."""

	sink = seedtone.midi.MidiFileSink()
	engine = seedtone.engine.Engine(output=sink, seed=42)
	engine.play_full_random_song()

	path = tmp_path / "song.mid"
	sink.save(str(path))

	mid = mido.MidiFile(str(path))
	note_ons = [message for message in mid.tracks[0] if message.type == "note_on"]
	recorded_ons = [message for _, message in sink.recorded_events if message.type == "note_on"]

	assert mid.ticks_per_beat == 480
	assert len(note_ons) == len(recorded_ons)
	assert mid.length == pytest.approx(sink.elapsed_ms / 1000.0, abs=0.05)


def test_file_sink_tempo_message () -> None:

	"""The file starts with the sink's tempo."""

	sink = seedtone.midi.MidiFileSink(tempo_bpm=90)
	sink.play(_event())

	track = sink.to_midi_file().tracks[0]

	assert track[0].type == "set_tempo"
	assert track[0].tempo == mido.bpm2tempo(90)
