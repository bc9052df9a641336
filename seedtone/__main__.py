"""
Command-line player.

Usage::

    python -m seedtone song --seed 42 --render song.mid
    python -m seedtone beat --seed 7 --midi-device "Synth:Synth MIDI 1"
    python -m seedtone song --config seedtone.yaml --visualizer wave --realtime
"""

import argparse
import logging
import sys
import typing

import seedtone.config
import seedtone.display
import seedtone.engine
import seedtone.events
import seedtone.midi
import seedtone.osc
import seedtone.sinks


logger = logging.getLogger(__name__)


COMMANDS = ("sound", "rhythm", "beat", "song")


def build_parser () -> argparse.ArgumentParser:

	"""Create the argument parser."""

	parser = argparse.ArgumentParser(prog="seedtone", description="Deterministic procedural music from a seed")
	parser.add_argument("command", choices=COMMANDS, nargs="?", default="song", help="What to play (default: song)")
	parser.add_argument("--config", help="YAML configuration file")
	parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
	parser.add_argument("--minor", action="store_true", help="Use the minor scale")
	parser.add_argument("--instrument", help="Waveform: triangle, sawtooth, square, sine or noise")
	parser.add_argument("--render", metavar="FILE", help="Render to a MIDI file instead of playing")
	parser.add_argument("--midi-device", help="Play on this MIDI output port")
	parser.add_argument("--visualizer", metavar="MODE", help="Show a terminal visualizer: bar, wave or particle")
	parser.add_argument("--osc", metavar="HOST:PORT", help="Send visualizer data over OSC")
	parser.add_argument("--realtime", action="store_true", help="Wait out each note when not using a MIDI device")
	parser.add_argument("--verbose", action="store_true", help="Log every generated step")

	return parser


def _parse_osc_target (value: str) -> typing.Tuple[str, int]:

	host, _, port = value.rpartition(":")

	if not host or not port.isdigit() or not 0 < int(port) < 65536:
		raise ValueError(f"OSC target must look like HOST:PORT with a port from 1 to 65535, got {value!r}")

	return host, int(port)


def _apply_arguments (config: seedtone.config.EngineConfig, args: argparse.Namespace) -> None:

	"""Let command-line flags override the loaded configuration."""

	if args.seed is not None:
		config.seed = args.seed

	if args.minor:
		config.major = False

	if args.instrument:
		config.instrument = seedtone.events.Waveform.parse(args.instrument)

	if args.visualizer:
		config.visualizer = True
		config.visualizer_mode = seedtone.events.VisualizerMode.parse(args.visualizer)

	if args.midi_device:
		config.midi_device = args.midi_device

	if args.osc:
		config.osc_host, config.osc_port = _parse_osc_target(args.osc)
		config.visualizer = True


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the seedtone player.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	try:
		config = seedtone.config.load_config(args.config) if args.config else seedtone.config.EngineConfig()
		_apply_arguments(config, args)
	except ValueError as e:
		parser.error(str(e))

	output: typing.Any
	port: typing.Optional[typing.Any] = None

	if args.render:
		output = seedtone.midi.MidiFileSink()
	elif config.midi_device:
		port = seedtone.midi.open_output_port(config.midi_device)
		if port is None:
			return 1
		output = seedtone.midi.MidiPortSink(port)
	else:
		output = seedtone.sinks.RecordingSink(realtime=args.realtime)

	visualizer: typing.Optional[seedtone.sinks.VisualizerSink] = None

	if config.osc_host:
		visualizer = seedtone.osc.OscVisualizer(config.osc_host, config.osc_port, config.visualizer_mode)
	elif config.visualizer:
		visualizer = seedtone.display.TerminalVisualizer(config.visualizer_mode)

	engine = seedtone.engine.Engine.from_config(config, output=output, visualizer=visualizer)

	actions = {
		"sound": engine.play_random_sound,
		"rhythm": engine.play_random_rhythm,
		"beat": engine.play_hybrid_beat,
		"song": engine.play_full_random_song,
	}

	logger.info(f"Playing {args.command} with seed {config.seed}")

	try:
		actions[args.command]()
	except KeyboardInterrupt:
		logger.info("Stopping...")
	finally:
		if port is not None:
			output.close()

	if args.render:
		output.save(args.render)

	print(f"{len(engine.note_log)} notes logged")

	if engine.last_song is not None:
		song = engine.last_song
		print(
			f"Song: {song.iterations} steps, {song.elapsed_ms / 1000:.1f}s nominal "
			f"(target {song.target_ms / 1000:.1f}s), riff {list(song.riff)}, instrument {song.instrument.value}"
		)

	return 0


if __name__ == "__main__":
	sys.exit(main())
