"""YAML configuration for the command-line player.

Example ``seedtone.yaml``::

	engine:
	  seed: 42
	  key: minor
	  instrument: square
	  visualizer: true
	  visualizer_mode: wave
	midi:
	  device_name: "Synth:Synth MIDI 1"
	osc:
	  host: 127.0.0.1
	  port: 9001

Values are validated here so that the engine never sees a bad setting.
"""

import dataclasses
import logging
import os
import typing

import yaml

import seedtone.events


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class EngineConfig:

	"""Validated settings for an :class:`~seedtone.engine.Engine` and its sinks."""

	seed: int = 1
	major: bool = True
	instrument: seedtone.events.Waveform = seedtone.events.Waveform.SINE
	visualizer: bool = False
	visualizer_mode: seedtone.events.VisualizerMode = seedtone.events.VisualizerMode.BAR
	midi_device: typing.Optional[str] = None
	osc_host: typing.Optional[str] = None
	osc_port: int = 9001


def _parse_key (value: typing.Any) -> bool:

	if isinstance(value, bool):
		return value

	if isinstance(value, str) and value.strip().lower() in ("major", "minor"):
		return value.strip().lower() == "major"

	raise ValueError(f"Key must be 'major' or 'minor', got {value!r}")


def _parse_flag (name: str, value: typing.Any) -> bool:

	if isinstance(value, bool):
		return value

	raise ValueError(f"{name} must be true or false, got {value!r}")


def config_from_dict (data: typing.Optional[typing.Dict[str, typing.Any]]) -> EngineConfig:

	"""
	Build a config from parsed YAML (or any nested dict).

	Raises:
		ValueError: For an unknown key, instrument or mode, a seed or port
			that is not an integer, or a visualizer flag that is not a boolean.
	"""

	data = data or {}

	if not isinstance(data, dict):
		raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

	engine = data.get("engine") or {}
	midi = data.get("midi") or {}
	osc = data.get("osc") or {}

	config = EngineConfig()

	if "seed" in engine:
		seed = engine["seed"]
		if isinstance(seed, bool) or not isinstance(seed, int):
			raise ValueError(f"Seed must be an integer, got {seed!r}")
		config.seed = seed

	if "key" in engine:
		config.major = _parse_key(engine["key"])

	if "instrument" in engine:
		config.instrument = seedtone.events.Waveform.parse(engine["instrument"])

	if "visualizer" in engine:
		config.visualizer = _parse_flag("visualizer", engine["visualizer"])

	if "visualizer_mode" in engine:
		config.visualizer_mode = seedtone.events.VisualizerMode.parse(engine["visualizer_mode"])

	config.midi_device = midi.get("device_name", config.midi_device)
	config.osc_host = osc.get("host", config.osc_host)

	if "port" in osc:
		port = osc["port"]
		if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
			raise ValueError(f"OSC port must be an integer from 1 to 65535, got {port!r}")
		config.osc_port = port

	return config


def load_config (config_path: str = "seedtone.yaml") -> EngineConfig:

	"""
	Load configuration from a YAML file.  A missing file gives the defaults;
	a file that is not valid YAML raises ValueError.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return EngineConfig()

	with open(config_path, "r") as f:
		try:
			data = yaml.safe_load(f)
		except yaml.YAMLError as e:
			raise ValueError(f"Config file {config_path} is not valid YAML: {e}") from e

	return config_from_dict(data)
