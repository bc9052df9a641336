import logging
import pathlib
import typing

import pytest

import seedtone.config
import seedtone.events


def test_defaults_when_missing (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing file logs a warning and yields defaults."""

	with caplog.at_level(logging.WARNING):
		config = seedtone.config.load_config(str(tmp_path / "nope.yaml"))

	assert config == seedtone.config.EngineConfig()
	assert "not found" in caplog.text


def test_load_full_config (tmp_path: pathlib.Path) -> None:

	"""Every section is read and converted to typed values."""

	path = tmp_path / "seedtone.yaml"
	path.write_text(
		"engine:\n"
		"  seed: 42\n"
		"  key: minor\n"
		"  instrument: square\n"
		"  visualizer: true\n"
		"  visualizer_mode: wave\n"
		"midi:\n"
		"  device_name: Dummy MIDI\n"
		"osc:\n"
		"  host: 10.0.0.2\n"
		"  port: 7000\n"
	)

	config = seedtone.config.load_config(str(path))

	assert config.seed == 42
	assert config.major is False
	assert config.instrument is seedtone.events.Waveform.SQUARE
	assert config.visualizer is True
	assert config.visualizer_mode is seedtone.events.VisualizerMode.WAVE
	assert config.midi_device == "Dummy MIDI"
	assert config.osc_host == "10.0.0.2"
	assert config.osc_port == 7000


def test_empty_file_gives_defaults (tmp_path: pathlib.Path) -> None:

	"""An empty YAML document is the same as no settings."""

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert seedtone.config.load_config(str(path)) == seedtone.config.EngineConfig()


@pytest.mark.parametrize("engine_section", [
	{"seed": "forty-two"},
	{"seed": True},
	{"key": "lydian"},
	{"instrument": "theremin"},
	{"visualizer_mode": "hologram"},
	{"visualizer": "false"},
	{"visualizer": "off"},
	{"visualizer": 1},
])
def test_invalid_values_raise (engine_section: dict) -> None:

	"""Bad values are rejected before they reach the engine."""

	with pytest.raises(ValueError):
		seedtone.config.config_from_dict({"engine": engine_section})


def test_non_mapping_raises () -> None:

	"""A YAML scalar or list is not a configuration."""

	with pytest.raises(ValueError):
		seedtone.config.config_from_dict(["seed", 1])  # type: ignore[arg-type]


@pytest.mark.parametrize("port", [None, "9001", 9001.0, True, 0, 70000])
def test_invalid_osc_port_raises (port: typing.Any) -> None:

	"""The OSC port must be a usable integer port number."""

	with pytest.raises(ValueError):
		seedtone.config.config_from_dict({"osc": {"host": "127.0.0.1", "port": port}})


def test_quoted_visualizer_flag_in_yaml_raises (tmp_path: pathlib.Path) -> None:

	"""A quoted "false" is a string, not a boolean, and is rejected."""

	path = tmp_path / "seedtone.yaml"
	path.write_text("engine:\n  visualizer: \"false\"\n")

	with pytest.raises(ValueError):
		seedtone.config.load_config(str(path))


def test_malformed_yaml_raises (tmp_path: pathlib.Path) -> None:

	"""Unparseable YAML is reported as a configuration error."""

	path = tmp_path / "seedtone.yaml"
	path.write_text("engine: [seed: 1\n")

	with pytest.raises(ValueError):
		seedtone.config.load_config(str(path))
