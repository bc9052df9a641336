import logging

import seedtone
import seedtone.display
import seedtone.midi
import seedtone.sinks

logging.basicConfig(level=logging.INFO)

# Render the same seed in both keys.  The minor version shares the major
# version's rhythm, riff shape and instrument; only the pitches move.
for seed in (7, 42):

	for is_major in (True, False):

		sink = seedtone.midi.MidiFileSink(tempo_bpm=120)
		engine = seedtone.Engine(output=sink, seed=seed)
		engine.set_key(is_major)
		engine.play_full_random_song()

		key_name = "major" if is_major else "minor"
		sink.save(f"seed_{seed}_{key_name}.mid")

# Watch a hybrid beat and a rhythm go by in the terminal, in real time.
engine = seedtone.Engine(
	output=seedtone.sinks.RecordingSink(realtime=True),
	visualizer=seedtone.display.TerminalVisualizer(),
	seed=2024,
)
engine.enable_visualizer()
engine.set_visualizer_mode(seedtone.VisualizerMode.WAVE)

engine.play_random_rhythm()
engine.play_hybrid_beat()
