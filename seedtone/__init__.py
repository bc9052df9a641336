"""
seedtone - deterministic procedural music for tiny sound devices.

seedtone generates notes, rhythms and multi-minute songs from a single
integer seed.  It targets output devices with only a handful of oscillator
waveforms, blocking tone playback and no polyphony, and emits nothing but
frequency/duration events - no audio synthesis.

What it does:

- **Reproducible.** Every decision comes from one Park-Miller generator.
  The same seed and the same calls always give the same notes.
- **Always in key.** Pitches are drawn as (octave, degree) pairs from a
  major or minor scale and played on the equal-tempered grid above A3.
- **Four generators.** ``play_random_sound()`` (a gliding note),
  ``play_random_rhythm()`` (four notes with random pauses),
  ``play_hybrid_beat()`` (an 8-slot beat template with random mutations)
  and ``play_full_random_song()`` (a 12 s - 2 min song built from a random
  riff, rhythms and beats).
- **Pluggable outputs.** Play into a MIDI port, render a ``.mid`` file,
  or record in memory.  Visualize on the terminal or over OSC.

Minimal example:

    ```python
    import seedtone
    import seedtone.midi

    sink = seedtone.midi.MidiFileSink()
    engine = seedtone.Engine(output=sink, seed=42)
    engine.play_full_random_song()
    sink.save("song.mid")
    ```

Package-level exports: ``Engine``, ``NoteEvent``, ``VisualizerMode``, ``Waveform``.
"""

import seedtone.engine
import seedtone.events


Engine = seedtone.engine.Engine
NoteEvent = seedtone.events.NoteEvent
VisualizerMode = seedtone.events.VisualizerMode
Waveform = seedtone.events.Waveform
