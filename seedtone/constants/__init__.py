"""Constants for seedtone.

This package contains two sets of constants:

- ``seedtone.constants.timing`` - Millisecond durations used by the generators
- ``seedtone.constants.frequencies`` - Reference pitches and visualizer ranges

Every value here feeds the deterministic generators, so changing one changes
the songs a given seed produces.
"""
