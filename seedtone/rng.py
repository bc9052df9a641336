"""Seeded Park-Miller random source shared by every generator.

All randomness in seedtone flows from a single :class:`ParkMillerRandom`.
Each draw advances the state, so the *order* in which generators draw is
part of the output: the same seed and the same call order always give the
same notes, and changing either gives a different song.

The generator is the "minimal standard" multiplicative LCG
(``seed = seed * 16807 mod 2**31 - 1``, no additive constant).  Range
reduction is a plain modulo, which slightly favours low values when the
range does not divide the modulus.  That bias is kept as-is so that old
seeds keep producing the same songs.
"""

import threading
import typing

T = typing.TypeVar("T")


MULTIPLIER = 16807
MODULUS = 2147483647


class ParkMillerRandom:

	"""Deterministic integer stream driven by a mutable 31-bit seed."""

	def __init__ (self, seed: int = 1) -> None:

		"""Create a generator at the given seed (default 1)."""

		self._seed = seed
		self._lock = threading.Lock()


	@property
	def seed (self) -> int:

		"""The current generator state."""

		return self._seed


	def reseed (self, seed: int) -> None:

		"""Replace the generator state.  The only way to rewind the stream."""

		with self._lock:
			self._seed = seed


	def draw (self, low: int, high: int) -> int:

		"""
		Advance the state once and return an integer in ``[low, high]``.

		Example:
			```python
			rng = ParkMillerRandom(1)
			rng.draw(0, 6)  # seed becomes 16807, 16807 % 7 == 0 → 0
			```
		"""

		with self._lock:
			self._seed = (self._seed * MULTIPLIER) % MODULUS
			return low + (self._seed % (high - low + 1))


	def choice (self, options: typing.Sequence[T]) -> T:

		"""Pick one item with a single index draw over ``options``."""

		if not options:
			raise ValueError("Options cannot be empty")

		return options[self.draw(0, len(options) - 1)]
