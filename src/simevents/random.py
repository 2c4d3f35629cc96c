"""
Random number streams for event generation.

Every stream owns its generator state. A multiplicative generator fills a
128-slot shuffle table which is then drawn from by a linear congruential
generator (Maclaren-Marsaglia shuffle). Two streams built from the same seeds
and ``stream_select`` produce the same sequence. ``stream_select`` only skips
ahead in one sequence, so streams that must be independent get their own
seeds (see ``seed_pairs``).

Anything that is a zero-argument callable returning a float can stand in for
a stream (see ``Sampler``), which is how tests inject fixed sequences.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Callable

from simevents.errors import InvalidParameterError

TWO_26 = 67108864  # 2**26
M = 100000000
B = 31415821
M1 = 10000

SERIES_SIZE = 128
SKIP_PER_STREAM = 1000

DEFAULT_MG_SEED = 772531  # Must be odd
DEFAULT_LCG_SEED = 1878892440

Sampler = Callable[[], float]

# Shuffle table built from the default seeds. Each stream copies it.
_initial_series_cache: list[float] | None = None
_initial_mseed_after_series: int = 0


def reset_prng_cache() -> None:
    """Drop the cached default shuffle table."""
    global _initial_series_cache, _initial_mseed_after_series
    _initial_series_cache = None
    _initial_mseed_after_series = 0


def seed_pair(seed: int | None = None) -> tuple[int, int]:
    """
    Derive ``(mg_seed, lcg_seed)`` for a new stream.

    With an integer seed the pair is reproducible. With ``None`` it comes from
    OS entropy, so processes created without a seed never share a sequence.
    """
    return seed_pairs(seed, 1)[0]


def seed_pairs(seed: int | None = None, count: int = 2) -> list[tuple[int, int]]:
    """
    Derive ``count`` seed pairs, distinct in both seeds, from one seed, one per stream.

    Each pair starts its own generator, unlike ``stream_select`` which only
    offsets a shared one.
    """
    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    pairs: list[tuple[int, int]] = []
    while len(pairs) < count:
        pair = (rng.randrange(1, TWO_26, 2), rng.randrange(1, M))
        if all(pair[0] != p[0] and pair[1] != p[1] for p in pairs):
            pairs.append(pair)
    return pairs


class RandomStream(ABC):
    """
    Base class for seeded random streams.

    Args:
        stream_select: skip ``stream_select * 1000`` values of the sequence
            the seeds define.
        mg_seed: multiplicative generator seed (made odd and positive).
        lcg_seed: linear congruential generator seed (made positive).
    """

    def __init__(
        self,
        stream_select: int = 0,
        mg_seed: int = DEFAULT_MG_SEED,
        lcg_seed: int = DEFAULT_LCG_SEED,
    ) -> None:
        global _initial_series_cache, _initial_mseed_after_series

        if isinstance(stream_select, bool) or not isinstance(stream_select, int) or stream_select < 0:
            raise InvalidParameterError(f"stream_select must be a non-negative integer (got {stream_select!r})")

        if mg_seed % 2 == 0:
            mg_seed -= 1
        if mg_seed < 0:
            mg_seed = -mg_seed
        if lcg_seed < 0:
            lcg_seed = -lcg_seed

        self._mseed = mg_seed
        self._lseed = lcg_seed

        is_default = mg_seed == DEFAULT_MG_SEED and lcg_seed == DEFAULT_LCG_SEED
        if is_default and _initial_series_cache is not None:
            self._series = _initial_series_cache.copy()
            self._mseed = _initial_mseed_after_series
        else:
            self._series = [self._mgen() for _ in range(SERIES_SIZE)]
            if is_default:
                _initial_series_cache = self._series.copy()
                _initial_mseed_after_series = self._mseed

        for _ in range(stream_select * SKIP_PER_STREAM):
            self._uniform()

    def _mgen(self) -> float:
        """Y[i+1] = Y[i] * 5^5 mod 2^26, always odd and so never zero."""
        self._mseed = (self._mseed * 25) % TWO_26
        self._mseed = (self._mseed * 25) % TWO_26
        self._mseed = (self._mseed * 5) % TWO_26
        return self._mseed / TWO_26

    def _uniform(self) -> float:
        """Uniform value in (0, 1)."""
        # Split multiply keeps the intermediate products small.
        p0 = self._lseed % M1
        p1 = self._lseed // M1
        q0 = B % M1
        q1 = B // M1
        self._lseed = (((((p0 * q1 + p1 * q0) % M1) * M1 + p0 * q0) % M) + 1) % M

        choose = self._lseed % SERIES_SIZE
        result = self._series[choose]
        self._series[choose] = self._mgen()
        return result

    @abstractmethod
    def __call__(self) -> float:
        """Generate the next value from the distribution."""
        ...

    def next(self) -> float:
        """Same as calling the stream."""
        return self()


class ExponentialStream(RandomStream):
    """
    Exponential distribution with the given mean.

    Density ``(1/mean) * exp(-x/mean)`` for ``x >= 0``. Samples are strictly
    positive.
    """

    def __init__(
        self,
        mean: float,
        stream_select: int = 0,
        mg_seed: int = DEFAULT_MG_SEED,
        lcg_seed: int = DEFAULT_LCG_SEED,
    ) -> None:
        if isinstance(mean, bool) or not isinstance(mean, (int, float)):
            raise InvalidParameterError(f"mean must be a number (got {mean!r})")
        if not math.isfinite(mean) or mean <= 0:
            raise InvalidParameterError(f"mean must be positive and finite (got {mean!r})")
        super().__init__(stream_select, mg_seed, lcg_seed)
        self._mean = float(mean)

    @property
    def mean(self) -> float:
        return self._mean

    def __call__(self) -> float:
        return -self._mean * math.log(self._uniform())

    def __repr__(self) -> str:
        return f"ExponentialStream(mean={self._mean})"
