"""
Synthetic dataset generation.

A dataset is a noisy sample of the line y = true_slope * x + true_intercept,
with x drawn uniformly from [x_min, x_max) and a uniform noise term centred on
zero. Randomness always comes from a caller-supplied numpy Generator.
"""
from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from regression_lab.utils.config import GeneratorConfig
from regression_lab.utils.errors import InvalidParameter

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    id: int
    x: float
    y: float


def _frozen(values, dtype) -> np.ndarray:
    arr = np.array(values, dtype=dtype).reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Dataset:
    """Observations sorted ascending by x; ids record the original generation order."""
    ids: np.ndarray
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        ids = _frozen(self.ids, np.int64)
        x = _frozen(self.x, float)
        y = _frozen(self.y, float)
        if not (ids.size == x.size == y.size):
            raise InvalidParameter(
                f"ids, x and y must have the same length (got {ids.size}, {x.size}, {y.size})"
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise InvalidParameter("Dataset values must be finite")
        object.__setattr__(self, "ids", ids)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "Dataset":
        """Build a dataset from (x, y) pairs; ids follow input order, rows are sorted by x."""
        pairs = [(float(px), float(py)) for px, py in points]
        x = np.array([p[0] for p in pairs], dtype=float)
        y = np.array([p[1] for p in pairs], dtype=float)
        return cls._sorted(np.arange(len(pairs)), x, y)

    @classmethod
    def _sorted(cls, ids: np.ndarray, x: np.ndarray, y: np.ndarray) -> "Dataset":
        order = np.argsort(x, kind="stable")
        return cls(ids=ids[order], x=x[order], y=y[order])

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self) -> Iterator[Observation]:
        for i, xv, yv in zip(self.ids, self.x, self.y):
            yield Observation(id=int(i), x=float(xv), y=float(yv))

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"id": self.ids, "x": self.x, "y": self.y})


def _check_sample_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameter(f"Sample count must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidParameter(f"Sample count must be positive, got {n}")
    return int(n)


def _check_noise_level(noise_level) -> float:
    if isinstance(noise_level, bool) or not isinstance(noise_level, numbers.Real):
        raise InvalidParameter(f"Noise level must be a real number, got {noise_level!r}")
    noise_level = float(noise_level)
    if not math.isfinite(noise_level) or noise_level < 0:
        raise InvalidParameter(f"Noise level must be a finite non-negative number, got {noise_level}")
    return noise_level


def generate(
    n: int,
    noise_level: float,
    rng: np.random.Generator,
    config: Optional[GeneratorConfig] = None,
) -> Dataset:
    """
    Draw n observations around the configured true line.

    - x ~ U[x_min, x_max)
    - y = true_slope * x + true_intercept + U[-h, h), h = noise_level * noise_scale / 2
    - ids are assigned in draw order, then rows are stably sorted by x.

    Raises InvalidParameter for n <= 0 or noise_level < 0.
    """
    n = _check_sample_count(n)
    noise_level = _check_noise_level(noise_level)
    cfg = config or GeneratorConfig()

    x = rng.uniform(cfg.x_min, cfg.x_max, size=n)
    true_y = cfg.true_slope * x + cfg.true_intercept
    # (u - 0.5) * 2h spans [-h, h); exactly zero when noise_level is zero
    noise = (rng.random(n) - 0.5) * (2 * cfg.noise_half_width(noise_level))
    y = true_y + noise if noise_level > 0 else true_y

    log.debug("generated %d observations (noise_level=%s)", n, noise_level)
    return Dataset._sorted(np.arange(n), x, y)
