"""
Goodness-of-fit statistics over a set of predictions.

Values are kept at full float precision; rounding for display happens only in
Metrics.rounded().
"""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Union

import numpy as np

from regression_lab.utils.errors import DegenerateInput, InsufficientData, InvalidParameter
from regression_lab.utils.estimator import Predictions

log = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Metrics:
    mse: float
    rmse: float
    mae: float
    r2: float
    adjusted_r2: float
    n: int

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def rounded(self, decimals: int = 4) -> Dict[str, str]:
        out = {k: f"{v:.{decimals}f}" for k, v in asdict(self).items() if k != "n"}
        out["n"] = str(self.n)
        return out


def _pair(actual: ArrayLike, predicted: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(actual, dtype=float).reshape(-1)
    p = np.asarray(predicted, dtype=float).reshape(-1)
    if a.size != p.size:
        raise InvalidParameter(f"actual and predicted differ in length ({a.size} vs {p.size})")
    if a.size == 0:
        raise InsufficientData("Need at least 1 prediction")
    return a, p


def mean_squared_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    a, p = _pair(actual, predicted)
    return float(np.sum((a - p) ** 2) / a.size)


def root_mean_squared_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    return math.sqrt(mean_squared_error(actual, predicted))


def mean_absolute_error(actual: ArrayLike, predicted: ArrayLike) -> float:
    a, p = _pair(actual, predicted)
    return float(np.sum(np.abs(a - p)) / a.size)


def r_squared(actual: ArrayLike, predicted: ArrayLike) -> float:
    """1 - SS_res / SS_tot, with the mean taken over `actual` itself."""
    a, p = _pair(actual, predicted)
    mean_actual = float(np.sum(a) / a.size)
    ss_tot = float(np.sum((a - mean_actual) ** 2))
    if ss_tot == 0 or np.all(a == a[0]):
        raise DegenerateInput("All actual values are identical; R^2 is undefined")
    ss_res = float(np.sum((a - p) ** 2))
    return 1.0 - ss_res / ss_tot


def adjusted_r_squared(r2: float, n: int) -> float:
    if n <= 2:
        raise InsufficientData(f"Adjusted R^2 needs at least 3 observations, got {n}")
    return 1.0 - ((1.0 - r2) * (n - 1)) / (n - 2)


def evaluate(predictions: Predictions) -> Metrics:
    """
    Score predictions against their actual values.

    Raises InsufficientData when there are fewer than 3 predictions (adjusted R^2
    is part of the record) and DegenerateInput when every actual y is equal.
    """
    n = len(predictions)
    if n <= 2:
        raise InsufficientData(f"Need at least 3 predictions to evaluate, got {n}")

    actual, predicted = predictions.actual, predictions.predicted
    mse = mean_squared_error(actual, predicted)
    r2 = r_squared(actual, predicted)
    metrics = Metrics(
        mse=mse,
        rmse=math.sqrt(mse),
        mae=mean_absolute_error(actual, predicted),
        r2=r2,
        adjusted_r2=adjusted_r_squared(r2, n),
        n=n,
    )
    log.debug("evaluated n=%d mse=%r r2=%r", n, metrics.mse, metrics.r2)
    return metrics
