"""
Closed-form single-predictor OLS and prediction.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np
import pandas as pd

from regression_lab.utils.dataset import Dataset
from regression_lab.utils.errors import DegenerateInput, InsufficientData

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Model:
    slope: float
    intercept: float
    mean_x: float
    mean_y: float

    def predict_value(self, x: float) -> float:
        return self.slope * x + self.intercept

    def equation(self, decimals: int = 4) -> str:
        return f"y = {self.slope:.{decimals}f}x + {self.intercept:.{decimals}f}"


def fit(dataset: Dataset) -> Model:
    """
    Fit y = slope * x + intercept via the textbook sums formula:

        slope     = (n*Sxy - Sx*Sy) / (n*Sxx - Sx^2)
        intercept = mean_y - slope * mean_x

    No centering is applied, so results match the naive formula exactly.
    Raises InsufficientData for n < 2 and DegenerateInput when every x is equal.
    """
    n = len(dataset)
    if n < 2:
        raise InsufficientData(f"Need at least 2 observations to fit a line, got {n}")

    x, y = dataset.x, dataset.y
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_xx = float(np.sum(x * x))

    denominator = n * sum_xx - sum_x * sum_x
    # identical x can still leave a rounding residue in the denominator
    if denominator == 0 or np.all(x == x[0]):
        raise DegenerateInput("All x values are identical; slope is undefined")

    mean_x = sum_x / n
    mean_y = sum_y / n
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = mean_y - slope * mean_x

    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateInput(f"Fit produced non-finite parameters (slope={slope}, intercept={intercept})")

    log.debug("fit n=%d slope=%r intercept=%r", n, slope, intercept)
    return Model(slope=slope, intercept=intercept, mean_x=mean_x, mean_y=mean_y)


@dataclass(frozen=True)
class Prediction:
    id: int
    x: float
    y: float
    predicted: float

    @property
    def residual(self) -> float:
        return self.y - self.predicted


@dataclass(frozen=True, eq=False)
class Predictions:
    """One predicted value per observation of `dataset`, in the same order."""
    dataset: Dataset
    predicted: np.ndarray

    def __len__(self) -> int:
        return int(self.predicted.size)

    def __iter__(self) -> Iterator[Prediction]:
        for obs, p in zip(self.dataset, self.predicted):
            yield Prediction(id=obs.id, x=obs.x, y=obs.y, predicted=float(p))

    @property
    def actual(self) -> np.ndarray:
        return self.dataset.y

    @property
    def residuals(self) -> np.ndarray:
        return self.dataset.y - self.predicted

    def to_frame(self) -> pd.DataFrame:
        df = self.dataset.to_frame()
        df["predicted"] = self.predicted
        df["residual"] = self.residuals
        return df


def predict(model: Model, dataset: Dataset) -> Predictions:
    predicted = model.slope * dataset.x + model.intercept
    predicted.setflags(write=False)
    return Predictions(dataset=dataset, predicted=predicted)
