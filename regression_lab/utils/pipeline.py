"""
One training run: generate -> fit -> predict -> evaluate.

Each call builds fresh, immutable results and keeps nothing between calls, so
a failed run can never disturb a previous one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from regression_lab.utils.config import GeneratorConfig
from regression_lab.utils.dataset import Dataset, generate
from regression_lab.utils.estimator import Model, Predictions, fit, predict
from regression_lab.utils.metrics import Metrics, evaluate

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingRun:
    dataset: Dataset
    model: Model
    predictions: Predictions
    metrics: Metrics


def train(
    sample_size: int,
    noise_level: float,
    rng: Optional[np.random.Generator] = None,
    *,
    seed: Optional[int] = None,
    config: Optional[GeneratorConfig] = None,
) -> TrainingRun:
    """
    Run the full pipeline once.

    Pass `rng` to control the random source directly, or `seed` to get a fresh
    reproducible one; with neither, numpy seeds from OS entropy.
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    dataset = generate(sample_size, noise_level, rng, config)
    model = fit(dataset)
    predictions = predict(model, dataset)
    metrics = evaluate(predictions)

    log.info(
        "trained n=%d noise=%s slope=%.4f intercept=%.4f r2=%.4f",
        metrics.n, noise_level, model.slope, model.intercept, metrics.r2,
    )
    return TrainingRun(dataset=dataset, model=model, predictions=predictions, metrics=metrics)
