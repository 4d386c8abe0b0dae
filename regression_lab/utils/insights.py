"""
Display helpers shared by the Streamlit app and the scripts.
Rounding happens here, never in the core.
"""
from __future__ import annotations

import pandas as pd

from regression_lab.utils.pipeline import TrainingRun

# (lower bound exclusive, label), checked top-down
PERFORMANCE_BANDS = [
    (0.8, "Excellent"),
    (0.6, "Good"),
    (0.4, "Fair"),
]


def performance_label(r2: float) -> str:
    for bound, label in PERFORMANCE_BANDS:
        if r2 > bound:
            return label
    return "Poor"


def chart_frame(run: TrainingRun, decimals: int = 2) -> pd.DataFrame:
    """
    Per-point table for charts: x, actual, predicted, residual, plus a
    1-based observation index for the residual plot.
    """
    df = run.predictions.to_frame().rename(columns={"y": "actual"})
    df.insert(0, "index", range(1, len(df) + 1))
    for col in ("x", "actual", "predicted", "residual"):
        df[col] = df[col].round(decimals)
    return df


def summary_lines(run: TrainingRun, decimals: int = 4) -> list[str]:
    m = run.metrics
    shown = m.rounded(decimals)
    return [
        f"**Dataset Size:** {m.n} observations",
        "**Model Type:** Simple Linear Regression (y = mx + b)",
        f"**Performance:** {performance_label(m.r2)} (R² = {shown['r2']})",
        f"**Prediction Accuracy:** Average error of ±{shown['rmse']} units",
    ]
