#!/usr/bin/env python3
"""
Render fit and residual plots as CI artifacts (no browser needed).
Outputs:
  artifacts/fit.png
  artifacts/residuals.png
"""
from __future__ import annotations

import os
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from regression_lab.utils.config import load_config
from regression_lab.utils.insights import chart_frame
from regression_lab.utils.pipeline import train

ART = Path(os.environ.get("ARTIFACTS_DIR", "artifacts"))
SEED = int(os.environ.get("SNAPSHOT_SEED", "42"))


def fit_plot(df, equation: str, out: Path) -> None:
    plt.figure(figsize=(8, 4.5))
    plt.scatter(df["x"], df["actual"], s=12, color="#ef4444", label="Actual Values")
    plt.plot(df["x"], df["predicted"], color="#3b82f6", linewidth=2, label="Regression Line")
    plt.title(f"Actual vs Predicted ({equation})")
    plt.xlabel("X (Feature)")
    plt.ylabel("Y (Target)")
    plt.legend(loc="best", fontsize=8)
    plt.tight_layout()
    plt.savefig(out)
    plt.close()
    print(f"[snapshot] Wrote {out}")


def residual_plot(df, out: Path) -> None:
    plt.figure(figsize=(8, 3.5))
    plt.scatter(df["index"], df["residual"], s=12, color="#8884d8")
    plt.axhline(0.0, color="#ff0000", linestyle="--", linewidth=1)
    plt.title("Residual Plot")
    plt.xlabel("Observation Index")
    plt.ylabel("Residuals")
    plt.tight_layout()
    plt.savefig(out)
    plt.close()
    print(f"[snapshot] Wrote {out}")


def main():
    cfg = load_config()
    ART.mkdir(parents=True, exist_ok=True)
    run = train(
        int(cfg.ui.sample_size.default),
        float(cfg.ui.noise_level.default),
        seed=SEED,
        config=cfg.generator,
    )
    df = chart_frame(run)
    fit_plot(df, run.model.equation(cfg.decimals), ART / "fit.png")
    residual_plot(df, ART / "residuals.png")


if __name__ == "__main__":
    main()
