#!/usr/bin/env python3
"""
Run one training pass from the command line and write a metrics artifact.

Usage:
  python scripts/train_model.py --samples 100 --noise 0.1 --seed 42
  python scripts/train_model.py --samples 150 --noise 0.3 --out artifacts/metrics.json
Env (optional):
  REGRESSION_LAB_CONFIG (default: config/config.yaml)
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from regression_lab.utils.config import load_config
from regression_lab.utils.errors import RegressionError
from regression_lab.utils.insights import performance_label
from regression_lab.utils.pipeline import train


def eprint(*a, **k):
    print(*a, file=sys.stderr, **k)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Train a single-variable OLS model on synthetic data")
    p.add_argument("--samples", type=int, default=None, help="Number of observations (default from config)")
    p.add_argument("--noise", type=float, default=None, help="Noise level >= 0 (default from config)")
    p.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible dataset")
    p.add_argument("--config", default=None, help="YAML config path")
    p.add_argument("--out", default="artifacts/metrics.json", help="Where to write the JSON artifact")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    samples = args.samples if args.samples is not None else int(cfg.ui.sample_size.default)
    noise = args.noise if args.noise is not None else float(cfg.ui.noise_level.default)

    print(f"[train] samples={samples} noise={noise} seed={args.seed}")
    run = train(samples, noise, seed=args.seed, config=cfg.generator)

    shown = run.metrics.rounded(cfg.decimals)
    print(f"[train] {run.model.equation(cfg.decimals)}")
    for key in ("mse", "rmse", "mae", "r2", "adjusted_r2"):
        print(f"[train] {key.ljust(11)} {shown[key]}")
    print(f"[train] performance: {performance_label(run.metrics.r2)}")

    payload = {
        "params": {"samples": samples, "noise": noise, "seed": args.seed},
        "model": {
            "slope": run.model.slope,
            "intercept": run.model.intercept,
            "mean_x": run.model.mean_x,
            "mean_y": run.model.mean_y,
        },
        "metrics": run.metrics.as_dict(),
    }
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2) + "\n")
    print(f"[train] Wrote {out}")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except RegressionError as e:
        eprint(f"[ERROR] {type(e).__name__}: {e}")
        sys.exit(2)
    except Exception as e:
        eprint(f"[FATAL] {type(e).__name__}: {e}")
        sys.exit(1)
