"""
Configuration for the generator, the Streamlit controls and display precision.

Values come from a small YAML file (config/config.yaml by default, or the path
in REGRESSION_LAB_CONFIG). A missing file or missing keys fall back to the
defaults below, so the core runs fine without any config at all.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from regression_lab.utils.errors import InvalidParameter

CONFIG_PATH = Path("config/config.yaml")
CONFIG_ENV_VAR = "REGRESSION_LAB_CONFIG"


@dataclass(frozen=True)
class GeneratorConfig:
    true_slope: float = 2.5
    true_intercept: float = 10.0
    x_min: float = 0.0
    x_max: float = 20.0
    noise_scale: float = 50.0   # half-width of the noise term = noise_level * noise_scale / 2

    def __post_init__(self) -> None:
        for name in ("true_slope", "true_intercept", "x_min", "x_max", "noise_scale"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidParameter(f"{name} must be finite, got {value!r}")
        if self.x_max <= self.x_min:
            raise InvalidParameter(f"x_max ({self.x_max}) must be greater than x_min ({self.x_min})")
        if self.noise_scale < 0:
            raise InvalidParameter(f"noise_scale must be non-negative, got {self.noise_scale}")

    def noise_half_width(self, noise_level: float) -> float:
        return noise_level * self.noise_scale / 2


@dataclass(frozen=True)
class SliderConfig:
    min: float
    max: float
    default: float
    step: Optional[float] = None


@dataclass(frozen=True)
class UiConfig:
    sample_size: SliderConfig = SliderConfig(min=50, max=200, default=100)
    noise_level: SliderConfig = SliderConfig(min=0.05, max=0.5, default=0.1, step=0.05)
    seed: Optional[int] = None


@dataclass(frozen=True)
class AppConfig:
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    decimals: int = 4


def _pick(section: dict, cls) -> dict:
    # unknown keys are ignored
    names = cls.__dataclass_fields__.keys()
    return {k: v for k, v in section.items() if k in names}


def _slider(raw: Any, fallback: SliderConfig) -> SliderConfig:
    if not isinstance(raw, dict):
        return fallback
    merged = {**fallback.__dict__, **_pick(raw, SliderConfig)}
    return SliderConfig(**merged)


def resolve_path(path: Optional[str | os.PathLike] = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_ENV_VAR, CONFIG_PATH))


def load_cfg(path: Optional[str | os.PathLike] = None) -> dict:
    cfg_path = resolve_path(path)
    if not cfg_path.exists():
        return {}
    with open(cfg_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_config(path: Optional[str | os.PathLike] = None) -> AppConfig:
    """Read the YAML config into typed settings; anything missing keeps its default."""
    raw = load_cfg(path)

    gen_raw = raw.get("generator") or {}
    generator = GeneratorConfig(**{k: float(v) for k, v in _pick(gen_raw, GeneratorConfig).items()})

    ui_raw = raw.get("ui") or {}
    defaults = UiConfig()
    seed = ui_raw.get("seed", defaults.seed)
    ui = UiConfig(
        sample_size=_slider(ui_raw.get("sample_size"), defaults.sample_size),
        noise_level=_slider(ui_raw.get("noise_level"), defaults.noise_level),
        seed=int(seed) if seed is not None else None,
    )

    display = raw.get("display") or {}
    decimals = int(display.get("decimals", 4))

    return AppConfig(generator=generator, ui=ui, decimals=decimals)
