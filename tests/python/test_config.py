from pathlib import Path

import pytest

from regression_lab.utils.config import CONFIG_ENV_VAR, AppConfig, GeneratorConfig, load_config
from regression_lab.utils.errors import InvalidParameter

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "config.yaml"


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == AppConfig()
    assert cfg.generator.true_slope == 2.5
    assert cfg.generator.true_intercept == 10.0
    assert cfg.ui.sample_size.default == 100
    assert cfg.ui.noise_level.step == 0.05
    assert cfg.decimals == 4


def test_repo_config_matches_defaults():
    cfg = load_config(REPO_CONFIG)
    assert cfg.generator == GeneratorConfig()
    assert cfg.ui.sample_size.min == 50 and cfg.ui.sample_size.max == 200
    assert cfg.ui.noise_level.min == 0.05 and cfg.ui.noise_level.max == 0.5


def test_partial_yaml_overrides_only_given_keys(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text(
        "generator:\n"
        "  true_slope: -1.5\n"
        "  unknown_key: 3\n"
        "ui:\n"
        "  sample_size:\n"
        "    default: 75\n"
        "  seed: 9\n"
        "display:\n"
        "  decimals: 2\n"
    )
    cfg = load_config(p)
    assert cfg.generator.true_slope == -1.5
    assert cfg.generator.true_intercept == 10.0
    assert cfg.ui.sample_size.default == 75
    assert cfg.ui.sample_size.max == 200
    assert cfg.ui.seed == 9
    assert cfg.decimals == 2


def test_env_var_selects_config(tmp_path, monkeypatch):
    p = tmp_path / "env.yaml"
    p.write_text("generator:\n  true_intercept: 1.0\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
    assert load_config().generator.true_intercept == 1.0


def test_empty_yaml_is_fine(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == AppConfig()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"x_min": 5.0, "x_max": 5.0},
        {"x_min": 10.0, "x_max": 0.0},
        {"noise_scale": -1.0},
        {"true_slope": float("nan")},
    ],
)
def test_invalid_generator_config(kwargs):
    with pytest.raises(InvalidParameter):
        GeneratorConfig(**kwargs)


def test_noise_half_width():
    assert GeneratorConfig().noise_half_width(0.1) == pytest.approx(2.5)
    assert GeneratorConfig().noise_half_width(0.0) == 0.0
