import math

import numpy as np
import pytest

from regression_lab.utils.dataset import Dataset, generate
from regression_lab.utils.errors import DegenerateInput, InsufficientData, InvalidParameter
from regression_lab.utils.estimator import Model, fit, predict
from regression_lab.utils.metrics import (
    Metrics,
    adjusted_r_squared,
    evaluate,
    mean_absolute_error,
    mean_squared_error,
    r_squared,
    root_mean_squared_error,
)


def test_perfect_fit_scores(exact_line):
    m = evaluate(predict(fit(exact_line), exact_line))
    assert m.mse == 0.0
    assert m.rmse == 0.0
    assert m.mae == 0.0
    assert m.r2 == 1.0
    assert m.adjusted_r2 == 1.0
    assert m.n == 4


def test_noiseless_generated_data_has_unit_r2(rng):
    ds = generate(100, 0.0, rng)
    m = evaluate(predict(fit(ds), ds))
    assert m.r2 == pytest.approx(1.0, abs=1e-9)
    assert m.mse < 1e-12


def test_known_values():
    actual = [1.0, 2.0, 3.0, 4.0]
    predicted = [1.5, 2.0, 2.0, 5.0]
    # residuals: -0.5, 0, 1, -1
    assert mean_squared_error(actual, predicted) == pytest.approx(2.25 / 4)
    assert mean_absolute_error(actual, predicted) == pytest.approx(2.5 / 4)
    # ss_tot = 2.25 + 0.25 + 0.25 + 2.25 = 5
    assert r_squared(actual, predicted) == pytest.approx(1 - 2.25 / 5)
    assert adjusted_r_squared(0.55, 4) == pytest.approx(1 - 0.45 * 3 / 2)


def test_mse_is_rmse_squared(rng):
    for n in (1, 2, 3, 50):
        a = rng.normal(size=n)
        p = rng.normal(size=n)
        rmse = root_mean_squared_error(a, p)
        assert mean_squared_error(a, p) == pytest.approx(rmse ** 2, rel=1e-12)


def test_evaluate_mse_matches_rmse(rng):
    ds = generate(150, 0.5, rng)
    m = evaluate(predict(fit(ds), ds))
    assert m.mse == pytest.approx(m.rmse ** 2, rel=1e-12)
    assert 0.0 < m.r2 <= 1.0
    assert m.adjusted_r2 <= m.r2


def test_r2_uses_mean_of_scored_points(rng):
    """R^2 on a subset must use that subset's own mean, not the fitted mean_y."""
    ds = generate(60, 0.3, rng)
    preds = predict(fit(ds), ds)
    a, p = preds.actual[:20], preds.predicted[:20]
    expected = 1 - np.sum((a - p) ** 2) / np.sum((a - a.mean()) ** 2)
    assert r_squared(a, p) == pytest.approx(expected)


def test_r2_can_be_negative():
    assert r_squared([1.0, 2.0, 3.0], [3.0, 2.0, 1.0]) < 0


def test_constant_actuals_are_degenerate():
    ds = Dataset.from_points([(0, 4.0), (1, 4.0), (2, 4.0), (3, 4.0)])
    model = fit(ds)
    assert model.slope == 0.0
    with pytest.raises(DegenerateInput):
        evaluate(predict(model, ds))
    with pytest.raises(DegenerateInput):
        r_squared(ds.y, ds.y)


def test_zero_r2_is_not_degenerate():
    # predicting the mean exactly is a valid R^2 of 0
    assert r_squared([1.0, 2.0, 3.0], [2.0, 2.0, 2.0]) == 0.0


def test_two_points_fit_but_cannot_be_evaluated():
    ds = Dataset.from_points([(0, 1), (2, 5)])
    preds = predict(fit(ds), ds)
    assert r_squared(preds.actual, preds.predicted) == 1.0
    with pytest.raises(InsufficientData):
        adjusted_r_squared(1.0, 2)
    with pytest.raises(InsufficientData):
        evaluate(preds)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_adjusted_r2_needs_three_points(n):
    with pytest.raises(InsufficientData):
        adjusted_r_squared(0.5, n)


def test_empty_or_mismatched_inputs():
    with pytest.raises(InsufficientData):
        mean_squared_error([], [])
    with pytest.raises(InvalidParameter):
        mean_absolute_error([1.0, 2.0], [1.0])


def test_metrics_keep_full_precision_and_round_for_display():
    ds = Dataset.from_points([(0, 0.0), (1, 1.3), (2, 1.9), (3, 3.4)])
    m = evaluate(predict(Model(slope=1.0, intercept=0.0, mean_x=0.0, mean_y=0.0), ds))
    assert m.mse == pytest.approx((0.09 + 0.01 + 0.16) / 4)
    assert m.rmse != round(m.rmse, 4)

    shown = m.rounded()
    assert shown["mse"] == f"{m.mse:.4f}"
    assert shown["n"] == "4"
    assert all(len(v.split(".")[1]) == 4 for k, v in shown.items() if k != "n")


def test_metrics_as_dict():
    m = Metrics(mse=0.25, rmse=0.5, mae=0.5, r2=0.9, adjusted_r2=0.85, n=10)
    assert m.as_dict() == {"mse": 0.25, "rmse": 0.5, "mae": 0.5, "r2": 0.9, "adjusted_r2": 0.85, "n": 10}
    assert m.rounded(2)["r2"] == "0.90"
    assert math.isclose(m.rmse ** 2, m.mse)
