import numpy as np
import pytest

from lassocd.model import (
    Config,
    IterationLog,
    LassoModel,
    default_config,
    fit,
    soft_threshold,
)

X_BASIC = np.array([[1, 2], [3, 4], [5, 6], [7, 8]], dtype=float)
Y_BASIC = [3.0, 7.0, 11.0, 15.0]


def test_default_config_values():
    cfg = default_config()
    assert cfg == Config(
        lam=0.01,
        max_iter=1000,
        tol=1e-4,
        n_jobs=4,
        standardize=True,
        verbose=False,
        log_step=10,
        early_stop=True,
        stop_after=20,
        min_delta=1e-5,
    )


@pytest.mark.parametrize(
    "z, lam, expected",
    [(5.0, 1.0, 4.0), (-5.0, 1.0, -4.0), (0.5, 1.0, 0.0), (-1.0, 1.0, 0.0)],
)
def test_soft_threshold(z, lam, expected):
    assert soft_threshold(z, lam) == expected


def test_lasso_regression():
    cfg = default_config()
    cfg.lam = 0.001
    cfg.max_iter = 1000
    model = fit(X_BASIC, Y_BASIC, cfg)

    tol = 1e-3
    assert model.weights[0] == pytest.approx(2.0, abs=tol)
    assert model.weights[1] == pytest.approx(0.0, abs=tol)
    assert model.intercept == pytest.approx(1.0, abs=tol)

    predictions = model.predict(X_BASIC)
    assert predictions == pytest.approx([3.0, 7.0, 11.0, 15.0], abs=tol)
    assert model.score(X_BASIC, Y_BASIC) == pytest.approx(1.0, abs=tol)
    assert model.mse(X_BASIC, Y_BASIC) < tol
    assert model.mae(X_BASIC, Y_BASIC) < tol


def test_high_regularization():
    cfg = default_config()
    cfg.lam = 100.0
    model = fit(X_BASIC, Y_BASIC, cfg)
    tol = 1e-5
    assert list(model.weights) == pytest.approx([0.0, 0.0], abs=tol)
    assert model.intercept == pytest.approx(np.mean(Y_BASIC), abs=tol)
    assert model.lam == 100.0


def test_standardization():
    X = np.array([[1, 200], [3, 400], [5, 600], [7, 800]], dtype=float)
    cfg = default_config()
    cfg.lam = 0.1
    cfg.standardize = True
    model = fit(X, Y_BASIC, cfg)
    predictions = model.predict(X)
    assert len(predictions) == len(Y_BASIC)
    assert list(predictions) == pytest.approx(Y_BASIC, abs=1.0)


def test_convergence():
    X = np.array([[i + j for j in range(5)] for i in range(100)], dtype=float)
    y = [float(i) for i in range(100)]
    cfg = default_config()
    cfg.lam = 0.1
    cfg.tol = 1e-6
    cfg.early_stop = False
    model = fit(X, y, cfg)
    assert len(model.history) < cfg.max_iter
    assert model.history[-1].max_delta <= cfg.tol


def test_history_is_sequential():
    model = fit(X_BASIC, Y_BASIC, default_config())
    assert [entry.iteration for entry in model.history] == list(range(len(model.history)))
    assert all(isinstance(entry, IterationLog) for entry in model.history)


def test_inputs_not_modified():
    X = X_BASIC.copy()
    y = np.array(Y_BASIC)
    fit(X, y, default_config())
    assert np.array_equal(X, X_BASIC)
    assert y.tolist() == Y_BASIC


def test_without_standardization_fits_data():
    cfg = default_config()
    cfg.standardize = False
    cfg.lam = 0.001
    model = fit(X_BASIC, Y_BASIC, cfg)
    assert model.score(X_BASIC, Y_BASIC) > 0.99


def test_max_iter_limits_history():
    cfg = default_config()
    cfg.max_iter = 1
    model = fit(X_BASIC, Y_BASIC, cfg)
    assert len(model.history) == 1


def test_sample_mismatch_raises():
    with pytest.raises(ValueError, match="different number of samples"):
        fit(X_BASIC, [1.0, 2.0], default_config())


def test_invalid_n_jobs_raises():
    cfg = default_config()
    cfg.n_jobs = 0
    with pytest.raises(ValueError):
        fit(X_BASIC, Y_BASIC, cfg)


def test_predict_shape_mismatch_raises():
    model = LassoModel(weights=np.array([1.0, 2.0]), intercept=0.0, lam=0.1)
    with pytest.raises(ValueError):
        model.predict([[1.0, 2.0, 3.0]])


def test_predict_with_given_weights():
    model = LassoModel(weights=np.array([2.0, 0.0]), intercept=1.0, lam=0.1)
    assert model.predict(X_BASIC).tolist() == Y_BASIC


def test_verbose_output(capsys):
    cfg = default_config()
    cfg.verbose = True
    cfg.lam = 0.001
    fit(X_BASIC, Y_BASIC, cfg)
    out = capsys.readouterr().out
    assert "Starting LASSO training" in out
    assert "Samples: 4, Features: 2" in out
    assert "Converged at iteration" in out