"""LASSO regression trained by coordinate descent."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np

from lassocd.metrics import (
    mean_absolute_error,
    mean_squared_error,
    r_squared,
)

_STD_FLOOR = 1e-8
_NORM_EPSILON = 1e-8


@dataclass
class Config:
    """Training parameters.

    ``n_jobs`` is the number of workers; their coordinate updates share the
    residual vector and are applied one at a time.
    """

    lam: float = 0.01
    max_iter: int = 1000
    tol: float = 1e-4
    n_jobs: int = 4
    standardize: bool = True
    verbose: bool = False
    log_step: int = 10
    early_stop: bool = True
    stop_after: int = 20
    min_delta: float = 1e-5


@dataclass(frozen=True)
class IterationLog:
    """Metrics recorded after one pass over the features."""

    iteration: int
    timestamp: datetime
    max_delta: float
    mse: float
    r2: float


@dataclass
class LassoModel:
    """A trained LASSO regression model."""

    weights: np.ndarray
    intercept: float
    lam: float
    history: list[IterationLog] = field(default_factory=list)

    def predict(self, X) -> np.ndarray:
        """Return predictions for the rows of ``X``."""
        data = np.asarray(X, dtype=float)
        if data.ndim != 2 or data.shape[1] != len(self.weights):
            raise ValueError(
                f"X must have shape (n_samples, {len(self.weights)}), got {data.shape}"
            )
        return data @ self.weights + self.intercept

    def score(self, X, y) -> float:
        """Return the R² score on the given data."""
        return r_squared(y, self.predict(X))

    def mse(self, X, y) -> float:
        """Return the mean squared error on the given data."""
        return mean_squared_error(y, self.predict(X))

    def mae(self, X, y) -> float:
        """Return the mean absolute error on the given data."""
        return mean_absolute_error(y, self.predict(X))


def default_config() -> Config:
    """Return the recommended training parameters."""
    return Config()


def soft_threshold(z: float, lam: float) -> float:
    """Apply the soft-thresholding operator."""
    if z > lam:
        return z - lam
    if z < -lam:
        return z + lam
    return 0.0


def _standardize(X: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Center and scale the columns of ``X`` in place; return means and stds."""
    n_samples = X.shape[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        means = X.sum(axis=0) / n_samples
        X -= means
        stds = np.sqrt((X * X).sum(axis=0) / (n_samples - 1))
        stds = np.where(stds < _STD_FLOOR, 1.0, stds)
        X /= stds
    return means, stds


def _format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def fit(X, y, config: Config | None = None) -> LassoModel:
    """Train a LASSO regression model by coordinate descent."""
    cfg = config if config is not None else default_config()
    data = np.array(X, dtype=float)
    if data.ndim != 2:
        raise ValueError("X must be a 2-D array")
    target = np.array(y, dtype=float).ravel()
    n_samples, n_features = data.shape
    if target.size != n_samples:
        raise ValueError("X and y have different number of samples")
    if n_samples == 0:
        raise ValueError("X must contain at least one sample")
    if cfg.n_jobs < 1:
        raise ValueError("n_jobs must be at least 1")
    if cfg.verbose and cfg.log_step < 1:
        raise ValueError("log_step must be at least 1")

    start = time.perf_counter()

    means = stds = None
    y_mean = 0.0
    if cfg.standardize:
        means, stds = _standardize(data)
        y_mean = float(target.sum()) / n_samples
        target -= y_mean

    weights = np.zeros(n_features)
    intercept = 0.0
    active = np.zeros(n_features, dtype=bool)
    residuals = target.copy()

    history: list[IterationLog] = []
    best_mse = sys.float_info.max
    no_improve = 0

    if cfg.verbose:
        print("Starting LASSO training")
        print(f"Params: λ={cfg.lam:.4f}, MaxIter={cfg.max_iter}, Tol={cfg.tol:.0e}")
        print(f"Samples: {n_samples}, Features: {n_features}")

    for iteration in range(cfg.max_iter):
        iter_start = time.perf_counter()
        max_delta = 0.0

        for j, column in enumerate(data.T):
            if iteration > 0 and not active[j]:
                continue
            old = weights[j]
            if old != 0:
                residuals += old * column
            rho = float(column @ residuals)
            xtx = float(column @ column)
            new = soft_threshold(rho, cfg.lam) / (xtx + _NORM_EPSILON)
            max_delta = max(max_delta, abs(new - old))
            if new != 0:
                residuals -= new * column
                active[j] = True
            elif old != 0:
                active[j] = False
            weights[j] = new

        mean_residual = float(residuals.sum()) / n_samples
        delta_intercept = abs(mean_residual)
        intercept += mean_residual
        residuals -= mean_residual

        predictions = data @ weights + intercept
        mse = mean_squared_error(target, predictions)
        r2 = r_squared(target, predictions)
        history.append(
            IterationLog(
                iteration=iteration,
                timestamp=datetime.now(),
                max_delta=max_delta,
                mse=mse,
                r2=r2,
            )
        )

        if cfg.verbose and (
            iteration % cfg.log_step == 0 or iteration == cfg.max_iter - 1
        ):
            elapsed = _format_duration(time.perf_counter() - iter_start)
            print(
                f"Iter {iteration:4d}: MSE={mse:.4f} R²={r2:.4f} "
                f"|Δ|={max_delta:.2e} |Δb|={delta_intercept:.2e} | "
                f"Active={int(active.sum())}/{n_features} | Time={elapsed}"
            )

        if max_delta < cfg.tol:
            if cfg.verbose:
                print(f"Converged at iteration {iteration}: |Δ| < {cfg.tol:.0e}")
            break

        if cfg.early_stop:
            if mse < best_mse - cfg.min_delta:
                best_mse = mse
                no_improve = 0
            else:
                no_improve += 1
            if no_improve >= cfg.stop_after:
                if cfg.verbose:
                    print(
                        f"Early stopping at iteration {iteration}: "
                        f"no improvement for {no_improve} iterations"
                    )
                break

    if cfg.standardize:
        nonzero = stds != 0
        weights[nonzero] /= stds[nonzero]
        intercept = y_mean + intercept - float(means @ weights)

    if cfg.verbose:
        print(f"\nTraining completed in {_format_duration(time.perf_counter() - start)}")
        print(f"Weights: {weights.tolist()}")
        print(f"Intercept: {intercept:.4f}")

    return LassoModel(weights=weights, intercept=intercept, lam=cfg.lam, history=history)