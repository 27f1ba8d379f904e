"""Regression evaluation metrics."""

from __future__ import annotations

from typing import Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray

_TSS_EPSILON = 1e-15


def _paired(y_true: ArrayLike, y_pred: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    true = np.asarray(y_true, dtype=float).ravel()
    pred = np.asarray(y_pred, dtype=float).ravel()
    if true.shape != pred.shape:
        raise ValueError("input lengths must match")
    if true.size == 0:
        raise ValueError("inputs must not be empty")
    return true, pred


def mean_squared_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Return the mean of the squared differences."""
    true, pred = _paired(y_true, y_pred)
    diff = true - pred
    return float(np.sum(diff * diff)) / true.size


def r_squared(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Return the coefficient of determination.

    A target with (almost) no variance scores 1.
    """
    true, pred = _paired(y_true, y_pred)
    centered = true - float(np.sum(true)) / true.size
    tss = float(np.sum(centered * centered))
    diff = true - pred
    rss = float(np.sum(diff * diff))
    if tss < _TSS_EPSILON:
        return 1.0
    return 1.0 - rss / tss


def mean_absolute_error(y_true: ArrayLike, y_pred: ArrayLike) -> float:
    """Return the mean of the absolute differences."""
    true, pred = _paired(y_true, y_pred)
    return float(np.sum(np.abs(true - pred))) / true.size