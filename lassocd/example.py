"""Small demonstration of fitting a LASSO model."""

from __future__ import annotations

import argparse

import numpy as np

from lassocd.model import default_config, fit


def main(argv: list[str] | None = None) -> int:
    """Fit a model on a tiny dataset and print its predictions."""
    parser = argparse.ArgumentParser(description="Fit LASSO on a small example dataset.")
    parser.parse_args(argv)

    X = np.array([[1, 2], [3, 4], [5, 6], [7, 8]], dtype=float)
    y = [3.0, 7.0, 11.0, 15.0]

    cfg = default_config()
    cfg.lam = 0.001
    cfg.verbose = True

    model = fit(X, y, cfg)

    print("\nImproved weights:", model.weights.tolist())
    print("Improved intercept:", model.intercept)

    for row, target in zip(X, y):
        pred = float(row @ model.weights) + model.intercept
        print(
            f"X: [{row[0]:.1f}, {row[1]:.1f}] => y_true: {target:.1f}, y_pred: {pred:.4f}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())