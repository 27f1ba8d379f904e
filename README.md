# lassocd

LASSO (least absolute shrinkage and selection operator) regression fitted by
coordinate descent. Features can be standardized before training, and
training stops on convergence or when the error stops improving. Every
iteration is recorded in a history, and fitted models report R², mean
squared error and mean absolute error.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and NumPy.

## Usage

```python
import numpy as np

from lassocd.model import default_config, fit

X = np.array([[1, 2], [3, 4], [5, 6], [7, 8]], dtype=float)
y = np.array([3, 7, 11, 15], dtype=float)

config = default_config()
config.lam = 0.001
model = fit(X, y, config)

print(model.weights, model.intercept)
print(model.predict(X))   # predictions for each row of X
print(model.score(X, y))  # R² on the given data
print(model.mse(X, y))    # mean squared error
print(model.mae(X, y))    # mean absolute error
```

`fit(X, y, config=None)` takes a two-dimensional `X` and a `y` with one value
per row. Without a config it uses `default_config()`. The input arrays are
not modified.

### Configuration

`default_config()` returns a `Config` dataclass with these fields:

| field         | default | meaning                                                    |
|---------------|---------|------------------------------------------------------------|
| `lam`         | 0.01    | regularization strength                                    |
| `max_iter`    | 1000    | maximum number of passes over the features                 |
| `tol`         | 1e-4    | stop once the largest weight change falls below this       |
| `n_jobs`      | 4       | number of workers; must be at least 1                      |
| `standardize` | True    | center and scale features and center the target            |
| `verbose`     | False   | print progress while training                              |
| `log_step`    | 10      | print every this many iterations when verbose (at least 1) |
| `early_stop`  | True    | stop when the MSE stops improving                          |
| `stop_after`  | 20      | iterations without improvement before stopping             |
| `min_delta`   | 1e-5    | smallest MSE decrease that counts as an improvement        |

Coordinate updates share one residual vector and are applied one feature at
a time. After the first pass, only features with a nonzero weight are
updated again. When `standardize` is on, the returned weights and intercept
are converted back to the scale of the original features.

### Results

`fit` returns a `LassoModel` with:

- `weights`: the coefficients, as a NumPy array
- `intercept`: the bias term
- `lam`: the regularization strength used
- `history`: a list of `IterationLog` entries, one per iteration. Each entry
  holds `iteration`, `timestamp`, `max_delta` (largest weight change), `mse`
  and `r2`, measured on the training data as used during training, which is
  the standardized data when standardization is on.

`LassoModel.predict` raises `ValueError` when `X` does not have one column
per weight.

### Errors

`fit` raises `ValueError` in these cases:

- `X` is not two-dimensional
- `X` and `y` have different numbers of samples
- `X` has no samples
- `n_jobs` is below 1
- `verbose` is on and `log_step` is below 1

### Metrics

The evaluation functions can also be used on their own:

```python
from lassocd.metrics import mean_absolute_error, mean_squared_error, r_squared

mean_squared_error([3, 7, 11], [3, 6, 11])
r_squared([3, 7, 11], [3, 6, 11])
mean_absolute_error([3, 7, 11], [3, 6, 11])
```

Each function raises `ValueError` when its inputs differ in length or are
empty. `r_squared` returns 1.0 when the true values have (almost) no
variance.

### Soft thresholding

`soft_threshold(z, lam)` in `lassocd.model` applies the soft-thresholding
operator that coordinate descent uses:

- it returns `z - lam` above `lam`
- it returns `z + lam` below `-lam`
- it returns zero in between

## Example

The package installs a small demonstration command. It fits a model on a
four-sample dataset with verbose output, then prints the weights, the
intercept and the prediction for each sample:

```
lassocd-example
```

## Running the tests

```
pip install .[test]
pytest
```