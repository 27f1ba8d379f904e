[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lassocd"
version = "0.1.0"
description = "LASSO regression fitted by coordinate descent, with training history and evaluation metrics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "lasso",
    "regression",
    "coordinate-descent",
    "regularization",
    "sparse",
    "linear-model",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lassocd-example = "lassocd.example:main"

[tool.hatch.build.targets.wheel]
packages = ["lassocd"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
