"""LASSO regression fitted by coordinate descent, with evaluation metrics and a demo command."""

__version__ = "0.1.0"
__all__ = ["metrics", "model", "example"]