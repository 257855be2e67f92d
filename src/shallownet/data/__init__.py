"""Data utilities for tabular classification."""

from .tabular import Dataset, load_dataset, one_hot

__all__ = ["Dataset", "load_dataset", "one_hot"]
