"""
Labels Package

Normalized labels from the user's personal record and the CSV loader that
produces them.
"""

from .loader import labels_to_dataframe, load_labels
from .models import Label

__all__ = [
    "Label",
    "labels_to_dataframe",
    "load_labels",
]
