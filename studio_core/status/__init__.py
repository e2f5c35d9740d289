"""Project status normalization."""

from .classifier import StatusClassifier, classify_status, normalize_status

__all__ = ["StatusClassifier", "classify_status", "normalize_status"]
