"""Command-line explorer for AutoML video classification models."""

__version__ = "0.1.0"
