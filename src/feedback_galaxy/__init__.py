"""Feedback Galaxy: command-line course feedback collection."""

__version__ = "1.0.0"
