"""Publish pylint reports as GitHub check-run annotations."""

__version__ = "1.0.0"
