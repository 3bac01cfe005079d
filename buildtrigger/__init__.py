"""Trigger GitLab builds and wait for them to finish."""

__version__ = "0.1.0"
