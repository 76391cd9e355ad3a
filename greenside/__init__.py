"""Greenside: on-course distance, club suggestion and scorecard services."""

__version__ = "0.1.0"
