"""PTO Plan - personal time-off tracking and projection."""

__version__ = "0.1.0"
