"""Command-line client, data models and analytics for a VOR randomness oracle daemon."""

__version__ = "0.1.0"