"""Summarize a GitHub user's public activity and render it as an SVG card."""

__version__ = "0.1.0"

__all__ = ["__version__"]
