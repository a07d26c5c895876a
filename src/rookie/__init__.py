"""rookie — a two-player chess rule engine."""

__version__ = "0.1.0"
