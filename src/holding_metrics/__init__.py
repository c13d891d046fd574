"""Time-windowed performance metrics for a single-asset holding."""

__version__ = "0.1.0"
