"""Trilemma — Speed / Quality / Cost circle geometry and trade-off analysis."""

__version__ = "0.1.0"
