"""Diagnostics package.

- round_trip: always available, day-by-day conversion checks
- year_lengths: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["round_trip", "year_lengths"]
