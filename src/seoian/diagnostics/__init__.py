"""Diagnostics package.

- text tools: always available (pretty_month, year_table, round_trip, gaps)
- superday_plot: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "year_table", "round_trip", "gaps", "superday_plot"]
