"""Diagnostics package.

- new_years_table, round_trip, leap_years: plain text, no extra dependencies
- nowruz_scatter: optional (requires the `diagnostics` extras: numpy, matplotlib)
"""

__all__ = ["new_years_table", "round_trip", "leap_years", "nowruz_scatter"]
