"""Utility functions."""

from idea_engine.utils.dates import DateInfo, current_date_info, parse_iso_duration, utc_now

__all__ = ["DateInfo", "current_date_info", "parse_iso_duration", "utc_now"]
