"""Utility functions for entrybook."""

from entrybook.utils.date_parser import days_since, format_timestamp, parse_manual_date

__all__ = ["parse_manual_date", "days_since", "format_timestamp"]
