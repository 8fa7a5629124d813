#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting for labels and YNAB data.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object
        """
        return cls(date=datetime.strptime(date_str.strip(), format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD (also the format YNAB expects)."""
        return self.date.isoformat()

    def distance_to(self, other: "FinancialDate") -> timedelta:
        """Absolute distance between two dates."""
        return abs(self.date - other.date)

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"
