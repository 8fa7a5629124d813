#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
"""

from dataclasses import dataclass

from .currency import (
    cents_to_dollars_str,
    cents_to_milliunits,
    milliunits_to_cents,
    parse_dollars_to_cents,
)


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in cents.

    Signed the same way YNAB is: outflows are negative, inflows positive.

    Examples:
        >>> expense = Money.from_milliunits(-45990)
        >>> str(expense)
        '$-45.99'
        >>> expense.to_milliunits()
        -45990
        >>> Money.from_dollars("12.34") == Money.from_cents(1234)
        True
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_milliunits(cls, milliunits: int) -> "Money":
        """
        Create Money from YNAB milliunits, preserving sign.

        Sub-cent remainders are truncated; compare in milliunits when exactness matters.
        """
        return cls(cents=milliunits_to_cents(milliunits))

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """Parse from dollar string like '$123.45' or integer dollars."""
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_milliunits(self) -> int:
        """Get value in YNAB milliunits."""
        return cents_to_milliunits(self.cents)

    def __add__(self, other: "Money") -> "Money":
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return f"${cents_to_dollars_str(self.cents)}"

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
