#!/usr/bin/env python3
"""
Label Domain Model

A label is a user-intended transaction from a personal record (for example a
CSV export) whose memo should end up on the matching YNAB transaction.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


@dataclass(frozen=True)
class Label:
    """
    Normalized label record.

    Amounts are signed the same way YNAB signs them: outflows negative.
    """

    id: str
    date: FinancialDate
    amount: Money
    payee: str = ""
    memo: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Label":
        """
        Create Label from a persisted dict.

        Args:
            data: Dictionary with "amount" in integer cents and ISO "date"

        Returns:
            Label instance
        """
        return cls(
            id=data["id"],
            date=FinancialDate.from_string(data["date"]),
            amount=Money.from_cents(data["amount"]),
            payee=data.get("payee") or "",
            memo=data.get("memo") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "amount": self.amount.to_cents(),
            "payee": self.payee,
            "memo": self.memo,
        }
