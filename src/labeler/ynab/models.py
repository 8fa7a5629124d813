#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models representing YNAB API data structures.
These models are true to the YNAB API format and use Money/FinancialDate primitives.
"""

from dataclasses import dataclass
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


@dataclass
class YnabBudget:
    """YNAB budget summary from API."""

    id: str
    name: str
    last_modified_on: str | None = None
    currency_iso_code: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabBudget":
        """
        Create YnabBudget from API dict.

        Args:
            data: Dictionary from YNAB API (budgets list)

        Returns:
            YnabBudget instance
        """
        currency_format = data.get("currency_format") or {}
        return cls(
            id=data["id"],
            name=data["name"],
            last_modified_on=data.get("last_modified_on"),
            currency_iso_code=currency_format.get("iso_code"),
        )


@dataclass
class YnabAccount:
    """
    YNAB account from API.

    Represents a financial account in YNAB.
    """

    id: str
    name: str
    type: str  # "checking", "savings", "creditCard", etc.
    on_budget: bool
    closed: bool
    balance: Money
    deleted: bool = False
    note: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabAccount":
        """
        Create YnabAccount from API dict.

        Args:
            data: Dictionary from YNAB API (accounts list)

        Returns:
            YnabAccount instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=data.get("type", "unknown"),
            on_budget=data.get("on_budget", True),
            closed=data.get("closed", False),
            balance=Money.from_milliunits(data.get("balance", 0)),
            deleted=data.get("deleted", False),
            note=data.get("note"),
        )


@dataclass(frozen=True)
class YnabTransaction:
    """
    YNAB transaction from API.

    The amount is kept in YNAB's native milliunits so that exact comparisons
    never lose a sub-cent remainder; `amount` gives the Money view.
    """

    id: str
    date: FinancialDate
    amount_milliunits: int
    memo: str | None
    account_id: str
    payee_name: str | None = None
    account_name: str | None = None
    category_name: str | None = None
    cleared: str = "uncleared"  # "cleared", "uncleared", "reconciled"
    approved: bool = True
    import_id: str | None = None
    transfer_account_id: str | None = None
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabTransaction":
        """
        Create YnabTransaction from API dict.

        Args:
            data: Dictionary from YNAB API (transactions list or cache file)

        Returns:
            YnabTransaction instance
        """
        return cls(
            id=data["id"],
            date=FinancialDate.from_string(data["date"]),
            amount_milliunits=int(data["amount"]),
            memo=data.get("memo"),
            account_id=data.get("account_id", "unknown"),
            payee_name=data.get("payee_name"),
            account_name=data.get("account_name"),
            category_name=data.get("category_name"),
            cleared=data.get("cleared", "uncleared"),
            approved=data.get("approved", True),
            import_id=data.get("import_id"),
            transfer_account_id=data.get("transfer_account_id"),
            deleted=data.get("deleted", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the YNAB API shape."""
        return {
            "id": self.id,
            "date": self.date.to_iso_string(),
            "amount": self.amount_milliunits,
            "memo": self.memo,
            "account_id": self.account_id,
            "payee_name": self.payee_name,
            "account_name": self.account_name,
            "category_name": self.category_name,
            "cleared": self.cleared,
            "approved": self.approved,
            "import_id": self.import_id,
            "transfer_account_id": self.transfer_account_id,
            "deleted": self.deleted,
        }

    @property
    def amount(self) -> Money:
        """Amount as Money (cents)."""
        return Money.from_milliunits(self.amount_milliunits)

    @property
    def is_transfer(self) -> bool:
        """Check if this is a transfer transaction."""
        return self.transfer_account_id is not None
