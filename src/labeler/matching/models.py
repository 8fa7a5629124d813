#!/usr/bin/env python3
"""
Matching Domain Models

Value types passed between candidate discovery, resolution, memo composition
and sync.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from ..labels.models import Label
from ..ynab.models import YnabTransaction


@dataclass(frozen=True)
class CandidateTransaction:
    """A YNAB transaction eligible to match a label, with its date distance."""

    transaction: YnabTransaction
    date_diff: timedelta

    @property
    def id(self) -> str:
        return self.transaction.id

    @property
    def date_diff_ms(self) -> int:
        """Absolute date distance in milliseconds."""
        return self.date_diff // timedelta(milliseconds=1)

    @property
    def date_diff_days(self) -> int:
        return self.date_diff.days


@dataclass(frozen=True)
class MatchCandidate:
    """A label and its candidates, sorted ascending by date distance."""

    label: Label
    candidates: list[CandidateTransaction] = field(default_factory=list)


@dataclass(frozen=True)
class LabelTransactionMatch:
    """
    Resolved pairing for one label.

    `transaction_match` is None when no eligible candidate remained.
    """

    label: Label
    transaction_match: YnabTransaction | None = None
    date_diff: timedelta | None = None

    @property
    def is_matched(self) -> bool:
        return self.transaction_match is not None


@dataclass(frozen=True)
class LabelTransactionMatchFinalized:
    """A matched label with the memo to write; the unit of work for sync."""

    label: Label
    new_memo: str
    transaction_match: YnabTransaction

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LabelTransactionMatchFinalized":
        return cls(
            label=Label.from_dict(data["label"]),
            new_memo=data["new_memo"],
            transaction_match=YnabTransaction.from_dict(data["transaction_match"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label.to_dict(),
            "new_memo": self.new_memo,
            "transaction_match": self.transaction_match.to_dict(),
        }
