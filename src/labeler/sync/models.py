#!/usr/bin/env python3
"""
Sync Domain Models

The account context a sync runs against and the per-item update log it
produces.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from ..labels.models import Label
from ..ynab.models import YnabTransaction


class SyncOperation(Enum):
    """Which engine operation produced an update log entry."""

    SYNC = "sync"
    UNDO = "undo"


@dataclass(frozen=True)
class AccountContext:
    """The YNAB budget and account a sync or undo targets."""

    budget_id: str
    account_id: str

    @property
    def is_complete(self) -> bool:
        return bool(self.budget_id) and bool(self.account_id)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class UpdateLog:
    """
    Record of one attempted memo mutation.

    `previous_memo` is the memo before this mutation and `attempted_memo` the
    memo it wrote (or tried to write). For undo entries these are the synced
    memo and the restored memo respectively, so an undo log can itself be
    undone.
    """

    operation: SyncOperation
    label: Label
    transaction_match: YnabTransaction
    update_succeeded: bool
    previous_memo: str | None
    attempted_memo: str | None
    error: str | None = None
    skipped: bool = False
    timestamp: str = field(default_factory=_utc_now_iso)

    @property
    def is_undoable(self) -> bool:
        """Whether undo should issue a compensating call for this entry."""
        return self.update_succeeded and not self.skipped

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UpdateLog":
        """Create UpdateLog from a persisted dict."""
        return cls(
            operation=SyncOperation(data["operation"]),
            label=Label.from_dict(data["label"]),
            transaction_match=YnabTransaction.from_dict(data["transaction_match"]),
            update_succeeded=data["update_succeeded"],
            previous_memo=data.get("previous_memo"),
            attempted_memo=data.get("attempted_memo"),
            error=data.get("error"),
            skipped=data.get("skipped", False),
            timestamp=data.get("timestamp") or _utc_now_iso(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "operation": self.operation.value,
            "label": self.label.to_dict(),
            "transaction_match": self.transaction_match.to_dict(),
            "update_succeeded": self.update_succeeded,
            "previous_memo": self.previous_memo,
            "attempted_memo": self.attempted_memo,
            "error": self.error,
            "skipped": self.skipped,
            "timestamp": self.timestamp,
        }
