"""
Sync Package

Pushes finalized label matches to YNAB as memo updates and reverses them,
producing an ordered, per-item update log for each run.
"""

from .engine import (
    PreconditionError,
    SyncCancelledError,
    summarize_update_logs,
    sync_labels_to_remote,
    sync_labels_to_ynab,
    undo_sync_labels_to_ynab,
    undo_sync_to_remote,
)
from .models import AccountContext, SyncOperation, UpdateLog

__all__ = [
    "AccountContext",
    "PreconditionError",
    "SyncCancelledError",
    "SyncOperation",
    "UpdateLog",
    "summarize_update_logs",
    "sync_labels_to_remote",
    "sync_labels_to_ynab",
    "undo_sync_labels_to_ynab",
    "undo_sync_to_remote",
]
