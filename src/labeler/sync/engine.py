#!/usr/bin/env python3
"""
Sync and Undo Engine

Applies finalized label matches to YNAB as memo updates and reverses them.

Both operations issue one remote call at a time, awaiting each before the next,
so the returned logs line up 1:1 with their inputs. A failed call is recorded
in its log entry and the loop moves on; the engine never retries and imposes no
timeout of its own.

Undo is a best-effort compensating action, not a transactional rollback: it
writes back the memo captured before the sync. If the memo was edited in YNAB
after the sync, undo overwrites that edit, and replaying the same sync log
twice is only safe when nothing changed out of band in between.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ..matching.models import LabelTransactionMatchFinalized
from ..ynab.client import YnabRemoteClient
from .models import AccountContext, SyncOperation, UpdateLog

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


class PreconditionError(ValueError):
    """Sync or undo was called without a usable account context."""


class SyncCancelledError(Exception):
    """A cooperative cancellation check stopped a run before its next call."""

    def __init__(self, message: str, update_logs: list[UpdateLog]):
        super().__init__(message)
        self.update_logs = update_logs


def _require_account_context(account_context: AccountContext | None) -> AccountContext:
    if account_context is None or not account_context.is_complete:
        raise PreconditionError("A budget id and account id are required before syncing to YNAB")
    return account_context


def _check_cancelled(should_cancel: CancelCheck | None, logs: list[UpdateLog], total: int) -> None:
    if should_cancel is not None and should_cancel():
        logger.warning(f"Cancelled after {len(logs)} of {total} updates")
        raise SyncCancelledError(f"Cancelled after {len(logs)} of {total} updates", update_logs=logs)


async def sync_labels_to_ynab(
    *,
    account_context: AccountContext | None,
    finalized_matches: Sequence[LabelTransactionMatchFinalized],
    remote_client: YnabRemoteClient,
    should_cancel: CancelCheck | None = None,
) -> list[UpdateLog]:
    """
    Write each finalized match's memo to its YNAB transaction.

    Args:
        account_context: Budget and account to update
        finalized_matches: Matches to apply, in order
        remote_client: Client used for the memo updates
        should_cancel: Optional check run before every remote call

    Returns:
        One UpdateLog per finalized match, in input order

    Raises:
        PreconditionError: If account_context is missing or incomplete
        SyncCancelledError: If should_cancel returned True
    """
    context = _require_account_context(account_context)
    logs: list[UpdateLog] = []

    for match in finalized_matches:
        _check_cancelled(should_cancel, logs, len(finalized_matches))

        transaction = match.transaction_match
        try:
            await remote_client.update_transaction_memo(context.budget_id, transaction.id, match.new_memo)
        except Exception as e:
            logger.warning(f"Memo update failed for transaction {transaction.id} (label {match.label.id}): {e}")
            logs.append(
                UpdateLog(
                    operation=SyncOperation.SYNC,
                    label=match.label,
                    transaction_match=transaction,
                    update_succeeded=False,
                    previous_memo=transaction.memo,
                    attempted_memo=match.new_memo,
                    error=str(e) or type(e).__name__,
                )
            )
            continue

        logger.info(f"Updated memo for transaction {transaction.id} (label {match.label.id})")
        logs.append(
            UpdateLog(
                operation=SyncOperation.SYNC,
                label=match.label,
                transaction_match=transaction,
                update_succeeded=True,
                previous_memo=transaction.memo,
                attempted_memo=match.new_memo,
            )
        )

    return logs


async def undo_sync_labels_to_ynab(
    *,
    account_context: AccountContext | None,
    update_logs: Sequence[UpdateLog],
    remote_client: YnabRemoteClient,
    should_cancel: CancelCheck | None = None,
) -> list[UpdateLog]:
    """
    Restore the pre-sync memo of every successfully updated transaction.

    Every input entry produces exactly one output entry at the same index.
    Entries that did not succeed originally (or were themselves skipped) need
    no remote call and are emitted as skipped with update_succeeded=True.

    Raises:
        PreconditionError: If account_context is missing or incomplete
        SyncCancelledError: If should_cancel returned True
    """
    context = _require_account_context(account_context)
    logs: list[UpdateLog] = []

    for entry in update_logs:
        if not entry.is_undoable:
            logs.append(
                UpdateLog(
                    operation=SyncOperation.UNDO,
                    label=entry.label,
                    transaction_match=entry.transaction_match,
                    update_succeeded=True,
                    previous_memo=entry.previous_memo,
                    attempted_memo=entry.previous_memo,
                    skipped=True,
                )
            )
            continue

        _check_cancelled(should_cancel, logs, len(update_logs))

        transaction = entry.transaction_match
        restored_memo = entry.previous_memo or ""
        try:
            await remote_client.update_transaction_memo(context.budget_id, transaction.id, restored_memo)
        except Exception as e:
            logger.warning(f"Memo restore failed for transaction {transaction.id} (label {entry.label.id}): {e}")
            logs.append(
                UpdateLog(
                    operation=SyncOperation.UNDO,
                    label=entry.label,
                    transaction_match=transaction,
                    update_succeeded=False,
                    previous_memo=entry.attempted_memo,
                    attempted_memo=restored_memo,
                    error=str(e) or type(e).__name__,
                )
            )
            continue

        logger.info(f"Restored memo for transaction {transaction.id} (label {entry.label.id})")
        logs.append(
            UpdateLog(
                operation=SyncOperation.UNDO,
                label=entry.label,
                transaction_match=transaction,
                update_succeeded=True,
                previous_memo=entry.attempted_memo,
                attempted_memo=restored_memo,
            )
        )

    return logs


sync_labels_to_remote = sync_labels_to_ynab
undo_sync_to_remote = undo_sync_labels_to_ynab


def summarize_update_logs(update_logs: Sequence[UpdateLog]) -> dict[str, Any]:
    """Count outcomes of a sync or undo run."""
    skipped = sum(1 for log in update_logs if log.skipped)
    failed = sum(1 for log in update_logs if not log.update_succeeded)
    return {
        "total": len(update_logs),
        "succeeded": len(update_logs) - failed - skipped,
        "failed": failed,
        "skipped": skipped,
    }
