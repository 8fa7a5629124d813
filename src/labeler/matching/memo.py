#!/usr/bin/env python3
"""
Memo Composition

Strategies that turn a resolved label/transaction pair into the memo text to
write to YNAB, and the step that finalizes resolved matches for sync.
"""

import logging
from collections.abc import Callable, Sequence

from ..labels.models import Label
from ..ynab.models import YnabTransaction
from .models import LabelTransactionMatch, LabelTransactionMatchFinalized

logger = logging.getLogger(__name__)

YNAB_MEMO_MAX_LENGTH = 500
MEMO_SEPARATOR = " | "

MemoComposer = Callable[[Label, YnabTransaction], str]


def truncate_memo(memo: str, max_length: int = YNAB_MEMO_MAX_LENGTH) -> str:
    """Truncate a memo to YNAB's length limit, marking the cut with '...'."""
    if len(memo) <= max_length:
        return memo
    return memo[: max_length - 3] + "..."


def append_label_memo(label: Label, transaction: YnabTransaction) -> str:
    """
    Append the label's memo to the transaction's existing memo.

    Leaves the memo unchanged when it already contains the label text, so
    composing twice against an already-synced transaction is a no-op.
    """
    existing = (transaction.memo or "").strip()
    label_text = label.memo.strip()

    if not label_text:
        return truncate_memo(existing)
    if not existing:
        return truncate_memo(label_text)
    if label_text in existing:
        return truncate_memo(existing)
    return truncate_memo(f"{existing}{MEMO_SEPARATOR}{label_text}")


def replace_with_label_memo(label: Label, transaction: YnabTransaction) -> str:
    """Discard the existing memo and use the label's memo alone."""
    return truncate_memo(label.memo.strip())


def finalize_matches(
    matches: Sequence[LabelTransactionMatch],
    composer: MemoComposer = append_label_memo,
) -> list[LabelTransactionMatchFinalized]:
    """
    Compose memos for every matched label.

    Unmatched labels are dropped; the relative order of the rest is kept.
    """
    finalized = [
        LabelTransactionMatchFinalized(
            label=match.label,
            new_memo=composer(match.label, match.transaction_match),
            transaction_match=match.transaction_match,
        )
        for match in matches
        if match.transaction_match is not None
    ]
    logger.debug(f"Finalized {len(finalized)} of {len(matches)} matches")
    return finalized
