#!/usr/bin/env python3
"""
Label Transaction Matching Module

Core logic for matching labels to YNAB transactions.

Matching runs in two stages:
1. Candidate discovery: for each label independently, every transaction with
   exactly the same amount within MAXIMUM_MATCH_DISTANCE, closest date first.
2. Resolution: labels are walked in input order and each claims its closest
   candidate not already claimed by an earlier label.

Resolution is greedy and order-dependent, not a global optimum: a label that
comes later and shares a candidate with an earlier label may be pushed to a
farther transaction or left unmatched. Callers that need reproducible results
must keep label order fixed.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import timedelta
from typing import Any, TypeVar

from ..core.currency import format_cents
from ..labels.models import Label
from ..ynab.models import YnabTransaction
from .models import CandidateTransaction, LabelTransactionMatch, MatchCandidate

logger = logging.getLogger(__name__)

MAXIMUM_MATCH_DISTANCE = timedelta(days=10)

T = TypeVar("T", Label, YnabTransaction)


def _require_instances(items: Iterable[Any], expected: type, name: str) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, expected):
            raise TypeError(f"{name}[{index}] must be {expected.__name__}, got {type(item).__name__}")


def get_candidates_for_label(
    label: Label, transactions: Sequence[YnabTransaction]
) -> list[CandidateTransaction]:
    """
    Find the transactions that could match a single label.

    A transaction qualifies when its amount equals the label's amount exactly
    (compared in milliunits) and its date is within MAXIMUM_MATCH_DISTANCE of
    the label's date, inclusive.

    Args:
        label: Label to match
        transactions: Transactions in fetch order

    Returns:
        Candidates sorted by ascending date distance; equal distances keep
        fetch order. Empty if nothing qualifies.
    """
    if not isinstance(label, Label):
        raise TypeError(f"label must be Label, got {type(label).__name__}")

    label_milliunits = label.amount.to_milliunits()
    candidates: list[CandidateTransaction] = []

    for transaction in transactions:
        if transaction.amount_milliunits != label_milliunits:
            logger.debug(
                "Label %s: transaction %s amount mismatch (%d != %d milliunits)",
                label.id,
                transaction.id,
                transaction.amount_milliunits,
                label_milliunits,
            )
            continue

        date_diff = label.date.distance_to(transaction.date)
        if date_diff > MAXIMUM_MATCH_DISTANCE:
            logger.debug(
                "Label %s: transaction %s out of date range (%d days)",
                label.id,
                transaction.id,
                date_diff.days,
            )
            continue

        candidates.append(CandidateTransaction(transaction=transaction, date_diff=date_diff))

    # list.sort is stable, so equal distances keep fetch order
    candidates.sort(key=lambda candidate: candidate.date_diff)

    logger.debug(
        "Label %s (%s on %s): %d candidates",
        label.id,
        format_cents(label.amount.to_cents()),
        label.date,
        len(candidates),
    )
    return candidates


def get_candidates_for_all_labels(
    labels: Sequence[Label], transactions: Sequence[YnabTransaction]
) -> list[MatchCandidate]:
    """
    Compute candidates for every label, in label order.

    Labels do not interact at this stage: two labels may list the same
    transaction. Transactions are rescanned for every label.
    """
    _require_instances(labels, Label, "labels")
    _require_instances(transactions, YnabTransaction, "transactions")

    match_candidates = [
        MatchCandidate(label=label, candidates=get_candidates_for_label(label, transactions)) for label in labels
    ]

    logger.info(
        f"Found candidates for {sum(1 for mc in match_candidates if mc.candidates)} "
        f"of {len(match_candidates)} labels across {len(transactions)} transactions"
    )
    return match_candidates


def resolve_best_match_for_labels(match_candidates: Sequence[MatchCandidate]) -> list[LabelTransactionMatch]:
    """
    Resolve a one-to-one assignment of transactions to labels.

    Labels are processed in input order; each claims the first of its
    candidates that no earlier label has claimed. The earliest label wins the
    closest available transaction. A label whose candidates are all claimed
    (or that has none) gets transaction_match=None.

    Returns:
        Exactly one LabelTransactionMatch per input entry, in input order
    """
    _require_instances(match_candidates, MatchCandidate, "match_candidates")

    claimed_transaction_ids: set[str] = set()
    matches: list[LabelTransactionMatch] = []

    for match_candidate in match_candidates:
        best: CandidateTransaction | None = None
        for candidate in match_candidate.candidates:
            if candidate.id not in claimed_transaction_ids:
                best = candidate
                break

        if best is None:
            if match_candidate.candidates:
                logger.debug(f"Label {match_candidate.label.id}: all candidates already claimed")
            matches.append(LabelTransactionMatch(label=match_candidate.label))
            continue

        claimed_transaction_ids.add(best.id)
        matches.append(
            LabelTransactionMatch(
                label=match_candidate.label,
                transaction_match=best.transaction,
                date_diff=best.date_diff,
            )
        )

    return matches


def get_transaction_by_id(collection: Iterable[T], id: str) -> T | None:
    """Find a label or transaction by id; None if not present."""
    for item in collection:
        if item.id == id:
            return item
    return None


def generate_match_summary(matches: Sequence[LabelTransactionMatch]) -> dict[str, Any]:
    """
    Generate summary statistics for resolved matches.

    Args:
        matches: Output of resolve_best_match_for_labels

    Returns:
        Dictionary with summary statistics
    """
    total_labels = len(matches)
    if total_labels == 0:
        return {"total_labels": 0}

    matched = [m for m in matches if m.is_matched]
    distance_counts = Counter(m.date_diff.days for m in matched if m.date_diff is not None)

    return {
        "total_labels": total_labels,
        "matched": len(matched),
        "unmatched": total_labels - len(matched),
        "match_rate": len(matched) / total_labels,
        "total_amount_matched": sum(m.label.amount.to_cents() for m in matched),
        "date_distance_days": {str(days): count for days, count in sorted(distance_counts.items())},
    }
