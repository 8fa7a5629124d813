"""
Matching Package

Label to YNAB transaction matching.

Key Components:
- matcher: Candidate discovery (exact amount, 10-day window) and greedy
  order-dependent one-to-one resolution
- memo: Pluggable memo composition and match finalization
- models: MatchCandidate, LabelTransactionMatch and finalized match types
"""

from .matcher import (
    MAXIMUM_MATCH_DISTANCE,
    generate_match_summary,
    get_candidates_for_all_labels,
    get_candidates_for_label,
    get_transaction_by_id,
    resolve_best_match_for_labels,
)
from .memo import (
    YNAB_MEMO_MAX_LENGTH,
    MemoComposer,
    append_label_memo,
    finalize_matches,
    replace_with_label_memo,
    truncate_memo,
)
from .models import (
    CandidateTransaction,
    LabelTransactionMatch,
    LabelTransactionMatchFinalized,
    MatchCandidate,
)

__all__ = [
    # Matching
    "MAXIMUM_MATCH_DISTANCE",
    "generate_match_summary",
    "get_candidates_for_all_labels",
    "get_candidates_for_label",
    "get_transaction_by_id",
    "resolve_best_match_for_labels",
    # Memo composition
    "YNAB_MEMO_MAX_LENGTH",
    "MemoComposer",
    "append_label_memo",
    "finalize_matches",
    "replace_with_label_memo",
    "truncate_memo",
    # Models
    "CandidateTransaction",
    "LabelTransactionMatch",
    "LabelTransactionMatchFinalized",
    "MatchCandidate",
]
