"""
YNAB Labeler

Reconciles a personal record of labels (intended transactions with memos)
against YNAB transactions, writes each label's memo to its best-matching
transaction, and can undo those writes.

Domain Packages:
- core: Currency handling, Money/FinancialDate primitives, configuration
- labels: Label model and CSV loader
- ynab: YNAB models, transaction cache and API client
- matching: Candidate discovery, greedy resolution, memo composition
- sync: Sequential memo sync and undo with per-item update logs
- cli: Command-line interface

Example Usage:
    from labeler.matching import get_candidates_for_all_labels, resolve_best_match_for_labels
    from labeler.sync import sync_labels_to_ynab
"""

__version__ = "0.1.0"

from .core.config import Environment, get_config
from .core.money import Money
from .labels.models import Label
from .matching import (
    finalize_matches,
    get_candidates_for_all_labels,
    resolve_best_match_for_labels,
)
from .sync import sync_labels_to_ynab, undo_sync_labels_to_ynab
from .ynab.models import YnabTransaction

__all__ = [
    "Environment",
    "Label",
    "Money",
    "YnabTransaction",
    "finalize_matches",
    "get_candidates_for_all_labels",
    "get_config",
    "resolve_best_match_for_labels",
    "sync_labels_to_ynab",
    "undo_sync_labels_to_ynab",
]
