#!/usr/bin/env python3
"""Tests for memo composition and match finalization."""

import pytest

from labeler.matching import (
    YNAB_MEMO_MAX_LENGTH,
    append_label_memo,
    finalize_matches,
    replace_with_label_memo,
    truncate_memo,
)
from labeler.matching.models import LabelTransactionMatch
from tests.fixtures.synthetic_data import make_label, make_transaction


class TestAppendLabelMemo:
    """Test the default memo composer."""

    @pytest.mark.matching
    def test_empty_existing_memo_uses_label_memo(self):
        label = make_label("L1", "2024-01-01", 100, memo="Team lunch")
        assert append_label_memo(label, make_transaction("A", "2024-01-01", 1000, memo=None)) == "Team lunch"
        assert append_label_memo(label, make_transaction("A", "2024-01-01", 1000, memo="  ")) == "Team lunch"

    @pytest.mark.matching
    def test_appends_to_existing_memo(self):
        label = make_label("L1", "2024-01-01", 100, memo="Team lunch")
        transaction = make_transaction("A", "2024-01-01", 1000, memo="Imported")
        assert append_label_memo(label, transaction) == "Imported | Team lunch"

    @pytest.mark.matching
    def test_already_labeled_memo_is_unchanged(self):
        label = make_label("L1", "2024-01-01", 100, memo="Team lunch")
        transaction = make_transaction("A", "2024-01-01", 1000, memo="Imported | Team lunch")
        assert append_label_memo(label, transaction) == "Imported | Team lunch"

    @pytest.mark.matching
    def test_empty_label_memo_keeps_existing(self):
        label = make_label("L1", "2024-01-01", 100, memo="")
        transaction = make_transaction("A", "2024-01-01", 1000, memo="Imported")
        assert append_label_memo(label, transaction) == "Imported"

    @pytest.mark.matching
    def test_result_is_truncated_to_ynab_limit(self):
        label = make_label("L1", "2024-01-01", 100, memo="x" * 300)
        transaction = make_transaction("A", "2024-01-01", 1000, memo="y" * 300)

        memo = append_label_memo(label, transaction)

        assert len(memo) == YNAB_MEMO_MAX_LENGTH
        assert memo.endswith("...")


class TestOtherComposers:
    """Test the replace composer and truncation helper."""

    @pytest.mark.matching
    def test_replace_discards_existing_memo(self):
        label = make_label("L1", "2024-01-01", 100, memo="Team lunch")
        transaction = make_transaction("A", "2024-01-01", 1000, memo="Imported")
        assert replace_with_label_memo(label, transaction) == "Team lunch"

    @pytest.mark.matching
    def test_truncate_leaves_short_memos_alone(self):
        assert truncate_memo("short") == "short"
        assert truncate_memo("abcdef", max_length=5) == "ab..."


class TestFinalizeMatches:
    """Test turning resolved matches into sync work items."""

    @pytest.mark.matching
    def test_drops_unmatched_and_keeps_order(self):
        l1 = make_label("L1", "2024-01-01", 100, memo="first")
        l2 = make_label("L2", "2024-01-01", 200, memo="second")
        l3 = make_label("L3", "2024-01-01", 300, memo="third")
        matches = [
            LabelTransactionMatch(label=l1, transaction_match=make_transaction("A", "2024-01-01", 1000)),
            LabelTransactionMatch(label=l2),
            LabelTransactionMatch(label=l3, transaction_match=make_transaction("C", "2024-01-01", 3000, memo="m")),
        ]

        finalized = finalize_matches(matches)

        assert [f.label.id for f in finalized] == ["L1", "L3"]
        assert [f.transaction_match.id for f in finalized] == ["A", "C"]
        assert [f.new_memo for f in finalized] == ["first", "m | third"]

    @pytest.mark.matching
    def test_custom_composer(self):
        label = make_label("L1", "2024-01-01", 100, memo="lunch")
        matches = [LabelTransactionMatch(label=label, transaction_match=make_transaction("A", "2024-01-01", 1000))]

        finalized = finalize_matches(matches, composer=lambda lbl, tx: f"[{lbl.id}] {lbl.memo}")

        assert finalized[0].new_memo == "[L1] lunch"
