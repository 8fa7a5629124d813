#!/usr/bin/env python3
"""Tests for the YNAB transactions cache."""

import json

import pytest

from labeler.ynab.loader import filter_active_transactions, load_transactions, save_transactions
from labeler.ynab.models import YnabTransaction
from tests.fixtures.synthetic_data import generate_synthetic_transactions


class TestLoadTransactions:
    """Test reading the transactions cache."""

    @pytest.mark.ynab
    def test_object_format(self, temp_dir):
        raw = generate_synthetic_transactions(5)
        (temp_dir / "transactions.json").write_text(json.dumps({"budget_id": "b", "transactions": raw}))

        transactions = load_transactions(temp_dir)

        assert [tx.id for tx in transactions] == [tx["id"] for tx in raw]

    @pytest.mark.ynab
    def test_array_format(self, temp_dir):
        raw = generate_synthetic_transactions(3)
        (temp_dir / "transactions.json").write_text(json.dumps(raw))

        assert len(load_transactions(temp_dir)) == 3

    @pytest.mark.ynab
    def test_missing_cache(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_transactions(temp_dir)

    @pytest.mark.ynab
    def test_defaults_to_configured_cache_dir(self):
        save_transactions([YnabTransaction.from_dict(generate_synthetic_transactions(1)[0])])

        assert len(load_transactions()) == 1


class TestSaveTransactions:
    """Test writing the transactions cache."""

    @pytest.mark.ynab
    def test_save_then_load(self, temp_dir):
        transactions = [YnabTransaction.from_dict(tx) for tx in generate_synthetic_transactions(4)]

        path = save_transactions(transactions, cache_dir=temp_dir / "cache", budget_id="b", account_id="a")

        data = json.loads(path.read_text())
        assert data["budget_id"] == "b"
        assert data["account_id"] == "a"
        assert load_transactions(temp_dir / "cache") == transactions


class TestFilterActiveTransactions:
    """Test dropping deleted transactions."""

    @pytest.mark.ynab
    def test_deleted_dropped_in_order(self):
        raw = generate_synthetic_transactions(4)
        raw[1]["deleted"] = True
        transactions = [YnabTransaction.from_dict(tx) for tx in raw]

        active = filter_active_transactions(transactions)

        assert [tx.id for tx in active] == [raw[0]["id"], raw[2]["id"], raw[3]["id"]]
