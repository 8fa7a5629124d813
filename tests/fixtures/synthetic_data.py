#!/usr/bin/env python3
"""
Synthetic Test Data Generators

Generates synthetic, anonymized labels and YNAB transactions for unit,
integration and CLI tests. No real financial data is used.

Note: Uses standard random module for test data generation (not cryptographic use).
"""

import csv
import random
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from labeler.core.currency import cents_to_dollars_str
from labeler.core.dates import FinancialDate
from labeler.core.money import Money
from labeler.labels.models import Label
from labeler.ynab.models import YnabTransaction

SYNTHETIC_PAYEES = [
    "Generic Grocery Store",
    "Test Gas Station",
    "Sample Coffee Shop",
    "Mock Restaurant",
    "Example Pharmacy",
]

SYNTHETIC_MEMOS = [
    "Birthday gift",
    "Team lunch",
    "Reimbursable",
    "Home office supplies",
    "Road trip fuel",
]


def make_label(
    label_id: str,
    date_str: str,
    amount_cents: int,
    memo: str = "",
    payee: str = "",
) -> Label:
    """Create a Label with minimal boilerplate."""
    return Label(
        id=label_id,
        date=FinancialDate.from_string(date_str),
        amount=Money.from_cents(amount_cents),
        payee=payee,
        memo=memo,
    )


def make_transaction(
    tx_id: str,
    date_str: str,
    amount_milliunits: int,
    memo: str | None = None,
    account_id: str = "account-001",
    payee_name: str | None = "Generic Grocery Store",
) -> YnabTransaction:
    """Create a YnabTransaction with minimal boilerplate."""
    return YnabTransaction(
        id=tx_id,
        date=FinancialDate.from_string(date_str),
        amount_milliunits=amount_milliunits,
        memo=memo,
        account_id=account_id,
        payee_name=payee_name,
        account_name="Test Checking",
    )


def generate_synthetic_transactions(
    num_transactions: int = 50,
    account_id: str = "account-001",
    start_date: date | None = None,
    days: int = 60,
    seed: int = 1234,
) -> list[dict[str, Any]]:
    """
    Generate synthetic YNAB transactions in API shape.

    Args:
        num_transactions: Number of transactions to generate
        account_id: Account the transactions belong to
        start_date: First possible transaction date (default: 2024-01-01)
        days: Number of days the dates are spread over
        seed: Random seed, so generated data is reproducible

    Returns:
        List of transaction dicts as YNAB returns them
    """
    rng = random.Random(seed)
    start_date = start_date or date(2024, 1, 1)

    return [
        {
            "id": f"transaction-{i:05d}",
            "date": (start_date + timedelta(days=rng.randint(0, days))).isoformat(),
            # Whole cents, unique per transaction while num_transactions <= 100
            "amount": -(rng.randint(1, 400) * 100 + i) * 10,
            "memo": rng.choice([None, "", "Imported"]),
            "account_id": account_id,
            "account_name": "Test Checking",
            "payee_name": rng.choice(SYNTHETIC_PAYEES),
            "cleared": "cleared",
            "approved": True,
        }
        for i in range(num_transactions)
    ]


def labels_for_transactions(
    transactions: list[dict[str, Any]], count: int, seed: int = 1234
) -> list[dict[str, Any]]:
    """
    Generate label rows that mirror some of the given transactions.

    Dates are shifted by up to three days so the labels still fall within the
    matching window.
    """
    rng = random.Random(seed)
    chosen = rng.sample(transactions, count)
    rows = []
    for i, tx in enumerate(chosen, start=1):
        shifted = date.fromisoformat(tx["date"]) + timedelta(days=rng.randint(-3, 3))
        rows.append(
            {
                "id": f"label-{i:03d}",
                "date": shifted.isoformat(),
                "amount": cents_to_dollars_str(tx["amount"] // 10),
                "payee": tx["payee_name"],
                "memo": rng.choice(SYNTHETIC_MEMOS),
            }
        )
    return rows


def write_labels_csv(path: Path, rows: list[dict[str, Any]], fieldnames: list[str] | None = None) -> Path:
    """Write label rows to a CSV file."""
    fieldnames = fieldnames or ["id", "date", "amount", "payee", "memo"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)
    return path
