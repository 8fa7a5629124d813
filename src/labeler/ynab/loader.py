#!/usr/bin/env python3
"""
YNAB Data Loader

Utilities for loading and saving cached YNAB transactions as local JSON.

Functions:
- load_transactions: Load cached transactions as domain models
- save_transactions: Write fetched transactions to the cache
- filter_active_transactions: Drop deleted transactions
"""

import logging
from pathlib import Path
from typing import Any

from ..core.config import get_config
from ..core.json_utils import read_json, write_json
from .models import YnabTransaction

logger = logging.getLogger(__name__)

TRANSACTIONS_FILE = "transactions.json"


def _resolve_cache_dir(cache_dir: str | Path | None) -> Path:
    if cache_dir is None:
        return get_config().cache_dir
    return Path(cache_dir)


def load_transactions(cache_dir: str | Path | None = None) -> list[YnabTransaction]:
    """
    Load YNAB transactions from cache as domain models.

    Args:
        cache_dir: Directory containing cached YNAB data.
                   If None, uses config.data_dir/ynab/cache

    Returns:
        List of YnabTransaction domain models, in cached (fetch) order

    Raises:
        FileNotFoundError: If the transactions cache file is not found
    """
    transactions_file = _resolve_cache_dir(cache_dir) / TRANSACTIONS_FILE

    if not transactions_file.exists():
        raise FileNotFoundError(f"YNAB transactions cache not found: {transactions_file}")

    data: Any = read_json(transactions_file)

    # Handle both array format and object format
    if isinstance(data, dict):
        transactions_list: list[dict[str, Any]] = data.get("transactions", [])
    elif isinstance(data, list):
        transactions_list = data
    else:
        transactions_list = []

    return [YnabTransaction.from_dict(tx) for tx in transactions_list]


def save_transactions(
    transactions: list[YnabTransaction],
    cache_dir: str | Path | None = None,
    budget_id: str | None = None,
    account_id: str | None = None,
) -> Path:
    """
    Write transactions to the cache in object format.

    Returns:
        Path of the written cache file
    """
    transactions_file = _resolve_cache_dir(cache_dir) / TRANSACTIONS_FILE
    write_json(
        transactions_file,
        {
            "budget_id": budget_id,
            "account_id": account_id,
            "transactions": [tx.to_dict() for tx in transactions],
        },
    )
    logger.info(f"Cached {len(transactions)} transactions to {transactions_file}")
    return transactions_file


def filter_active_transactions(transactions: list[YnabTransaction]) -> list[YnabTransaction]:
    """Drop deleted transactions, preserving order."""
    return [tx for tx in transactions if not tx.deleted]
