#!/usr/bin/env python3
"""
Label Data Loader

Converts a user's label CSV into normalized Label domain models.

Expected columns (header names are case-insensitive):
- date (required): ISO date, YYYY-MM-DD
- amount (required): signed dollar amount, e.g. "-12.34" or "(12.34)"
- id (optional): stable label identifier; defaults to "label-<row number>"
- payee (optional): descriptive text
- memo (optional): text to attach to the matched YNAB transaction
"""

import logging
from pathlib import Path

import pandas as pd

from ..core.dates import FinancialDate
from ..core.money import Money
from .models import Label

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("date", "amount")
OPTIONAL_COLUMNS = ("id", "payee", "memo")


def load_labels(csv_path: str | Path) -> list[Label]:
    """
    Load labels from a CSV file.

    Row order is preserved, since label order decides who wins a contested
    transaction during matching. When the file has an id column, exact
    duplicate rows are dropped; without one, identical rows are separate
    purchases and each becomes its own label.

    Args:
        csv_path: Path to the label CSV

    Returns:
        List of Label domain models in file order

    Raises:
        FileNotFoundError: If the CSV does not exist
        ValueError: If required columns are missing or a row cannot be parsed
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"Label file not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df.columns = [str(column).strip().lower() for column in df.columns]

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Label file {csv_path} is missing required columns: {', '.join(missing)}")

    has_id_column = "id" in df.columns
    for column in OPTIONAL_COLUMNS:
        if column not in df.columns:
            df[column] = ""

    # Row numbers count data rows from 1 and are fixed before any row is dropped
    df["row_number"] = df.index + 1

    if has_id_column:
        duplicated = df.duplicated(subset=["id", "date", "amount", "payee", "memo"], keep="first")
        if duplicated.any():
            logger.warning(
                f"Dropped {int(duplicated.sum())} duplicate label rows from {csv_path.name}: "
                f"rows {', '.join(str(n) for n in df.loc[duplicated, 'row_number'])}"
            )
            df = df[~duplicated]

    labels = [_row_to_label(int(row["row_number"]), row) for row in df.to_dict("records")]

    ids = [label.id for label in labels]
    if len(set(ids)) != len(ids):
        raise ValueError(f"Label file {csv_path} contains duplicate label ids")

    logger.info(f"Loaded {len(labels)} labels from {csv_path}")
    return labels


def _row_to_label(row_number: int, row: dict[str, str]) -> Label:
    try:
        return Label(
            id=row["id"].strip() or f"label-{row_number}",
            date=FinancialDate.from_string(row["date"]),
            amount=Money.from_dollars(row["amount"]),
            payee=row["payee"].strip(),
            memo=row["memo"].strip(),
        )
    except ValueError as e:
        raise ValueError(f"Invalid label on row {row_number}: {e}") from e


def labels_to_dataframe(labels: list[Label]) -> pd.DataFrame:
    """Convert labels to a DataFrame for display or export."""
    return pd.DataFrame([label.to_dict() for label in labels], columns=["id", "date", "amount", "payee", "memo"])
