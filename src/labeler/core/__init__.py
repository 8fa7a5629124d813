"""
Core Utilities Package

Shared primitives used by the label, YNAB, matching and sync packages.

This package provides:
- Currency handling with integer arithmetic for exact amount comparison
- Money and FinancialDate value types
- Configuration management for environment-specific settings
- JSON helpers for every persisted artifact
"""

from .config import (
    Config,
    Environment,
    YNABConfig,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    cents_to_milliunits,
    format_cents,
    format_milliunits,
    is_whole_cents,
    milliunits_to_cents,
    parse_dollars_to_cents,
)
from .dates import FinancialDate
from .json_utils import read_json, write_json
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "YNABConfig",
    "get_config",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "cents_to_milliunits",
    "format_cents",
    "format_milliunits",
    "is_whole_cents",
    "milliunits_to_cents",
    "parse_dollars_to_cents",
    # Primitives
    "FinancialDate",
    "Money",
    # JSON
    "read_json",
    "write_json",
]
