"""
YNAB Integration Package

Models, cache loading and the API client for the YNAB side of labeling.

Key Components:
- models: YnabBudget, YnabAccount and YnabTransaction domain models
- loader: Local transactions cache (the Transaction Store)
- client: Async API client and the remote-client contract the sync engine uses
"""

from .client import (
    RemoteFetchError,
    RemoteUpdateError,
    YnabApiError,
    YnabClient,
    YnabRemoteClient,
)
from .loader import filter_active_transactions, load_transactions, save_transactions
from .models import YnabAccount, YnabBudget, YnabTransaction

__all__ = [
    # Domain models
    "YnabAccount",
    "YnabBudget",
    "YnabTransaction",
    # API client
    "RemoteFetchError",
    "RemoteUpdateError",
    "YnabApiError",
    "YnabClient",
    "YnabRemoteClient",
    # Transaction cache
    "filter_active_transactions",
    "load_transactions",
    "save_transactions",
]
