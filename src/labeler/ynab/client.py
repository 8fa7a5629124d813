#!/usr/bin/env python3
"""
YNAB API Client

Thin async client over the YNAB v1 REST API covering exactly what the labeler
needs: listing budgets, accounts and an account's transactions, and updating a
transaction's memo.

Failures are signalled by raising YnabApiError subclasses. The client performs
no retries; it only spaces consecutive calls by the configured rate limit delay.
"""

import asyncio
import logging
import time
from typing import Any, Protocol

import httpx

from ..core.config import YNABConfig
from .models import YnabAccount, YnabBudget, YnabTransaction

logger = logging.getLogger(__name__)


class YnabApiError(Exception):
    """Error returned by (or while talking to) the YNAB API."""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class RemoteFetchError(YnabApiError):
    """Listing budgets, accounts or transactions failed."""


class RemoteUpdateError(YnabApiError):
    """Updating a single transaction failed."""


class YnabRemoteClient(Protocol):
    """The remote operations the matcher and sync engine depend on."""

    async def list_transactions(self, budget_id: str, account_id: str) -> list[YnabTransaction]: ...

    async def update_transaction_memo(self, budget_id: str, transaction_id: str, memo: str) -> YnabTransaction: ...


class YnabClient:
    """
    httpx-based YNAB client.

    Usable as an async context manager:

        async with YnabClient(config.ynab) as client:
            transactions = await client.list_transactions(budget_id, account_id)
    """

    def __init__(self, config: YNABConfig, transport: httpx.AsyncBaseTransport | None = None):
        """
        Initialize the client.

        Args:
            config: YNAB section of the application configuration
            transport: Optional httpx transport (used by tests)
        """
        if not config.api_token:
            raise ValueError("YNAB API token is required but not configured")

        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "Authorization": f"Bearer {config.api_token}",
                "Accept": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )
        self._last_call: float | None = None

    async def __aenter__(self) -> "YnabClient":
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_budgets(self) -> list[YnabBudget]:
        data = await self._request("GET", "/budgets", error_cls=RemoteFetchError)
        return [YnabBudget.from_dict(budget) for budget in data.get("budgets", [])]

    async def list_accounts(self, budget_id: str) -> list[YnabAccount]:
        data = await self._request("GET", f"/budgets/{budget_id}/accounts", error_cls=RemoteFetchError)
        return [YnabAccount.from_dict(account) for account in data.get("accounts", [])]

    async def list_transactions(self, budget_id: str, account_id: str) -> list[YnabTransaction]:
        """Fetch every transaction of an account, in the order YNAB returns them."""
        data = await self._request(
            "GET",
            f"/budgets/{budget_id}/accounts/{account_id}/transactions",
            error_cls=RemoteFetchError,
        )
        transactions = [YnabTransaction.from_dict(tx) for tx in data.get("transactions", [])]
        logger.info(f"Fetched {len(transactions)} transactions for account {account_id}")
        return transactions

    async def update_transaction_memo(self, budget_id: str, transaction_id: str, memo: str) -> YnabTransaction:
        """Set a transaction's memo and return the updated transaction."""
        data = await self._request(
            "PUT",
            f"/budgets/{budget_id}/transactions/{transaction_id}",
            json={"transaction": {"memo": memo}},
            error_cls=RemoteUpdateError,
        )
        return YnabTransaction.from_dict(data["transaction"])

    async def _request(
        self,
        method: str,
        path: str,
        error_cls: type[YnabApiError],
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        await self._throttle()

        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise error_cls(f"YNAB request timed out: {method} {path}") from e
        except httpx.HTTPError as e:
            raise error_cls(f"YNAB request failed: {method} {path}: {e}") from e

        if response.status_code >= 400:
            detail = _error_detail(response)
            raise error_cls(
                f"YNAB API returned {response.status_code} for {method} {path}: {detail}",
                status_code=response.status_code,
                detail=detail,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise error_cls(
                f"YNAB API returned a non-JSON body for {method} {path}",
                status_code=response.status_code,
                detail=response.text[:200],
            ) from e
        if not isinstance(payload, dict):
            raise error_cls(
                f"YNAB API returned an unexpected payload for {method} {path}",
                status_code=response.status_code,
            )
        return payload.get("data", {})

    async def _throttle(self) -> None:
        delay = self.config.rate_limit_delay
        if self._last_call is not None and delay > 0:
            elapsed = time.monotonic() - self._last_call
            if elapsed < delay:
                await asyncio.sleep(delay - elapsed)
        self._last_call = time.monotonic()


def _error_detail(response: httpx.Response) -> str:
    """Extract YNAB's error detail ({"error": {"id", "name", "detail"}}) if present."""
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200] if response.text else "No error details"
    error = payload.get("error") if isinstance(payload, dict) else None
    if not isinstance(error, dict):
        return "No error details"
    return error.get("detail") or error.get("name") or "No error details"
