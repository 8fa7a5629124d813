#!/usr/bin/env python3
"""
YNAB CLI - Budget, Account and Transaction Fetching

Commands for discovering budget/account ids and refreshing the local
transactions cache that matching runs against.
"""

import asyncio
from pathlib import Path

import click

from ..core.config import Config, get_config
from ..core.currency import format_milliunits
from ..ynab.client import YnabApiError, YnabClient
from ..ynab.loader import save_transactions


def create_client(config: Config) -> YnabClient:
    """Build the YNAB client for CLI commands."""
    try:
        return YnabClient(config.ynab)
    except ValueError as e:
        raise click.ClickException(f"{e}. Set YNAB_API_TOKEN in your environment or .env file.") from e


def resolve_ids(config: Config, budget_id: str | None, account_id: str | None = None) -> tuple[str, str | None]:
    """Fill budget/account ids from configuration when not given on the command line."""
    budget_id = budget_id or config.ynab.budget_id
    account_id = account_id or config.ynab.account_id
    if not budget_id:
        raise click.ClickException("No budget id given. Use --budget-id or set YNAB_BUDGET_ID.")
    return budget_id, account_id


@click.group()
def ynab() -> None:
    """YNAB budget, account and transaction commands."""
    pass


@ynab.command()
def budgets() -> None:
    """List budgets available to the access token."""
    config = get_config()

    async def run() -> list:
        async with create_client(config) as client:
            return await client.list_budgets()

    try:
        results = asyncio.run(run())
    except YnabApiError as e:
        raise click.ClickException(f"Failed to fetch budgets: {e}") from e

    if not results:
        click.echo("No budgets found")
        return
    for budget in results:
        click.echo(f"{budget.id}  {budget.name}")


@ynab.command()
@click.option("--budget-id", help="Budget id (default: YNAB_BUDGET_ID)")
@click.option("--include-closed", is_flag=True, help="Include closed accounts")
def accounts(budget_id: str | None, include_closed: bool) -> None:
    """List accounts in a budget."""
    config = get_config()
    budget_id, _ = resolve_ids(config, budget_id)

    async def run() -> list:
        async with create_client(config) as client:
            return await client.list_accounts(budget_id)

    try:
        results = asyncio.run(run())
    except YnabApiError as e:
        raise click.ClickException(f"Failed to fetch accounts: {e}") from e

    shown = [a for a in results if not a.deleted and (include_closed or not a.closed)]
    if not shown:
        click.echo("No accounts found")
        return
    for account in shown:
        click.echo(f"{account.id}  {account.name} ({account.type}, balance {account.balance})")


@ynab.command("fetch-transactions")
@click.option("--budget-id", help="Budget id (default: YNAB_BUDGET_ID)")
@click.option("--account-id", help="Account id (default: YNAB_ACCOUNT_ID)")
@click.option("--cache-dir", help="Override transactions cache directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def fetch_transactions(budget_id: str | None, account_id: str | None, cache_dir: str | None, verbose: bool) -> None:
    """
    Fetch an account's transactions into the local cache.

    Examples:
      labeler ynab fetch-transactions --budget-id <budget> --account-id <account>
    """
    config = get_config()
    budget_id, account_id = resolve_ids(config, budget_id, account_id)
    if not account_id:
        raise click.ClickException("No account id given. Use --account-id or set YNAB_ACCOUNT_ID.")

    async def run() -> list:
        async with create_client(config) as client:
            return await client.list_transactions(budget_id, account_id)

    try:
        transactions = asyncio.run(run())
    except YnabApiError as e:
        raise click.ClickException(f"Failed to fetch transactions: {e}") from e

    cache_path = save_transactions(
        transactions,
        cache_dir=Path(cache_dir) if cache_dir else config.cache_dir,
        budget_id=budget_id,
        account_id=account_id,
    )

    click.echo(f"✅ Cached {len(transactions)} transactions")
    click.echo(f"   Saved to: {cache_path}")
    if verbose:
        for tx in transactions[:10]:
            click.echo(f"   [{tx.date}] {tx.payee_name or '-'}  {format_milliunits(tx.amount_milliunits)}  {tx.memo or ''}")
