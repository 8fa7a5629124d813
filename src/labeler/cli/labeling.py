#!/usr/bin/env python3
"""
Labeling CLI - Match, Sync and Undo

Three-step workflow:
1. match: labels CSV + cached transactions -> match results JSON
2. sync: match results -> memo updates in YNAB -> sync log JSON
3. undo: sync log -> memo restores in YNAB -> undo log JSON
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Any

import click

from ..core.config import Config, get_config
from ..core.currency import format_cents
from ..core.json_utils import read_json, write_json
from ..labels.loader import load_labels
from ..matching import (
    append_label_memo,
    finalize_matches,
    generate_match_summary,
    get_candidates_for_all_labels,
    replace_with_label_memo,
    resolve_best_match_for_labels,
)
from ..matching.models import LabelTransactionMatchFinalized
from ..sync import (
    AccountContext,
    PreconditionError,
    UpdateLog,
    summarize_update_logs,
    sync_labels_to_ynab,
    undo_sync_labels_to_ynab,
)
from ..ynab.loader import filter_active_transactions, load_transactions
from . import ynab as ynab_cli

MEMO_STRATEGIES = {
    "append": append_label_memo,
    "replace": replace_with_label_memo,
}


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


def _output_path(config: Config, output_file: str | None, suffix: str) -> Path:
    if output_file:
        return Path(output_file)
    return config.output_dir / f"{_timestamp()}_{suffix}.json"


def _account_context(config: Config, budget_id: str | None, account_id: str | None, metadata: dict[str, Any]) -> AccountContext:
    budget_id = budget_id or metadata.get("budget_id") or config.ynab.budget_id
    account_id = account_id or metadata.get("account_id") or config.ynab.account_id
    return AccountContext(budget_id=budget_id or "", account_id=account_id or "")


def _echo_summary(action: str, summary: dict[str, Any]) -> None:
    click.echo(f"✅ {summary['succeeded']} of {summary['total']} {action} succeeded")
    if summary["failed"]:
        click.echo(f"   Failed: {summary['failed']}")
    if summary["skipped"]:
        click.echo(f"   Skipped: {summary['skipped']}")


@click.command()
@click.option("--labels-file", required=True, help="Labels CSV file")
@click.option("--cache-dir", help="Override transactions cache directory")
@click.option(
    "--memo-strategy",
    type=click.Choice(sorted(MEMO_STRATEGIES)),
    default="append",
    help="How the label memo combines with the existing memo (default: append)",
)
@click.option("--output-file", help="Override match results file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def match(labels_file: str, cache_dir: str | None, memo_strategy: str, output_file: str | None, verbose: bool) -> None:
    """
    Match labels to cached YNAB transactions.

    Labels are resolved in file order: when two labels compete for the same
    transaction, the earlier row wins.

    Examples:
      labeler match --labels-file labels.csv
      labeler match --labels-file labels.csv --memo-strategy replace
    """
    config = get_config()
    cache_path = Path(cache_dir) if cache_dir else config.cache_dir

    try:
        labels = load_labels(labels_file)
        transactions = filter_active_transactions(load_transactions(cache_path))
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    cache_data = read_json(cache_path / "transactions.json")
    cache_metadata = cache_data if isinstance(cache_data, dict) else {}

    matches = resolve_best_match_for_labels(get_candidates_for_all_labels(labels, transactions))
    finalized = finalize_matches(matches, composer=MEMO_STRATEGIES[memo_strategy])
    summary = generate_match_summary(matches)

    output_path = _output_path(config, output_file, "matches")
    write_json(
        output_path,
        {
            "metadata": {
                "labels_file": str(labels_file),
                "budget_id": cache_metadata.get("budget_id"),
                "account_id": cache_metadata.get("account_id"),
                "memo_strategy": memo_strategy,
                "timestamp": _timestamp(),
            },
            "summary": summary,
            "matches": [f.to_dict() for f in finalized],
            "unmatched_label_ids": [m.label.id for m in matches if not m.is_matched],
        },
    )

    click.echo(f"✅ Matched {len(finalized)} of {len(labels)} labels")
    click.echo(f"   Saved to: {output_path}")
    if verbose:
        for item in finalized:
            click.echo(
                f"   {item.label.id}: {format_cents(item.label.amount.to_cents())} on {item.label.date} "
                f"-> {item.transaction_match.id} [{item.transaction_match.date}] memo: {item.new_memo!r}"
            )
        for m in matches:
            if not m.is_matched:
                click.echo(f"   {m.label.id}: no match")


@click.command()
@click.option("--matches-file", required=True, help="Match results JSON from 'labeler match'")
@click.option("--budget-id", help="Budget id (default: from match results or YNAB_BUDGET_ID)")
@click.option("--account-id", help="Account id (default: from match results or YNAB_ACCOUNT_ID)")
@click.option("--output-file", help="Override sync log file")
@click.option("--dry-run", is_flag=True, help="Show memo changes without applying them")
def sync(matches_file: str, budget_id: str | None, account_id: str | None, output_file: str | None, dry_run: bool) -> None:
    """
    Write matched label memos to YNAB.

    Every match is attempted even if earlier ones fail; the sync log records
    the outcome of each and is the input for 'labeler undo'.
    """
    config = get_config()
    matches_path = Path(matches_file)
    if not matches_path.exists():
        raise click.ClickException(f"Matches file not found: {matches_path}")

    match_data = read_json(matches_path)
    finalized = [LabelTransactionMatchFinalized.from_dict(m) for m in match_data.get("matches", [])]
    context = _account_context(config, budget_id, account_id, match_data.get("metadata", {}))

    if dry_run:
        for item in finalized:
            click.echo(f"{item.transaction_match.id}: {item.transaction_match.memo or ''!r} -> {item.new_memo!r}")
        click.echo(f"\n💡 Dry run: {len(finalized)} memo updates would be applied.")
        return

    async def run() -> list[UpdateLog]:
        async with ynab_cli.create_client(config) as client:
            return await sync_labels_to_ynab(
                account_context=context,
                finalized_matches=finalized,
                remote_client=client,
            )

    try:
        logs = asyncio.run(run())
    except PreconditionError as e:
        raise click.ClickException(f"{e}. Use --budget-id/--account-id.") from e

    summary = summarize_update_logs(logs)
    output_path = _output_path(config, output_file, "sync_log")
    write_json(
        output_path,
        {
            "metadata": {
                "matches_file": str(matches_path),
                "budget_id": context.budget_id,
                "account_id": context.account_id,
                "timestamp": _timestamp(),
            },
            "summary": summary,
            "update_logs": [log.to_dict() for log in logs],
        },
    )

    _echo_summary("updates", summary)
    click.echo(f"   Saved to: {output_path}")


@click.command()
@click.option("--log-file", required=True, help="Sync log JSON from 'labeler sync'")
@click.option("--budget-id", help="Budget id (default: from the log or YNAB_BUDGET_ID)")
@click.option("--account-id", help="Account id (default: from the log or YNAB_ACCOUNT_ID)")
@click.option("--output-file", help="Override undo log file")
def undo(log_file: str, budget_id: str | None, account_id: str | None, output_file: str | None) -> None:
    """
    Restore the memos a previous sync changed.

    Only successful updates are reverted. A memo edited in YNAB after the sync
    is overwritten by the restore.
    """
    config = get_config()
    log_path = Path(log_file)
    if not log_path.exists():
        raise click.ClickException(f"Log file not found: {log_path}")

    log_data = read_json(log_path)
    update_logs = [UpdateLog.from_dict(entry) for entry in log_data.get("update_logs", [])]
    context = _account_context(config, budget_id, account_id, log_data.get("metadata", {}))

    async def run() -> list[UpdateLog]:
        async with ynab_cli.create_client(config) as client:
            return await undo_sync_labels_to_ynab(
                account_context=context,
                update_logs=update_logs,
                remote_client=client,
            )

    try:
        logs = asyncio.run(run())
    except PreconditionError as e:
        raise click.ClickException(f"{e}. Use --budget-id/--account-id.") from e

    summary = summarize_update_logs(logs)
    output_path = _output_path(config, output_file, "undo_log")
    write_json(
        output_path,
        {
            "metadata": {
                "log_file": str(log_path),
                "budget_id": context.budget_id,
                "account_id": context.account_id,
                "timestamp": _timestamp(),
            },
            "summary": summary,
            "update_logs": [log.to_dict() for log in logs],
        },
    )

    _echo_summary("restores", summary)
    click.echo(f"   Saved to: {output_path}")
