"""
Theurgy VIP - Rollup VIP score operations.

- set-stage:    vip_score::set_init_stage
- update-score: vip_score::update_score_script
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..config import ROLLUP_CHAIN_ID, ConfigNotFoundError
from ..pneuma.contracts import update_vip_score, update_vip_stage, vip_score_args, vip_stage_args
from .broadcast import (
    dry_run_option,
    network_option,
    open_sdk,
    rest_url_option,
    signer_option,
    submit,
)


@click.group()
def vip() -> None:
    """VIP stage and score updates."""
    pass


@vip.command("set-stage")
@click.option("--stage", required=True, type=int, help="Initial stage number")
@network_option
@rest_url_option
@signer_option
@dry_run_option
def set_stage(
    stage: int,
    network: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Set the initial VIP stage."""
    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url, signer_spec)
    try:
        msg = update_vip_stage(sdk.get_account_address(), vip_stage_args(stage), network=network)
    except (ConfigNotFoundError, ValueError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    submit(sdk, [msg], "initialize vip", dry_run)


@vip.command("update-score")
@click.option("--stage", required=True, type=int, help="Stage number")
@click.option(
    "--score",
    "scores",
    multiple=True,
    required=True,
    help="ADDRESS=SCORE (repeatable)",
)
@network_option
@rest_url_option
@signer_option
@dry_run_option
def update_score(
    stage: int,
    scores: tuple[str, ...],
    network: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Update VIP scores for a stage."""
    addresses: list[str] = []
    values: list[int] = []
    for entry in scores:
        addr, sep, score = entry.partition("=")
        if not sep or not score.strip().isdecimal():
            click.secho(f"ERROR: Expected ADDRESS=SCORE, got {entry!r}", fg="red")
            sys.exit(1)
        addresses.append(addr.strip())
        values.append(int(score.strip()))

    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url, signer_spec)
    try:
        args = vip_score_args(stage, addresses, values)
        msg = update_vip_score(sdk.get_account_address(), args, network=network)
    except (ConfigNotFoundError, ValueError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    submit(sdk, [msg], "update vip score", dry_run)
