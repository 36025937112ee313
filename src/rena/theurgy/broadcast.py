"""Shared plumbing for commands that build and broadcast messages."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

import click

from ..config import ConfigNotFoundError
from ..pneuma.msgs import Msg
from ..pneuma.rest import RestError
from ..pneuma.wallet import SignerNotConfiguredError, load_signer
from ..sdk import InitiaSDK, create_sdk
from ..utils import pretty_json

signer_option = click.option(
    "--signer",
    "signer_spec",
    envvar="RENA_SIGNER",
    default=None,
    help="Transaction signer as module:attr",
)
dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Print the messages instead of broadcasting",
)
rest_url_option = click.option(
    "--rest-url",
    envvar="RENA_REST_URL",
    default=None,
    help="Override the chain's REST endpoint",
)
network_option = click.option(
    "--network",
    type=click.Choice(["testnet", "mainnet"]),
    envvar="RENA_NETWORK",
    default="mainnet",
    show_default=True,
    help="Contract network",
)


def open_sdk(chain_id: str, rest_url: Optional[str] = None, signer_spec: Optional[str] = None) -> InitiaSDK:
    """Create an SDK from the stored mnemonic, exiting on configuration errors."""
    try:
        signer = load_signer(signer_spec) if signer_spec else None
        return create_sdk(chain_id, rest_url=rest_url, signer=signer)
    except (ValueError, ConfigNotFoundError, ImportError, AttributeError, TypeError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


def submit(sdk: InitiaSDK, msgs: Sequence[Msg], memo: str, dry_run: bool = False) -> None:
    """Broadcast ``msgs`` (or print them) and report the outcome."""
    if dry_run:
        click.echo(pretty_json({"memo": memo, "msgs": [m.to_data() for m in msgs]}))
        return

    try:
        result = sdk.sign_and_broadcast(msgs, memo)
    except SignerNotConfiguredError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        click.echo("Use --dry-run to inspect the messages without signing.")
        sys.exit(1)
    except (RestError, ValueError) as exc:
        click.secho(f"Transaction failed: {exc}", fg="red")
        sys.exit(1)

    click.secho("SUCCESS: Transaction broadcast!", fg="green")
    click.echo(f"  TX: {result.txhash}")
