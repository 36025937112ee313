"""
Theurgy Query - Read-only chain queries.

- balance: Bank balances of an address
- tx:      Transaction status by hash
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..config import L1_CHAIN_ID
from ..pneuma.rest import RestError
from ..utils import pretty_json
from .broadcast import open_sdk, rest_url_option


@click.command()
@click.option("--address", default=None, help="Address to query (default: own wallet)")
@click.option("--chain-id", default=L1_CHAIN_ID, show_default=True, help="Chain to query")
@rest_url_option
def balance(address: Optional[str], chain_id: str, rest_url: Optional[str]) -> None:
    """Show token balances."""
    sdk = open_sdk(chain_id, rest_url)
    address = address or sdk.get_account_address()

    try:
        coins = sdk.get_account_balance(address)
    except RestError as exc:
        click.secho(f"ERROR: Failed to read balance: {exc}", fg="red")
        sys.exit(1)

    click.echo(f"  Address: {address}")
    if not coins:
        click.echo("  (no balances)")
        return
    for coin in coins:
        click.echo(f"  {coin['amount']:>24}  {coin['denom']}")


@click.command()
@click.argument("tx_hash")
@click.option("--chain-id", default=L1_CHAIN_ID, show_default=True, help="Chain to query")
@click.option("--json", "as_json", is_flag=True, help="Print the full tx response")
@rest_url_option
def tx(tx_hash: str, chain_id: str, as_json: bool, rest_url: Optional[str]) -> None:
    """Show the status of a transaction."""
    sdk = open_sdk(chain_id, rest_url)

    try:
        info = sdk.get_tx_status(tx_hash)
    except RestError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(pretty_json(info))
        return

    code = int(info.get("code", 0) or 0)
    click.echo(f"  TX:     {info.get('txhash', tx_hash)}")
    click.echo(f"  Height: {info.get('height', '?')}")
    if code == 0:
        click.secho("  Status: success", fg="green")
    else:
        click.secho(f"  Status: failed (code {code})", fg="red")
        if info.get("raw_log"):
            click.echo(f"  Log:    {info['raw_log']}")
