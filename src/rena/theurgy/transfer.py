"""
Theurgy Transfer - Move tokens.

- send:       Bank transfer on one chain
- bridge:     Deposit from L1 into the rollup (OPinit bridge)
- bridge-out: Withdraw from the rollup to L1; finalizes after the
              challenge period (usually about 7 days)
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..config import DEFAULT_BRIDGE_ID, L1_CHAIN_ID, ROLLUP_CHAIN_ID
from ..pneuma.contracts import bridge_out_token, bridge_token, send_token
from ..pneuma.msgs import Coin, Coins
from ..sigil.key import is_valid_address
from .broadcast import dry_run_option, open_sdk, rest_url_option, signer_option, submit


def _check_recipient(to: str) -> None:
    if not is_valid_address(to):
        click.secho(f"ERROR: Invalid recipient address: {to}", fg="red")
        sys.exit(1)


def _parse_coin(value: str) -> Coin:
    try:
        return Coin.parse(value)
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


@click.command()
@click.option("--to", required=True, help="Recipient address")
@click.option("--amount", required=True, help="Amount, e.g. 1000uinit")
@click.option("--memo", default="Token transfer", help="Transaction memo")
@click.option("--chain-id", default=L1_CHAIN_ID, show_default=True, help="Chain to send on")
@rest_url_option
@signer_option
@dry_run_option
def send(
    to: str,
    amount: str,
    memo: str,
    chain_id: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Send tokens to another address."""
    _check_recipient(to)
    try:
        coins = Coins.parse(amount)
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    sdk = open_sdk(chain_id, rest_url, signer_spec)
    sender = sdk.get_account_address()
    click.echo(f"Sending {coins} from {sender} to {to}")

    submit(sdk, [send_token(sender, to, coins)], memo, dry_run)


@click.command()
@click.option("--to", required=True, help="Recipient address on the rollup")
@click.option("--amount", required=True, help="Amount, e.g. 1000000uinit")
@click.option("--bridge-id", default=DEFAULT_BRIDGE_ID, type=int, show_default=True, help="OPinit bridge ID")
@click.option("--memo", default="Token bridge", help="Transaction memo")
@rest_url_option
@signer_option
@dry_run_option
def bridge(
    to: str,
    amount: str,
    bridge_id: int,
    memo: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Bridge tokens from L1 to the rollup."""
    _check_recipient(to)
    coin = _parse_coin(amount)

    sdk = open_sdk(L1_CHAIN_ID, rest_url, signer_spec)
    msg = bridge_token(sdk.get_account_address(), bridge_id, to, coin)
    submit(sdk, [msg], memo, dry_run)


@click.command("bridge-out")
@click.option("--to", required=True, help="Recipient address on L1")
@click.option("--amount", required=True, help="Amount in the rollup's L2 denom")
@click.option("--memo", default="Token bridge out", help="Transaction memo")
@rest_url_option
@signer_option
@dry_run_option
def bridge_out(
    to: str,
    amount: str,
    memo: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Withdraw tokens from the rollup back to L1."""
    _check_recipient(to)
    coin = _parse_coin(amount)

    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url, signer_spec)
    msg = bridge_out_token(sdk.get_account_address(), to, coin)
    submit(sdk, [msg], memo, dry_run)
