"""
Rena CLI

Command-line driver for the Rena Initia SDK: one wallet, the Initia L1
testnet and the Nuwa rollup.

Commands:
  keygen      - Create a wallet mnemonic
  whoami      - Show current wallet address
  info        - Show configuration
  balance     - Show token balances
  tx          - Show transaction status
  send        - Send tokens
  bridge      - Bridge tokens from L1 to the rollup
  bridge-out  - Withdraw tokens from the rollup to L1
  tee         - TEE public key and signature verification
  vip         - VIP stage and score updates
  uuid        - Convert request ids between UUID and u256
"""

from __future__ import annotations

import logging
import os
import sys

import click

from .config import CHAIN_CONFIGS, RENA_ENV, get_contract_config
from .sigil.key import MnemonicKey, load_mnemonic


# ============ Constants ============

VERSION = "1.0.0"


# ============ Banner ============


def _print_banner() -> None:
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("R E N A", fg="bright_white", bold=True)
        + click.style(f"  v{VERSION}", dim=True)
    )
    click.secho("  ─── Initia SDK ───", fg="cyan")
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="rena")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Rena - Initia L1 and rollup toolkit."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .theurgy.keygen import keygen
from .theurgy.query import balance, tx
from .theurgy.request_id import request_id
from .theurgy.tee import tee
from .theurgy.transfer import bridge, bridge_out, send
from .theurgy.vip import vip

cli.add_command(keygen)
cli.add_command(balance)
cli.add_command(tx)
cli.add_command(send)
cli.add_command(bridge)
cli.add_command(bridge_out)
cli.add_command(tee)
cli.add_command(vip)
cli.add_command(request_id)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show current wallet identity."""
    try:
        mnemonic = load_mnemonic()
    except ValueError:
        click.echo("No wallet found.")
        click.echo("Run 'rena keygen' to create one.")
        sys.exit(1)
    try:
        key = MnemonicKey(mnemonic)
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
    click.echo(f"Address: {key.acc_address}")


# ============ Info ============


@cli.command()
@click.option("--network", type=click.Choice(["testnet", "mainnet"]), default="mainnet")
def info(network: str) -> None:
    """Show configuration."""
    _print_banner()

    click.secho("  Wallet ─────────────────────────────────", fg="cyan")
    try:
        key = MnemonicKey(load_mnemonic())
        click.echo(click.style("  Address:  ", dim=True) + click.style(key.acc_address, fg="bright_white"))
    except ValueError:
        click.echo(
            click.style("  Address:  ", dim=True)
            + click.style("not initialized", fg="yellow")
            + click.style("  (run: rena keygen)", dim=True)
        )
    click.echo(click.style("  Env file: ", dim=True) + str(RENA_ENV))
    click.echo()

    click.secho("  Chains ─────────────────────────────────", fg="cyan")
    for config in CHAIN_CONFIGS.values():
        click.echo(f"  {config.chain_id:<16} {config.rest_url}")
        click.echo(click.style(f"  {'':<16} gas {config.gas_prices} x{config.gas_adjustment}", dim=True))
    click.echo()

    click.secho(f"  Contracts ({network}) ──────────────────────", fg="cyan")
    contracts = get_contract_config(network)
    for label, value in [
        ("TEE verify", contracts.tee_verify_contract),
        ("VIP", contracts.vip_contract),
        ("TEE pubkey", contracts.tee_public_key),
    ]:
        shown = click.style(value, fg="bright_white") if value else click.style("not set", fg="yellow")
        click.echo(click.style(f"  {label:<11} ", dim=True) + shown)
    signer = os.environ.get("RENA_SIGNER")
    click.echo(
        click.style("  Signer      ", dim=True)
        + (click.style(signer, fg="bright_white") if signer else click.style("not set", fg="yellow"))
    )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Rena CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass
    cli()


if __name__ == "__main__":
    main()
