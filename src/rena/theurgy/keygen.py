"""
Keygen - Create the wallet mnemonic.

Writes a fresh BIP-39 mnemonic to ~/.rena/.env unless one already exists,
then prints the derived account address.
"""

from __future__ import annotations

import sys

import click

from ..sigil.key import MnemonicKey, generate_mnemonic, load_mnemonic, save_mnemonic


@click.command()
@click.option("--force", is_flag=True, help="Replace an existing mnemonic")
@click.option("--words", default="24", type=click.Choice(["12", "24"]), help="Mnemonic length")
@click.option("--show-mnemonic", is_flag=True, help="Print the mnemonic (keep it secret)")
def keygen(force: bool, words: str, show_mnemonic: bool) -> None:
    """Create a wallet mnemonic in ~/.rena/.env."""
    click.echo("=== Rena Keygen ===")
    click.echo("")

    mnemonic = None
    if not force:
        try:
            mnemonic = load_mnemonic()
            click.echo("Existing mnemonic found, keeping it.")
        except ValueError:
            mnemonic = None

    if mnemonic is None:
        mnemonic = generate_mnemonic(int(words))
        env_path = save_mnemonic(mnemonic)
        click.secho(f"Mnemonic saved to {env_path}", fg="green")

    try:
        key = MnemonicKey(mnemonic)
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        click.echo("Run 'rena keygen --force' to replace it.")
        sys.exit(1)
    click.echo(f"  Address: {key.acc_address}")
    click.echo(f"  Path:    {key.derivation_path}")
    if show_mnemonic:
        click.echo(f"  Mnemonic: {mnemonic}")

    click.echo("")
    click.echo("=== Keygen Complete ===")
