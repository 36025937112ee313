"""
Theurgy Request ID - Convert between UUID and the contract's u256 key.
"""

from __future__ import annotations

import sys

import click

from ..codec import CodecError, u256_to_uuid, uuid_to_u256


@click.group("uuid")
def request_id() -> None:
    """Convert request ids between UUID and u256."""
    pass


@request_id.command()
@click.argument("uuid")
@click.option("--hex", "as_hex", is_flag=True, help="Print as 64-digit hex")
def encode(uuid: str, as_hex: bool) -> None:
    """UUID -> u256."""
    try:
        value = uuid_to_u256(uuid)
    except CodecError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    click.echo(f"0x{value:064x}" if as_hex else str(value))


@request_id.command()
@click.argument("value")
@click.option("--strict", is_flag=True, help="Fail instead of dropping bits above 128")
def decode(value: str, strict: bool) -> None:
    """u256 (decimal or 0x hex) -> UUID."""
    try:
        number = int(value, 0)
    except ValueError:
        click.secho(f"ERROR: Not an integer: {value}", fg="red")
        sys.exit(1)

    try:
        click.echo(u256_to_uuid(number, strict=strict))
    except CodecError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)
