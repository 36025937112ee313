"""
Theurgy TEE - Enclave key registration and signature verification.

All calls go to the TEE verify contract on the rollup:
- init-key:   public_key_aggregate::create
- update-key: public_key_aggregate::update
- show-key:   read the registered key (view call)
- verify:     agent_tweet_event_aggregate::create

Contract abort codes: 100 (cannot verify signature), 101 (duplicate request).
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from ..codec import is_uuid
from ..config import ROLLUP_CHAIN_ID, ConfigNotFoundError, get_contract_config
from ..pneuma.contracts import (
    create_public_key,
    public_key_args,
    update_public_key,
    verify_signature,
    verify_signature_args,
)
from ..pneuma.rest import RestError
from ..utils import hex_to_string
from .broadcast import (
    dry_run_option,
    network_option,
    open_sdk,
    rest_url_option,
    signer_option,
    submit,
)


@click.group()
def tee() -> None:
    """TEE public key and signature verification."""
    pass


def _resolve_public_key(public_key: Optional[str], network: str) -> str:
    if public_key:
        return public_key
    try:
        return get_contract_config(network).require("tee_public_key")
    except ConfigNotFoundError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)


def _register_key(
    update: bool,
    public_key: Optional[str],
    network: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    key_hex = _resolve_public_key(public_key, network)
    try:
        args = public_key_args(key_hex)
    except ValueError as exc:
        click.secho(f"ERROR: Invalid public key hex: {exc}", fg="red")
        sys.exit(1)

    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url, signer_spec)
    builder = update_public_key if update else create_public_key
    try:
        msg = builder(sdk.get_account_address(), args, network=network)
    except ConfigNotFoundError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    memo = "Public key update" if update else "Public key initialization"
    submit(sdk, [msg], memo, dry_run)


@tee.command("init-key")
@click.option("--public-key", default=None, help="Hex public key (default: RENA_TEE_PUBLIC_KEY)")
@network_option
@rest_url_option
@signer_option
@dry_run_option
def init_key(public_key, network, rest_url, signer_spec, dry_run) -> None:
    """Register the TEE public key."""
    _register_key(False, public_key, network, rest_url, signer_spec, dry_run)


@tee.command("update-key")
@click.option("--public-key", default=None, help="Hex public key (default: RENA_TEE_PUBLIC_KEY)")
@network_option
@rest_url_option
@signer_option
@dry_run_option
def update_key(public_key, network, rest_url, signer_spec, dry_run) -> None:
    """Replace the registered TEE public key."""
    _register_key(True, public_key, network, rest_url, signer_spec, dry_run)


@tee.command("show-key")
@click.option("--decode", is_flag=True, help="Decode a 0x hex result into text")
@network_option
@rest_url_option
def show_key(decode: bool, network: str, rest_url: Optional[str]) -> None:
    """Show the TEE public key currently registered on chain."""
    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url)
    try:
        public_key = sdk.get_tee_public_key(network)
    except (ConfigNotFoundError, RestError) as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    if decode and isinstance(public_key, str) and public_key.startswith("0x"):
        public_key = hex_to_string(public_key)
    click.echo(f"Public Key: {public_key}")


@tee.command()
@click.option("--request-id", required=True, help="Request UUID")
@click.option("--message", "message_json", required=True, help="Signed payload as JSON")
@click.option("--signature", required=True, help="Enclave signature (hex)")
@click.option("--timestamp", required=True, type=int, help="Unix timestamp (seconds)")
@click.option("--numeric-id", is_flag=True, help="Pass the request id as its u256 key")
@network_option
@rest_url_option
@signer_option
@dry_run_option
def verify(
    request_id: str,
    message_json: str,
    signature: str,
    timestamp: int,
    numeric_id: bool,
    network: str,
    rest_url: Optional[str],
    signer_spec: Optional[str],
    dry_run: bool,
) -> None:
    """Verify an enclave signature on chain."""
    if not is_uuid(request_id):
        click.secho(f"ERROR: Request id must be a canonical UUID: {request_id}", fg="red")
        sys.exit(1)

    try:
        message = json.loads(message_json)
    except json.JSONDecodeError as exc:
        click.secho(f"ERROR: Invalid message JSON: {exc}", fg="red")
        sys.exit(1)

    try:
        args = verify_signature_args(
            request_id, message, signature, timestamp, numeric_request_id=numeric_id
        )
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    sdk = open_sdk(ROLLUP_CHAIN_ID, rest_url, signer_spec)
    try:
        msg = verify_signature(sdk.get_account_address(), args, network=network)
    except ConfigNotFoundError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    submit(sdk, [msg], "Signature verification", dry_run)
