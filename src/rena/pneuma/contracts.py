"""
Message builders for token movement and the TEE / VIP contracts.

Contract-call builders resolve the target module address from the
network's ContractConfig, so callers only supply the sender and the
pre-serialized arguments.
"""

from __future__ import annotations

import base64
import json
from typing import Any, Optional, Sequence, Union

from ..config import ContractConfig, get_contract_config
from . import bcs
from .msgs import (
    Coin,
    Coins,
    MsgExecute,
    MsgInitiateTokenDeposit,
    MsgInitiateTokenWithdrawal,
    MsgSend,
)

PUBLIC_KEY_MODULE = "public_key_aggregate"
TWEET_EVENT_MODULE = "agent_tweet_event_aggregate"
VIP_MODULE = "vip_score"


# ---------------------------------------------------------------------------
# Token movement
# ---------------------------------------------------------------------------

def send_token(sender: str, recipient: str, amount: Union[str, Coin, Coins]) -> MsgSend:
    """
    Create a bank transfer.

    Args:
        sender: Sender account address
        recipient: Recipient account address
        amount: Amount such as ``"1000uinit"``
    """
    return MsgSend(from_address=sender, to_address=recipient, amount=Coins.of(amount))


def bridge_token(sender: str, bridge_id: int, to: str, amount: Coin) -> MsgInitiateTokenDeposit:
    """Deposit tokens from L1 into the rollup behind ``bridge_id``."""
    return MsgInitiateTokenDeposit(sender=sender, bridge_id=bridge_id, to=to, amount=amount)


def bridge_out_token(sender: str, to: str, amount: Coin) -> MsgInitiateTokenWithdrawal:
    """Withdraw tokens from the rollup back to L1 (finalizes after the challenge period)."""
    return MsgInitiateTokenWithdrawal(sender=sender, to=to, amount=amount)


# ---------------------------------------------------------------------------
# Contract calls
# ---------------------------------------------------------------------------

def _execute(
    sender: str,
    module_address: str,
    module_name: str,
    function_name: str,
    args: Sequence[str],
) -> MsgExecute:
    return MsgExecute(
        sender=sender,
        module_address=module_address,
        module_name=module_name,
        function_name=function_name,
        type_args=(),
        args=tuple(args),
    )


def _contracts(network: str, config: Optional[ContractConfig]) -> ContractConfig:
    return config if config is not None else get_contract_config(network)


def create_public_key(
    sender: str,
    args: Sequence[str],
    network: str = "mainnet",
    config: Optional[ContractConfig] = None,
) -> MsgExecute:
    """Register the TEE public key (``public_key_aggregate::create``)."""
    contract = _contracts(network, config).require("tee_verify_contract")
    return _execute(sender, contract, PUBLIC_KEY_MODULE, "create", args)


def update_public_key(
    sender: str,
    args: Sequence[str],
    network: str = "mainnet",
    config: Optional[ContractConfig] = None,
) -> MsgExecute:
    """Rotate the registered TEE public key (``public_key_aggregate::update``)."""
    contract = _contracts(network, config).require("tee_verify_contract")
    return _execute(sender, contract, PUBLIC_KEY_MODULE, "update", args)


def verify_signature(
    sender: str,
    args: Sequence[str],
    network: str = "mainnet",
    config: Optional[ContractConfig] = None,
) -> MsgExecute:
    """Submit a TEE-signed event for on-chain verification."""
    contract = _contracts(network, config).require("tee_verify_contract")
    return _execute(sender, contract, TWEET_EVENT_MODULE, "create", args)


def update_vip_stage(
    sender: str,
    args: Sequence[str],
    network: str = "mainnet",
    config: Optional[ContractConfig] = None,
) -> MsgExecute:
    contract = _contracts(network, config).require("vip_contract")
    return _execute(sender, contract, VIP_MODULE, "set_init_stage", args)


def update_vip_score(
    sender: str,
    args: Sequence[str],
    network: str = "mainnet",
    config: Optional[ContractConfig] = None,
) -> MsgExecute:
    contract = _contracts(network, config).require("vip_contract")
    return _execute(sender, contract, VIP_MODULE, "update_score_script", args)


# ---------------------------------------------------------------------------
# Argument preparation
# ---------------------------------------------------------------------------

def public_key_args(public_key_hex: str) -> list[str]:
    return [bcs.bytes_vector(public_key_hex)]


def encode_message(message: Any) -> bytes:
    """
    Encode an event payload the way the enclave signs it.

    Compact JSON, then base64; the contract receives the base64 text's bytes.
    """
    if isinstance(message, (bytes, bytearray)):
        raw = bytes(message)
    elif isinstance(message, str):
        raw = message.encode("utf-8")
    else:
        raw = json.dumps(message, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return base64.b64encode(raw)


def verify_signature_args(
    request_id: str,
    message: Any,
    signature_hex: str,
    timestamp: int,
    numeric_request_id: bool = False,
) -> list[str]:
    """
    Build the argument vector for ``verify_signature``.

    Args:
        request_id: UUID of the request
        message: Event payload (dict, str or bytes)
        signature_hex: Enclave signature, hex encoded
        timestamp: Unix timestamp in seconds
        numeric_request_id: Pass the request id as its u256 key instead of
            its UTF-8 bytes
    """
    if numeric_request_id:
        id_arg = bcs.request_id(request_id)
    else:
        id_arg = bcs.bytes_vector(request_id, encoding="utf-8")

    return [
        id_arg,
        bcs.bytes_vector(encode_message(message)),
        bcs.bytes_vector(signature_hex),
        bcs.u64(timestamp),
    ]


def vip_stage_args(stage: int) -> list[str]:
    return [bcs.u64(stage)]


def vip_score_args(stage: int, addresses: Sequence[str], scores: Sequence[int]) -> list[str]:
    if len(addresses) != len(scores):
        raise ValueError(
            f"addresses and scores differ in length ({len(addresses)} != {len(scores)})"
        )
    return [
        bcs.u64(stage),
        bcs.address_vector(addresses),
        bcs.u64_vector(scores),
    ]
