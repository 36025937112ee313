"""
Wallet - sign and broadcast transactions.

Protobuf encoding, fee estimation and signing are delegated to a TxSigner
implementation so that any Initia-compatible signer (a local keyring, a
sidecar process, a hardware wallet bridge) can be plugged in.
"""

from __future__ import annotations

import importlib
import logging
import re
from typing import Any, Optional, Protocol, Sequence

from ..sigil.key import MnemonicKey
from .msgs import Msg
from .rest import BroadcastResult, RESTClient, RestError

logger = logging.getLogger(__name__)

# Abort codes raised by the TEE verification contract
CONTRACT_ERRORS: dict[int, str] = {
    100: "invalid request - cannot verify signature",
    101: "duplicate request",
}


class SignerNotConfiguredError(RuntimeError):
    pass


class BroadcastError(RestError):
    def __init__(self, result: BroadcastResult) -> None:
        message = f"Transaction {result.txhash or '<unknown>'} failed with code {result.code}"
        reason = describe_failure(result.raw_log)
        if reason:
            message += f": {reason}"
        elif result.raw_log:
            message += f": {result.raw_log}"
        super().__init__(message)
        self.result = result


class TxSigner(Protocol):
    def sign(
        self,
        key: MnemonicKey,
        msgs: Sequence[Msg],
        memo: str,
        *,
        chain_id: str,
        account_number: int,
        sequence: int,
        gas_prices: str,
        gas_adjustment: str,
    ) -> bytes:
        """Return the protobuf-encoded signed TxRaw."""
        ...


def describe_failure(raw_log: str) -> Optional[str]:
    """Map a Move abort code in a raw log to a readable reason."""
    for code, reason in CONTRACT_ERRORS.items():
        if re.search(rf"(?:code=|abort_code: ){code}\b", raw_log):
            return reason
    return None


def load_signer(spec: str) -> TxSigner:
    """
    Resolve a signer from a ``module:attr`` import path.

    ``attr`` may be a signer instance or a zero-argument factory.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Signer must be given as 'module:attr', got {spec!r}")

    module = importlib.import_module(module_name)
    obj: Any = getattr(module, attr)
    if not hasattr(obj, "sign") and callable(obj):
        obj = obj()
    if not hasattr(obj, "sign"):
        raise TypeError(f"{spec} does not provide a sign() method")
    return obj


class Wallet:
    def __init__(self, rest: RESTClient, key: MnemonicKey, signer: Optional[TxSigner] = None) -> None:
        self.rest = rest
        self.key = key
        self.signer = signer

    @property
    def address(self) -> str:
        return self.key.acc_address

    def account_number_and_sequence(self) -> tuple[int, int]:
        info = self.rest.account_info(self.address)
        return int(info.get("account_number", 0)), int(info.get("sequence", 0))

    def create_and_sign_tx(self, msgs: Sequence[Msg], memo: str = "") -> bytes:
        if self.signer is None:
            raise SignerNotConfiguredError(
                "No transaction signer configured. Pass signer= or set RENA_SIGNER."
            )
        if not msgs:
            raise ValueError("At least one message is required")

        account_number, sequence = self.account_number_and_sequence()
        return self.signer.sign(
            self.key,
            list(msgs),
            memo,
            chain_id=self.rest.chain_id,
            account_number=account_number,
            sequence=sequence,
            gas_prices=self.rest.gas_prices,
            gas_adjustment=self.rest.gas_adjustment,
        )

    def broadcast(self, tx_bytes: bytes) -> BroadcastResult:
        result = self.rest.broadcast(tx_bytes)
        if not result.success:
            raise BroadcastError(result)
        return result

    def sign_and_broadcast(self, msgs: Sequence[Msg], memo: str = "") -> BroadcastResult:
        """Sign ``msgs`` and submit them; failures are logged and re-raised."""
        try:
            tx_bytes = self.create_and_sign_tx(msgs, memo)
            result = self.broadcast(tx_bytes)
        except Exception as exc:
            logger.error("Error in transaction: %s", exc)
            raise
        logger.info("Transaction result: %s", result)
        return result
