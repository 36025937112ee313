"""
REST Client for Initia L1 and rollups.

Thin httpx wrapper over the Cosmos / Initia LCD endpoints: bank balances,
account info, transaction lookup, Move view functions and raw transaction
broadcast.  Transaction construction and signing live elsewhere.
"""

from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import httpx

from .msgs import Coin

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class RestError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class BroadcastResult:
    txhash: str
    code: int = 0
    raw_log: str = ""
    height: int = 0
    codespace: str = ""

    @property
    def success(self) -> bool:
        return self.code == 0

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "BroadcastResult":
        return cls(
            txhash=payload.get("txhash", ""),
            code=int(payload.get("code", 0) or 0),
            raw_log=payload.get("raw_log", "") or "",
            height=int(payload.get("height", 0) or 0),
            codespace=payload.get("codespace", "") or "",
        )


class RESTClient:
    """
    LCD client bound to one chain.

    Args:
        url: REST endpoint base URL
        chain_id: Chain ID the endpoint serves
        gas_prices: Default gas prices, e.g. ``"0.15uinit"``
        gas_adjustment: Multiplier applied to simulated gas
        timeout: Request timeout in seconds
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        url: str,
        chain_id: str,
        gas_prices: str = "",
        gas_adjustment: str = "1.75",
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.chain_id = chain_id
        self.gas_prices = gas_prices
        self.gas_adjustment = gas_adjustment
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.url, timeout=self.timeout, transport=self._transport)

    def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        logger.debug("%s %s%s", method, self.url, path)
        try:
            with self._client() as client:
                response = client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise RestError(f"{method} {path} failed: {exc}") from exc

        if response.status_code >= 400:
            try:
                detail = response.json().get("message", response.text)
            except ValueError:
                detail = response.text
            raise RestError(
                f"{method} {path} returned {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise RestError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
            ) from exc

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self._request("GET", path, params=params)

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", path, json=payload)

    # ---- Queries ----

    def balance(self, address: str) -> list[Coin]:
        """Get all bank balances of an address, following pagination."""
        coins: list[Coin] = []
        params: dict[str, Any] = {}
        while True:
            data = self._get(f"/cosmos/bank/v1beta1/balances/{address}", params=params)
            coins.extend(Coin(denom=c["denom"], amount=c["amount"]) for c in data.get("balances", []))
            next_key = (data.get("pagination") or {}).get("next_key")
            if not next_key:
                return coins
            params = {"pagination.key": next_key}

    def account_info(self, address: str) -> dict[str, Any]:
        """Get account number and sequence for an address."""
        data = self._get(f"/cosmos/auth/v1beta1/account_info/{address}")
        return data.get("info", {})

    def tx_info(self, tx_hash: str) -> dict[str, Any]:
        """
        Look up a transaction by hash.

        Returns:
            The ``tx_response`` object (height, code, raw_log, events, ...)
        """
        data = self._get(f"/cosmos/tx/v1beta1/txs/{tx_hash}")
        return data.get("tx_response", data)

    def view(
        self,
        module_address: str,
        module_name: str,
        function_name: str,
        type_args: Sequence[str] = (),
        args: Sequence[str] = (),
    ) -> Any:
        """
        Call a Move view function.

        Returns:
            JSON-decoded return value
        """
        data = self._post(
            "/initia/move/v1/view",
            {
                "address": module_address,
                "module_name": module_name,
                "function_name": function_name,
                "type_args": list(type_args),
                "args": list(args),
            },
        )
        raw = data.get("data")
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as exc:
            raise RestError(f"View {module_name}::{function_name} returned invalid JSON") from exc

    # ---- Broadcast ----

    def broadcast(self, tx_bytes: bytes, mode: str = "BROADCAST_MODE_SYNC") -> BroadcastResult:
        """
        Submit a signed transaction.

        Args:
            tx_bytes: Protobuf-encoded signed TxRaw
            mode: Broadcast mode

        Returns:
            BroadcastResult (check ``success``; chain rejections have code != 0)
        """
        data = self._post(
            "/cosmos/tx/v1beta1/txs",
            {"tx_bytes": base64.b64encode(tx_bytes).decode("ascii"), "mode": mode},
        )
        tx_response = data.get("tx_response")
        if not tx_response:
            raise RestError("Broadcast response is missing tx_response")
        return BroadcastResult.from_response(tx_response)
