"""
Transaction message types.

Plain value objects mirroring the protobuf messages accepted by Initia
L1 and its OPinit rollups.  ``to_data()`` yields the JSON form with an
``@type`` discriminator; encoding for signing is left to the TxSigner.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Union

_COIN_RE = re.compile(r"^(\d+(?:\.\d+)?)([a-zA-Z][a-zA-Z0-9/:._-]{2,127})$")


@dataclass(frozen=True)
class Coin:
    denom: str
    amount: str

    def __post_init__(self) -> None:
        # Accept ints for convenience; the wire form is a string.
        object.__setattr__(self, "amount", str(self.amount))

    @classmethod
    def parse(cls, value: str) -> "Coin":
        """Parse ``"1000uinit"`` style strings."""
        match = _COIN_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid coin string: {value!r}")
        return cls(denom=match.group(2), amount=match.group(1))

    def to_data(self) -> dict[str, str]:
        return {"denom": self.denom, "amount": self.amount}

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Coins(tuple):
    """Immutable ordered collection of Coin."""

    @classmethod
    def parse(cls, value: str) -> "Coins":
        """Parse a comma-separated list like ``"1000uinit,5uusdc"``."""
        parts = [p for p in value.split(",") if p.strip()]
        if not parts:
            raise ValueError("Empty coin list")
        return cls(Coin.parse(p) for p in parts)

    @classmethod
    def of(cls, amount: Union[str, Coin, "Coins", list]) -> "Coins":
        if isinstance(amount, Coins):
            return amount
        if isinstance(amount, Coin):
            return cls([amount])
        if isinstance(amount, str):
            return cls.parse(amount)
        return cls(amount)

    def to_data(self) -> list[dict[str, str]]:
        return [c.to_data() for c in self]

    def __str__(self) -> str:
        return ",".join(str(c) for c in self)


class Msg:
    type_url: str = ""

    def to_data(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class MsgSend(Msg):
    type_url = "/cosmos.bank.v1beta1.MsgSend"

    from_address: str
    to_address: str
    amount: Coins

    def to_data(self) -> dict[str, Any]:
        return {
            "@type": self.type_url,
            "from_address": self.from_address,
            "to_address": self.to_address,
            "amount": self.amount.to_data(),
        }


@dataclass(frozen=True)
class MsgInitiateTokenDeposit(Msg):
    type_url = "/opinit.ophost.v1.MsgInitiateTokenDeposit"

    sender: str
    bridge_id: int
    to: str
    amount: Coin
    data: str = ""

    def to_data(self) -> dict[str, Any]:
        return {
            "@type": self.type_url,
            "sender": self.sender,
            "bridge_id": str(self.bridge_id),
            "to": self.to,
            "amount": self.amount.to_data(),
            "data": self.data,
        }


@dataclass(frozen=True)
class MsgInitiateTokenWithdrawal(Msg):
    type_url = "/opinit.opchild.v1.MsgInitiateTokenWithdrawal"

    sender: str
    to: str
    amount: Coin

    def to_data(self) -> dict[str, Any]:
        return {
            "@type": self.type_url,
            "sender": self.sender,
            "to": self.to,
            "amount": self.amount.to_data(),
        }


@dataclass(frozen=True)
class MsgExecute(Msg):
    """Move entry function call; ``args`` are base64 BCS values."""

    type_url = "/initia.move.v1.MsgExecute"

    sender: str
    module_address: str
    module_name: str
    function_name: str
    type_args: tuple[str, ...] = field(default_factory=tuple)
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type_args", tuple(self.type_args or ()))
        object.__setattr__(self, "args", tuple(self.args or ()))

    def to_data(self) -> dict[str, Any]:
        return {
            "@type": self.type_url,
            "sender": self.sender,
            "module_address": self.module_address,
            "module_name": self.module_name,
            "function_name": self.function_name,
            "type_args": list(self.type_args),
            "args": list(self.args),
        }
