"""
Move argument encoding.

MsgExecute carries each argument as base64 of its BCS encoding.  These
helpers wrap the aptos-sdk BCS serializer and return ready-to-use strings.
"""

from __future__ import annotations

import base64
from typing import Callable, Iterable, Union

from aptos_sdk.bcs import Serializer

from ..codec import U256_MAX, uuid_to_u256
from ..sigil.key import address_to_bytes

U64_MAX = (1 << 64) - 1


def _serialize(write: Callable[[Serializer], None]) -> str:
    ser = Serializer()
    write(ser)
    return base64.b64encode(ser.output()).decode("ascii")


def _check_range(value: int, maximum: int, kind: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{kind} argument must be an int, got {type(value).__name__}")
    if value < 0 or value > maximum:
        raise ValueError(f"{kind} argument out of range: {value}")
    return value


def to_bytes(data: Union[bytes, str], encoding: str = "hex") -> bytes:
    """Coerce bytes, hex strings (optionally 0x-prefixed) or text into bytes."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if encoding == "hex":
        return bytes.fromhex(data.removeprefix("0x"))
    return data.encode(encoding)


def u64(value: int) -> str:
    _check_range(value, U64_MAX, "u64")
    return _serialize(lambda ser: ser.u64(value))


def u256(value: int) -> str:
    _check_range(value, U256_MAX, "u256")
    return _serialize(lambda ser: ser.u256(value))


def bytes_vector(data: Union[bytes, str], encoding: str = "hex") -> str:
    """Encode ``vector<u8>``; strings are read as hex unless told otherwise."""
    raw = to_bytes(data, encoding)
    return _serialize(lambda ser: ser.to_bytes(raw))


def address(addr: str) -> str:
    raw = address_to_bytes(addr)
    return _serialize(lambda ser: ser.fixed_bytes(raw))


def address_vector(addrs: Iterable[str]) -> str:
    raws = [address_to_bytes(a) for a in addrs]
    return _serialize(lambda ser: ser.sequence(raws, Serializer.fixed_bytes))


def u64_vector(values: Iterable[int]) -> str:
    checked = [_check_range(v, U64_MAX, "u64") for v in values]
    return _serialize(lambda ser: ser.sequence(checked, Serializer.u64))


def request_id(uuid: str) -> str:
    """Encode a UUID request id as the contract's u256 key."""
    return u256(uuid_to_u256(uuid))
