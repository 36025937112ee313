"""Tests for Move argument encoding."""

from __future__ import annotations

import base64

import pytest

from rena.pneuma import bcs
from rena.sigil.key import address_to_bytes


def _raw(encoded: str) -> bytes:
    return base64.b64decode(encoded)


class TestScalars:
    def test_u64(self) -> None:
        assert bcs.u64(1) == "AQAAAAAAAAA="
        assert _raw(bcs.u64(1745089251)) == (1745089251).to_bytes(8, "little")

    def test_u64_range(self) -> None:
        with pytest.raises(ValueError):
            bcs.u64(-1)
        with pytest.raises(ValueError):
            bcs.u64(2**64)

    def test_u256_little_endian(self) -> None:
        value = 0xF57956AE51BF4EE69F5CB6EEEC2BF623
        assert _raw(bcs.u256(value)) == value.to_bytes(32, "little")

    def test_u256_range(self) -> None:
        with pytest.raises(ValueError):
            bcs.u256(2**256)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(ValueError):
            bcs.u64("1")  # type: ignore[arg-type]


class TestVectors:
    def test_bytes_vector_from_hex(self) -> None:
        assert _raw(bcs.bytes_vector("abcd")) == b"\x02\xab\xcd"

    def test_bytes_vector_from_prefixed_hex(self) -> None:
        assert _raw(bcs.bytes_vector("0xabcd")) == b"\x02\xab\xcd"

    def test_bytes_vector_from_text(self) -> None:
        assert _raw(bcs.bytes_vector("hi", encoding="utf-8")) == b"\x02hi"

    def test_bytes_vector_from_bytes(self) -> None:
        assert _raw(bcs.bytes_vector(b"\x00" * 200)) == b"\xc8\x01" + b"\x00" * 200

    def test_u64_vector(self) -> None:
        expected = b"\x02" + (3).to_bytes(8, "little") + (5).to_bytes(8, "little")
        assert _raw(bcs.u64_vector([3, 5])) == expected

    def test_address(self) -> None:
        assert _raw(bcs.address("0x1")) == b"\x00" * 31 + b"\x01"

    def test_address_vector(self) -> None:
        addrs = ["0x1", "0x2"]
        expected = b"\x02" + b"".join(address_to_bytes(a) for a in addrs)
        assert _raw(bcs.address_vector(addrs)) == expected


class TestRequestId:
    def test_request_id_is_u256_of_uuid(self) -> None:
        encoded = bcs.request_id("f57956ae-51bf-4ee6-9f5c-b6eeec2bf623")
        assert encoded == bcs.u256(0xF57956AE51BF4EE69F5CB6EEEC2BF623)
        assert len(_raw(encoded)) == 32
        # upper 128 bits are zero, stored last in little-endian
        assert _raw(encoded)[16:] == b"\x00" * 16
