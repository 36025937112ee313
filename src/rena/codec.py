"""
Request ID codec - UUID <-> u256.

Contracts key requests by a fixed-width unsigned integer, while clients
hand out canonical UUID strings.  The numeric form is the UUID's 128-bit
payload zero-extended to 256 bits, so only the low 128 bits ever carry
information.
"""

from __future__ import annotations

import logging
import string

logger = logging.getLogger(__name__)

U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1

_HEX_DIGITS = frozenset(string.hexdigits)
_GROUPS = (8, 4, 4, 4, 12)


class CodecError(ValueError):
    pass


class InvalidFormatError(CodecError):
    pass


class PrecisionLossError(CodecError):
    pass


def uuid_to_u256(uuid: str) -> int:
    """
    Convert a UUID string to its u256 representation.

    Args:
        uuid: Canonical UUID (8-4-4-4-12 hex groups)

    Returns:
        Integer value of the 32 hex digits, upper 128 bits always zero

    Raises:
        InvalidFormatError: If the input is not 32 hex digits once hyphens
            are removed
    """
    if not isinstance(uuid, str):
        raise InvalidFormatError(f"UUID must be a string, got {type(uuid).__name__}")

    hexed = uuid.replace("-", "")
    if len(hexed) != 32:
        raise InvalidFormatError(
            f"UUID must contain 32 hex digits, got {len(hexed)}: {uuid!r}"
        )
    if not _HEX_DIGITS.issuperset(hexed):
        raise InvalidFormatError(f"UUID contains non-hex characters: {uuid!r}")

    return int(hexed.rjust(64, "0"), 16)


def u256_to_uuid(value: int, *, strict: bool = False) -> str:
    """
    Convert a u256 back to a canonical UUID string.

    Only the low 128 bits are kept.  Higher bits are discarded with a
    warning, or rejected when ``strict`` is set.

    Args:
        value: Unsigned integer, at most 256 bits
        strict: Raise instead of truncating values above 2**128 - 1

    Returns:
        36-char lower-case UUID string

    Raises:
        InvalidFormatError: If value is negative or wider than 256 bits
        PrecisionLossError: If strict and value does not fit in 128 bits
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError(f"u256 must be an int, got {type(value).__name__}")
    if value < 0 or value > U256_MAX:
        raise InvalidFormatError(f"Value is not an unsigned 256-bit integer: {value}")

    if value > U128_MAX:
        if strict:
            raise PrecisionLossError(
                f"Value {value:#x} exceeds 128 bits; high bits would be discarded"
            )
        logger.warning("Discarding high bits of request id %#x", value)

    uuid_hex = format(value, "064x")[-32:]

    parts = []
    offset = 0
    for width in _GROUPS:
        parts.append(uuid_hex[offset:offset + width])
        offset += width
    return "-".join(parts)


def is_uuid(value: str) -> bool:
    """Check whether a string is a canonical hyphenated UUID."""
    if not isinstance(value, str) or len(value) != 36:
        return False
    if any(value[i] != "-" for i in (8, 13, 18, 23)):
        return False
    try:
        uuid_to_u256(value)
    except InvalidFormatError:
        return False
    return True
