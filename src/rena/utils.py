from __future__ import annotations

import json
from typing import Any


def hex_to_string(hexed: str) -> str:
    """Decode hex byte pairs into characters, one code point per byte."""
    hexed = hexed.removeprefix("0x")
    return "".join(chr(int(hexed[i:i + 2], 16)) for i in range(0, len(hexed), 2))


def pretty_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, default=str)
