"""Conversion between raw token amounts and xFUND."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def convert_to_xfund(amount: str) -> float:
    """Turn a raw token amount (9 decimals) into xFUND; 0 if it is not an integer."""
    tokens = amount.strip()
    if not _INTEGER.fullmatch(tokens):
        print("error", f"invalid amount {tokens!r}")
        return 0.0
    value = int(tokens)
    if not _INT64_MIN <= value <= _INT64_MAX:
        print("error", f"amount {tokens!r} out of range")
        return 0.0
    return float(value) / 1e9