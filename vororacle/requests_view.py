"""Paginated view of stored randomness requests."""

from __future__ import annotations

import re
from typing import Sequence

from vororacle.api_models import Pages, RandomnessRequestView, RequestResponse
from vororacle.records import RandomnessRequest

_HEX_NUMBER = re.compile(r"0[xX]([0-9a-fA-F]+)")
_UINT64_MASK = 2**64 - 1


def normalise_order(order: str) -> str:
    """``asc`` or ``desc``; anything else becomes ``asc``."""
    return order if order in ("asc", "desc") else "asc"


def page_count(count: int, limit: int) -> int:
    """Number of pages needed to show ``count`` records ``limit`` at a time."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    pages, rest = divmod(count, limit)
    return pages + 1 if rest > 0 else pages


def _decode_seed(seed_hex: str) -> int:
    match = _HEX_NUMBER.fullmatch(seed_hex)
    if match is None:
        raise ValueError(f"invalid hex seed {seed_hex!r}")
    digits = match.group(1)
    if len(digits) > 64:
        raise ValueError(f"hex seed {seed_hex!r} larger than 256 bits")
    if len(digits) > 1 and digits[0] == "0":
        raise ValueError(f"hex seed {seed_hex!r} has leading zero digits")
    return int(digits, 16)


def request_view(row: RandomnessRequest) -> RandomnessRequestView:
    """Report form of a stored request; the seed is cut to its low 64 bits."""
    return RandomnessRequestView(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        sender=row.sender,
        request_id=row.request_id,
        request_block_number=row.request_block_number,
        request_block_hash=row.request_block_hash,
        request_tx_hash=row.request_tx_hash,
        request_gas_used=row.request_gas_used,
        request_gas_price=row.request_gas_price,
        seed_hex=row.seed,
        seed=_decode_seed(row.seed) & _UINT64_MASK,
        fee=row.fee,
        randomness=row.randomness,
        fulfill_block_number=row.fulfill_block_number,
        fulfill_block_hash=row.fulfill_block_hash,
        fulfill_tx_hash=row.fulfill_tx_hash,
        fulfill_gas_used=row.fulfill_gas_used,
        fulfill_gas_price=row.fulfill_gas_price,
        status=row.status,
        status_text=row.status_text(),
        status_reason=row.status_reason,
    )


def build_request_response(
    rows: Sequence[RandomnessRequest], count: int, page: int, limit: int
) -> RequestResponse:
    """One page of requests together with its pagination details."""
    return RequestResponse(
        requests=[request_view(row) for row in rows],
        pages=Pages(
            page=page,
            num_pages=page_count(count, limit),
            num_records=count,
            limit=limit,
        ),
    )