"""Rows the daemon keeps about randomness requests and related transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import ClassVar


class RequestStatus(IntEnum):
    """Life cycle of a randomness request."""

    UNKNOWN = 0
    INITIALISED = 1
    SENT = 2
    TX_FAILED = 3
    SUCCESS = 4
    FULFILMENT_FAILED = 5

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    RequestStatus.UNKNOWN: "UNKNOWN",
    RequestStatus.INITIALISED: "INITIALISED",
    RequestStatus.SENT: "SENT",
    RequestStatus.TX_FAILED: "TX FAILED",
    RequestStatus.SUCCESS: "SUCCESS",
    RequestStatus.FULFILMENT_FAILED: "FULFILMENT FAILED",
}


@dataclass
class RandomnessRequest:
    """A randomness request seen on chain and what became of it."""

    TABLE_NAME: ClassVar[str] = "randomness_requests"

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    key_hash: str = ""
    seed: str = ""
    sender: str = ""
    request_id: str = ""
    request_block_hash: str = ""
    request_block_number: int = 0
    request_tx_hash: str = ""
    request_gas_used: int = 0
    request_gas_price: int = 0
    fee: int = 0
    randomness: str = ""
    fulfill_block_hash: str = ""
    fulfill_block_number: int = 0
    fulfill_tx_hash: str = ""
    fulfill_gas_used: int = 0
    fulfill_gas_price: int = 0
    fulfillment_attempts: int = 0
    status: int = RequestStatus.UNKNOWN
    status_reason: str = ""

    def status_text(self) -> str:
        """Readable name of the status; anything unrecognised is UNKNOWN."""
        try:
            return RequestStatus(self.status).label
        except ValueError:
            return RequestStatus.UNKNOWN.label


@dataclass
class BlocksStored:
    """A block hash the oracle asked the block hash store to keep."""

    TABLE_NAME: ClassVar[str] = "blocks_stored"

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    block_hash: str = ""
    block_number: int = 0
    tx_hash: str = ""


@dataclass
class FailedFulfilment:
    """One failed attempt to fulfil a request."""

    TABLE_NAME: ClassVar[str] = "failed_fulfilments"

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    request_id: str = ""
    tx_hash: str = ""
    gas_used: int = 0
    gas_price: int = 0
    fail_reason: str = ""


@dataclass(frozen=True)
class LogRandomnessRequest:
    """The fields of a randomness request event."""

    key_hash: bytes
    consumer_seed: int
    fee_paid: int