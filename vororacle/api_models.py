"""Response bodies returned by the daemon's HTTP interface."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class IntStats:
    max: int = 0
    min: int = 0
    mean: int = 0


@dataclass
class FloatStats:
    max: float = 0.0
    min: float = 0.0
    mean: float = 0.0


@dataclass
class EarningsStats:
    current_xfund_price_eth: float = 0.0
    total_fees_xfund: float = 0.0
    total_fees_eth: float = 0.0
    total_cost_eth: float = 0.0
    profit_loss_eth: float = 0.0


@dataclass
class AnalyticsData:
    """Gas, cost and fee statistics over a set of fulfilled requests."""

    gas_used: IntStats = field(default_factory=IntStats)
    gas_price: IntStats = field(default_factory=IntStats)
    eth_costs: FloatStats = field(default_factory=FloatStats)
    earnings: EarningsStats = field(default_factory=EarningsStats)
    most_gas_used_consumer: str = ""
    least_gas_used_consumer: str = ""
    number_analysed: int = 0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "gas_used": asdict(self.gas_used),
            "gas_price": asdict(self.gas_price),
            "eth_costs": asdict(self.eth_costs),
            "earnings": asdict(self.earnings),
        }
        if self.most_gas_used_consumer:
            data["most_gas_used_consumer"] = self.most_gas_used_consumer
        if self.least_gas_used_consumer:
            data["least_gas_used_consumer"] = self.least_gas_used_consumer
        data["number_requests_analysed"] = self.number_analysed
        return data


@dataclass
class AnalyticsFilter:
    consumer_contract: str = ""
    limit: int = 0

    def _to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.consumer_contract:
            data["consumer_contract"] = self.consumer_contract
        if self.limit:
            data["limit"] = self.limit
        return data


@dataclass
class SimValues:
    if_gas: int = 0
    if_fees: float = 0.0


@dataclass
class AnalyticsResponse:
    data: AnalyticsData = field(default_factory=AnalyticsData)
    filters: AnalyticsFilter = field(default_factory=AnalyticsFilter)

    def to_dict(self) -> dict[str, Any]:
        result = self.data.to_dict()
        result["filters"] = self.filters._to_dict()
        return result


@dataclass
class AnalyticsSimResponse:
    data: AnalyticsData = field(default_factory=AnalyticsData)
    sim_values: SimValues = field(default_factory=SimValues)
    filters: AnalyticsFilter = field(default_factory=AnalyticsFilter)

    def to_dict(self) -> dict[str, Any]:
        result = self.data.to_dict()
        result["simulation_values"] = asdict(self.sim_values)
        result["filters"] = self.filters._to_dict()
        return result


@dataclass
class ConsumerAnalytics:
    consumer: str = ""
    current_fee: float = 0.0
    data: AnalyticsData = field(default_factory=AnalyticsData)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"consumer": self.consumer, "current_fee": self.current_fee}
        result.update(self.data.to_dict())
        return result


@dataclass
class ConsumersResponse:
    consumers: list[ConsumerAnalytics] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"consumers": [item.to_dict() for item in self.consumers]}


def _timestamp(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat()


@dataclass
class RandomnessRequestView:
    """A stored request as the daemon reports it."""

    id: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    sender: str = ""
    request_id: str = ""
    request_block_number: int = 0
    request_block_hash: str = ""
    request_tx_hash: str = ""
    request_gas_used: int = 0
    request_gas_price: int = 0
    seed_hex: str = ""
    seed: int = 0
    fee: int = 0
    randomness: str = ""
    fulfill_block_number: int = 0
    fulfill_block_hash: str = ""
    fulfill_tx_hash: str = ""
    fulfill_gas_used: int = 0
    fulfill_gas_price: int = 0
    status: int = 0
    status_text: str = ""
    status_reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created": _timestamp(self.created_at),
            "updated": _timestamp(self.updated_at),
            "consumer": self.sender,
            "request_id": self.request_id,
            "request_block_num": self.request_block_number,
            "request_block_hash": self.request_block_hash,
            "request_tx_hash": self.request_tx_hash,
            "request_gas": self.request_gas_used,
            "request_gas_price": self.request_gas_price,
            "seed_hex": self.seed_hex,
            "seed": self.seed,
            "fee": self.fee,
            "randomness": self.randomness,
            "fulfill_block_num": self.fulfill_block_number,
            "fulfill_block_hash": self.fulfill_block_hash,
            "fulfill_tx_hash": self.fulfill_tx_hash,
            "fulfill_gas": self.fulfill_gas_used,
            "fulfill_gas_price": self.fulfill_gas_price,
            "status": self.status,
            "status_text": self.status_text,
            "status_reason": self.status_reason,
        }


@dataclass
class Pages:
    page: int = 0
    num_pages: int = 0
    num_records: int = 0
    limit: int = 0


@dataclass
class RequestResponse:
    """One page of stored requests with pagination details."""

    requests: list[RandomnessRequestView] = field(default_factory=list)
    pages: Pages = field(default_factory=Pages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "requests": [item.to_dict() for item in self.requests] if self.requests else None,
            "pagination": asdict(self.pages),
        }