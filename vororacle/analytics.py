"""Gas, cost and fee statistics over fulfilled randomness requests."""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Mapping, Sequence

from vororacle.api_models import (
    AnalyticsData,
    AnalyticsFilter,
    AnalyticsResponse,
    AnalyticsSimResponse,
    ConsumerAnalytics,
    ConsumersResponse,
    EarningsStats,
    FloatStats,
    IntStats,
    SimValues,
)
from vororacle.records import RandomnessRequest

GWEI = 10**9
ETHER = 10**18


def _track_min(current: int, value: int) -> int:
    # Zero means "not set yet", so a zero seen earlier is replaced.
    return value if current == 0 or current > value else current


def process(
    rows: Sequence[RandomnessRequest],
    xfund_eth: float,
    xfund_usd: float,
    fees: float,
    gas_price: int,
    simulation: int,
) -> AnalyticsData:
    """Summarise ``rows``; with ``simulation == 1`` use ``gas_price`` (Gwei) and ``fees`` (xFUND)."""
    if not rows:
        raise ValueError("no requests to analyse")
    simulate = simulation == 1

    gas_min = gas_max = gas_sum = 0
    price_min = price_max = price_sum = 0
    cost_min = cost_max = cost_sum = 0
    total_fees = 0

    for row in rows:
        gas = row.fulfill_gas_used
        gas_min = _track_min(gas_min, gas)
        gas_max = max(gas_max, gas)
        gas_sum += gas

        price = gas_price * GWEI if simulate else row.fulfill_gas_price
        price_min = _track_min(price_min, price)
        price_max = max(price_max, price)
        price_sum += price

        cost = gas * price
        cost_min = _track_min(cost_min, cost)
        cost_max = max(cost_max, cost)
        cost_sum += cost

        total_fees += int(fees * 1e9) if simulate else row.fee

    count = len(rows)
    total_fees_xfund = total_fees / GWEI
    total_fees_eth = total_fees_xfund * xfund_eth
    total_cost_eth = cost_sum / ETHER
    profit_loss = float(Fraction(total_fees_eth) - Fraction(cost_sum, ETHER))

    return AnalyticsData(
        gas_used=IntStats(max=gas_max, min=gas_min, mean=gas_sum // count),
        gas_price=IntStats(
            max=price_max // GWEI,
            min=price_min // GWEI,
            mean=price_sum // (count * GWEI),
        ),
        eth_costs=FloatStats(
            max=cost_max / ETHER,
            min=cost_min / ETHER,
            mean=cost_sum / (count * ETHER),
        ),
        earnings=EarningsStats(
            current_xfund_price_eth=xfund_eth,
            total_fees_xfund=total_fees_xfund,
            total_fees_eth=total_fees_eth,
            total_cost_eth=total_cost_eth,
            profit_loss_eth=profit_loss,
        ),
        number_analysed=count,
    )


def analyse(
    rows: Sequence[RandomnessRequest],
    xfund_eth: float,
    xfund_usd: float,
    fees: float,
    limit: int,
    gas_price: int,
    simulation: int,
    consumer: str,
    most_gas_used_consumer: str = "",
    least_gas_used_consumer: str = "",
) -> AnalyticsResponse | AnalyticsSimResponse | None:
    """Build the analytics response, or ``None`` when there is nothing to analyse."""
    if not rows:
        return None
    data = process(rows, xfund_eth, xfund_usd, fees, gas_price, simulation)
    if not consumer:
        data.most_gas_used_consumer = most_gas_used_consumer
        data.least_gas_used_consumer = least_gas_used_consumer
    filters = AnalyticsFilter(consumer_contract=consumer, limit=limit)
    if simulation == 1:
        return AnalyticsSimResponse(
            data=data,
            sim_values=SimValues(if_gas=gas_price, if_fees=fees),
            filters=filters,
        )
    return AnalyticsResponse(data=data, filters=filters)


def consumers_report(
    rows_by_consumer: Mapping[str, Sequence[RandomnessRequest]],
    fee_lookup: Callable[[str], int],
    xfund_eth: float,
    xfund_usd: float,
    consumer: str = "",
) -> ConsumersResponse | ConsumerAnalytics | None:
    """Per-consumer statistics with each consumer's current fee in xFUND.

    When ``consumer`` is given, the single matching entry is returned.
    """
    if not rows_by_consumer:
        return None
    report = ConsumersResponse()
    for sender, rows in rows_by_consumer.items():
        data = process(rows, xfund_eth, xfund_usd, 0, 0, 0) if rows else AnalyticsData()
        current_fee = fee_lookup(sender) / GWEI
        report.consumers.append(ConsumerAnalytics(consumer=sender, current_fee=current_fee, data=data))
    if consumer and report.consumers:
        return report.consumers[0]
    return report