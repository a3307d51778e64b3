"""HTTP client for the oracle daemon's management interface."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from vororacle.cli_models import (
    ChangeFeeRequest,
    ChangeGranularFeeRequest,
    QueryFeesRequest,
    RegisterRequest,
    WithdrawRequest,
)
from vororacle.tokens import convert_to_xfund

COINGECKO_PRICE_URL = (
    "https://api.coingecko.com/api/v3/simple/price?ids=xfund&vs_currencies=eth%2Cusd"
)


class OracleClientError(RuntimeError):
    """The daemon could not be reached or did not answer."""


@dataclass(frozen=True)
class XfundPrice:
    """Current xFUND price in ETH and USD."""

    eth: float = 0.0
    usd: float = 0.0


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def fetch_xfund_price(session: requests.Session | None = None) -> XfundPrice:
    """Look up the xFUND price; any failure is reported and gives zero prices."""
    getter = session if session is not None else requests
    try:
        response = getter.get(COINGECKO_PRICE_URL)
        data = response.json()
    except requests.RequestException as exc:
        print(exc)
        return XfundPrice()
    except ValueError as exc:
        print(exc)
        return XfundPrice()
    if not isinstance(data, Mapping):
        return XfundPrice()
    xfund = data.get("xfund")
    if not isinstance(xfund, Mapping):
        return XfundPrice()
    return XfundPrice(eth=_number(xfund.get("eth")), usd=_number(xfund.get("usd")))


def _check_limit(limit: int) -> None:
    if limit <= 0:
        raise ValueError("number to analyse must be > 0")


def _encode(body: Mapping[str, Any]) -> bytes:
    return json.dumps(body, separators=(",", ":")).encode()


class OracleClient:
    """Talks to a running daemon, authenticating with its api key."""

    def __init__(
        self,
        base_url: str,
        key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url
        self.key = key
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def _request(self, method: str, target: str, body: bytes | None = None) -> requests.Response:
        url = target if target.startswith(("http://", "https://")) else self.base_url + target
        headers = {"Authorization": "Bearer " + self.key}
        try:
            return self._session.request(
                method, url, data=body, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as exc:
            raise OracleClientError(f"Sorry, something went wrong =( {exc}") from exc

    def _get(self, target: str) -> str:
        return self._request("GET", target).text

    def _post(self, path: str, body: Mapping[str, Any]) -> str:
        return self._request("POST", path, _encode(body)).text

    def _prices(self, prices: XfundPrice | None) -> XfundPrice:
        return prices if prices is not None else fetch_xfund_price(self._session)

    def status(self) -> str:
        """Liveness text reported by the daemon."""
        return self._get("/status")

    def about(self) -> str:
        """Summary of the oracle's addresses, keys and balances."""
        return self._get("/about")

    def analytics(self, limit: int, prices: XfundPrice | None = None) -> str:
        """Statistics over the last ``limit`` fulfilled requests."""
        _check_limit(limit)
        price = self._prices(prices)
        return self._get(
            f"{self.base_url}/analytics?eth={price.eth:f}&usd={price.usd:f}"
            f"&limit={limit}&gasprice=0&fees=0&consumer=&sim=0"
        )

    def simulate(
        self,
        limit: int,
        gas_price: int,
        fees: float,
        consumer: str = "",
        prices: XfundPrice | None = None,
    ) -> str:
        """Statistics recomputed with a made-up gas price (Gwei) and fee (xFUND)."""
        _check_limit(limit)
        if gas_price == 0:
            raise ValueError("enter if-gas value")
        if fees == 0:
            raise ValueError("enter if-fees value")
        price = self._prices(prices)
        return self._get(
            f"{self.base_url}/analytics?eth={price.eth:f}&usd={price.usd:f}"
            f"&limit={limit}&gasprice={gas_price}&fees={fees:f}&sim=1&consumer={consumer}"
        )

    def consumers(self, consumer: str = "", prices: XfundPrice | None = None) -> str:
        """Statistics grouped by consumer contract, optionally for one contract."""
        price = self._prices(prices)
        return self._get(
            f"{self.base_url}/consumers?eth={price.eth:f}&usd={price.usd:f}&consumer={consumer}"
        )

    def query_requests(
        self, page: int = 1, limit: int = 10, order: str = "desc", status: int = -1
    ) -> str:
        """One page of stored randomness requests; status -1 means no filter."""
        return self._get(
            f"{self.base_url}/requests?page={page}&limit={limit}&order={order}&status={status}"
        )

    def query_withdrawable(self) -> tuple[str, float]:
        """Withdrawable tokens as raw amount and in xFUND."""
        tokens = self._get("/querywithdrawable").strip()
        return tokens, convert_to_xfund(tokens)

    def query_fees(self, consumer: str = "") -> tuple[str, float]:
        """Current fee as raw amount and in xFUND, optionally for one consumer."""
        tokens = self._post("/queryfees", QueryFeesRequest(consumer=consumer).to_dict()).strip()
        return tokens, convert_to_xfund(tokens)

    def get_tx(self, tx_hash: str) -> str:
        """Transaction details, with the receipt when there is one."""
        if not tx_hash:
            raise ValueError("requires a tx hash")
        return self._get(f"{self.base_url}/tx?tx_hash={tx_hash}")

    def change_fee(self, amount: int) -> str:
        return self._post("/changefee", ChangeFeeRequest(amount=amount).to_dict())

    def change_granular_fee(self, consumer: str, amount: int) -> str:
        request = ChangeGranularFeeRequest(consumer=consumer, amount=amount)
        return self._post("/changegranularfee", request.to_dict())

    def register(self, account_name: str, private_key: str, fee: int) -> str:
        request = RegisterRequest(account_name=account_name, private_key=private_key, fee=fee)
        return self._post("/register", request.to_dict())

    def withdraw(self, address: str, amount: int) -> str:
        return self._post("/withdraw", WithdrawRequest(address=address, amount=amount).to_dict())

    def stop(self) -> int | None:
        """Ask the daemon to stop; the status code, or ``None`` if the connection dropped."""
        try:
            response = self._request("POST", "/stop", b"")
        except OracleClientError:
            return None
        return response.status_code