import json

import pytest
import requests
import responses

from vororacle.client import (
    COINGECKO_PRICE_URL,
    OracleClient,
    OracleClientError,
    XfundPrice,
    fetch_xfund_price,
)

BASE = "http://127.0.0.1:8888"
PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"
CONSUMER = "0x" + "ab" * 20


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return OracleClient(BASE, "token", session=requests.Session())


def test_status_sends_bearer_and_returns_body(mocked, client):
    mocked.add(responses.GET, BASE + "/status", body="alive")
    assert client.status() == "alive"
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer token"


def test_about_returns_body(mocked, client):
    mocked.add(responses.GET, BASE + "/about", body="info text")
    assert client.about() == "info text"


def test_analytics_url(mocked, client):
    mocked.add(responses.GET, BASE + "/analytics", body="{}")
    assert client.analytics(100, XfundPrice(eth=0.5, usd=2.0)) == "{}"
    assert mocked.calls[0].request.url == (
        BASE + "/analytics?eth=0.500000&usd=2.000000&limit=100"
        "&gasprice=0&fees=0&consumer=&sim=0"
    )


def test_analytics_fetches_price_when_not_given(mocked, client):
    mocked.add(responses.GET, PRICE_URL, json={"xfund": {"eth": 0.5, "usd": 2.0}})
    mocked.add(responses.GET, BASE + "/analytics", body="analysed")
    assert client.analytics(10) == "analysed"
    assert mocked.calls[0].request.url == COINGECKO_PRICE_URL
    assert "eth=0.500000&usd=2.000000" in mocked.calls[1].request.url


def test_analytics_rejects_non_positive_limit(mocked, client):
    with pytest.raises(ValueError, match="number to analyse must be > 0"):
        client.analytics(0, XfundPrice())
    assert len(mocked.calls) == 0


@pytest.mark.parametrize(
    "limit, gas, fees, message",
    [
        (0, 150, 0.05, "number to analyse must be > 0"),
        (10, 0, 0.05, "enter if-gas value"),
        (10, 150, 0, "enter if-fees value"),
    ],
)
def test_simulate_validation(mocked, client, limit, gas, fees, message):
    with pytest.raises(ValueError, match=message):
        client.simulate(limit, gas, fees, prices=XfundPrice())


def test_simulate_url(mocked, client):
    mocked.add(responses.GET, BASE + "/analytics", body="{}")
    client.simulate(1000, 150, 0.05, CONSUMER, XfundPrice(eth=0.5, usd=2.0))
    url = mocked.calls[0].request.url
    assert url.startswith(BASE + "/analytics?eth=0.500000&usd=2.000000&limit=1000")
    assert "&gasprice=150&fees=0.050000&sim=1&consumer=" + CONSUMER in url


def test_consumers_url(mocked, client):
    mocked.add(responses.GET, BASE + "/consumers", body="{}")
    client.consumers(CONSUMER, XfundPrice(eth=0.5, usd=2.0))
    assert mocked.calls[0].request.url == (
        BASE + "/consumers?eth=0.500000&usd=2.000000&consumer=" + CONSUMER
    )


def test_query_requests_defaults(mocked, client):
    mocked.add(responses.GET, BASE + "/requests", body="[]")
    assert client.query_requests() == "[]"
    assert mocked.calls[0].request.url == (
        BASE + "/requests?page=1&limit=10&order=desc&status=-1"
    )


def test_query_withdrawable_converts(mocked, client):
    mocked.add(responses.GET, BASE + "/querywithdrawable", body="1000000000\n")
    assert client.query_withdrawable() == ("1000000000", 1.0)


def test_query_fees_posts_consumer(mocked, client):
    mocked.add(responses.POST, BASE + "/queryfees", body=" 1000000000 ")
    assert client.query_fees(CONSUMER) == ("1000000000", 1.0)
    assert json.loads(mocked.calls[0].request.body) == {"consumer": CONSUMER}


def test_get_tx_requires_hash(client):
    with pytest.raises(ValueError, match="requires a tx hash"):
        client.get_tx("")


def test_get_tx_url(mocked, client):
    mocked.add(responses.GET, BASE + "/tx", body="tx info")
    assert client.get_tx("0xdead") == "tx info"
    assert mocked.calls[0].request.url == BASE + "/tx?tx_hash=0xdead"


def test_change_fee_body(mocked, client):
    mocked.add(responses.POST, BASE + "/changefee", body="ok")
    assert client.change_fee(2) == "ok"
    assert json.loads(mocked.calls[0].request.body) == {"amount": 2}


def test_change_granular_fee_body(mocked, client):
    mocked.add(responses.POST, BASE + "/changegranularfee", body="ok")
    client.change_granular_fee(CONSUMER, 5)
    assert json.loads(mocked.calls[0].request.body) == {"consumer": CONSUMER, "amount": 5}


def test_register_body(mocked, client):
    mocked.add(responses.POST, BASE + "/register", body="registered")
    assert client.register("oracle", "placeholder", 100) == "registered"
    assert json.loads(mocked.calls[0].request.body) == {
        "account_name": "oracle",
        "private_key": "placeholder",
        "fee": 100,
    }


def test_withdraw_body(mocked, client):
    mocked.add(responses.POST, BASE + "/withdraw", body="ok")
    client.withdraw(CONSUMER, 1)
    assert json.loads(mocked.calls[0].request.body) == {"address": CONSUMER, "amount": 1}


def test_unreachable_daemon_raises(mocked, client):
    mocked.add(responses.GET, BASE + "/status", body=requests.ConnectionError("refused"))
    with pytest.raises(OracleClientError):
        client.status()


def test_stop_returns_status_code(mocked, client):
    mocked.add(responses.POST, BASE + "/stop", status=200)
    assert client.stop() == 200


def test_stop_returns_none_when_connection_drops(mocked, client):
    mocked.add(responses.POST, BASE + "/stop", body=requests.ConnectionError("closed"))
    assert client.stop() is None


def test_fetch_price_parses_response(mocked):
    mocked.add(responses.GET, PRICE_URL, json={"xfund": {"eth": 0.5, "usd": 2.0}})
    assert fetch_xfund_price(requests.Session()) == XfundPrice(eth=0.5, usd=2.0)


def test_fetch_price_zero_on_error(mocked):
    mocked.add(responses.GET, PRICE_URL, body=requests.ConnectionError("down"))
    assert fetch_xfund_price(requests.Session()) == XfundPrice()


def test_fetch_price_zero_on_bad_json(mocked):
    mocked.add(responses.GET, PRICE_URL, body="not json")
    assert fetch_xfund_price(requests.Session()) == XfundPrice(eth=0.0, usd=0.0)