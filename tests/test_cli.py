import json

import pytest
import responses

from vororacle.cli import main, run_settings_menu
from vororacle.settings_store import SettingsStore

BASE = "http://127.0.0.1:8445"
PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"


class Scripted:
    def __init__(self, *answers):
        self._answers = list(answers)

    def __call__(self, prompt=""):
        return self._answers.pop(0)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"oracle_host": "127.0.0.1", "oracle_port": "8445", "oracle_key": "token"})
    )
    return path


def test_status_with_bearer_key(mocked, settings_file, capsys):
    mocked.add(responses.GET, BASE + "/status", body="alive")
    assert main(["-c", str(settings_file)]) == 0
    assert "Oracle status:  alive" in capsys.readouterr().out
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer token"


def test_status_connection_failure(mocked, settings_file, capsys):
    assert main(["-c", str(settings_file)]) == 1
    assert "Sorry, something went wrong =(" in capsys.readouterr().out


def test_version_prints_name(settings_file, capsys):
    assert main(["-c", str(settings_file), "version"]) == 0
    assert "VOR Oracle CLI v0.0.1" in capsys.readouterr().out


def test_missing_settings_file_is_created(tmp_path):
    path = tmp_path / "new.json"
    assert main(["-c", str(path), "version"]) == 0
    assert path.read_text() == "{}"


def test_missing_host_is_reported(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text("{}")
    assert main(["-c", str(path), "about"]) == 1
    out = capsys.readouterr().out
    assert "Can't find Oracle host info." in out
    assert "Can't find Oracle port info." in out


def test_bad_settings_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("not json")
    assert main(["-c", str(path), "version"]) == 1


def test_settings_menu_updates_file(settings_file, capsys):
    store = SettingsStore.load(settings_file)
    run_settings_menu(store, Scripted("9", "2", "10.0.0.1", "3", "9000", "0"))
    saved = json.loads(settings_file.read_text())
    assert saved["oracle_host"] == "10.0.0.1"
    assert saved["oracle_port"] == "9000"
    assert saved["oracle_key"] == "token"
    assert "Please choose action." in capsys.readouterr().out


def test_settings_command_uses_input(settings_file, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", Scripted("1", "secret", "0"))
    assert main(["-c", str(settings_file), "settings"]) == 0
    assert json.loads(settings_file.read_text())["oracle_key"] == "secret"
    assert "Current oracle-cli settings:" in capsys.readouterr().out


def test_analytics_requires_positive_number(settings_file, capsys):
    assert main(["-c", str(settings_file), "analytics", "0"]) == 1
    assert "number to analyse must be > 0" in capsys.readouterr().err


def test_analytics_requires_argument(settings_file, capsys):
    assert main(["-c", str(settings_file), "analytics"]) == 1
    assert "requires a number to analyse argument" in capsys.readouterr().err


def test_simulation_requires_gas(settings_file, capsys):
    assert main(["-c", str(settings_file), "analytics", "sim", "100", "-f", "0.05"]) == 1
    assert "enter if-gas value" in capsys.readouterr().err


def test_simulation_query(mocked, settings_file, capsys):
    mocked.add(responses.GET, PRICE_URL, json={"xfund": {"eth": 0.5, "usd": 2.0}})
    mocked.add(responses.GET, BASE + "/analytics", body="{}")
    code = main(["-c", str(settings_file), "analytics", "sim", "100", "-g", "150", "-f", "0.05"])
    assert code == 0
    url = mocked.calls[-1].request.url
    assert "gasprice=150" in url
    assert "sim=1" in url
    assert "limit=100" in url


def test_consumers_query(mocked, settings_file, capsys):
    mocked.add(responses.GET, PRICE_URL, json={"xfund": {"eth": 0.5, "usd": 2.0}})
    mocked.add(responses.GET, BASE + "/consumers", body="report")
    assert main(["-c", str(settings_file), "analytics", "consumers", "0xabc"]) == 0
    assert mocked.calls[-1].request.url.endswith("consumer=0xabc")
    assert "report" in capsys.readouterr().out


def test_query_withdrawable(mocked, settings_file, capsys):
    mocked.add(responses.GET, BASE + "/querywithdrawable", body="2000000000\n")
    assert main(["-c", str(settings_file), "querywithdrawable"]) == 0
    assert "Withdrawable Tokens: 2000000000 (2.000000 xFUND)" in capsys.readouterr().out


def test_query_fees_for_consumer(mocked, settings_file, capsys):
    mocked.add(responses.POST, BASE + "/queryfees", body="1000000000")
    assert main(["-c", str(settings_file), "queryfees", "0xabc"]) == 0
    out = capsys.readouterr().out
    assert "Consumer contract: 0xabc" in out
    assert "Fee: 1000000000 (1.000000 xFUND)" in out
    assert json.loads(mocked.calls[0].request.body) == {"consumer": "0xabc"}


def test_query_requests_defaults(mocked, settings_file, capsys):
    mocked.add(responses.GET, BASE + "/requests", body="[]")
    assert main(["-c", str(settings_file), "queryrequests"]) == 0
    url = mocked.calls[0].request.url
    assert url.endswith("page=1&limit=10&order=desc&status=-1")


def test_withdraw_sends_answers(mocked, settings_file, monkeypatch):
    mocked.add(responses.POST, BASE + "/withdraw", body="ok")
    monkeypatch.setattr("builtins.input", Scripted("5", "0xabc"))
    assert main(["-c", str(settings_file), "withdraw"]) == 0
    assert json.loads(mocked.calls[0].request.body) == {"address": "0xabc", "amount": 5}


def test_register_sends_answers(mocked, settings_file, monkeypatch):
    mocked.add(responses.POST, BASE + "/register", body="ok")
    monkeypatch.setattr("builtins.input", Scripted("alice", "placeholder", "3"))
    assert main(["-c", str(settings_file), "register"]) == 0
    assert json.loads(mocked.calls[0].request.body) == {
        "account_name": "alice",
        "private_key": "placeholder",
        "fee": 3,
    }


def test_change_granular_fee(mocked, settings_file, monkeypatch):
    consumer = "0x" + "c" * 40
    mocked.add(responses.POST, BASE + "/changegranularfee", body="ok")
    monkeypatch.setattr("builtins.input", Scripted("7", "bad", consumer))
    assert main(["-c", str(settings_file), "changegranularfee"]) == 0
    assert json.loads(mocked.calls[0].request.body) == {"consumer": consumer, "amount": 7}


def test_gettx_requires_hash(settings_file, capsys):
    assert main(["-c", str(settings_file), "gettx"]) == 1
    assert "requires a tx hash" in capsys.readouterr().err


def test_prompt_end_of_input(settings_file, monkeypatch):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)
    assert main(["-c", str(settings_file), "changefee"]) == 1