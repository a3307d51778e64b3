"""Command-line tool that manages a running oracle daemon."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable

from vororacle.client import OracleClient, OracleClientError
from vororacle.prompts import (
    Ask,
    ask_address,
    ask_amount,
    ask_consumer_address,
    ask_fee,
    ask_oracle_host,
    ask_oracle_key,
    ask_oracle_port,
    ask_private_key,
    ask_username,
)
from vororacle.settings_store import SettingsError, SettingsStore
from vororacle.version import new_info

_DESCRIPTION = (
    "CLI to manage your Oracle.\n\n"
    "Note:\n"
    ' You need to run "oracle start -c [config_path | optional] -k [key | optional]" '
    "to start your daemon before using CLI."
)

_MENU = (
    "Okay, let's configure your CLI",
    "What do you want to do?",
    "1 - Set HTTP/cli Oracle Key",
    "2 - Set Oracle host address",
    "3 - Set Oracle host port",
    "0 - Exit",
)


def run_settings_menu(store: SettingsStore, ask: Ask = input) -> None:
    """Let the user change settings until they choose to exit."""
    actions = {
        "1": (ask_oracle_key, store.set_oracle_key),
        "2": (ask_oracle_host, store.set_oracle_host),
        "3": (ask_oracle_port, store.set_oracle_port),
    }
    while True:
        print("")
        for line in _MENU:
            print(line)
        words = ask("Action: ").split()
        choice = words[0] if words else ""
        if choice == "0":
            return
        action = actions.get(choice)
        if action is None:
            print("Please choose action.")
            continue
        question, setter = action
        value = question(ask)
        try:
            setter(value)
        except OSError as exc:
            print(exc)


def _client(store: SettingsStore) -> OracleClient:
    return OracleClient(store.oracle_address(), store.settings.oracle_key)


def _number_to_analyse(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"invalid number to analyse: {raw!r}") from None


def _status(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    try:
        body = _client(store).status()
    except OracleClientError:
        print("Sorry, something went wrong =(")
        return 1
    print("Oracle status: ", body)
    return 0


def _about(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    print(_client(store).about())
    return 0


def _analytics(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    words = args.args
    if words and words[0] == "consumers":
        consumer = words[1] if len(words) > 1 else ""
        print(_client(store).consumers(consumer))
        return 0
    simulate = bool(words) and words[0] == "sim"
    if simulate:
        words = words[1:]
    if not words:
        raise ValueError("requires a number to analyse argument")
    limit = _number_to_analyse(words[0])
    if limit <= 0:
        raise ValueError("number to analyse must be > 0")
    client = _client(store)
    if simulate:
        print(client.simulate(limit, args.if_gas, args.if_fees, args.consumer))
    else:
        print(client.analytics(limit))
    return 0


def _change_granular_fee(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    amount = ask_fee(ask)
    consumer = ask_consumer_address(ask)
    print(_client(store).change_granular_fee(consumer, amount))
    return 0


def _change_fee(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    amount = ask_fee(ask)
    print(_client(store).change_fee(amount))
    return 0


def _get_tx(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    if not args.tx_hash:
        raise ValueError("requires a tx hash")
    print(_client(store).get_tx(args.tx_hash[0]))
    return 0


def _query_fees(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    consumer = args.consumer[0] if args.consumer else ""
    if consumer:
        print("Consumer contract:", consumer)
    tokens, xfund = _client(store).query_fees(consumer)
    print("Fee:", tokens, f"({xfund:f} xFUND)")
    return 0


def _query_requests(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    if args.page < 0 or args.limit < 0:
        raise ValueError("page and limit must not be negative")
    client = _client(store)
    print(
        "url",
        f"{client.base_url}/requests?page={args.page}&limit={args.limit}"
        f"&order={args.order}&status={args.status}",
    )
    print(client.query_requests(args.page, args.limit, args.order, args.status))
    return 0


def _query_withdrawable(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    tokens, xfund = _client(store).query_withdrawable()
    print("Withdrawable Tokens:", tokens, f"({xfund:f} xFUND)")
    return 0


def _register(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    account_name = ask_username(ask)
    private_key = ask_private_key(ask)
    fee = ask_fee(ask)
    print(_client(store).register(account_name, private_key, fee))
    return 0


def _settings(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    print(store.describe(), end="")
    run_settings_menu(store, ask)
    return 0


def _stop(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    status_code = _client(store).stop()
    if status_code is None:
        print("Oracle stopped; the connection was closed")
    else:
        print(f"Oracle answered with status {status_code}")
    return 0


def _version(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    print(new_info())
    return 0


def _withdraw(args: argparse.Namespace, store: SettingsStore, ask: Ask) -> int:
    amount = ask_amount(ask)
    address = ask_address(ask)
    print(_client(store).withdraw(address, amount), end="")
    return 0


Handler = Callable[[argparse.Namespace, SettingsStore, Ask], int]

_HANDLERS: dict[str | None, Handler] = {
    None: _status,
    "about": _about,
    "analytics": _analytics,
    "changegranularfee": _change_granular_fee,
    "changefee": _change_fee,
    "gettx": _get_tx,
    "queryfees": _query_fees,
    "queryrequests": _query_requests,
    "querywithdrawable": _query_withdrawable,
    "register": _register,
    "settings": _settings,
    "stop": _stop,
    "version": _version,
    "withdraw": _withdraw,
}


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--conf", default=argparse.SUPPRESS, help="oraclecli settings file")

    parser = argparse.ArgumentParser(
        prog="oraclecli",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c",
        "--conf",
        default=str(Path.home() / ".oracle-cli_settings.json"),
        help="oraclecli settings file",
    )
    commands = parser.add_subparsers(dest="command")

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        return commands.add_parser(name, help=help_text, parents=[common])

    add("about", "List info about your oracle")

    analytics = add("analytics", "Basic analytics summary")
    analytics.add_argument(
        "args",
        nargs="*",
        help="[num_to_analyse] | consumers [consumer_address] | sim [num_to_analyse]",
    )
    analytics.add_argument("-q", "--consumer", default="", help="filter by consumer contract address")
    analytics.add_argument(
        "-g", "--if-gas", type=int, default=0, help="simulated gas price in Gwei"
    )
    analytics.add_argument(
        "-f", "--if-fees", type=float, default=0.0, help="simulated XFUND fees"
    )

    add("changegranularfee", "Change Oracle granular fee")
    add("changefee", "Change Oracle fee")
    gettx = add("gettx", "get tx info")
    gettx.add_argument("tx_hash", nargs="*")
    queryfees = add("queryfees", "get the fee")
    queryfees.add_argument("consumer", nargs="*")

    queryrequests = add("queryrequests", "get the requests from the DB")
    queryrequests.add_argument("-p", "--page", type=int, default=1, help="page number")
    queryrequests.add_argument(
        "-l", "--limit", type=int, default=10, help="results to return per page"
    )
    queryrequests.add_argument("-s", "--status", type=int, default=-1, help="request status")
    queryrequests.add_argument("-o", "--order", default="desc", help="order asc | desc")

    add("querywithdrawable", "get the amount of xFUND you can withdraw")
    add("register", "Register your new Oracle")
    add("settings", "Oracle CLI settings command")
    add("stop", "Stop oracle")
    add("version", "output version info")
    add("withdraw", "Withdraw your xFUND")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command-line tool and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        store = SettingsStore.load(args.conf)
    except (SettingsError, OSError) as exc:
        print(exc)
        return 1
    handler = _HANDLERS[args.command]
    try:
        return handler(args, store, input)
    except OracleClientError as exc:
        print("Sorry, something went wrong =(")
        print(exc.__cause__ if exc.__cause__ is not None else exc)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("")
        return 1


if __name__ == "__main__":
    sys.exit(main())