"""Interactive questions the command-line tool asks, repeated until answered."""

from __future__ import annotations

import re
from typing import Callable

Ask = Callable[[str], str]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_CONTRACT_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")


def _token(ask: Ask, prompt: str) -> str:
    """First whitespace-separated word of the answer, or an empty string."""
    words = ask(prompt).split()
    return words[0] if words else ""


def _required(ask: Ask, prompt: str, missing: str) -> str:
    while True:
        answer = _token(ask, prompt)
        if answer:
            return answer
        print(missing)


def _positive_amount(ask: Ask, prompt: str, missing: str) -> int:
    while True:
        print("")
        raw = _token(ask, prompt)
        if not _INTEGER.fullmatch(raw) or not _INT64_MIN <= int(raw) <= _INT64_MAX:
            print("Incorrect amount")
            continue
        value = int(raw)
        if value == 0:
            print(missing)
            continue
        return value


def ask_username(ask: Ask = input) -> str:
    """Account name; asked again while empty."""
    return _required(ask, "Username: ", "Please enter account username.")


def ask_private_key(ask: Ask = input) -> str:
    """Private key of the account; asked again while empty."""
    print("")
    return _required(
        ask,
        "Private Key (NOTE: it has to start with 0x): ",
        "Please enter account Private Key.",
    )


def ask_fee(ask: Ask = input) -> int:
    """A non-zero 64-bit fee."""
    return _positive_amount(ask, "Fee: ", "Please enter Fee.")


def ask_amount(ask: Ask = input) -> int:
    """A non-zero 64-bit amount to withdraw."""
    return _positive_amount(ask, "Amount: ", "Please enter Fee.")


def ask_address(ask: Ask = input) -> str:
    """Recipient address; asked again while empty."""
    print("")
    return _required(ask, "Address: ", "Please enter address.")


def ask_consumer_address(ask: Ask = input) -> str:
    """A consumer contract address of the form 0x followed by 40 hex digits."""
    print("")
    while True:
        answer = _token(ask, "Consumer Contract Address: ")
        if not answer:
            print("Please enter Consumer Contract Address.")
            continue
        if not _CONTRACT_ADDRESS.fullmatch(answer):
            print("not an address")
            continue
        return answer


def ask_oracle_host(ask: Ask = input) -> str:
    """Host the daemon listens on."""
    print("")
    return _required(
        ask, "Oracle host address (ex.: 127.0.0.1): ", "Please enter Oracle host address."
    )


def ask_oracle_port(ask: Ask = input) -> str:
    """Port the daemon listens on."""
    print("")
    return _required(ask, "Oracle host port (ex.: 8888): ", "Please enter Oracle host port.")


def ask_oracle_key(ask: Ask = input) -> str:
    """Api key the daemon printed on its first run."""
    print("")
    return _required(ask, "Oracle host key: ", "Please enter Oracle host key.")