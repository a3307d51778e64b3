"""Request bodies sent to the oracle daemon and the CLI's own settings record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class WithdrawRequest:
    """Withdraw earned tokens to an address."""

    address: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "amount": self.amount}


@dataclass(frozen=True)
class ChangeFeeRequest:
    """Change the oracle's base fee."""

    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"amount": self.amount}


@dataclass(frozen=True)
class ChangeGranularFeeRequest:
    """Change the fee charged to one consumer contract."""

    consumer: str
    amount: int

    def to_dict(self) -> dict[str, Any]:
        return {"consumer": self.consumer, "amount": self.amount}


@dataclass(frozen=True)
class RegisterRequest:
    """Register a new oracle account with its private key and fee."""

    account_name: str
    private_key: str
    fee: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_name": self.account_name,
            "private_key": self.private_key,
            "fee": self.fee,
        }


@dataclass(frozen=True)
class QueryFeesRequest:
    """Ask for the current fee, optionally for one consumer contract."""

    consumer: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"consumer": self.consumer}


_SETTINGS_KEYS = ("oracle_host", "oracle_port", "oracle_key")


@dataclass
class CliSettings:
    """Where the daemon lives and the key used to talk to it."""

    oracle_host: str = ""
    oracle_port: str = ""
    oracle_key: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "oracle_host": self.oracle_host,
            "oracle_port": self.oracle_port,
            "oracle_key": self.oracle_key,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "CliSettings":
        """Build settings from decoded JSON; absent or null fields stay empty."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError("settings must be a JSON object")
        values: dict[str, str] = {}
        for key in _SETTINGS_KEYS:
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"setting {key!r} must be a string")
            values[key] = value
        return cls(**values)