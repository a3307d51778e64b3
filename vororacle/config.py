"""Daemon configuration read from a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_UINT64 = (0, 2**64 - 1)


class ConfigError(ValueError):
    """The configuration file cannot be understood."""


def _object(data: Any, where: str) -> Mapping[str, Any] | None:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ConfigError(f"{where} must be a JSON object")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str, bounds: tuple[int, int]) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key!r} must be an integer")
    low, high = bounds
    if not low <= value <= high:
        raise ConfigError(f"{key!r} is out of range")
    return value


@dataclass
class KeystorageSettings:
    file: str = ""
    account: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeystorageSettings":
        return cls(file=_str(data, "file"), account=_str(data, "account"))


@dataclass
class ServeSettings:
    host: str = ""
    port: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ServeSettings":
        return cls(host=_str(data, "host"), port=_int(data, "port", _INT32))


@dataclass
class DatabaseSettings:
    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    database: str = ""
    storage: str = ""
    dialect: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DatabaseSettings":
        return cls(
            host=_str(data, "host"),
            port=_int(data, "port", _INT32),
            user=_str(data, "user"),
            password=_str(data, "password"),
            database=_str(data, "database"),
            storage=_str(data, "storage"),
            dialect=_str(data, "dialect"),
        )


@dataclass
class Config:
    """Daemon settings; sections absent from the file are ``None``."""

    vor_coordinator_contract_address: str = ""
    block_hash_store_contract_address: str = ""
    contract_caller_address: str = ""
    mock_contract_address: str = ""
    eth_http_host: str = ""
    eth_ws_host: str = ""
    network_id: int = 0
    first_block_number: int = 0
    check_duration: int = 0
    serve: ServeSettings | None = None
    log_level: str = ""
    gas_limit: int = 0
    max_gas_price: int = 0
    keystorage: KeystorageSettings | None = None
    database: DatabaseSettings | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Config":
        """Build a configuration from decoded JSON, unset fields left at zero."""
        data = _object(data, "configuration")
        if data is None:
            return cls()
        serve = _object(data.get("serve"), "'serve'")
        keystorage = _object(data.get("keystorage"), "'keystorage'")
        database = _object(data.get("database"), "'database'")
        return cls(
            vor_coordinator_contract_address=_str(data, "contract_address"),
            block_hash_store_contract_address=_str(data, "blockhash_store_address"),
            contract_caller_address=_str(data, "contract_caller_address"),
            mock_contract_address=_str(data, "mock_contract_address"),
            eth_http_host=_str(data, "eth_http_host"),
            eth_ws_host=_str(data, "eth_ws_host"),
            network_id=_int(data, "network_id", _INT64),
            first_block_number=_int(data, "first_block", _UINT64),
            check_duration=_int(data, "check_duration", _INT32),
            serve=None if serve is None else ServeSettings.from_dict(serve),
            log_level=_str(data, "log_level"),
            gas_limit=_int(data, "gas_limit", _INT64),
            max_gas_price=_int(data, "max_gas_price", _INT64),
            keystorage=None if keystorage is None else KeystorageSettings.from_dict(keystorage),
            database=None if database is None else DatabaseSettings.from_dict(database),
        )


def default_config() -> Config:
    """The configuration the daemon runs with before a file is loaded."""
    return Config(
        first_block_number=1,
        gas_limit=500000,
        max_gas_price=150,
        serve=ServeSettings(host="0.0.0.0", port=8445),
        check_duration=15,
        keystorage=KeystorageSettings(file="./keystore.json"),
        database=DatabaseSettings(dialect="sqlite", storage="./oracle.db"),
    )


def load_config(path: str | Path) -> Config:
    """Read a configuration file; a missing file raises ``FileNotFoundError``."""
    raw = Path(path).read_text()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"cannot parse config file {path}: {exc}") from exc
    return Config.from_dict(data)