"""Serialised form of the key storage file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _as_mapping(data: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{where} must be a JSON object")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


@dataclass
class KeyStorageKey:
    """One account: its encrypted private key and progress on chain.

    ``private`` holds the decrypted key while the daemon runs and is never saved.
    """

    account: str = ""
    cipher_private: str = ""
    private: str = ""
    registered: bool = False
    block_number: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "account": self.account,
            "cipherprivate": self.cipher_private,
            "registered": self.registered,
            "block_number": self.block_number,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeyStorageKey":
        data = _as_mapping(data, "key")
        registered = data.get("registered")
        if registered is None:
            registered = False
        if not isinstance(registered, bool):
            raise ValueError("'registered' must be a boolean")
        block_number = data.get("block_number")
        if block_number is None:
            block_number = 0
        if isinstance(block_number, bool) or not isinstance(block_number, int):
            raise ValueError("'block_number' must be an integer")
        return cls(
            account=_str(data, "account"),
            cipher_private=_str(data, "cipherprivate"),
            registered=registered,
            block_number=block_number,
        )


@dataclass
class KeyStorageModel:
    """All stored keys plus the hash of the api token.

    ``token`` and ``private_key`` hold decrypted values in memory only.
    """

    keys: list[KeyStorageKey] = field(default_factory=list)
    hash: str = ""
    token: str = ""
    private_key: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"keys": [key.to_dict() for key in self.keys], "hash": self.hash}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeyStorageModel":
        data = _as_mapping(data, "key storage")
        raw_keys = data.get("keys")
        if raw_keys is None:
            raw_keys = []
        if not isinstance(raw_keys, list):
            raise ValueError("'keys' must be a list")
        return cls(
            keys=[KeyStorageKey.from_dict(item) for item in raw_keys],
            hash=_str(data, "hash"),
        )