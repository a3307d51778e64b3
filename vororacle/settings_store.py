"""Persistent CLI settings kept in a small JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from vororacle.cli_models import CliSettings

_MISSING_HOST = (
    "Can't find Oracle host info.\n"
    "Please, check if Oracle daemon is running and CLI settings are correct."
)
_MISSING_PORT = (
    "Can't find Oracle port info.\n"
    "Please, check if Oracle daemon is running and CLI settings are correct."
)


class SettingsError(ValueError):
    """The settings file exists but cannot be understood."""


@dataclass
class SettingsStore:
    """CLI settings bound to the file they are saved in."""

    path: Path
    settings: CliSettings = field(default_factory=CliSettings)

    @classmethod
    def load(cls, path: str | Path) -> "SettingsStore":
        """Read settings from ``path``, creating an empty file if there is none."""
        path = Path(path)
        if not path.exists():
            path.write_text("{}")
            return cls(path=path)
        raw = path.read_text()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"cannot parse settings file {path}: {exc}") from exc
        try:
            settings = CliSettings.from_dict(data)
        except ValueError as exc:
            raise SettingsError(f"invalid settings file {path}: {exc}") from exc
        return cls(path=path, settings=settings)

    def set_oracle_host(self, host: str) -> None:
        self.settings.oracle_host = host
        self.save()

    def set_oracle_port(self, port: str) -> None:
        self.settings.oracle_port = port
        self.save()

    def set_oracle_key(self, key: str) -> None:
        self.settings.oracle_key = key
        self.save()

    def save(self) -> None:
        """Write the current settings to the file."""
        self.path.write_text(json.dumps(self.settings.to_dict(), separators=(",", ":")))

    def describe(self) -> str:
        """Human-readable summary that leaves the key out."""
        return (
            "\nCurrent oracle-cli settings:\n"
            f"\tOracle Host: {self.settings.oracle_host}\n"
            f"\tOracle Port: {self.settings.oracle_port}\n"
            "\tKey: ...\n"
        )

    def oracle_address(self) -> str:
        """Base URL of the daemon, warning when host or port is unset."""
        if not self.settings.oracle_host:
            print(_MISSING_HOST)
        if not self.settings.oracle_port:
            print(_MISSING_PORT)
        return f"http://{self.settings.oracle_host}:{self.settings.oracle_port}"