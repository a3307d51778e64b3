"""Version information for the command-line tool."""

from __future__ import annotations

import platform
from dataclasses import dataclass

NAME = "VOR Oracle CLI"
BINARY = "oraclecli"
VERSION = "0.0.1"
COMMIT = ""


@dataclass(frozen=True)
class VersionInfo:
    name: str
    binary: str
    version: str
    git_commit: str
    runtime_version: str

    def __str__(self) -> str:
        return (
            f"{self.name} v{self.version}\n"
            f"binary: {self.binary}\n"
            f"git commit: {self.git_commit}\n"
            f"{self.runtime_version}"
        )

    def line(self) -> str:
        """The same information on one line."""
        return f"{self.name} v{self.version}. git commit: {self.git_commit}. {self.runtime_version}"


def new_info() -> VersionInfo:
    """Version information for this build and interpreter."""
    runtime = (
        f"python version {platform.python_version()} "
        f"{platform.system().lower()}/{platform.machine().lower()}"
    )
    return VersionInfo(
        name=NAME,
        binary=BINARY,
        version=VERSION,
        git_commit=COMMIT,
        runtime_version=runtime,
    )