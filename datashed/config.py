"""Datashed configuration: reading and writing ``config.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import semver
import tomli_w

DATA_DIR = "data"
TMP_DIR = "tmp"
CONFIG_FILE = "config.toml"

DEFAULT_VERSION = "0.1.0"


class DatashedError(Exception):
    """Raised when a datashed operation fails."""


def _default_version() -> semver.Version:
    return semver.Version.parse(DEFAULT_VERSION)


@dataclass
class Metadata:
    """Descriptive metadata of a datashed."""

    name: str = ""
    version: semver.Version = field(default_factory=_default_version)
    description: str | None = None
    authors: list[str] = field(default_factory=list)

    @classmethod
    def _from_dict(cls, data: Any) -> Metadata:
        if not isinstance(data, dict):
            raise DatashedError("invalid type for field `metadata`: expected a table")

        if "name" not in data:
            raise DatashedError("missing field `name`")
        name = data["name"]
        if not isinstance(name, str):
            raise DatashedError("invalid type for field `name`: expected a string")

        if "version" not in data:
            raise DatashedError("missing field `version`")
        raw_version = data["version"]
        if not isinstance(raw_version, str):
            raise DatashedError("invalid type for field `version`: expected a string")
        try:
            version = semver.Version.parse(raw_version)
        except ValueError as exc:
            raise DatashedError(f"invalid version '{raw_version}': {exc}") from exc

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise DatashedError(
                "invalid type for field `description`: expected a string"
            )

        authors = data.get("authors", [])
        if not isinstance(authors, list) or not all(
            isinstance(author, str) for author in authors
        ):
            raise DatashedError(
                "invalid type for field `authors`: expected a list of strings"
            )

        return cls(
            name=name,
            version=version,
            description=description,
            authors=list(authors),
        )

    def _to_dict(self) -> dict[str, Any]:
        table: dict[str, Any] = {"name": self.name, "version": str(self.version)}
        if self.description is not None:
            table["description"] = self.description
        if self.authors:
            table["authors"] = list(self.authors)
        return table


@dataclass
class Config:
    """A datashed config bound to the file it is saved to."""

    path: Path
    metadata: Metadata = field(default_factory=Metadata)

    @classmethod
    def create(cls, path: str | Path) -> Config:
        """Return a new config with default metadata for ``path``."""
        return cls(path=Path(path))

    @classmethod
    def from_path(cls, path: str | Path) -> Config:
        """Load an existing config from ``path``."""
        path = Path(path)
        content = path.read_text(encoding="utf-8")
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as exc:
            raise DatashedError(f"invalid config '{path}': {exc}") from exc

        if "metadata" not in data:
            raise DatashedError("missing field `metadata`")

        return cls(path=path, metadata=Metadata._from_dict(data["metadata"]))

    def to_toml(self) -> str:
        """Render the config as TOML text."""
        return tomli_w.dumps({"metadata": self.metadata._to_dict()})

    def save(self) -> None:
        """Write the config to its path."""
        self.path.write_text(self.to_toml(), encoding="utf-8")