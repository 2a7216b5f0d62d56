"""Creating or re-initializing a datashed."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import semver

from datashed.config import (
    CONFIG_FILE,
    DATA_DIR,
    DEFAULT_VERSION,
    TMP_DIR,
    Config,
    DatashedError,
)

GITIGNORE = "/data\n/tmp\n\n/index.ipc\n"


class Vcs(Enum):
    """Version control systems a datashed can be initialized for."""

    GIT = "git"
    NONE = "none"


def _git_succeeds(path: str | Path, *args: str) -> bool:
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=path,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def _git_output(path: str | Path, *args: str) -> str | None:
    try:
        result = subprocess.run(
            ["git", *args], cwd=path, capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def is_inside_git_work_tree(path: str | Path) -> bool:
    """Return whether ``path`` lies inside a Git work tree."""
    return _git_succeeds(path, "rev-parse", "--is-inside-work-tree")


def git_init(path: str | Path) -> bool:
    """Create a Git repository in ``path``; return whether it worked."""
    return _git_succeeds(path, "init")


def git_get_user(path: str | Path) -> str | None:
    """Return the Git identity as ``"Name <email>"``, or None if unset."""
    name = _git_output(path, "config", "--get", "user.name")
    user = name.rstrip() if name is not None else ""
    if not user:
        return None

    email = _git_output(path, "config", "--get", "user.email")
    if email is not None:
        user += f" <{email.rstrip()}>"
    return user


@dataclass
class InitCommand:
    """Options of the ``init`` command."""

    name: str | None = None
    version: semver.Version = field(
        default_factory=lambda: semver.Version.parse(DEFAULT_VERSION)
    )
    description: str | None = None
    authors: list[str] = field(default_factory=list)
    vcs: Vcs = Vcs.GIT
    force: bool = False
    directory: str | Path | None = None
    quiet: bool = False
    verbose: bool = False

    def execute(self) -> int:
        """Create the datashed layout and config; return the exit code."""
        root_dir = Path.cwd()
        if self.directory is not None:
            root_dir = root_dir / self.directory

        data_dir = root_dir / DATA_DIR
        tmp_dir = root_dir / TMP_DIR
        config_path = root_dir / CONFIG_FILE

        root_dir.mkdir(parents=True, exist_ok=True)
        data_dir.mkdir(exist_ok=True)
        tmp_dir.mkdir(exist_ok=True)

        if self.vcs is Vcs.GIT:
            if not is_inside_git_work_tree(root_dir) and not git_init(root_dir):
                raise DatashedError("Failed to initialize Git repository")

            gitignore = root_dir / ".gitignore"
            if not gitignore.is_file():
                gitignore.write_text(GITIGNORE, encoding="utf-8")

        if not config_path.exists() or self.force:
            authors = list(self.authors)
            if not authors:
                author = git_get_user(root_dir)
                if author is not None:
                    if self.verbose:
                        print(f"Set author to Git identity '{author}'", file=sys.stderr)
                    authors.append(author)

            config = Config.create(config_path)
            config.metadata.description = self.description
            config.metadata.authors = authors
            config.metadata.version = self.version
            config.metadata.name = (
                self.name if self.name is not None else root_dir.name
            )
            config.save()

        if not self.quiet:
            print(f"Initialized datashed in {root_dir}", file=sys.stderr)

        return 0