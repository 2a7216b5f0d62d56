import subprocess

import pytest
import semver

from datashed.config import CONFIG_FILE, DATA_DIR, TMP_DIR, Config
from datashed.init import (
    GITIGNORE,
    InitCommand,
    Vcs,
    git_get_user,
    git_init,
    is_inside_git_work_tree,
)


def _git(path, *args):
    subprocess.run(["git", *args], cwd=path, check=True, capture_output=True)


@pytest.mark.parametrize("value, has_git", [("git", True), ("none", False)])
def test_vcs_values(tmp_path, value, has_git):
    root = tmp_path / "test-data"
    code = InitCommand(vcs=Vcs(value), directory=root, quiet=True).execute()
    assert code == 0
    assert (root / ".git").exists() is has_git
    assert (root / ".gitignore").exists() is has_git


def test_execute_creates_layout_without_vcs(tmp_path, capsys):
    root = tmp_path / "test-data"
    code = InitCommand(vcs=Vcs.NONE, directory=root).execute()

    assert code == 0
    assert (root / DATA_DIR).is_dir()
    assert (root / TMP_DIR).is_dir()
    assert not (root / ".gitignore").exists()
    assert not (root / ".git").exists()
    config = Config.from_path(root / CONFIG_FILE)
    assert config.metadata.name == "test-data"
    assert str(config.metadata.version) == "0.1.0"
    assert capsys.readouterr().err == f"Initialized datashed in {root}\n"


def test_execute_relative_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = InitCommand(vcs=Vcs.NONE, directory="nested/shed", quiet=True).execute()
    assert code == 0
    config = Config.from_path(tmp_path / "nested" / "shed" / CONFIG_FILE)
    assert config.metadata.name == "shed"


def test_execute_sets_given_metadata(tmp_path):
    root = tmp_path / "test-data"
    InitCommand(
        name="foobar",
        version=semver.Version.parse("0.2.0"),
        description="foobar",
        authors=["Max Mustermann <m.muster@example.com>"],
        vcs=Vcs.NONE,
        directory=root,
        quiet=True,
    ).execute()

    metadata = Config.from_path(root / CONFIG_FILE).metadata
    assert metadata.name == "foobar"
    assert str(metadata.version) == "0.2.0"
    assert metadata.description == "foobar"
    assert metadata.authors == ["Max Mustermann <m.muster@example.com>"]


def test_execute_keeps_config_without_force(tmp_path):
    root = tmp_path / "test-data"
    InitCommand(vcs=Vcs.NONE, directory=root, quiet=True).execute()
    InitCommand(name="foobar", vcs=Vcs.NONE, directory=root, quiet=True).execute()
    assert Config.from_path(root / CONFIG_FILE).metadata.name == "test-data"

    InitCommand(
        name="foobar", vcs=Vcs.NONE, directory=root, quiet=True, force=True
    ).execute()
    assert Config.from_path(root / CONFIG_FILE).metadata.name == "foobar"


def test_execute_quiet_prints_nothing(tmp_path, capsys):
    InitCommand(vcs=Vcs.NONE, directory=tmp_path / "q", quiet=True).execute()
    assert capsys.readouterr().err == ""


def test_execute_git_writes_gitignore(tmp_path):
    root = tmp_path / "test-data"
    InitCommand(vcs=Vcs.GIT, directory=root, quiet=True).execute()
    assert (root / ".git").exists()
    assert (root / ".gitignore").read_text(encoding="utf-8") == GITIGNORE


def test_execute_git_keeps_existing_gitignore(tmp_path):
    root = tmp_path / "test-data"
    root.mkdir()
    (root / ".gitignore").write_text("custom\n", encoding="utf-8")
    InitCommand(vcs=Vcs.GIT, directory=root, quiet=True).execute()
    assert (root / ".gitignore").read_text(encoding="utf-8") == "custom\n"


def test_git_helpers(tmp_path):
    assert not is_inside_git_work_tree(tmp_path)
    assert git_init(tmp_path)
    assert is_inside_git_work_tree(tmp_path)


def test_git_get_user(tmp_path):
    _git(tmp_path, "init")
    _git(tmp_path, "config", "user.name", "Max Mustermann")
    _git(tmp_path, "config", "user.email", "m.muster@example.com")
    assert git_get_user(tmp_path) == "Max Mustermann <m.muster@example.com>"


def test_execute_derives_author_verbosely(tmp_path, capsys):
    _git(tmp_path, "init")
    _git(tmp_path, "config", "user.name", "Max Mustermann")
    _git(tmp_path, "config", "user.email", "m.muster@example.com")

    InitCommand(directory=tmp_path, verbose=True).execute()

    err = capsys.readouterr().err
    assert "Set author to Git identity 'Max Mustermann <m.muster@example.com>'" in err
    assert Config.from_path(tmp_path / CONFIG_FILE).metadata.authors == [
        "Max Mustermann <m.muster@example.com>"
    ]


@pytest.mark.parametrize("verbose", [False, True])
def test_explicit_authors_are_not_replaced(tmp_path, verbose, capsys):
    _git(tmp_path, "init")
    _git(tmp_path, "config", "user.name", "Max Mustermann")
    InitCommand(
        authors=["Erika <erika@example.com>"], directory=tmp_path, verbose=verbose
    ).execute()
    assert "Set author" not in capsys.readouterr().err
    assert Config.from_path(tmp_path / CONFIG_FILE).metadata.authors == [
        "Erika <erika@example.com>"
    ]