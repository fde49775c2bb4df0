"""Tests for git hook installation."""
from __future__ import annotations

import os
from pathlib import Path

import pytest

from xtask.errors import HookInstallError
from xtask.hooks import install_hooks


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    hooks = tmp_path / ".workspace" / "hooks"
    hooks.mkdir(parents=True)
    (hooks / "pre-commit").write_text("#!/bin/sh\necho pre\n", encoding="utf-8")
    (hooks / "pre-push").write_text("#!/bin/sh\necho push\n", encoding="utf-8")
    return tmp_path


def test_copy_mode_installs_every_hook(repo: Path) -> None:
    lines: list[str] = []
    installed = install_hooks(
        repo / ".workspace" / "hooks", repo / ".git" / "hooks", use_symlinks=False, echo=lines.append
    )
    assert [p.name for p in installed] == ["pre-commit", "pre-push"]
    assert (repo / ".git" / "hooks" / "pre-push").read_text(encoding="utf-8") == "#!/bin/sh\necho push\n"
    assert lines == ["Installing git hooks...", "Installed pre-commit", "Installed pre-push"]


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlink_mode_replaces_existing(repo: Path) -> None:
    git_hooks = repo / ".git" / "hooks"
    git_hooks.mkdir(parents=True)
    (git_hooks / "pre-commit").write_text("old", encoding="utf-8")

    install_hooks(repo / ".workspace" / "hooks", git_hooks, use_symlinks=True, echo=lambda _: None)

    dest = git_hooks / "pre-commit"
    assert dest.is_symlink()
    assert dest.resolve() == (repo / ".workspace" / "hooks" / "pre-commit").resolve()
    assert "echo pre" in dest.read_text(encoding="utf-8")


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlink_mode_is_rerunnable(repo: Path) -> None:
    src, dst = repo / ".workspace" / "hooks", repo / ".git" / "hooks"
    install_hooks(src, dst, use_symlinks=True, echo=lambda _: None)
    install_hooks(src, dst, use_symlinks=True, echo=lambda _: None)
    assert sorted(p.name for p in dst.iterdir()) == ["pre-commit", "pre-push"]


def test_missing_hooks_dir_raises(tmp_path: Path) -> None:
    with pytest.raises(HookInstallError):
        install_hooks(tmp_path / "nope", tmp_path / ".git" / "hooks", echo=lambda _: None)


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_directory_in_the_way_is_wrapped(repo: Path) -> None:
    git_hooks = repo / ".git" / "hooks"
    (git_hooks / "pre-commit").mkdir(parents=True)

    with pytest.raises(HookInstallError, match="failed to symlink hook pre-commit") as excinfo:
        install_hooks(repo / ".workspace" / "hooks", git_hooks, use_symlinks=True, echo=lambda _: None)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_uncreatable_target_is_wrapped(repo: Path) -> None:
    blocker = repo / ".git"
    blocker.write_text("gitdir: elsewhere\n", encoding="utf-8")

    with pytest.raises(HookInstallError, match="failed to create"):
        install_hooks(repo / ".workspace" / "hooks", blocker / "hooks", echo=lambda _: None)
