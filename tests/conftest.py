"""Shared test fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from reclaim.config import ScanConfig


def write_bytes(path: Path, size: int, fill: bytes = b"x") -> Path:
    """Create *path* (and its parents) holding exactly *size* bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(fill * size)
    return path


@pytest.fixture
def node_project(tmp_path):
    """A Node project with a 1536-byte node_modules and a 40-byte package.json."""
    project = tmp_path / "home" / "webapp"
    write_bytes(project / "package.json", 40)
    modules = project / "node_modules"
    write_bytes(modules / "left-pad" / "index.js", 1024)
    write_bytes(modules / "left-pad" / "README.md", 512)
    return project


@pytest.fixture
def config_for(tmp_path):
    """Build a ScanConfig rooted at a path under tmp_path."""

    def _make(root: Path | None = None, **kwargs) -> ScanConfig:
        return ScanConfig.build(root=root or tmp_path, **kwargs)

    return _make


@pytest.fixture
def make_file():
    """Return the helper that writes a file of an exact size."""
    return write_bytes


@pytest.fixture
def deep_chain(tmp_path):
    """Build ``<base>/d/d/...`` deeper than the recursion limit.

    Path.mkdir(parents=True) and older shutil.rmtree recurse per level,
    so the chain is created and removed one directory at a time.
    """
    created: list[Path] = []

    def _make(base: Path) -> Path:
        base.mkdir(parents=True)
        current = base
        for _ in range(sys.getrecursionlimit() + 100):
            current = current / "d"
            current.mkdir()
            created.append(current)
        return current

    yield _make
    for path in reversed(created):
        path.rmdir()


class Answers:
    """Scripted operator answers that also records every question asked."""

    def __init__(self, *answers: str) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        return self._answers.pop(0) if self._answers else ""


@pytest.fixture
def answers():
    return Answers
