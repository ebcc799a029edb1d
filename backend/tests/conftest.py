"""Shared pytest fixtures for knbn backend tests."""

from __future__ import annotations

from pathlib import Path

import pytest


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Empty working root, canonicalized."""
    root_dir = tmp_path / "root"
    root_dir.mkdir()
    return root_dir.resolve()


@pytest.fixture
def board_tree(root: Path) -> Path:
    """Working root with boards at several depths.

    Layout:
        a.knbn
        notes.txt
        sub/b.knbn
        sub/.hidden/c.knbn
        sub/deeper/d.knbn
        .git/e.knbn
        empty/
    """
    (root / "a.knbn").write_text("name: a\n", encoding="utf-8")
    (root / "notes.txt").write_text("not a board\n", encoding="utf-8")
    (root / "sub" / ".hidden").mkdir(parents=True)
    (root / "sub" / "b.knbn").write_text("name: b\n", encoding="utf-8")
    (root / "sub" / ".hidden" / "c.knbn").write_text("name: c\n", encoding="utf-8")
    (root / "sub" / "deeper").mkdir()
    (root / "sub" / "deeper" / "d.knbn").write_text("name: d\n", encoding="utf-8")
    (root / ".git").mkdir()
    (root / ".git" / "e.knbn").write_text("name: e\n", encoding="utf-8")
    (root / "empty").mkdir()
    return root
