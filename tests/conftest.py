"""Shared pytest fixtures for the docen test suite.

Provides reusable fixtures for:
- Temporary Go project directories
- Fake directory entries for the listing probe
- Probes with injected runtime version and directory listing
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

import pytest

from docen.probes import ProjectProbe


# ---------------------------------------------------------------------------
# Fake directory entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FakeEntry:
    """Stand-in for an ``os.DirEntry`` returned by a directory listing."""

    name: str
    directory: bool = True

    def is_dir(self, *, follow_symlinks: bool = True) -> bool:
        return self.directory


@pytest.fixture
def fake_entry() -> type[FakeEntry]:
    """The ``FakeEntry`` class, for building listings inline."""
    return FakeEntry


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def go_project(tmp_path: Path) -> Path:
    """Temporary Go project with a ``go.mod`` declaring a URL-style module."""
    project_dir = tmp_path / "go-project"
    project_dir.mkdir()
    (project_dir / "go.mod").write_text(
        "module github.com/lobz1g/docen\n\ngo 1.16\n", encoding="utf-8"
    )
    return project_dir


# ---------------------------------------------------------------------------
# Probes
# ---------------------------------------------------------------------------


@pytest.fixture
def make_probe(tmp_path: Path) -> Callable[..., ProjectProbe]:
    """Factory for probes with a fixed runtime version and fake listing.

    ``entries`` defaults to an empty directory; pass an exception instance
    to make the listing fail.
    """

    def _make(
        entries: list | Exception | None = None,
        runtime: str = "go1.13",
        root: Path | None = None,
    ) -> ProjectProbe:
        def read_dir(_path: Path) -> list:
            if isinstance(entries, Exception):
                raise entries
            return list(entries or [])

        return ProjectProbe(
            root if root is not None else tmp_path,
            read_dir=read_dir,
            runtime_version=lambda: runtime,
        )

    return _make


@pytest.fixture
def probe(make_probe) -> ProjectProbe:
    """Probe over an empty directory without ``go.mod``, runtime ``go1.13``."""
    return make_probe()


@pytest.fixture
def no_go_toolchain(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the ``go env GOVERSION`` call fail as if Go were not installed."""

    def _missing(*args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "go")

    monkeypatch.setattr("docen.probes.subprocess.run", _missing)
