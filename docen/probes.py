"""Environment probes used to derive generator defaults.

Three small inspections of the project being containerised:

* the Go toolchain version, turned into a ``golang`` image tag;
* the module name from the first line of ``go.mod``, used to namespace
  paths inside the image;
* the top-level directory listing, used to pick up well-known asset folders
  and to detect a ``vendor/`` dependency cache.

Every probe degrades to a fallback instead of raising.  The I/O entry points
live on :class:`ProjectProbe` so tests can substitute them per instance.
"""

from __future__ import annotations

import os
import re
import subprocess
from pathlib import Path
from typing import IO, Callable

from .config import (
    ADDITIONAL_FOLDERS,
    DEFAULT_APP_NAME,
    DEFAULT_TAG_VERSION,
    GO_MOD_FILE,
    VENDOR_FOLDER_NAME,
)
from .utils import print_note

_VERSION_RE = re.compile(r"[0-9.]+")


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def derive_version(raw: str) -> str:
    """Turn a runtime version string into a ``golang`` image tag.

    Examples::

        derive_version("go1.13")          -> "1.13-alpine"
        derive_version("without version") -> "alpine"
    """
    runs = _VERSION_RE.findall(raw)
    if not runs:
        return DEFAULT_TAG_VERSION
    return f"{''.join(runs)}-{DEFAULT_TAG_VERSION}"


def parse_package_name(stream: IO[str]) -> str:
    """Extract a short project identifier from a ``go.mod`` stream.

    Only the first line is read.  ``module "name"`` and ``module a/b/c.d``
    are both accepted; the last path segment is kept and periods become
    underscores.  An empty stream or a failed read yields ``"app"``.
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError):
        return DEFAULT_APP_NAME

    line = line.rstrip("\r\n")
    if not line:
        return DEFAULT_APP_NAME

    module = line.replace("module ", "")
    if not module:
        return DEFAULT_APP_NAME
    if module.startswith('"'):
        module = module.replace('"', "")

    return module.split("/")[-1].replace(".", "_")


def _go_runtime_version() -> str:
    """Ask the local Go toolchain for its version (e.g. ``go1.21.3``)."""
    try:
        completed = subprocess.run(
            ["go", "env", "GOVERSION"],
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=30,
        )
    except (OSError, subprocess.SubprocessError):
        print_note("Go toolchain not available; using the default image tag.")
        return ""
    return completed.stdout.strip()


def _list_dir(path: Path) -> list[os.DirEntry]:
    with os.scandir(path) as entries:
        return list(entries)


def _is_dir(entry: os.DirEntry) -> bool:
    """Lstat-style check: symlinks and unreadable entries are not directories."""
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


# ---------------------------------------------------------------------------
# ProjectProbe
# ---------------------------------------------------------------------------


class ProjectProbe:
    """Inspects a project directory for the generator.

    Args:
        root: Directory to inspect.  Defaults to the current working
            directory.
        read_dir: Callable returning the entries of a directory.
        runtime_version: Callable returning the raw Go runtime version.
        open_file: Callable opening a text file for reading.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        *,
        read_dir: Callable[[Path], list[os.DirEntry]] = _list_dir,
        runtime_version: Callable[[], str] = _go_runtime_version,
        open_file: Callable[..., IO[str]] = open,
    ) -> None:
        self.root = Path(root) if root is not None else Path(".")
        self.read_dir = read_dir
        self.runtime_version = runtime_version
        self.open_file = open_file

    # -- Version -----------------------------------------------------------

    def version(self) -> str:
        """Default image tag derived from the Go runtime version."""
        return derive_version(self.runtime_version())

    # -- go.mod ------------------------------------------------------------

    def package_name(self) -> str:
        """Project identifier from ``go.mod``, or ``"app"`` without one."""
        try:
            stream = self.open_file(self.root / GO_MOD_FILE, encoding="utf-8")
        except OSError:
            print_note(f"No readable {GO_MOD_FILE}; using '{DEFAULT_APP_NAME}' as the project name.")
            return DEFAULT_APP_NAME

        with stream:
            return parse_package_name(stream)

    # -- Directory listing -------------------------------------------------

    def list_dir(self) -> list[os.DirEntry]:
        """Immediate entries of the project directory (empty on failure)."""
        try:
            return self.read_dir(self.root)
        except OSError as exc:
            print_note(f"Could not list {self.root}: {exc}")
            return []

    def additional_folders(self) -> set[str]:
        """Allow-listed asset directories present in the project."""
        return {
            entry.name
            for entry in self.list_dir()
            if entry.name in ADDITIONAL_FOLDERS and _is_dir(entry)
        }

    def is_vendor_mode(self) -> bool:
        """``True`` if the project carries a ``vendor/`` directory."""
        return any(
            entry.name == VENDOR_FOLDER_NAME and _is_dir(entry)
            for entry in self.list_dir()
        )
