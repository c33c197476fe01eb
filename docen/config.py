"""docen configuration.

Holds the constants of the generated layout and the typed
:class:`DockerfileConfig` model accumulated by :class:`docen.generator.Docen`.
The model uses Pydantic v2 so a recipe can be serialised to/from JSON or
built from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_serializer

# Image flavor appended to every golang tag, and the bare tag when no version is known.
DEFAULT_TAG_VERSION = "alpine"
# Project identifier used when go.mod is missing or unreadable.
DEFAULT_APP_NAME = "app"

GO_MOD_FILE = "go.mod"
VENDOR_FOLDER_NAME = "vendor"
VENDOR_BUILD_FLAG = "-mod=vendor"
DOCKERFILE_NAME = "Dockerfile"

# Top-level folders bundled into the image automatically when present.
ADDITIONAL_FOLDERS: frozenset[str] = frozenset({"static", "assets", "templates", "config"})


def _split_list(value: str) -> set[str]:
    return {item.strip() for item in value.split(",") if item.strip()}


def parent_dir(path: str) -> str:
    """Directory containing *path*; ``"."`` for a bare file name."""
    return os.path.dirname(path) or "."


class DockerfileConfig(BaseModel):
    """Everything the Dockerfile template needs besides the probed values.

    ``port`` and ``timezone`` are copied verbatim into the output; an empty
    string means the matching directive is omitted.
    """

    version: str = Field(default=DEFAULT_TAG_VERSION, description="golang image tag")
    port: str = Field(default="", description="Single port or range, e.g. 3000-4000")
    timezone: str = Field(default="", description="Value of the TZ variable")
    additional_folders: set[str] = Field(default_factory=set)
    additional_files: set[str] = Field(default_factory=set)
    is_test_mode: bool = Field(default=False)

    @field_serializer("additional_folders", "additional_files")
    def _serialise_sorted(self, value: set[str]) -> list[str]:
        return sorted(value)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "DockerfileConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "DockerfileConfig":
        """Build a ``DockerfileConfig`` from environment variables.

        Recognised variables (all optional):
            DOCEN_GO_VERSION, DOCEN_PORT, DOCEN_TIMEZONE, DOCEN_TEST_MODE,
            DOCEN_FOLDERS, DOCEN_FILES.

        Folder and file lists are comma-separated.  ``DOCEN_GO_VERSION`` gets
        the image flavor appended, like :meth:`Docen.set_go_version`.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("DOCEN_GO_VERSION"):
            kwargs["version"] = f"{os.environ['DOCEN_GO_VERSION']}-{DEFAULT_TAG_VERSION}"
        if os.environ.get("DOCEN_PORT"):
            kwargs["port"] = os.environ["DOCEN_PORT"]
        if os.environ.get("DOCEN_TIMEZONE"):
            kwargs["timezone"] = os.environ["DOCEN_TIMEZONE"]
        if os.environ.get("DOCEN_TEST_MODE"):
            kwargs["is_test_mode"] = os.environ["DOCEN_TEST_MODE"].strip().lower() in (
                "1", "true", "yes", "on",
            )

        files = _split_list(os.environ.get("DOCEN_FILES", ""))
        folders = _split_list(os.environ.get("DOCEN_FOLDERS", ""))
        folders |= {parent_dir(f) for f in files}

        return cls(additional_folders=folders, additional_files=files, **kwargs)
