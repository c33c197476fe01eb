"""Dockerfile generation for Go projects.

:class:`Docen` accumulates build options through chained setters and renders
them into a two-stage ``Dockerfile``: a ``golang`` builder stage that tests
and compiles the project, and a ``scratch`` runtime stage carrying only the
binary, trust material and any bundled folders or files.

Quick usage::

    from docen import Docen

    Docen().set_go_version("1.14.9").set_port("3000").generate_dockerfile()
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .config import (
    DEFAULT_TAG_VERSION,
    DOCKERFILE_NAME,
    VENDOR_BUILD_FLAG,
    DockerfileConfig,
    parent_dir,
)
from .probes import ProjectProbe
from .templates import DOCKERFILE_TEMPLATE, TemplateRenderer
from .utils import print_success, print_warning


class Docen:
    """Builder for a project's ``Dockerfile``.

    Construction fills in defaults from *probe*: the image tag from the local
    Go toolchain and the allow-listed asset folders found in the project
    directory.  Every setter mutates the builder and returns it, so calls
    can be chained.  The project name and vendor mode are probed when the
    file is rendered, not at construction.
    """

    def __init__(
        self,
        probe: ProjectProbe | None = None,
        renderer: TemplateRenderer | None = None,
        config: DockerfileConfig | None = None,
    ) -> None:
        self.probe = probe if probe is not None else ProjectProbe()
        self.renderer = renderer if renderer is not None else TemplateRenderer()
        if config is None:
            config = DockerfileConfig(
                version=self.probe.version(),
                additional_folders=self.probe.additional_folders(),
            )
        self.config = config

    @classmethod
    def from_config(
        cls,
        config: DockerfileConfig,
        probe: ProjectProbe | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> "Docen":
        """Start from a stored configuration instead of probed defaults."""
        return cls(probe=probe, renderer=renderer, config=config.model_copy(deep=True))

    # -- Setters -----------------------------------------------------------

    def set_go_version(self, version: str) -> "Docen":
        """Use ``golang:<version>-alpine`` as the builder image."""
        self.config.version = f"{version}-{DEFAULT_TAG_VERSION}"
        return self

    def set_port(self, port: str) -> "Docen":
        """Expose a single port (``"3000"``) or a range (``"3000-4000"``)."""
        self.config.port = port
        return self

    def set_timezone(self, timezone: str) -> "Docen":
        """Set ``TZ`` in the runtime image, e.g. ``"Europe/Paris"``."""
        self.config.timezone = timezone
        return self

    def set_additional_folder(self, path: str) -> "Docen":
        """Bundle an extra folder into the runtime image."""
        self.config.additional_folders.add(path)
        return self

    def set_additional_file(self, path: str) -> "Docen":
        """Bundle an extra file; its parent folder is created as well."""
        self.config.additional_files.add(path)
        return self.set_additional_folder(parent_dir(path))

    def set_test_mode(self, mode: bool) -> "Docen":
        """Run ``go test ./...`` in the builder stage before compiling."""
        self.config.is_test_mode = mode
        return self

    # -- Rendering ---------------------------------------------------------

    def build_context(self) -> dict[str, Any]:
        """Template variables for the current configuration.

        Folders and files are sorted so the output is reproducible.
        """
        cfg = self.config
        return {
            "package_name": self.probe.package_name(),
            "version": cfg.version,
            "folders": sorted(cfg.additional_folders),
            "files": sorted(cfg.additional_files),
            "is_test_mode": cfg.is_test_mode,
            "vendor_flag": VENDOR_BUILD_FLAG if self.probe.is_vendor_mode() else "",
            "timezone": cfg.timezone,
            "port": cfg.port,
        }

    def render(self) -> str:
        """Return the Dockerfile text without writing it."""
        return self.renderer.render(DOCKERFILE_TEMPLATE, self.build_context())

    def generate_dockerfile(self, output_dir: str | Path | None = None) -> Path:
        """Render the Dockerfile and write it to *output_dir*.

        Args:
            output_dir: Directory receiving ``Dockerfile``.  Defaults to the
                probed project directory.

        Returns:
            Path of the written file.

        Raises:
            OSError: If the file cannot be written.
        """
        directory = Path(output_dir) if output_dir is not None else self.probe.root
        target = directory / DOCKERFILE_NAME
        if target.exists():
            print_warning(f"Overwriting existing {target}")
        path = self.renderer.render_to_file(DOCKERFILE_TEMPLATE, target, self.build_context())
        print_success(f"{DOCKERFILE_NAME} written to {path}")
        return path
