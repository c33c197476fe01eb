"""docen -- Dockerfile generator for Go projects.

Builds a two-stage ``Dockerfile`` (``golang`` builder, ``scratch`` runtime)
from a handful of options, with defaults probed from the project directory.

Quick usage::

    from docen import Docen

    Docen().set_port("3000").set_timezone("Europe/Paris").generate_dockerfile()
"""

from docen.config import DockerfileConfig
from docen.generator import Docen
from docen.probes import ProjectProbe, derive_version, parse_package_name
from docen.templates import TemplateRenderer

__all__ = [
    "Docen",
    "DockerfileConfig",
    "ProjectProbe",
    "TemplateRenderer",
    "derive_version",
    "parse_package_name",
]

__version__ = "0.1.0"
