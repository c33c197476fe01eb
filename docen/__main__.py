"""Command-line entry point for docen.

Usage::

    python -m docen --port 3000 --timezone Europe/Moscow --test
    python -m docen --file config/app.yaml --folder static/img --print
    python -m docen --config docen.json --output-dir ./build
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from docen.config import DockerfileConfig
from docen.generator import Docen
from docen.probes import ProjectProbe
from docen.utils import print_error, print_summary_table, print_success


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docen",
        description="Generate a multi-stage Dockerfile for a Go project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m docen --port 3000 --test\n"
            "  python -m docen --go-version 1.14.9 --timezone Europe/Moscow\n"
        ),
    )
    parser.add_argument(
        "--project-dir", "-C",
        default=".",
        help="Go project to inspect (default: current directory)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        default=None,
        help="Directory for the Dockerfile (default: the project directory)",
    )
    parser.add_argument("--config", default=None, help="Start from a saved JSON configuration")
    parser.add_argument("--save-config", default=None, help="Write the final configuration to JSON")
    parser.add_argument("--go-version", default=None, help="golang image version, e.g. 1.14.9")
    parser.add_argument("--port", default=None, help="Port or port range to expose")
    parser.add_argument("--timezone", default=None, help="Timezone for the runtime image")
    parser.add_argument(
        "--folder",
        action="append",
        default=[],
        help="Extra folder to bundle (repeatable)",
    )
    parser.add_argument(
        "--file",
        action="append",
        default=[],
        help="Extra file to bundle (repeatable)",
    )
    parser.add_argument("--test", action="store_true", help="Run go test before building")
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Write the Dockerfile to stdout instead of a file",
    )
    return parser


def _configure(args: argparse.Namespace) -> Docen:
    probe = ProjectProbe(args.project_dir)
    if args.config:
        docen = Docen.from_config(DockerfileConfig.load(Path(args.config)), probe=probe)
    else:
        docen = Docen(probe=probe)

    if args.go_version:
        docen.set_go_version(args.go_version)
    if args.port:
        docen.set_port(args.port)
    if args.timezone:
        docen.set_timezone(args.timezone)
    for folder in args.folder:
        docen.set_additional_folder(folder)
    for path in args.file:
        docen.set_additional_file(path)
    if args.test:
        docen.set_test_mode(True)
    return docen


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        docen = _configure(args)
    except (OSError, ValueError) as exc:
        print_error(f"Error: could not load configuration: {exc}")
        return 1

    if args.print_only:
        sys.stdout.write(docen.render())
        return 0

    cfg = docen.config
    print_summary_table(
        {
            "Image": f"golang:{cfg.version}",
            "Port": cfg.port or "-",
            "Timezone": cfg.timezone or "-",
            "Test mode": "yes" if cfg.is_test_mode else "no",
            "Folders": ", ".join(sorted(cfg.additional_folders)) or "-",
            "Files": ", ".join(sorted(cfg.additional_files)) or "-",
        },
        title="docen",
    )

    try:
        docen.generate_dockerfile(args.output_dir)
        if args.save_config:
            saved = cfg.save(Path(args.save_config))
            print_success(f"Configuration saved to {saved}")
    except OSError as exc:
        print_error(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
