"""Command line entry point: lint a project and print its diagnostics."""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import load_config, load_project_config
from .linter import lint_directory
from .utils.errors import SeassError
from .utils.logging_config import setup_logging


EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seass",
        description="Enforce single-class CSS selectors across a project",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Project root containing seass.yaml (default: current directory)",
    )
    parser.add_argument(
        "--config", "-c", type=str, help="Configuration file for logging settings"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    parser.add_argument("--json", action="store_true", help="Print diagnostics as a JSON array")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level

    root = Path(args.directory or os.getcwd())
    try:
        if args.config:
            setup_logging(load_config(args.config).logging)
            diagnostics = lint_directory(root)
        else:
            # The project file carries the logging section as well
            config = load_project_config(root)
            setup_logging(config.logging)
            diagnostics = lint_directory(root, config)
    except SeassError as e:
        print(e.message, file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(diagnostics, indent=2))
    else:
        for diagnostic in diagnostics:
            print(diagnostic, file=sys.stderr)

    return EXIT_FINDINGS if diagnostics else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
