"""Command-line interface for pomgraph."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pomgraph.errors import ExtractionError
from pomgraph.pipeline import run

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pomgraph",
        description="Extract an SBOM module graph from a Maven project.",
    )
    parser.add_argument(
        "project_dir",
        type=Path,
        help="Path to the Maven project (the directory holding pom.xml)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output JSON file path (default: pomgraph.json in the project)",
    )
    parser.add_argument(
        "--mvn",
        default=None,
        help="Maven executable (default: mvn)",
    )
    parser.add_argument(
        "--online",
        action="store_true",
        help="Allow Maven network access when listing dependencies",
    )
    parser.add_argument(
        "--no-plugins",
        action="store_true",
        help="Leave build plugins out of the graph",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("pomgraph").setLevel(logging.DEBUG)

    try:
        run(
            args.project_dir,
            output=args.output,
            mvn=args.mvn,
            offline=False if args.online else None,
            include_plugins=False if args.no_plugins else None,
        )
    except ExtractionError as e:
        logger.error("%s", e)
        sys.exit(1)
