"""fsroutes CLI — print the routes of a file-based-routing project.

Entry point registered as ``fsroutes`` in ``pyproject.toml``::

    [project.scripts]
    fsroutes = "fsroutes.cli:main"
"""

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None, *, default_root: Path | None = None) -> None:
    """CLI entry point for the ``fsroutes`` command.

    Args:
        argv: Arguments to parse; ``sys.argv[1:]`` when omitted.
        default_root: Project root used when ``--root`` is not given.
            Defaults to the current working directory.
    """
    parser = argparse.ArgumentParser(
        prog="fsroutes",
        description="List the routes defined by a project's pages/ and app/ directories.",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Print routes as a JSON array instead of a table",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root containing pages/ and/or app/ (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped files and duplicate routes to stderr",
    )

    args = parser.parse_args(argv)

    if args.root is None:
        args.root = default_root if default_root is not None else Path.cwd()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    from fsroutes.cli._routes import run_routes

    run_routes(args)
