"""``fsroutes`` — scan a project and print its routes.

Builds a :class:`ScanConfig` from parsed arguments, collects routes and
prints them as a table or JSON.
"""

import argparse
import locale
import logging
import sys
from pathlib import Path

from fsroutes.config import ScanConfig
from fsroutes.discovery import collect_routes
from fsroutes.errors import ConfigurationError
from fsroutes.render import render_json, render_table

logger = logging.getLogger("fsroutes.cli")


def _use_environment_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping current collation locale: %s", exc)


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes found under ``args.root``.

    A root that does not exist is reported on stderr with exit code 1.
    Filesystem errors during the scan are not caught.
    """
    root = Path(args.root)
    try:
        if not root.exists():
            raise ConfigurationError(f"Project root not found: {root}")
        config = ScanConfig(root=root)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    _use_environment_collation()
    routes = collect_routes(config)

    if args.json:
        print(render_json(routes))
        return

    if routes:
        print(render_table(routes))
