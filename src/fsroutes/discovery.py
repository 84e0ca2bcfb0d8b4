"""Filesystem route discovery for the pages/ and app/ directories.

Walks both directory trees and translates file paths into route patterns:

- ``pages/``: every file with a page extension is a route.  ``index``
  collapses to its directory, ``_``-prefixed segments are dropped and
  ``pages/api/**`` becomes an ``api`` route taken verbatim.
- ``app/``: only ``page.<ext>`` files define routes.  The folders above
  them form the path; ``(group)`` and ``_private`` folders are dropped.

Bracket segments (``[id]``, ``[...slug]``, ``[[...slug]]``) are converted
by :mod:`fsroutes.segments`.  Results from both trees are deduplicated by
route (first seen wins) and sorted.
"""

from __future__ import annotations

import locale
import logging
import os
import posixpath
import re
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path

from fsroutes.config import ScanConfig
from fsroutes.segments import convert_segment, join_route
from fsroutes.types import RouteEntry, RouteType

logger = logging.getLogger("fsroutes.discovery")

_API_PREFIX_RE = re.compile(r"^api/?")


def path_exists(path: str | Path) -> bool:
    """True if ``path`` can be stat'ed and is a directory or regular file."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return stat.S_ISDIR(mode) or stat.S_ISREG(mode)


def walk_files(directory: Path) -> Iterator[Path]:
    """Yield every regular file below ``directory``, recursively.

    Entries are visited in name order, depth first, so repeated walks of
    an unchanged tree yield the same sequence.  Symlinks are followed.
    Errors from listing or stat'ing an entry propagate.
    """
    if not path_exists(directory):
        return
    for item in sorted(directory.iterdir(), key=lambda p: p.name):
        mode = item.stat().st_mode
        if stat.S_ISDIR(mode):
            yield from walk_files(item)
        elif stat.S_ISREG(mode):
            yield item


def _relative(path: Path, base: Path) -> str:
    return path.relative_to(base).as_posix()


def _strip_extension(rel: str) -> str:
    # Only the first occurrence of the extension text is removed
    ext = posixpath.splitext(rel)[1]
    return rel.replace(ext, "", 1)


def route_from_pages(file: Path, pages_dir: Path) -> tuple[str, RouteType]:
    """Translate a file under ``pages/`` into its route.

    API files are returned as-is below ``/api``: no index collapsing,
    no ``_`` filtering and no bracket conversion.
    """
    rel = _relative(file, pages_dir)

    if rel.startswith("api/") or rel == "api":
        api_path = _strip_extension(_API_PREFIX_RE.sub("", rel, count=1))
        route = "/api" if api_path == "" else f"/api/{api_path}"
        return route, RouteType.API

    no_ext = _strip_extension(rel)
    if no_ext == "index":
        no_ext = ""
    if no_ext.endswith("/index"):
        no_ext = no_ext.removesuffix("/index")

    segments = [
        convert_segment(seg)
        for seg in no_ext.split("/")
        if seg and not seg.startswith("_")
    ]
    return join_route(segments), RouteType.PAGES


def _is_route_group(segment: str) -> bool:
    return segment.startswith("(") and segment.endswith(")")


def route_from_app(file: Path, app_dir: Path) -> tuple[str, RouteType]:
    """Translate an ``app/**/page.<ext>`` file into its route.

    The caller is responsible for only passing page files.
    """
    parts = _relative(file, app_dir).split("/")
    folders = parts[:-1]
    segments = [
        convert_segment(seg)
        for seg in folders
        if not _is_route_group(seg) and not seg.startswith("_")
    ]
    return join_route(segments), RouteType.APP


def discover_pages_routes(config: ScanConfig) -> Iterator[RouteEntry]:
    """Yield entries for every page-extension file under ``pages/``."""
    pages_dir = config.pages_dir
    if not path_exists(pages_dir):
        logger.debug("No pages directory at %s", pages_dir)
        return

    for file in walk_files(pages_dir):
        if not config.is_page_extension(os.path.splitext(file.name)[1]):
            logger.debug("Skipping non-page file %s", file)
            continue
        route, route_type = route_from_pages(file, pages_dir)
        yield RouteEntry(route=route, file=_relative(file, config.root), type=route_type)


def discover_app_routes(config: ScanConfig) -> Iterator[RouteEntry]:
    """Yield entries for every ``page.<ext>`` file under ``app/``."""
    app_dir = config.app_dir
    if not path_exists(app_dir):
        logger.debug("No app directory at %s", app_dir)
        return

    for file in walk_files(app_dir):
        if not config.is_app_page(file.name):
            logger.debug("Skipping non-page file %s", file)
            continue
        route, route_type = route_from_app(file, app_dir)
        yield RouteEntry(route=route, file=_relative(file, config.root), type=route_type)


def dedupe_routes(entries: Iterable[RouteEntry]) -> list[RouteEntry]:
    """Keep the first entry for each route, in input order."""
    seen: set[str] = set()
    kept: list[RouteEntry] = []
    for entry in entries:
        if entry.route in seen:
            logger.debug("Dropping duplicate route %s from %s", entry.route, entry.file)
            continue
        seen.add(entry.route)
        kept.append(entry)
    return kept


def sort_routes(entries: Iterable[RouteEntry]) -> list[RouteEntry]:
    """Sort ascending by route using the current collation locale."""
    return sorted(entries, key=lambda entry: locale.strxfrm(entry.route))


def collect_routes(config: ScanConfig) -> list[RouteEntry]:
    """Scan a project and return its unique routes, sorted.

    Pages entries are collected before app entries, so a pages route wins
    over an app route with the same pattern.

    Args:
        config: Scan configuration naming the project root.

    Returns:
        Sorted list of :class:`RouteEntry` with unique ``route`` values.
    """
    entries = [*discover_pages_routes(config), *discover_app_routes(config)]
    routes = sort_routes(dedupe_routes(entries))
    logger.debug("Collected %d routes from %d files", len(routes), len(entries))
    return routes
