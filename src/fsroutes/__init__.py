"""fsroutes — list the routes a file-based-routing project defines.

Reads the ``pages/`` and ``app/`` trees of a project and derives route
patterns from file paths, without building or running the project.

Basic usage::

    from pathlib import Path

    from fsroutes import ScanConfig, collect_routes

    for entry in collect_routes(ScanConfig(root=Path("."))):
        print(entry.route, entry.type, entry.file)

Command line::

    fsroutes --root path/to/project --json
"""

from fsroutes.config import ScanConfig
from fsroutes.discovery import collect_routes
from fsroutes.errors import ConfigurationError, FsRoutesError
from fsroutes.render import render_json, render_table
from fsroutes.segments import convert_segment, parse_segment
from fsroutes.types import RouteEntry, RouteType, Segment, SegmentKind

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FsRoutesError",
    "RouteEntry",
    "RouteType",
    "ScanConfig",
    "Segment",
    "SegmentKind",
    "collect_routes",
    "convert_segment",
    "parse_segment",
    "render_json",
    "render_table",
]
