"""Output renderers for collected routes."""

import json
from collections.abc import Sequence

from fsroutes.types import RouteEntry


def render_json(entries: Sequence[RouteEntry]) -> str:
    """Pretty-printed JSON array of ``{"route", "file", "type"}`` objects."""
    return json.dumps([entry.to_dict() for entry in entries], indent=2, ensure_ascii=False)


def render_table(entries: Sequence[RouteEntry]) -> str:
    """One ``<route>\\t[<type>]\\t<file>`` line per entry.

    Returns an empty string for no entries, so nothing is printed.
    """
    return "\n".join(f"{entry.route}\t[{entry.type}]\t{entry.file}" for entry in entries)
