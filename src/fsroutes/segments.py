"""Bracket-syntax path segment parsing.

Shared by the pages and app conventions.  Checked in order, first match
wins::

    [...slug]     catch-all            -> *slug
    [[...slug]]   optional catch-all   -> *slug
    [[id]]        optional dynamic     -> :id
    [id]          dynamic              -> :id
    about         static               -> about
"""

import re

from fsroutes.types import Segment, SegmentKind

_CATCH_ALL_RE = re.compile(r"\[\.\.\.(.+)\]")
_OPTIONAL_RE = re.compile(r"\[\[(\.\.\.)?(.+)\]\]")
_DYNAMIC_RE = re.compile(r"\[(.+)\]")


def parse_segment(raw: str) -> Segment:
    """Classify a single path segment.

    The double-bracket form is tested before the single-bracket form,
    otherwise ``[[id]]`` would parse as a dynamic segment named ``[id]``.
    """
    if match := _CATCH_ALL_RE.fullmatch(raw):
        return Segment(SegmentKind.CATCH_ALL, match.group(1))
    if match := _OPTIONAL_RE.fullmatch(raw):
        kind = SegmentKind.CATCH_ALL if match.group(1) else SegmentKind.DYNAMIC
        return Segment(kind, match.group(2), optional=True)
    if match := _DYNAMIC_RE.fullmatch(raw):
        return Segment(SegmentKind.DYNAMIC, match.group(1))
    return Segment(SegmentKind.STATIC, raw)


def convert_segment(raw: str) -> str:
    return parse_segment(raw).render()


def join_route(segments: list[str]) -> str:
    """Join converted segments into a route; no segments means ``/``."""
    return "/" + "/".join(segments)
