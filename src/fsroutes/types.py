"""Data models for discovered filesystem routes.

Immutable frozen dataclasses produced once per source file during a scan.
Nothing here is mutated after creation.
"""

from dataclasses import dataclass
from enum import StrEnum


class RouteType(StrEnum):
    """Which routing convention produced a route."""

    PAGES = "pages"
    APP = "app"
    API = "api"


class SegmentKind(StrEnum):
    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route path.

    Static:     ``about``        (kind=STATIC, name="about")
    Dynamic:    ``[id]``         (kind=DYNAMIC, name="id")
    Catch-all:  ``[...slug]``    (kind=CATCH_ALL, name="slug")

    Double-bracket forms set ``optional=True`` but render the same way.
    """

    kind: SegmentKind
    name: str
    optional: bool = False

    def render(self) -> str:
        if self.kind is SegmentKind.DYNAMIC:
            return f":{self.name}"
        if self.kind is SegmentKind.CATCH_ALL:
            return f"*{self.name}"
        return self.name


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A route derived from a single source file.

    Attributes:
        route: URL pattern (e.g., ``/blog/:id``), always starting with ``/``.
        file: Source path relative to the project root, ``/``-separated.
        type: The convention that produced the route.
    """

    route: str
    file: str
    type: RouteType

    def to_dict(self) -> dict[str, str]:
        return {"route": self.route, "file": self.file, "type": str(self.type)}
