"""Scan configuration.

ScanConfig is a frozen dataclass — immutable after creation, built once per
run and passed through the whole pipeline.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from fsroutes.errors import ConfigurationError

PAGES_DIR_NAME = "pages"
APP_DIR_NAME = "app"
PAGE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx", ".mdx")

# Basename of the marker file that defines a route in the app tree
APP_PAGE_STEM = "page"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Where to look and which files count as routes.

    All fields except ``root`` have defaults matching the usual
    conventions::

        config = ScanConfig(root=Path("~/code/site").expanduser())
    """

    root: Path
    pages_dir_name: str = PAGES_DIR_NAME
    app_dir_name: str = APP_DIR_NAME
    page_extensions: tuple[str, ...] = PAGE_EXTENSIONS
    _app_page_re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", Path(self.root))

        for name in (self.pages_dir_name, self.app_dir_name):
            if not name or "/" in name or "\\" in name:
                msg = f"Directory name must be a single path component, got {name!r}"
                raise ConfigurationError(msg)

        if not self.page_extensions:
            raise ConfigurationError("page_extensions must not be empty")
        for ext in self.page_extensions:
            if not ext.startswith(".") or len(ext) < 2:
                msg = f"Page extension must start with '.', got {ext!r}"
                raise ConfigurationError(msg)

        alternatives = "|".join(re.escape(ext[1:]) for ext in self.page_extensions)
        object.__setattr__(
            self,
            "_app_page_re",
            re.compile(rf"{APP_PAGE_STEM}\.({alternatives})"),
        )

    @property
    def pages_dir(self) -> Path:
        return self.root / self.pages_dir_name

    @property
    def app_dir(self) -> Path:
        return self.root / self.app_dir_name

    def is_page_extension(self, ext: str) -> bool:
        return ext in self.page_extensions

    def is_app_page(self, basename: str) -> bool:
        """True for ``page.<ext>`` with a recognised extension (case-sensitive)."""
        return self._app_page_re.fullmatch(basename) is not None
