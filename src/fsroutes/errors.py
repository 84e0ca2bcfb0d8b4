"""fsroutes exception hierarchy.

Filesystem failures are not wrapped: ``OSError`` from a walk propagates
unchanged and aborts the scan.
"""


class FsRoutesError(Exception):
    """Base for all fsroutes-specific errors."""


class ConfigurationError(FsRoutesError):
    """Raised when scan configuration is invalid.

    Typically raised from ``ScanConfig.__post_init__`` or by the CLI when
    ``--root`` does not exist.
    """
