"""Caesura error types."""


class CaesuraError(Exception):
    """Base error for all anticipated caesura failures."""


class CaesuraOptionError(CaesuraError, ValueError):
    """Unknown segmentation option or invalid option value."""


class CaesuraVersionError(CaesuraError):
    """Manifest version mismatch."""


class CaesuraChecksumError(CaesuraError):
    """File checksum verification failed."""


class ScanStalledError(RuntimeError):
    """The scan cursor failed to advance.

    Raised when a boundary rule matches without consuming input, which is
    a defect in rule construction rather than a property of the input.
    Not a CaesuraError: ``except CaesuraError`` must never catch it.
    """
