"""Error types for the COT sentiment builder."""


class CotError(RuntimeError):
    pass


class TransportError(CotError):
    """Report download failed or returned a non-200 status."""


class LocatorError(CotError):
    """Target instrument line could not be found in the report."""


class RecordFormatError(CotError):
    """Located line does not have the shape needed to extract positions."""


class SnapshotError(CotError):
    pass
