"""Exception types."""


class CatalogError(Exception):
    """Catalog could not be built; the current selection attempt is aborted."""


class FetchFailed(CatalogError):
    """Network failure or non-success HTTP status."""


class DecompressFailed(CatalogError):
    """Payload is not valid gzip."""


class ParseFailed(CatalogError):
    """Payload is not UTF-8 JSON of the expected shape."""


class PersistenceError(Exception):
    """Saved city list could not be read or written."""


class PersistenceLoadFailed(PersistenceError):
    pass


class PersistenceWriteFailed(PersistenceError):
    pass
