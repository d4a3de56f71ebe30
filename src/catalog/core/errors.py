"""Exception types raised by the catalog core."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class StoreError(CatalogError):
    """A product store could not complete an operation.

    Raised for connectivity failures and constraint violations. The original
    exception is chained as ``__cause__``.
    """
