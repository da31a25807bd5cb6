"""
Exceptions raised by the catalog, the ranking engine and the loader.
"""


class CatalogError(Exception):
    pass


class InvalidArgument(CatalogError, ValueError):
    pass


class NotFound(CatalogError, LookupError):
    pass


class LoadFailure(CatalogError):
    """The dataset could not be read or one of its rows is malformed."""
