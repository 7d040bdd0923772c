"""
db/errors.py
------------
Error kinds surfaced by the listing query layer.
"""


class ListingError(Exception):
    """Base class for all listing query failures."""


class ConnectivityError(ListingError):
    """The backing store was unreachable or rejected the query."""


class DecodeError(ListingError):
    """A result row did not match the column layout expected for its listing kind."""
