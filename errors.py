"""
Exceptions raised by the speedrun lookup collaborators.

The grid search and table extraction never raise for "not found" or a
badly laid out table; those outcomes are returned as data.  These
exceptions cover the I/O around the core (credentials, the data source)
so the pipeline can turn each one into user-facing wording.
"""

from typing import Optional


class SpeedrunLookupError(Exception):
    """Base class for every lookup failure outside the core."""


class CredentialsError(SpeedrunLookupError):
    """The OAuth client secrets or stored token could not be loaded."""


class DataSourceError(SpeedrunLookupError):
    """The data source failed to return a grid."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidRangeError(DataSourceError):
    """The requested sheet / range does not exist in the data source."""
