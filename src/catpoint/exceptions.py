"""Exceptions raised by catpoint.

The security service itself raises none of these; errors from the repository
or the cat detector propagate to the caller unchanged.
"""


class CatpointError(Exception):
    """Base exception for catpoint."""


class CatpointConfigError(CatpointError):
    """Scenario or configuration file is missing or malformed."""


class CatpointDetectorError(CatpointError):
    """Cat detector could not produce an answer."""
