"""Typed errors raised by readers, the position pipeline and the search engine.

Readers and search routines raise these; the public entry points catch them
and return a result object whose ``error`` field holds the class name, so
callers can branch on the kind without catching exceptions.
"""

from __future__ import annotations


class EphemerisError(RuntimeError):
    """Base class for all engine errors."""

    @property
    def kind(self) -> str:
        """Short error kind name used in result objects."""
        return type(self).__name__


class FileNotFoundEphemeris(EphemerisError, FileNotFoundError):
    """No ephemeris file covering the request exists on the search path."""


class CorruptHeader(EphemerisError):
    """File header fails validation; the file is unusable."""


class DateOutOfRange(EphemerisError):
    """Requested epoch lies outside the file's (or theory's) valid range."""


class BodyNotInFile(EphemerisError):
    """The opened file carries no data for the requested body."""


class BodyUnsupportedForCenter(EphemerisError):
    """The body cannot be computed for the requested center (e.g. heliocentric Moon)."""


class SearchNotFound(EphemerisError):
    """No event exists in the search window. An expected outcome, not a failure."""


class NumericNonConvergence(EphemerisError):
    """An iteration exhausted its budget before reaching its tolerance."""
