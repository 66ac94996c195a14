"""
Exception types raised by the export engine.
"""


class InkpressError(Exception):
    """Base class for all export engine errors."""


class DocumentLoadError(InkpressError):
    """The source document could not be fetched, read or opened."""


class ImageDecodeError(InkpressError):
    """An embedded raster could not be decoded from its data URL."""


class PayloadError(InkpressError):
    """A saved export payload could not be read, parsed or written."""
