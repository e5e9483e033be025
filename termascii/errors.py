"""
Exceptions raised by the termascii conversion pipeline.
"""


class ConversionError(Exception):
    """Base class for every failure while turning a file into text art."""


class SourceNotFound(ConversionError, FileNotFoundError):
    """The image path does not exist."""


class DecodeFailure(ConversionError):
    """The file exists but is not an image or animation Pillow can read."""


class InvalidDimension(ConversionError, ValueError):
    """A resize target (or the source itself) has no area."""


class ResizeFailure(ConversionError):
    """Resampling did not produce an image."""
