"""Exceptions raised by shapedetect."""


class ShapeDetectionError(Exception):
    """Base class for shapedetect errors."""


class InvalidInput(ShapeDetectionError, ValueError):
    """Pixel buffer does not match its declared dimensions."""


class ImageLoadError(ShapeDetectionError):
    """An image file could not be opened or decoded."""


class ConfigError(ShapeDetectionError):
    """A detection config file is malformed."""
