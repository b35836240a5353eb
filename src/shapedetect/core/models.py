"""Data types passed between pipeline stages and returned to callers."""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class ShapeType(str, Enum):
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    PENTAGON = "pentagon"
    STAR = "star"


@dataclass(frozen=True)
class PixelBuffer:
    """Flat row-major pixel data with top-left origin.

    ``data`` holds ``width * height * channels`` bytes; 4 channels for RGBA
    input, 1 for intensity buffers.
    """
    data: np.ndarray
    width: int
    height: int
    channels: int = 4

    def index(self, x, y):
        """Offset of the first byte of pixel (x, y)."""
        return (y * self.width + x) * self.channels


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    x: int
    y: int
    width: int
    height: int


@dataclass
class Region:
    """A maximal 4-connected set of foreground pixels."""
    pixels: list = field(default_factory=list)
    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    @property
    def area(self):
        return len(self.pixels)

    @property
    def width(self):
        return self.max_x - self.min_x + 1

    @property
    def height(self):
        return self.max_y - self.min_y + 1

    @property
    def bounding_box(self):
        return BoundingBox(self.min_x, self.min_y, self.width, self.height)

    @property
    def center(self):
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


@dataclass(frozen=True)
class DetectedShape:
    type: ShapeType
    confidence: float
    bounding_box: BoundingBox
    center: Point
    area: int


@dataclass(frozen=True)
class DetectionResult:
    """Shapes in discovery order plus timing (milliseconds) and image size."""
    shapes: tuple
    processing_time: float
    image_width: int
    image_height: int
