"""Rule-based detection of simple geometric shapes in raster images."""

from .core import (
    DetectedShape,
    DetectionConfig,
    DetectionResult,
    ImageLoadError,
    InvalidInput,
    PixelBuffer,
    ShapeDetectionError,
    ShapeType,
    detect_shapes,
    load_image,
)

__version__ = "0.1.0"
