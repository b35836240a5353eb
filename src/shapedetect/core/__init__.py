"""Core package for shape detection."""

from .errors import ShapeDetectionError, InvalidInput, ImageLoadError, ConfigError
from .models import (
    BoundingBox,
    DetectedShape,
    DetectionResult,
    PixelBuffer,
    Point,
    Region,
    ShapeType,
)
from .config import DetectionConfig, save_config, load_config
from .image_loading import load_image, buffer_from_array
from .thresholding import flat_bytes, to_grayscale, compute_histogram, otsu_threshold, binarize
from .regions import flood_fill, find_regions, border_map, border_pixels
from .classification import count_corners, circularity, fill_ratio, classify, classify_region
from .detection import detect_shapes
