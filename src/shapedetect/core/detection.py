"""The full detection pipeline: grayscale, threshold, regions, classification."""

import logging
import time

from .classification import classify_region
from .config import DetectionConfig
from .models import DetectionResult
from .regions import border_map, border_pixels, find_regions
from .thresholding import binarize, otsu_threshold, to_grayscale

log = logging.getLogger(__name__)


def detect_shapes(buffer, config=None):
    """Detect and classify the shapes in an RGBA pixel buffer.

    Shapes are returned in row-major order of each region's first pixel.
    Raises InvalidInput before doing any work if the buffer is malformed.
    """
    config = config or DetectionConfig()
    start = time.perf_counter()

    gray = to_grayscale(buffer)
    threshold = otsu_threshold(gray, fallback=config.fallback_threshold)
    mask = binarize(gray, threshold)
    border = border_map(mask)
    min_area = config.min_area(buffer.width, buffer.height)

    shapes = []
    for region in find_regions(mask):
        if region.area < min_area:
            log.debug("Dropping region at (%d,%d): area=%d < %.0f",
                      region.min_x, region.min_y, region.area, min_area)
            continue
        shape = classify_region(region, border_pixels(region, border), config)
        log.debug("Region at (%d,%d): %s area=%d",
                  region.min_x, region.min_y, shape.type.value, shape.area)
        shapes.append(shape)

    processing_time = (time.perf_counter() - start) * 1000
    log.info("Detected %d shapes in %dx%d image (threshold=%d, %.1f ms)",
             len(shapes), buffer.width, buffer.height, threshold, processing_time)
    return DetectionResult(
        shapes=tuple(shapes),
        processing_time=processing_time,
        image_width=buffer.width,
        image_height=buffer.height,
    )
