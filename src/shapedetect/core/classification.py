"""Corner counting and rule-based shape classification."""

import math

from .config import DetectionConfig
from .models import DetectedShape, ShapeType


def count_corners(edges, config=DetectionConfig()):
    """Count sharp turns along the ordered edge list.

    Every ``step``-th edge pixel starts a triple (p1, p2, p3) spaced ``step``
    apart, wrapping around the list. A triple is a corner when the angle
    between p1->p2 and p2->p3 lies strictly inside the configured band.
    """
    n = len(edges)
    if n == 0:
        return 0
    step = max(config.min_sample_step, n // config.corner_samples)
    corners = 0
    for i in range(0, n, step):
        x1, y1 = edges[i]
        x2, y2 = edges[(i + step) % n]
        x3, y3 = edges[(i + 2 * step) % n]
        v1x, v1y = x2 - x1, y2 - y1
        v2x, v2y = x3 - x2, y3 - y2
        mag1 = math.hypot(v1x, v1y)
        mag2 = math.hypot(v2x, v2y)
        if mag1 == 0 or mag2 == 0:
            continue
        cos = (v1x * v2x + v1y * v2y) / (mag1 * mag2)
        angle = math.acos(min(1.0, max(-1.0, cos)))
        if config.corner_angle_min < angle < config.corner_angle_max:
            corners += 1
    return corners


def circularity(area, perimeter):
    """4*pi*area / perimeter**2, or 0 for an empty perimeter."""
    if perimeter == 0:
        return 0.0
    return 4 * math.pi * area / (perimeter * perimeter)


def fill_ratio(area, width, height):
    return area / (width * height)


def classify(corners, circ, fill, config=DetectionConfig()):
    """Map corner count, circularity and fill ratio to a shape type."""
    if corners <= 3:
        return ShapeType.TRIANGLE
    if corners <= 5:
        if circ > config.rectangle_circularity:
            return ShapeType.RECTANGLE
        return ShapeType.PENTAGON
    if corners > 7 and fill < config.star_fill_ratio and circ < config.star_circularity:
        return ShapeType.STAR
    # 6 or 7 corners also land here
    return ShapeType.CIRCLE


def classify_region(region, edges, config=DetectionConfig()):
    """Build the DetectedShape for a region given its ordered border pixels."""
    corners = count_corners(edges, config)
    circ = circularity(region.area, len(edges))
    fill = fill_ratio(region.area, region.width, region.height)
    return DetectedShape(
        type=classify(corners, circ, fill, config),
        confidence=config.confidence,
        bounding_box=region.bounding_box,
        center=region.center,
        area=region.area,
    )
