"""Split a binary mask into connected regions and find their borders."""

import logging

import numpy as np
from scipy import ndimage

from .models import Region
from .thresholding import FOREGROUND

log = logging.getLogger(__name__)

# 4-connectivity: up, down, left, right
FOUR_CONNECTED = ndimage.generate_binary_structure(2, 1)


def flood_fill(foreground, visited, width, height, sx, sy):
    """Collect the 4-connected region containing (sx, sy).

    ``foreground`` and ``visited`` are flat row-major sequences of length
    width * height; ``visited`` is updated in place so later fills skip the
    claimed pixels. Neighbors are pushed +x, -x, +y, -y, which fixes the
    discovery order of ``Region.pixels``.
    """
    region = Region(min_x=sx, min_y=sy, max_x=sx, max_y=sy)
    pixels = region.pixels
    stack = [(sx, sy)]
    while stack:
        x, y = stack.pop()
        if x < 0 or y < 0 or x >= width or y >= height:
            continue
        idx = y * width + x
        if visited[idx] or not foreground[idx]:
            continue
        visited[idx] = 1
        pixels.append((x, y))
        if x < region.min_x:
            region.min_x = x
        if x > region.max_x:
            region.max_x = x
        if y < region.min_y:
            region.min_y = y
        if y > region.max_y:
            region.max_y = y
        stack.append((x + 1, y))
        stack.append((x - 1, y))
        stack.append((x, y + 1))
        stack.append((x, y - 1))
    return region


def find_regions(mask):
    """Yield every region of the mask in row-major order of its first pixel."""
    height, width = mask.shape
    flat = mask.ravel() == FOREGROUND
    foreground = flat.tolist()
    visited = bytearray(width * height)
    count = 0
    for idx in np.flatnonzero(flat).tolist():
        if visited[idx]:
            continue
        y, x = divmod(idx, width)
        count += 1
        yield flood_fill(foreground, visited, width, height, x, y)
    log.debug("Found %d regions in %dx%d mask", count, width, height)


def border_map(mask):
    """Foreground pixels with a background or out-of-bounds 4-neighbor."""
    foreground = mask == FOREGROUND
    interior = ndimage.binary_erosion(foreground, structure=FOUR_CONNECTED, border_value=0)
    return foreground & ~interior


def border_pixels(region, border):
    """Border pixels of the region, in flood-fill discovery order."""
    return [(x, y) for x, y in region.pixels if border[y, x]]
