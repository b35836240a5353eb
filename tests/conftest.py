"""Shared fixtures for building synthetic test images."""

import numpy as np
import pytest

from shapedetect.core import buffer_from_array


def to_buffer(gray):
    """Wrap an HxW intensity array as an opaque RGBA buffer."""
    alpha = np.full(gray.shape, 255, dtype=np.uint8)
    return buffer_from_array(np.dstack([gray, gray, gray, alpha]))


@pytest.fixture
def framed():
    """White canvas with a 1px mid-gray frame, so Otsu splits between 128 and 255."""
    def make(width, height):
        gray = np.full((height, width), 255, dtype=np.uint8)
        gray[0, :] = gray[-1, :] = gray[:, 0] = gray[:, -1] = 128
        return gray
    return make


@pytest.fixture
def draw_disk():
    def draw(gray, cx, cy, r, value=0):
        yy, xx = np.mgrid[0:gray.shape[0], 0:gray.shape[1]]
        gray[(xx - cx) ** 2 + (yy - cy) ** 2 <= r * r] = value
        return gray
    return draw


@pytest.fixture
def as_buffer():
    return to_buffer
