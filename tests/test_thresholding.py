"""Tests for grayscale conversion, Otsu thresholding and binarization."""

import numpy as np
import pytest

from shapedetect.core import (
    InvalidInput,
    PixelBuffer,
    binarize,
    compute_histogram,
    otsu_threshold,
    to_grayscale,
)


def test_to_grayscale_weights_and_rounding():
    data = np.array([
        255, 0, 0, 255,
        0, 255, 0, 255,
        0, 0, 255, 0,
        255, 255, 255, 255,
    ], dtype=np.uint8)
    gray = to_grayscale(PixelBuffer(data, 2, 2))
    assert gray.shape == (2, 2)
    assert gray.dtype == np.uint8
    assert gray.tolist() == [[76, 150], [29, 255]]


def test_to_grayscale_accepts_bytes():
    gray = to_grayscale(PixelBuffer(bytes([10, 10, 10, 255] * 6), 3, 2))
    assert gray.tolist() == [[10, 10, 10], [10, 10, 10]]


def test_to_grayscale_rejects_wrong_length():
    with pytest.raises(InvalidInput):
        to_grayscale(PixelBuffer(np.zeros(15, dtype=np.uint8), 2, 2))


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 2)])
def test_to_grayscale_rejects_non_positive_dimensions(width, height):
    with pytest.raises(InvalidInput):
        to_grayscale(PixelBuffer(np.zeros(0, dtype=np.uint8), width, height))


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInput, ValueError)


def test_compute_histogram_counts_every_pixel():
    gray = np.array([[0, 0, 5], [255, 5, 5]], dtype=np.uint8)
    hist = compute_histogram(gray)
    assert len(hist) == 256
    assert hist.sum() == 6
    assert hist[0] == 2 and hist[5] == 3 and hist[255] == 1


def test_otsu_threshold_two_levels_picks_darker_level():
    gray = np.array([10] * 50 + [200] * 50, dtype=np.uint8)
    assert otsu_threshold(gray) == 10


def test_otsu_threshold_three_levels():
    gray = np.full((100, 100), 255, dtype=np.uint8)
    gray[0, :] = gray[-1, :] = gray[:, 0] = gray[:, -1] = 128
    gray[30:70, 30:70] = 0
    assert otsu_threshold(gray) == 128


def test_otsu_threshold_ties_keep_smallest():
    gray = np.array([0, 100, 200], dtype=np.uint8)
    assert otsu_threshold(gray) == 0


@pytest.mark.parametrize("value", [0, 42, 255])
def test_otsu_threshold_uniform_image_falls_back(value):
    gray = np.full((8, 8), value, dtype=np.uint8)
    assert otsu_threshold(gray) == 127
    assert otsu_threshold(gray, fallback=50) == 50


def test_binarize_marks_strictly_darker_pixels():
    gray = np.array([[0, 99, 100, 101, 255]], dtype=np.uint8)
    mask = binarize(gray, 100)
    assert mask.dtype == np.uint8
    assert mask.tolist() == [[255, 255, 0, 0, 0]]


def test_to_grayscale_rejects_single_channel_buffer():
    with pytest.raises(InvalidInput):
        to_grayscale(PixelBuffer(np.zeros(16, dtype=np.uint8), 2, 2, channels=1))
