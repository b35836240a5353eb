"""Tests for batch evaluation against file-name labels."""

import pytest
from PIL import Image

from shapedetect.core import ShapeType
from shapedetect.evaluation import evaluate_directory, evaluate_images, expected_type


@pytest.mark.parametrize("name,expected", [
    ("circle.png", ShapeType.CIRCLE),
    ("Star_03.png", ShapeType.STAR),
    ("big-pentagon-2.jpg", ShapeType.PENTAGON),
    ("test triangle.bmp", ShapeType.TRIANGLE),
    ("squares.png", None),
    ("blank.png", None),
])
def test_expected_type(name, expected):
    assert expected_type(name) == expected


@pytest.fixture
def labeled_dir(tmp_path, framed, draw_disk):
    Image.fromarray(draw_disk(framed(100, 100), 50, 50, 30)).save(tmp_path / "circle_1.png")
    square = framed(100, 100)
    square[30:70, 30:70] = 0
    Image.fromarray(square).save(tmp_path / "rectangle_1.png")
    Image.fromarray(framed(100, 100)).save(tmp_path / "unlabeled.png")
    (tmp_path / "star_broken.png").write_bytes(b"not an image")
    (tmp_path / "notes.txt").write_text("circle")
    return tmp_path


def test_evaluate_directory(labeled_dir):
    report = evaluate_directory(labeled_dir)
    assert [r.expected for r in report.results] == [
        ShapeType.CIRCLE, ShapeType.RECTANGLE, ShapeType.STAR,
    ]
    circle, rectangle, star = report.results
    assert circle.correct and circle.predicted == ShapeType.CIRCLE
    assert circle.shape_count == 1
    assert not rectangle.correct and rectangle.predicted == ShapeType.TRIANGLE
    assert not star.correct and star.error is not None
    assert report.total == 3
    assert report.correct == 1
    assert report.accuracy == pytest.approx(1 / 3)
    assert report.per_type == {
        ShapeType.CIRCLE: 1.0,
        ShapeType.RECTANGLE: 0.0,
        ShapeType.STAR: 0.0,
    }


def test_image_without_shapes_predicts_nothing(tmp_path, framed):
    path = tmp_path / "circle_empty.png"
    Image.fromarray(framed(40, 40)).save(path)
    report = evaluate_images([path])
    assert report.results[0].predicted is None
    assert report.results[0].shape_count == 0
    assert report.accuracy == 0.0


def test_empty_report():
    report = evaluate_images([])
    assert report.total == 0
    assert report.accuracy == 0.0
    assert report.per_type == {}
