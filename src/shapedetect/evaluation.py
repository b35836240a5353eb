"""Batch accuracy evaluation against labels encoded in file names."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from .core import ImageLoadError, ShapeType, detect_shapes, load_image

log = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".bmp", ".gif")


def expected_type(path):
    """Shape type named by the first matching token of the file name, if any."""
    for token in re.split(r"[_\-\s.]+", Path(path).name.lower()):
        try:
            return ShapeType(token)
        except ValueError:
            continue
    return None


@dataclass(frozen=True)
class ImageEvaluation:
    path: str
    expected: ShapeType
    predicted: ShapeType = None
    shape_count: int = 0
    processing_time: float = 0.0
    error: str = None

    @property
    def correct(self):
        return self.error is None and self.predicted == self.expected


@dataclass
class EvaluationReport:
    results: list = field(default_factory=list)

    @property
    def total(self):
        return len(self.results)

    @property
    def correct(self):
        return sum(1 for r in self.results if r.correct)

    @property
    def accuracy(self):
        if not self.results:
            return 0.0
        return self.correct / self.total

    @property
    def per_type(self):
        """Accuracy per expected shape type."""
        counts = {}
        for r in self.results:
            hits, seen = counts.get(r.expected, (0, 0))
            counts[r.expected] = (hits + r.correct, seen + 1)
        return {t: hits / seen for t, (hits, seen) in counts.items()}


def evaluate_image(path, expected, config=None):
    """Run detection on one labeled image; the largest shape is the prediction."""
    try:
        buffer = load_image(path)
    except ImageLoadError as e:
        log.warning("Skipping detection for %s: %s", path, e)
        return ImageEvaluation(str(path), expected, error=str(e))
    result = detect_shapes(buffer, config)
    predicted = None
    if result.shapes:
        predicted = max(result.shapes, key=lambda s: s.area).type
    return ImageEvaluation(
        path=str(path),
        expected=expected,
        predicted=predicted,
        shape_count=len(result.shapes),
        processing_time=result.processing_time,
    )


def evaluate_images(paths, config=None):
    """Evaluate every image whose file name names a shape type."""
    report = EvaluationReport()
    for path in paths:
        expected = expected_type(path)
        if expected is None:
            log.warning("No shape label in file name, skipping: %s", path)
            continue
        report.results.append(evaluate_image(path, expected, config))
    log.info("Evaluated %d images: %d correct", report.total, report.correct)
    return report


def evaluate_directory(dir_path, config=None):
    """Evaluate all images in a directory, in sorted file name order."""
    paths = sorted(
        p for p in Path(dir_path).iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_SUFFIXES
    )
    return evaluate_images(paths, config)
