"""Draw detection results with matplotlib and format them as text."""

import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .core import ShapeType, flat_bytes

SHAPE_COLORS = {
    ShapeType.CIRCLE: "red",
    ShapeType.TRIANGLE: "lime",
    ShapeType.RECTANGLE: "blue",
    ShapeType.PENTAGON: "orange",
    ShapeType.STAR: "magenta",
}


def shape_patches(result):
    """Return one unfilled rectangle patch per detected shape."""
    rects = []
    for shape in result.shapes:
        box = shape.bounding_box
        rect = patches.Rectangle(
            (box.x, box.y), box.width, box.height,
            fill=False, edgecolor=SHAPE_COLORS[shape.type], linewidth=2,
        )
        rects.append(rect)
    return rects


def plot_detections(buffer, result, ax=None):
    """Show the image with a labeled box around every detected shape."""
    if ax is None:
        _, ax = plt.subplots()
    img = flat_bytes(buffer.data).reshape(buffer.height, buffer.width, buffer.channels)
    ax.imshow(img)
    for shape, rect in zip(result.shapes, shape_patches(result)):
        ax.add_patch(rect)
        box = shape.bounding_box
        ax.text(box.x, box.y - 2, shape.type.value, color=SHAPE_COLORS[shape.type], fontsize=8)
    ax.set_title(f"{len(result.shapes)} shapes ({result.processing_time:.2f}ms)")
    ax.axis("off")
    return ax


def format_result(result):
    """Plain-text summary of a detection result."""
    lines = [
        f"Processing Time: {result.processing_time:.2f}ms",
        f"Shapes Found: {len(result.shapes)}",
    ]
    if not result.shapes:
        lines.append("No shapes detected.")
        return "\n".join(lines)
    lines.append("Detected Shapes:")
    for shape in result.shapes:
        lines.append(
            f"  {shape.type.value}: confidence {shape.confidence * 100:.1f}%, "
            f"center ({shape.center.x:.1f}, {shape.center.y:.1f}), "
            f"area {shape.area:.1f}px²"
        )
    return "\n".join(lines)
