"""Command-line interface for shapedetect."""

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .core import (
    ConfigError,
    DetectionConfig,
    ImageLoadError,
    detect_shapes,
    load_config,
    load_image,
    save_config,
)
from .evaluation import evaluate_directory
from .render import format_result, plot_detections


def _config_from_args(args):
    if not args.config:
        return DetectionConfig()
    try:
        return load_config(args.config)
    except (OSError, ConfigError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)


def run_detect(args):
    config = _config_from_args(args)
    try:
        buffer = load_image(args.image)
    except ImageLoadError as e:
        print(f"Error loading image: {e}", file=sys.stderr)
        sys.exit(1)
    result = detect_shapes(buffer, config)
    print(format_result(result))
    if args.show:
        plot_detections(buffer, result)
        plt.show()


def run_evaluate(args):
    config = _config_from_args(args)
    try:
        report = evaluate_directory(args.directory, config)
    except OSError as e:
        print(f"Error reading directory: {e}", file=sys.stderr)
        sys.exit(1)
    for r in report.results:
        predicted = r.predicted.value if r.predicted else "-"
        status = "ok" if r.correct else (r.error or "wrong")
        print(f"{r.path}: expected {r.expected.value}, got {predicted} [{status}]")
    print(f"Accuracy: {report.correct}/{report.total} ({report.accuracy * 100:.1f}%)")
    for shape_type, accuracy in sorted(report.per_type.items(), key=lambda kv: kv[0].value):
        print(f"  {shape_type.value}: {accuracy * 100:.1f}%")


def run_config(args):
    save_config(DetectionConfig(), args.output)
    print(f"Default config written to {args.output}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Detect simple shapes in images.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Detect shapes in one image.")
    detect.add_argument("image", help="Path to the image file.")
    detect.add_argument("-c", "--config", help="Path to config YAML file.")
    detect.add_argument("--show", action="store_true", help="Plot the detections.")
    detect.set_defaults(func=run_detect)

    evaluate = subparsers.add_parser("evaluate", help="Measure accuracy on labeled images.")
    evaluate.add_argument("directory", help="Directory of images named after their shape.")
    evaluate.add_argument("-c", "--config", help="Path to config YAML file.")
    evaluate.set_defaults(func=run_evaluate)

    config = subparsers.add_parser("config", help="Write the default config.")
    config.add_argument("-o", "--output", default="shapedetect.yaml",
                        help="Destination YAML file.")
    config.set_defaults(func=run_config)

    args = parser.parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
