"""Save and load detection parameters."""

from dataclasses import asdict, dataclass, fields

import yaml

from .errors import ConfigError

# Used as divisors; must be greater than zero.
POSITIVE_FIELDS = ("area_divisor", "corner_samples", "min_sample_step")


@dataclass(frozen=True)
class DetectionConfig:
    """Tunable constants of the detection pipeline."""
    min_area_floor: int = 50
    area_divisor: float = 15000
    corner_samples: int = 50
    min_sample_step: int = 2
    corner_angle_min: float = 0.4
    corner_angle_max: float = 1.3
    rectangle_circularity: float = 0.70
    star_fill_ratio: float = 0.55
    star_circularity: float = 0.6
    fallback_threshold: int = 127
    confidence: float = 0.9

    def min_area(self, width, height):
        """Smallest region area kept for an image of the given size."""
        return max(self.min_area_floor, width * height / self.area_divisor)


def save_config(config, filename="shapedetect.yaml"):
    """Save detection config to YAML."""
    with open(filename, "w") as f:
        yaml.dump(asdict(config), f, sort_keys=False)


def load_config(filename="shapedetect.yaml"):
    """Load detection config from YAML, falling back to defaults for missing keys."""
    with open(filename, "r") as f:
        try:
            values = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{filename}: {e}") from e
    if values is None:
        return DetectionConfig()
    if not isinstance(values, dict):
        raise ConfigError(f"{filename}: expected a mapping, got {type(values).__name__}")
    known = {f.name for f in fields(DetectionConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"{filename}: unknown keys {', '.join(unknown)}")
    _check_values(values, filename)
    return DetectionConfig(**values)


def _check_values(values, filename):
    """Raise ConfigError for values of the wrong type or out of range."""
    for f in fields(DetectionConfig):
        if f.name not in values:
            continue
        value = values[f.name]
        allowed = (int,) if f.type is int else (int, float)
        if isinstance(value, bool) or not isinstance(value, allowed):
            raise ConfigError(
                f"{filename}: {f.name} must be {f.type.__name__}, got {value!r}"
            )
        if f.name in POSITIVE_FIELDS and value <= 0:
            raise ConfigError(f"{filename}: {f.name} must be greater than 0, got {value}")
