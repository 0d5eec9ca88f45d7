import logging
import math
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 72.0

# Unit codes shared by every reader. JFIF codes are shifted by +1 and PNG
# codes by +3 before they get here.
UNIT_INCH = 2
UNIT_CENTIMETER = 3
UNIT_METER = 4

CM_PER_INCH = 2.54
INCHES_PER_METER = 39.37007874015748


@dataclass(frozen=True)
class ResolutionCandidate:
    """
    Raw X/Y resolution and unit code as found in the image metadata.

    Any field is None when the corresponding tag or chunk was not present.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    unit: Optional[int] = None


def _non_finite(value: Optional[float]) -> bool:
    return value is not None and not math.isfinite(value)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def to_pixels_per_inch(value: Optional[float], unit: Optional[int]) -> Optional[float]:
    """
    Convert a per-unit pixel count into pixels per inch.

    Returns None when the value is missing or non-finite, when the unit is
    missing, or when the unit code has no mapping.
    """
    if value is None or not math.isfinite(value):
        return None
    if unit is None:
        return None
    if unit == UNIT_INCH:
        return float(value)
    if unit == UNIT_CENTIMETER:
        return value * CM_PER_INCH
    if unit == UNIT_METER:
        return _round_half_up(value / INCHES_PER_METER)
    return None


def normalize_resolution(candidate: ResolutionCandidate) -> float:
    """
    Collapse a resolution candidate into a single pixels-per-inch value.

    A non-finite X or Y (e.g. a rational with a zero denominator) yields the
    default without a warning. Non-square pixels are logged and yield the
    default, as does anything that does not map to a positive finite number.
    """
    x = candidate.x
    y = candidate.y
    if _non_finite(x) or _non_finite(y):
        return DEFAULT_RESOLUTION
    if x is not None and y is not None and x != y:
        logger.warning(
            "Non-square pixels detected (x=%s, y=%s). Falling back to default resolution.", x, y
        )
        return DEFAULT_RESOLUTION

    ppi = to_pixels_per_inch(x, candidate.unit)
    if ppi is None or not math.isfinite(ppi) or ppi <= 0:
        return DEFAULT_RESOLUTION
    return ppi
