import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .byte_reader import ByteReader, to_byte_reader
from .exif import read_exif_resolution
from .jfif import read_jfif_resolution
from .normalize import (
    DEFAULT_RESOLUTION,
    ResolutionCandidate,
    normalize_resolution,
    to_pixels_per_inch,
)
from .png import read_png_resolution
from .sniffer import ImageFormat, detect_format

logger = logging.getLogger(__name__)

READERS: Dict[str, Callable[[ByteReader], ResolutionCandidate]] = {
    "exif": read_exif_resolution,
    "jfif": read_jfif_resolution,
    "png": read_png_resolution,
}


@dataclass(frozen=True)
class ResolutionReport:
    """
    What was detected and read on the way to the final resolution.

    `mapped_resolution` is X converted through the unit code to pixels per
    inch, before the square-pixel check and the default fallback; None when
    the unit has no mapping or X is missing.
    """

    format: ImageFormat
    resolution: float
    candidate: ResolutionCandidate = field(default_factory=ResolutionCandidate)
    mapped_resolution: Optional[float] = None
    error: Optional[str] = None


def inspect_resolution(data: Any) -> ResolutionReport:
    """
    Run the full detection pipeline and report each stage.

    Never raises: any failure while classifying or reading the buffer is
    logged at debug level and reported with the default resolution.
    """
    reader = to_byte_reader(data)
    image_format: ImageFormat = "unknown"
    try:
        image_format = detect_format(reader)
        read = READERS.get(image_format)
        if read is None:
            return ResolutionReport(format=image_format, resolution=DEFAULT_RESOLUTION)
        candidate = read(reader)
    except Exception as exc:
        logger.debug("Could not read %s resolution metadata: %s", image_format, exc)
        return ResolutionReport(
            format=image_format,
            resolution=DEFAULT_RESOLUTION,
            error=str(exc) or exc.__class__.__name__,
        )
    return ResolutionReport(
        format=image_format,
        resolution=normalize_resolution(candidate),
        candidate=candidate,
        mapped_resolution=to_pixels_per_inch(candidate.x, candidate.unit),
    )


def get_image_resolution(data: Any) -> float:
    """
    Return the resolution of an encoded JPEG or PNG image in pixels per inch.

    `data` is the encoded file content in any bytes-like form. Images without
    usable resolution metadata, unknown formats and malformed buffers all
    give DEFAULT_RESOLUTION (72).
    """
    return inspect_resolution(data).resolution
