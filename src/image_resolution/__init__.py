from .byte_reader import ByteReader, to_byte_reader
from .errors import ByteOrderError, OutOfRangeError, ResolutionError
from .exif import Rational, byte_order, read_exif_resolution, read_rational
from .jfif import read_jfif_resolution
from .normalize import (
    DEFAULT_RESOLUTION,
    ResolutionCandidate,
    normalize_resolution,
    to_pixels_per_inch,
)
from .png import Chunk, iter_chunks, list_chunk_types, read_png_resolution
from .resolution import ResolutionReport, get_image_resolution, inspect_resolution
from .sniffer import ImageFormat, detect_format, is_exif, is_jfif, is_png

__all__ = [
    "ByteOrderError",
    "ByteReader",
    "Chunk",
    "DEFAULT_RESOLUTION",
    "ImageFormat",
    "OutOfRangeError",
    "Rational",
    "ResolutionCandidate",
    "ResolutionError",
    "ResolutionReport",
    "byte_order",
    "detect_format",
    "get_image_resolution",
    "inspect_resolution",
    "is_exif",
    "is_jfif",
    "is_png",
    "iter_chunks",
    "list_chunk_types",
    "normalize_resolution",
    "read_exif_resolution",
    "read_jfif_resolution",
    "read_png_resolution",
    "read_rational",
    "to_byte_reader",
    "to_pixels_per_inch",
]
