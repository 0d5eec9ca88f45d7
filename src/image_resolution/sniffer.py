from typing import Literal

from .byte_reader import ByteReader
from .errors import OutOfRangeError

ImageFormat = Literal["exif", "jfif", "png", "unknown"]

APP1_MARKER = 0xFFE1
EXIF_MARKER = 0x45786966  # "Exif"
JFIF_MARKER = 0x4A464946  # "JFIF"
PNG_MAGIC = "PNG"


def is_exif(reader: ByteReader) -> bool:
    """JPEG whose first segment is an APP1 carrying an Exif header."""
    try:
        return reader.uint16(2) == APP1_MARKER and reader.uint32(6) == EXIF_MARKER
    except OutOfRangeError:
        return False


def is_jfif(reader: ByteReader) -> bool:
    try:
        return reader.uint32(6) == JFIF_MARKER
    except OutOfRangeError:
        return False


def is_png(reader: ByteReader) -> bool:
    try:
        return reader.ascii(1, 3) == PNG_MAGIC
    except OutOfRangeError:
        return False


def detect_format(reader: ByteReader) -> ImageFormat:
    """Classify the buffer by its magic bytes; the first matching check wins."""
    if is_exif(reader):
        return "exif"
    if is_jfif(reader):
        return "jfif"
    if is_png(reader):
        return "png"
    return "unknown"
