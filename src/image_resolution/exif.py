import math
from dataclasses import dataclass
from typing import Optional

from .byte_reader import ByteReader
from .errors import ByteOrderError
from .normalize import ResolutionCandidate

# TIFF header begins after SOI (2), APP1 marker (2), length (2) and "Exif\0\0" (6).
TIFF_START = 12
IFD_OFFSET_POSITION = 16
IFD_ENTRY_SIZE = 12

LITTLE_ENDIAN_MARKER = 0x4949  # "II"
BIG_ENDIAN_MARKER = 0x4D4D  # "MM"

TAG_X_RESOLUTION = 282
TAG_Y_RESOLUTION = 283
TAG_RESOLUTION_UNIT = 296


@dataclass(frozen=True)
class Rational:
    numerator: int
    denominator: int

    @property
    def value(self) -> float:
        """numerator / denominator; a zero denominator gives inf or nan."""
        if self.denominator == 0:
            return math.nan if self.numerator == 0 else math.inf
        return self.numerator / self.denominator


def byte_order(marker: int) -> bool:
    """Return True for little-endian ('II'), False for big-endian ('MM')."""
    if marker == LITTLE_ENDIAN_MARKER:
        return True
    if marker == BIG_ENDIAN_MARKER:
        return False
    raise ByteOrderError(marker)


def read_rational(reader: ByteReader, entry: int, little_endian: bool) -> Rational:
    """Follow the value offset of the IFD entry at `entry` to its RATIONAL."""
    start = reader.uint32(entry + 8, little_endian) + TIFF_START
    return Rational(
        numerator=reader.uint32(start, little_endian),
        denominator=reader.uint32(start + 4, little_endian),
    )


def read_exif_resolution(reader: ByteReader) -> ResolutionCandidate:
    """
    Scan IFD0 of the Exif TIFF block for XResolution, YResolution and
    ResolutionUnit.

    Offsets stored in the TIFF block are relative to its header, so
    TIFF_START is added to each of them. Tags other than the three above are
    skipped. Raises ByteOrderError or OutOfRangeError on malformed input.
    """
    little_endian = byte_order(reader.uint16(TIFF_START))

    ifd_start = reader.uint32(IFD_OFFSET_POSITION, little_endian) + TIFF_START
    count = reader.uint16(ifd_start, little_endian)

    x: Optional[float] = None
    y: Optional[float] = None
    unit: Optional[int] = None

    entry = ifd_start + 2
    for _ in range(count):
        tag = reader.uint16(entry, little_endian)
        if tag == TAG_X_RESOLUTION:
            x = read_rational(reader, entry, little_endian).value
        elif tag == TAG_Y_RESOLUTION:
            y = read_rational(reader, entry, little_endian).value
        elif tag == TAG_RESOLUTION_UNIT:
            unit = reader.uint16(entry + 8, little_endian)
        entry += IFD_ENTRY_SIZE

    return ResolutionCandidate(x=x, y=y, unit=unit)
