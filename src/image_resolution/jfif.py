from .byte_reader import ByteReader
from .normalize import ResolutionCandidate

UNIT_OFFSET = 13
X_DENSITY_OFFSET = 14
Y_DENSITY_OFFSET = 16


def read_jfif_resolution(reader: ByteReader) -> ResolutionCandidate:
    """
    Read the density fields of a JFIF APP0 header at their fixed offsets.

    The JFIF unit byte (0 = aspect ratio only, 1 = inch, 2 = cm) is shifted
    by one into the shared unit code space.
    """
    unit = reader.uint8(UNIT_OFFSET) + 1
    x = reader.uint16(X_DENSITY_OFFSET)
    y = reader.uint16(Y_DENSITY_OFFSET)
    return ResolutionCandidate(x=x, y=y, unit=unit)
