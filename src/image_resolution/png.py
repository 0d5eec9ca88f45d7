from typing import Iterator, List, NamedTuple

from .byte_reader import ByteReader
from .normalize import ResolutionCandidate

SIGNATURE_SIZE = 8
PHYS = "pHYs"
UNIT_SHIFT = 3


class Chunk(NamedTuple):
    type: str
    length: int
    data_offset: int


def iter_chunks(reader: ByteReader) -> Iterator[Chunk]:
    """
    Walk the chunk sequence that follows the PNG signature.

    Each chunk is a 4-byte big-endian length, a 4-byte type, `length` bytes
    of data and a 4-byte CRC. The walk stops once the cursor reaches the end
    of the buffer; a truncated chunk header raises OutOfRangeError. Chunk
    data is not checked against the buffer size.
    """
    pos = SIGNATURE_SIZE
    while pos < len(reader):
        length = reader.uint32(pos)
        pos += 4
        chunk_type = reader.ascii(pos, 4)
        pos += 4
        yield Chunk(chunk_type, length, pos)
        pos += length + 4


def list_chunk_types(reader: ByteReader) -> List[str]:
    """List PNG chunk types in order."""
    return [chunk.type for chunk in iter_chunks(reader)]


def read_png_resolution(reader: ByteReader) -> ResolutionCandidate:
    """
    Read pixels-per-unit X/Y and the unit specifier from the pHYs chunk.

    The unit byte is shifted by UNIT_SHIFT into the shared unit code space,
    so 1 (metre) becomes 4 and 0 (unspecified) becomes 3. The scan runs to
    the end of the buffer; if several pHYs chunks exist the last one wins.
    """
    candidate = ResolutionCandidate()
    for chunk in iter_chunks(reader):
        if chunk.type == PHYS:
            candidate = ResolutionCandidate(
                x=reader.uint32(chunk.data_offset),
                y=reader.uint32(chunk.data_offset + 4),
                unit=reader.uint8(chunk.data_offset + 8) + UNIT_SHIFT,
            )
    return candidate
