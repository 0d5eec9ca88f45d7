import struct
from typing import Any, Dict, Tuple

from .errors import OutOfRangeError

_STRUCTS: Dict[Tuple[int, bool], struct.Struct] = {
    (1, False): struct.Struct(">B"),
    (1, True): struct.Struct("<B"),
    (2, False): struct.Struct(">H"),
    (2, True): struct.Struct("<H"),
    (4, False): struct.Struct(">I"),
    (4, True): struct.Struct("<I"),
}


class ByteReader:
    """
    Read-only, random-access view over a byte buffer.

    The underlying memory is wrapped in a memoryview, never copied. Every
    read is bounds-checked and raises OutOfRangeError instead of returning
    partial data. Multi-byte reads default to big-endian.
    """

    __slots__ = ("_view",)

    def __init__(self, data: Any) -> None:
        self._view = memoryview(data).cast("B")

    def __len__(self) -> int:
        return self._view.nbytes

    def _check(self, offset: int, size: int) -> None:
        if offset < 0 or offset + size > self._view.nbytes:
            raise OutOfRangeError(offset, size, self._view.nbytes)

    def _unpack(self, offset: int, size: int, little_endian: bool) -> int:
        self._check(offset, size)
        return _STRUCTS[(size, little_endian)].unpack_from(self._view, offset)[0]

    def uint8(self, offset: int) -> int:
        return self._unpack(offset, 1, False)

    def uint16(self, offset: int, little_endian: bool = False) -> int:
        return self._unpack(offset, 2, little_endian)

    def uint32(self, offset: int, little_endian: bool = False) -> int:
        return self._unpack(offset, 4, little_endian)

    def ascii(self, offset: int, length: int) -> str:
        """Decode `length` bytes one character per byte."""
        self._check(offset, length)
        return self._view[offset : offset + length].tobytes().decode("latin-1")


def to_byte_reader(data: Any) -> Any:
    """
    Wrap a bytes-like object in a ByteReader without copying it.

    Accepts bytes, bytearray, memoryview, array.array, mmap and anything else
    that exposes the buffer protocol. A ByteReader is returned unchanged, and
    so is any object that cannot be viewed as a buffer; reading from the
    latter fails later, where the caller already handles failures.
    """
    if isinstance(data, ByteReader):
        return data
    try:
        return ByteReader(data)
    except (TypeError, ValueError):
        return data
