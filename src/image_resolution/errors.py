class ResolutionError(Exception):
    """Base error raised by the format-specific resolution readers."""


class OutOfRangeError(ResolutionError, IndexError):
    """A read touched bytes past the end of the buffer."""

    def __init__(self, offset: int, size: int, length: int) -> None:
        super().__init__(
            f"Read of {size} byte(s) at offset {offset} is outside a buffer of {length} byte(s)."
        )
        self.offset = offset
        self.size = size
        self.length = length


class ByteOrderError(ResolutionError, ValueError):
    """The TIFF byte-order marker is neither 'II' nor 'MM'."""

    def __init__(self, marker: int) -> None:
        super().__init__(f"Bad TIFF byte order marker: 0x{marker:04x}")
        self.marker = marker
