import math
import struct
import unittest

from image_builders import build_exif, build_jfif, build_png

from image_resolution import (
    ByteOrderError,
    ByteReader,
    OutOfRangeError,
    Rational,
    ResolutionCandidate,
    byte_order,
    list_chunk_types,
    read_exif_resolution,
    read_jfif_resolution,
    read_png_resolution,
)


class TestJfifReader(unittest.TestCase):
    def test_reads_density_and_shifts_unit(self) -> None:
        candidate = read_jfif_resolution(ByteReader(build_jfif(unit=1, x=96, y=96)))
        self.assertEqual(candidate, ResolutionCandidate(x=96, y=96, unit=2))

    def test_aspect_ratio_only_unit(self) -> None:
        candidate = read_jfif_resolution(ByteReader(build_jfif(unit=0, x=1, y=1)))
        self.assertEqual(candidate.unit, 1)

    def test_truncated_header_raises(self) -> None:
        with self.assertRaises(OutOfRangeError):
            read_jfif_resolution(ByteReader(build_jfif()[:15]))


class TestExifReader(unittest.TestCase):
    def test_byte_order(self) -> None:
        self.assertTrue(byte_order(0x4949))
        self.assertFalse(byte_order(0x4D4D))
        with self.assertRaises(ByteOrderError):
            byte_order(0x4949 + 1)

    def test_rational_value(self) -> None:
        self.assertEqual(Rational(300, 1).value, 300.0)
        self.assertEqual(Rational(1, 4).value, 0.25)
        self.assertEqual(Rational(300, 0).value, math.inf)
        self.assertTrue(math.isnan(Rational(0, 0).value))

    def test_little_endian_ifd(self) -> None:
        candidate = read_exif_resolution(ByteReader(build_exif()))
        self.assertEqual(candidate, ResolutionCandidate(x=300.0, y=300.0, unit=2))

    def test_big_endian_ifd(self) -> None:
        data = build_exif(x=(720, 10), y=(720, 10), unit=3, order=b"MM")
        candidate = read_exif_resolution(ByteReader(data))
        self.assertEqual(candidate, ResolutionCandidate(x=72.0, y=72.0, unit=3))

    def test_other_tags_are_skipped(self) -> None:
        data = build_exif(extra_tags=(271, 274, 305))
        candidate = read_exif_resolution(ByteReader(data))
        self.assertEqual(candidate, ResolutionCandidate(x=300.0, y=300.0, unit=2))

    def test_missing_tags_stay_absent(self) -> None:
        candidate = read_exif_resolution(ByteReader(build_exif(y=None, unit=None)))
        self.assertEqual(candidate, ResolutionCandidate(x=300.0))

    def test_bad_byte_order_raises(self) -> None:
        data = bytearray(build_exif())
        data[12:14] = b"XX"
        with self.assertRaises(ByteOrderError):
            read_exif_resolution(ByteReader(data))

    def test_entry_count_past_end_raises(self) -> None:
        data = bytearray(build_exif())
        struct.pack_into("<H", data, 20, 500)
        with self.assertRaises(OutOfRangeError):
            read_exif_resolution(ByteReader(data))

    def test_rational_offset_past_end_raises(self) -> None:
        data = bytearray(build_exif())
        # value offset of the first entry (XResolution)
        struct.pack_into("<I", data, 22 + 8, 0xFFFF)
        with self.assertRaises(OutOfRangeError):
            read_exif_resolution(ByteReader(data))


class TestPngReader(unittest.TestCase):
    def test_reads_phys_and_shifts_unit(self) -> None:
        candidate = read_png_resolution(ByteReader(build_png(x=2835, y=2835, unit=1)))
        self.assertEqual(candidate, ResolutionCandidate(x=2835, y=2835, unit=4))

    def test_unspecified_unit_shifts_to_three(self) -> None:
        candidate = read_png_resolution(ByteReader(build_png(x=1, y=1, unit=0)))
        self.assertEqual(candidate.unit, 3)

    def test_missing_phys_gives_empty_candidate(self) -> None:
        candidate = read_png_resolution(ByteReader(build_png(x=None, y=None)))
        self.assertEqual(candidate, ResolutionCandidate())

    def test_chunk_types_in_order(self) -> None:
        self.assertEqual(
            list_chunk_types(ByteReader(build_png())), ["IHDR", "pHYs", "IEND"]
        )

    def test_truncated_chunk_header_raises(self) -> None:
        with self.assertRaises(OutOfRangeError):
            read_png_resolution(ByteReader(build_png(trailing=b"\x00\x00")))


if __name__ == "__main__":
    unittest.main()
