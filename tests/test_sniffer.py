import unittest

from image_builders import build_exif, build_jfif, build_png, pillow_image_bytes

from image_resolution import ByteReader, detect_format, is_exif, is_jfif, is_png


class TestFormatSniffer(unittest.TestCase):
    def test_detects_each_format(self) -> None:
        self.assertEqual(detect_format(ByteReader(build_exif())), "exif")
        self.assertEqual(detect_format(ByteReader(build_jfif())), "jfif")
        self.assertEqual(detect_format(ByteReader(build_png())), "png")
        self.assertEqual(detect_format(ByteReader(b"GIF89a\x01\x00\x01\x00")), "unknown")

    def test_detects_pillow_output(self) -> None:
        self.assertEqual(detect_format(ByteReader(pillow_image_bytes("JPEG"))), "jfif")
        self.assertEqual(detect_format(ByteReader(pillow_image_bytes("PNG"))), "png")

    def test_exif_requires_app1_marker(self) -> None:
        data = bytearray(build_exif())
        data[3] = 0xE0
        reader = ByteReader(data)
        self.assertFalse(is_exif(reader))
        self.assertEqual(detect_format(reader), "unknown")

    def test_short_buffers_do_not_match(self) -> None:
        for data in (b"", b"\xff", b"\xff\xd8\xff\xe1", b"\x89PN"):
            reader = ByteReader(data)
            self.assertFalse(is_exif(reader))
            self.assertFalse(is_jfif(reader))
            self.assertFalse(is_png(reader))
            self.assertEqual(detect_format(reader), "unknown")

    def test_png_needs_only_the_ascii_tag(self) -> None:
        self.assertTrue(is_png(ByteReader(b"\x00PNG")))


if __name__ == "__main__":
    unittest.main()
