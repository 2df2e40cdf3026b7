import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from imageclock_renderer import FontResource, RenderError


class FontResourceTests(unittest.TestCase):
    def test_default_font_is_bundled(self):
        font = FontResource.load()
        self.assertTrue(font.bundled)
        self.assertGreater(font.face(85).size, 0)

    def test_faces_are_cached_per_size(self):
        font = FontResource.load()
        self.assertIs(font.face(40), font.face(40))
        self.assertIsNot(font.face(40), font.face(41))

    def test_missing_file_is_render_error(self):
        with self.assertRaises(RenderError):
            FontResource.load("/nonexistent/imageclock/font.otf")

    def test_garbage_bytes_are_render_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            bogus = Path(tmp) / "broken.ttf"
            bogus.write_bytes(b"this is not a font")
            with self.assertRaises(RenderError):
                FontResource.load(bogus)

    def test_non_positive_size_is_render_error(self):
        with self.assertRaises(RenderError):
            FontResource.load().face(0)


if __name__ == "__main__":
    unittest.main()
