import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from imageclock_renderer import RGBA, FontResource, ImageRenderer, RenderError


def _band_bbox(image, top, bottom):
    return image.getchannel("A").crop((0, top, image.width, bottom)).getbbox()


class LayoutTests(unittest.TestCase):
    def test_four_lines_equally_spaced(self):
        placed = ImageRenderer.layout(2560, 1440, ["a", "b", "c", "d"])
        self.assertEqual([p.y for p in placed], [288.0, 576.0, 864.0, 1152.0])
        self.assertEqual({p.x for p in placed}, {1280})
        self.assertEqual([p.text for p in placed], ["a", "b", "c", "d"])
        self.assertEqual([p.slot for p in placed], [0, 1, 2, 3])

    def test_single_line_is_vertically_centered(self):
        placed = ImageRenderer.layout(300, 200, ["only"])
        self.assertEqual(len(placed), 1)
        self.assertEqual(placed[0].y, 100.0)

    def test_rejects_empty_lines(self):
        with self.assertRaises(RenderError):
            ImageRenderer.layout(100, 100, [])

    def test_rejects_non_positive_canvas(self):
        for width, height in ((0, 100), (100, 0), (-5, 10)):
            with self.assertRaises(RenderError):
                ImageRenderer.layout(width, height, ["x"])


class RenderTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.renderer = ImageRenderer(FontResource.load())

    def test_canvas_dimensions_match_request(self):
        image = self.renderer.render(640, 360, RGBA(255, 255, 255), ["short"])
        self.assertEqual(image.size, (640, 360))
        self.assertEqual(image.mode, "RGBA")

    def test_long_text_does_not_change_canvas(self):
        image = self.renderer.render(640, 360, RGBA(255, 0, 0), ["x" * 500, "y"])
        self.assertEqual(image.size, (640, 360))

    def test_background_is_transparent(self):
        image = self.renderer.render(640, 360, RGBA(0, 0, 255), ["hello"])
        self.assertEqual(image.getpixel((0, 0)), (0, 0, 0, 0))
        self.assertEqual(image.getpixel((639, 359)), (0, 0, 0, 0))

    def test_text_lands_in_each_row(self):
        image = self.renderer.render(2560, 1440, RGBA(0, 255, 0), ["cam1", "two", "three", "four"])
        for center in (288, 576, 864, 1152):
            bbox = _band_bbox(image, center - 100, center + 100)
            self.assertIsNotNone(bbox, f"no ink near y={center}")

        # Nothing drawn between rows or at the edges.
        self.assertIsNone(_band_bbox(image, 0, 200))
        self.assertIsNone(_band_bbox(image, 1250, 1440))

    def test_text_is_horizontally_centered(self):
        image = self.renderer.render(2560, 1440, RGBA(0, 255, 0), ["cam1"])
        left, _, right, _ = image.getchannel("A").getbbox()
        self.assertAlmostEqual((left + right) / 2, 1280, delta=15)

    def test_solid_pixels_use_requested_color(self):
        image = self.renderer.render(1280, 720, RGBA(0, 255, 0, 255), ["cam1"])
        solid = [c for _, c in image.getcolors(maxcolors=1 << 20) if c[3] == 255]
        self.assertTrue(solid)
        self.assertEqual(set(solid), {(0, 255, 0, 255)})

    def test_render_is_deterministic(self):
        lines = ["cam1", "start_time: 0", "time: x", "count: 1"]
        a = self.renderer.render(800, 450, RGBA(255, 255, 255), lines)
        b = self.renderer.render(800, 450, RGBA(255, 255, 255), lines)
        self.assertEqual(a.tobytes(), b.tobytes())


if __name__ == "__main__":
    unittest.main()
