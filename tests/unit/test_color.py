import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from namicon_renderer.color import ColorMapper, hash_to_hue, hsl_to_rgba
from namicon_renderer.errors import InvalidArgumentError
from namicon_renderer.hashing import Murmur3Hasher
from namicon_renderer.models import Color


class FixedHasher:
    def __init__(self, value):
        self.value = value

    def hash(self, text):
        return self.value


class HslTests(unittest.TestCase):
    def test_achromatic(self):
        for hue in (0.0, 0.25, 0.5, 0.9):
            c = hsl_to_rgba(hue, 0.0, 0.7)
            self.assertEqual(c.r, c.g)
            self.assertEqual(c.g, c.b)
        # truncation, not rounding: 0.7 * 255 = 178.5
        self.assertEqual(hsl_to_rgba(0.3, 0.0, 0.7), Color(178, 178, 178, 255))

    def test_lightness_extremes(self):
        self.assertEqual(hsl_to_rgba(0.6, 1.0, 0.0)[:3], (0, 0, 0))
        self.assertEqual(hsl_to_rgba(0.6, 1.0, 1.0)[:3], (255, 255, 255))

    def test_primary_red(self):
        self.assertEqual(hsl_to_rgba(0.0, 1.0, 0.5), Color(255, 0, 0, 255))

    def test_alpha(self):
        self.assertEqual(hsl_to_rgba(0.0, 1.0, 0.5).a, 255)
        self.assertEqual(hsl_to_rgba(0.0, 1.0, 0.5, a=0.0).a, 0)

    def test_channels_in_range(self):
        for i in range(100):
            for channel in hsl_to_rgba(i / 100, 0.8, 0.6):
                self.assertGreaterEqual(channel, 0)
                self.assertLessEqual(channel, 255)


class MapperTests(unittest.TestCase):
    def test_hue_normalization(self):
        self.assertEqual(hash_to_hue(0), 0.0)
        self.assertLess(hash_to_hue(0xFFFFFFFF), 1.0)
        self.assertEqual(hash_to_hue(1 << 31), 0.5)

    def test_uses_hasher(self):
        mapper = ColorMapper(FixedHasher(0), saturation=1.0, lightness=0.5)
        self.assertEqual(mapper.color_for("anything"), Color(255, 0, 0, 255))

    def test_deterministic(self):
        mapper = ColorMapper(Murmur3Hasher(seed=7), saturation=1.0, lightness=0.7)
        self.assertEqual(mapper.color_for("John Doe"), mapper.color_for("John Doe"))
        other = ColorMapper(Murmur3Hasher(seed=7), saturation=1.0, lightness=0.7)
        self.assertEqual(mapper.color_for("John Doe"), other.color_for("John Doe"))


class HexTests(unittest.TestCase):
    def test_parse(self):
        self.assertEqual(Color.from_hex("#0A0F1D"), Color(10, 15, 29, 255))
        self.assertEqual(Color.from_hex("35D9FF80"), Color(0x35, 0xD9, 0xFF, 0x80))

    def test_format(self):
        self.assertEqual(Color(10, 15, 29).to_hex(), "#0A0F1DFF")

    def test_invalid(self):
        for bad in ("#12345", "#GGGGGG", "", "#-1-1-1", "#+1+2+3", "# 1 2 3"):
            with self.assertRaises(InvalidArgumentError):
                Color.from_hex(bad)


if __name__ == "__main__":
    unittest.main()
