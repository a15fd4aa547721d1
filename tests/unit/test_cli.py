import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "apps" / "cli"))
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from namicon_app.cli import build_parser


class CliTests(unittest.TestCase):
    def test_initials_command(self):
        args = build_parser().parse_args(["initials", "John Doe"])
        self.assertEqual(args.command, "initials")
        self.assertEqual(args.name, "John Doe")

    def test_color_command(self):
        args = build_parser().parse_args(["color", "Ada", "--hasher", "murmur3", "--seed", "7"])
        self.assertEqual(args.command, "color")
        self.assertEqual(args.hasher, "murmur3")
        self.assertEqual(args.seed, 7)

    def test_render_command(self):
        args = build_parser().parse_args(
            ["render", "Ada Lovelace", "--out", "ada.png", "--size", "64", "--square", "--background", "#112233"]
        )
        self.assertEqual(args.command, "render")
        self.assertEqual(args.out, "ada.png")
        self.assertEqual(args.size, 64)
        self.assertTrue(args.square)
        self.assertFalse(args.raw)
        self.assertEqual(args.background, "#112233")

    def test_unknown_hasher_rejected(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["color", "Ada", "--hasher", "md5"])

    def test_doctor_command(self):
        args = build_parser().parse_args(["doctor"])
        self.assertEqual(args.command, "doctor")


if __name__ == "__main__":
    unittest.main()
