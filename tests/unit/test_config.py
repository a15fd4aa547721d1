import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from namicon_core.config import AppConfig, load_config, save_config
from namicon_renderer.hashing import DefaultHasher, Murmur3Hasher
from namicon_renderer.models import GeneratorConfig


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.generator.output_size, 100)
            self.assertTrue(cfg.generator.round)
            self.assertEqual(cfg.hasher.name, "default")

    def test_load_default_when_unreadable(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.generator.output_size = 64
            cfg.generator.round = False
            cfg.hasher.name = "murmur3"
            cfg.hasher.seed = 99
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.generator.output_size, 64)
            self.assertFalse(reloaded.generator.round)
            self.assertEqual(reloaded.hasher.seed, 99)

    def test_migrate_v1_shape(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            old = {"output_size": 48, "lightness": 0.5, "hasher": "murmur3", "seed": 5}
            path.write_text(json.dumps(old), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 2)
            self.assertEqual(cfg.generator.output_size, 48)
            self.assertEqual(cfg.generator.lightness, 0.5)
            self.assertEqual(cfg.hasher.name, "murmur3")
            self.assertEqual(cfg.hasher.seed, 5)

    def test_normalization(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": 2,
                "generator": {"output_size": 0, "saturation": 3, "lightness": -1, "font_size_factor": 0},
                "hasher": {"name": "sha1", "seed": -1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.generator.output_size, 1)
            self.assertEqual(cfg.generator.saturation, 1.0)
            self.assertEqual(cfg.generator.lightness, 0.0)
            self.assertEqual(cfg.generator.font_size_factor, 2.5)
            self.assertEqual(cfg.hasher.name, "default")
            self.assertEqual(cfg.hasher.seed, 0xFFFFFFFF)

    def test_log_level_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"config_version": 2, "diagnostics": {"log_level": "debug"}}), encoding="utf-8")
            self.assertEqual(load_config(path).diagnostics.log_level, "DEBUG")
            path.write_text(json.dumps({"config_version": 2, "diagnostics": {"log_level": "chatty"}}), encoding="utf-8")
            self.assertEqual(load_config(path).diagnostics.log_level, "INFO")

    def test_bridges_to_renderer(self):
        cfg = AppConfig()
        cfg.generator.output_size = 30
        gen = cfg.to_generator_config()
        self.assertIsInstance(gen, GeneratorConfig)
        self.assertEqual(gen.render_size, 120)
        self.assertIsInstance(cfg.build_hasher(), DefaultHasher)
        cfg.hasher.name = "murmur3"
        self.assertIsInstance(cfg.build_hasher(), Murmur3Hasher)


class GeneratorConfigTests(unittest.TestCase):
    def test_derived_sizes(self):
        cfg = GeneratorConfig(output_size=50, render_size_factor=3, font_size_factor=2.0)
        self.assertEqual(cfg.render_size, 150)
        self.assertEqual(cfg.font_size, 75.0)

    def test_set_default_size(self):
        cfg = GeneratorConfig(render_size_factor=9, font_size_factor=1.0)
        cfg.set_default_size(20)
        self.assertEqual((cfg.output_size, cfg.render_size, cfg.font_size), (20, 80, 32.0))

    def test_snapshot_is_independent(self):
        cfg = GeneratorConfig()
        snap = cfg.snapshot()
        cfg.output_size = 10
        self.assertEqual(snap.output_size, 100)


if __name__ == "__main__":
    unittest.main()
