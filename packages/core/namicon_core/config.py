"""Persistent generator settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from namicon_renderer.hashing import DEFAULT_HASHER_NAME, UINT32_MASK, Hasher, get_hasher, list_hashers
from namicon_renderer.models import (
    DEFAULT_FONT_SIZE_FACTOR,
    DEFAULT_OUTPUT_SIZE,
    DEFAULT_RENDER_SIZE_FACTOR,
    GeneratorConfig,
)

logger = logging.getLogger("namicon.config")

CONFIG_VERSION = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# v1 files kept every generator field at the top level.
_V1_GENERATOR_KEYS = (
    "output_size",
    "render_size_factor",
    "font_size_factor",
    "font_family",
    "saturation",
    "lightness",
    "round",
    "fallback_text",
)


@dataclass
class GeneratorSettings:
    output_size: int = DEFAULT_OUTPUT_SIZE
    render_size_factor: int = DEFAULT_RENDER_SIZE_FACTOR
    font_size_factor: float = DEFAULT_FONT_SIZE_FACTOR
    font_family: str = ""
    saturation: float = 1.0
    lightness: float = 0.7
    round: bool = True
    fallback_text: str = ""


@dataclass
class HasherSettings:
    name: str = DEFAULT_HASHER_NAME
    seed: int = 0


@dataclass
class OutputSettings:
    format: str = "PNG"
    matte: str = "#FFFFFF"


@dataclass
class DiagnosticsSettings:
    keep_log_files: int = 7
    log_to_console: bool = False
    log_level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    generator: GeneratorSettings = field(default_factory=GeneratorSettings)
    hasher: HasherSettings = field(default_factory=HasherSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    diagnostics: DiagnosticsSettings = field(default_factory=DiagnosticsSettings)

    def to_generator_config(self) -> GeneratorConfig:
        return GeneratorConfig(**asdict(self.generator))

    def build_hasher(self) -> Hasher:
        return get_hasher(self.hasher.name, self.hasher.seed)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Namicon" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Namicon" / "config.json"
    return Path.home() / ".config" / "namicon" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in (raw or {}).items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _clamp01(value: Any, default: float) -> float:
    try:
        return float(max(0.0, min(1.0, float(value))))
    except (TypeError, ValueError):
        return default


def _normalize_generator(cfg: AppConfig) -> None:
    gen = cfg.generator
    gen.output_size = max(1, int(gen.output_size))
    gen.render_size_factor = max(1, int(gen.render_size_factor))
    factor = float(gen.font_size_factor)
    gen.font_size_factor = factor if factor > 0 else DEFAULT_FONT_SIZE_FACTOR
    gen.saturation = _clamp01(gen.saturation, 1.0)
    gen.lightness = _clamp01(gen.lightness, 0.7)
    gen.round = bool(gen.round)
    gen.font_family = str(gen.font_family or "")
    gen.fallback_text = str(gen.fallback_text or "")


def _normalize_hasher(cfg: AppConfig) -> None:
    if cfg.hasher.name not in list_hashers():
        logger.warning("unknown hasher %r, using %r", cfg.hasher.name, DEFAULT_HASHER_NAME)
        cfg.hasher.name = DEFAULT_HASHER_NAME
    cfg.hasher.seed = int(cfg.hasher.seed) & UINT32_MASK


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, int(cfg.diagnostics.keep_log_files))
    level = str(cfg.diagnostics.log_level or "").upper()
    if level not in LOG_LEVELS:
        logger.warning("unknown log level %r, using INFO", cfg.diagnostics.log_level)
        level = "INFO"
    cfg.diagnostics.log_level = level


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        generator = dict(data.get("generator", {}) or {})
        for key in _V1_GENERATOR_KEYS:
            if key in data:
                generator.setdefault(key, data.pop(key))
        data["generator"] = generator
        hasher = data.get("hasher")
        if isinstance(hasher, str):
            data["hasher"] = {"name": hasher, "seed": data.pop("seed", 0)}
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning("unreadable config at %s, using defaults", path, exc_info=True)
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        generator=_merge(GeneratorSettings, data.get("generator", {})),
        hasher=_merge(HasherSettings, data.get("hasher", {})),
        output=_merge(OutputSettings, data.get("output", {})),
        diagnostics=_merge(DiagnosticsSettings, data.get("diagnostics", {})),
    )

    _normalize_generator(cfg)
    _normalize_hasher(cfg)
    _normalize_diagnostics(cfg)
    logger.debug("config loaded from %s", path, extra={"event": "config_loaded"})
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
