"""Environment report for troubleshooting font and rendering problems."""

from __future__ import annotations

import platform
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import PIL
from PIL import features

from namicon_renderer.badge import load_font
from namicon_renderer.errors import RenderError
from namicon_renderer.hashing import list_hashers

from .config import AppConfig, config_path


def check_font(cfg: AppConfig) -> dict[str, Any]:
    gen = cfg.to_generator_config()
    result: dict[str, Any] = {
        "family": gen.font_family or "<default>",
        "size": gen.font_size,
        "ok": True,
        "error": None,
    }
    try:
        load_font(gen.font_family, gen.font_size)
    except RenderError as exc:
        result["ok"] = False
        result["error"] = str(exc)
    return result


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "pillow": PIL.__version__,
        "freetype": bool(features.check("freetype2")),
        "font": check_font(cfg),
        "hashers": list_hashers(),
        "config_path": str(config_path()),
        "config": asdict(cfg),
    }
