"""Supersampled badge rendering on top of Pillow."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from PIL import Image, ImageDraw, ImageFont

from .errors import FontUnavailableError, RenderError
from .models import Color, GeneratorConfig

logger = logging.getLogger("namicon.renderer")

TRANSPARENT = Color(0, 0, 0, 0)
DOWNSAMPLE_FILTER = Image.Resampling.LANCZOS


def load_font(family: str, size: float) -> ImageFont.FreeTypeFont:
    """Load ``family`` at ``size`` pixels; an empty family selects Pillow's bundled font."""
    try:
        if family:
            font = ImageFont.truetype(family, size)
        else:
            font = ImageFont.load_default(size=size)
    except OSError as exc:
        raise FontUnavailableError(family or "<default>", str(exc)) from exc

    if not isinstance(font, ImageFont.FreeTypeFont):
        raise RenderError("Pillow was built without FreeType; scalable fonts are unavailable")
    return font


def line_height(font: ImageFont.FreeTypeFont) -> int:
    ascent, descent = font.getmetrics()
    return ascent + descent


def measure_text(font: ImageFont.FreeTypeFont, text: str) -> tuple[float, int]:
    """Advance width of the widest line and total height of ``text``.

    Every line is one ascent + descent tall with no extra leading, the same
    layout ``BadgeRenderer`` draws with.
    """
    lines = text.splitlines() or [""]
    width = max(font.getlength(line) for line in lines)
    return width, line_height(font) * len(lines)


@contextmanager
def scratch_canvas(size: int) -> Iterator[Image.Image]:
    canvas = Image.new("RGBA", (size, size), TRANSPARENT)
    try:
        yield canvas
    finally:
        canvas.close()


class BadgeRenderer:
    """Draws text centered on a round or square background.

    The badge is drawn at ``config.render_size`` and downsampled to
    ``config.output_size``, so edges come out anti-aliased independent of
    the font rasterizer.
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config

    def render(self, text: str | None, text_color: Color, background_color: Color) -> Image.Image:
        cfg = self.config
        cfg.validate()
        if not text:
            text = cfg.fallback_text

        size = cfg.render_size
        with scratch_canvas(size) as canvas:
            draw = ImageDraw.Draw(canvas)
            self._paint_background(draw, size, background_color)
            if text:
                self._draw_text(draw, size, text, text_color)
            badge = canvas.resize((cfg.output_size, cfg.output_size), DOWNSAMPLE_FILTER)

        logger.debug(
            "badge rendered text=%r render_size=%d output_size=%d round=%s",
            text,
            size,
            cfg.output_size,
            cfg.round,
            extra={"event": "badge_rendered"},
        )
        return badge

    def _paint_background(self, draw: ImageDraw.ImageDraw, size: int, color: Color) -> None:
        if self.config.round:
            draw.ellipse((0, 0, size - 1, size - 1), fill=color)
        else:
            draw.rectangle((0, 0, size - 1, size - 1), fill=color)

    def _draw_text(self, draw: ImageDraw.ImageDraw, size: int, text: str, color: Color) -> None:
        font = load_font(self.config.font_family, self.config.font_size)
        width, height = measure_text(font, text)
        x = (size - width) / 2
        y = (size - height) / 2
        step = line_height(font)
        # "la" puts each origin on the ascender line, matching measure_text's height.
        for i, line in enumerate(text.splitlines()):
            draw.text((x, y + i * step), line, font=font, fill=color, anchor="la")
