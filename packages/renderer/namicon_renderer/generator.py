"""Name to badge facade tying initials, color and rendering together."""

from __future__ import annotations

import logging

from PIL import Image

from . import text as _text
from .badge import BadgeRenderer
from .color import ColorMapper
from .hashing import DefaultHasher, Hasher, Murmur3Hasher
from .models import DEFAULT_TEXT_COLOR, BadgeRequest, Color, GeneratorConfig

logger = logging.getLogger("namicon.generator")


class NamiconGenerator:
    """Deterministic initials badges.

    ``config`` may be changed between calls; each call renders from a private
    snapshot taken when it starts.
    """

    def __init__(self, config: GeneratorConfig | None = None, hasher: Hasher | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.hasher = hasher or DefaultHasher()

    @classmethod
    def with_murmur(cls, seed: int = 0, config: GeneratorConfig | None = None) -> "NamiconGenerator":
        return cls(config=config, hasher=Murmur3Hasher(seed))

    @staticmethod
    def get_initials(name: str | None) -> str | None:
        return _text.get_initials(name)

    def get_color_from_text(self, text: str) -> Color:
        return self._color_for(text, self.config.snapshot())

    def create_image(self, name: str) -> Image.Image:
        cfg = self.config.snapshot()
        initials = _text.get_initials(name)
        return BadgeRenderer(cfg).render(initials, DEFAULT_TEXT_COLOR, self._color_for(name, cfg))

    def create_image_raw(
        self,
        text: str | None,
        text_color: Color | None = None,
        background_color: Color | None = None,
    ) -> Image.Image:
        cfg = self.config.snapshot()
        if background_color is None:
            background_color = self._color_for(text or cfg.fallback_text, cfg)
        return BadgeRenderer(cfg).render(text, text_color or DEFAULT_TEXT_COLOR, background_color)

    def render(self, request: BadgeRequest) -> Image.Image:
        if not request.is_name:
            return self.create_image_raw(request.text, request.text_color, request.background_color)

        cfg = self.config.snapshot()
        initials = _text.get_initials(request.text)
        background = request.background_color or self._color_for(request.text, cfg)
        return BadgeRenderer(cfg).render(initials, request.text_color or DEFAULT_TEXT_COLOR, background)

    def _color_for(self, text: str, cfg: GeneratorConfig) -> Color:
        cfg.validate()
        color = ColorMapper(self.hasher, cfg.saturation, cfg.lightness).color_for(text)
        logger.debug("color %s for %r via %r", color.to_hex(), text, self.hasher, extra={"event": "color_derived"})
        return color
