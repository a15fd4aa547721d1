"""Hash-to-hue mapping and HSL to RGB conversion."""

from __future__ import annotations

from .hashing import Hasher
from .models import Color

HUE_SCALE = float(1 << 32)


def hash_to_hue(value: int) -> float:
    """Normalize a uint32 hash into a hue in [0, 1)."""
    return value / HUE_SCALE


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t >= 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgba(h: float, s: float, l: float, a: float = 1.0) -> Color:
    """Convert HSL (all in [0, 1]) to an 8-bit color.

    Channels are truncated, not rounded, when scaled to 0..255.
    """
    if s == 0.0:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_channel(p, q, h + 1.0 / 3.0)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1.0 / 3.0)

    return Color(int(r * 255), int(g * 255), int(b * 255), int(a * 255))


class ColorMapper:
    def __init__(self, hasher: Hasher, saturation: float = 1.0, lightness: float = 0.7) -> None:
        self.hasher = hasher
        self.saturation = saturation
        self.lightness = lightness

    def hue_for(self, text: str) -> float:
        return hash_to_hue(self.hasher.hash(text))

    def color_for(self, text: str) -> Color:
        return hsl_to_rgba(self.hue_for(text), self.saturation, self.lightness)
