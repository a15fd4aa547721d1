"""Renderer package: initials, hash colors and supersampled badge images."""

from .badge import BadgeRenderer
from .color import ColorMapper, hash_to_hue, hsl_to_rgba
from .errors import (
    ConfigError,
    FontUnavailableError,
    InvalidArgumentError,
    NamiconError,
    RenderError,
)
from .generator import NamiconGenerator
from .hashing import DefaultHasher, Hasher, Murmur3Hasher, get_hasher, list_hashers, murmur3_32
from .models import DEFAULT_TEXT_COLOR, BadgeRequest, Color, GeneratorConfig
from .text import get_initials, is_letter_or_digit

__all__ = [
    "BadgeRenderer",
    "BadgeRequest",
    "Color",
    "ColorMapper",
    "ConfigError",
    "DEFAULT_TEXT_COLOR",
    "DefaultHasher",
    "FontUnavailableError",
    "GeneratorConfig",
    "Hasher",
    "InvalidArgumentError",
    "Murmur3Hasher",
    "NamiconError",
    "NamiconGenerator",
    "RenderError",
    "get_hasher",
    "get_initials",
    "hash_to_hue",
    "hsl_to_rgba",
    "is_letter_or_digit",
    "list_hashers",
    "murmur3_32",
]
