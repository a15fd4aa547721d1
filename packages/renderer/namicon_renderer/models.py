"""Typed generator models."""

from __future__ import annotations

import dataclasses
import string
from dataclasses import dataclass
from typing import NamedTuple

from .errors import ConfigError, InvalidArgumentError

DEFAULT_OUTPUT_SIZE = 100
DEFAULT_RENDER_SIZE_FACTOR = 4
DEFAULT_FONT_SIZE_FACTOR = 2.5


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        raw = value.strip().lstrip("#")
        if len(raw) not in (6, 8) or not all(c in string.hexdigits for c in raw):
            raise InvalidArgumentError(f"Expected #RRGGBB or #RRGGBBAA, got {value!r}")
        return cls(*bytes.fromhex(raw))

    def to_hex(self) -> str:
        return "#{:02X}{:02X}{:02X}{:02X}".format(*self)


DEFAULT_TEXT_COLOR = Color(0, 0, 0)


@dataclass
class GeneratorConfig:
    output_size: int = DEFAULT_OUTPUT_SIZE
    render_size_factor: int = DEFAULT_RENDER_SIZE_FACTOR
    font_size_factor: float = DEFAULT_FONT_SIZE_FACTOR
    font_family: str = ""
    saturation: float = 1.0
    lightness: float = 0.7
    round: bool = True
    fallback_text: str = ""

    @property
    def render_size(self) -> int:
        return self.render_size_factor * self.output_size

    @property
    def font_size(self) -> float:
        return self.render_size / self.font_size_factor

    def set_default_size(self, output_size: int) -> None:
        self.output_size = output_size
        self.render_size_factor = DEFAULT_RENDER_SIZE_FACTOR
        self.font_size_factor = DEFAULT_FONT_SIZE_FACTOR

    def validate(self) -> None:
        if self.output_size <= 0:
            raise ConfigError(f"output_size must be positive, got {self.output_size}")
        if self.render_size_factor <= 0:
            raise ConfigError(f"render_size_factor must be positive, got {self.render_size_factor}")
        if self.font_size_factor <= 0:
            raise ConfigError(f"font_size_factor must be positive, got {self.font_size_factor}")
        for name in ("saturation", "lightness"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")

    def snapshot(self) -> "GeneratorConfig":
        return dataclasses.replace(self)


@dataclass(frozen=True)
class BadgeRequest:
    text: str | None
    is_name: bool = True
    text_color: Color | None = None
    background_color: Color | None = None

    @classmethod
    def for_name(
        cls,
        name: str,
        text_color: Color | None = None,
        background_color: Color | None = None,
    ) -> "BadgeRequest":
        return cls(text=name, is_name=True, text_color=text_color, background_color=background_color)

    @classmethod
    def for_text(
        cls,
        text: str | None,
        text_color: Color | None = None,
        background_color: Color | None = None,
    ) -> "BadgeRequest":
        return cls(text=text, is_name=False, text_color=text_color, background_color=background_color)
