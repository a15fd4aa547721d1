"""Exception types raised by the badge pipeline."""

from __future__ import annotations


class NamiconError(Exception):
    pass


class InvalidArgumentError(NamiconError, ValueError):
    """A caller broke an argument contract (absent name, malformed color)."""


class ConfigError(NamiconError, ValueError):
    pass


class RenderError(NamiconError, RuntimeError):
    """The drawing backend failed while producing a badge."""


class FontUnavailableError(RenderError):
    def __init__(self, family: str, reason: str) -> None:
        super().__init__(f"Font {family!r} could not be loaded: {reason}")
        self.family = family
