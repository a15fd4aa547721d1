"""Core app services for settings, logging, and diagnostics."""

from .config import AppConfig, load_config, save_config
from .diagnostics import build_doctor_payload

__all__ = [
    "AppConfig",
    "build_doctor_payload",
    "load_config",
    "save_config",
]
