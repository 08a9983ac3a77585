"""Core app services for settings, logging, and the animation loop."""

from .config import AppConfig, load_config, save_config
from .driver import AnimationDriver, DriverStatus

__all__ = [
    "AnimationDriver",
    "AppConfig",
    "DriverStatus",
    "load_config",
    "save_config",
]
