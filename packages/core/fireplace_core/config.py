"""Optional settings file schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AssetConfig:
    # Alternative base64 payload file; None plays the bundled animation.
    path: str | None = None


@dataclass
class RenderConfig:
    glyph: str = "█"
    fallback_columns: int = 80
    fallback_rows: int = 24


@dataclass
class DiagnosticsConfig:
    log_to_file: bool = False
    keep_log_files: int = 7
    log_level: str = "INFO"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    asset: AssetConfig = field(default_factory=AssetConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Fireplace"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Fireplace"
    return Path.home() / ".config" / "fireplace"


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_render(cfg: AppConfig) -> None:
    defaults = RenderConfig()
    if not isinstance(cfg.render.glyph, str) or len(cfg.render.glyph) != 1:
        cfg.render.glyph = defaults.glyph
    try:
        cfg.render.fallback_columns = max(1, int(cfg.render.fallback_columns))
    except (TypeError, ValueError):
        cfg.render.fallback_columns = defaults.fallback_columns
    try:
        cfg.render.fallback_rows = max(1, int(cfg.render.fallback_rows))
    except (TypeError, ValueError):
        cfg.render.fallback_rows = defaults.fallback_rows


def _normalize_asset(cfg: AppConfig) -> None:
    if cfg.asset.path is not None and (not isinstance(cfg.asset.path, str) or not cfg.asset.path.strip()):
        cfg.asset.path = None


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.log_to_file = cfg.diagnostics.log_to_file is True
    try:
        cfg.diagnostics.keep_log_files = max(1, int(cfg.diagnostics.keep_log_files))
    except (TypeError, ValueError):
        cfg.diagnostics.keep_log_files = DiagnosticsConfig().keep_log_files
    level = str(cfg.diagnostics.log_level).upper()
    cfg.diagnostics.log_level = level if level in _LOG_LEVELS else "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=CONFIG_VERSION,
        asset=_merge(AssetConfig, raw.get("asset", {})),
        render=_merge(RenderConfig, raw.get("render", {})),
        diagnostics=_merge(DiagnosticsConfig, raw.get("diagnostics", {})),
    )

    _normalize_asset(cfg)
    _normalize_render(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
    return path
