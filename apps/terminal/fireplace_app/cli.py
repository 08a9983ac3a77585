"""CLI entrypoints for the fireplace terminal animation and its inspection tools."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from importlib import metadata
from pathlib import Path

from fireplace_animation import AssetDecodeError, FrameSet, load, load_embedded, read_payload
from fireplace_animation.ansi import RESET
from fireplace_core import AnimationDriver, AppConfig, load_config, save_config
from fireplace_core.config import config_path
from fireplace_core.logging_setup import configure_logging, install_crash_hooks, log_event
from fireplace_terminal import DisplaySurface, DisplaySurfaceSizer, TerminalOutput


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _installed_version() -> str:
    try:
        return metadata.version("fireplace")
    except Exception:
        return "0.1.0"


def _load_frames(cfg: AppConfig) -> FrameSet:
    if cfg.asset.path:
        return load(read_payload(cfg.asset.path))
    return load_embedded()


def _sizer(cfg: AppConfig) -> DisplaySurfaceSizer:
    fallback = DisplaySurface(columns=cfg.render.fallback_columns, rows=cfg.render.fallback_rows)
    return DisplaySurfaceSizer(fallback=fallback)


def cmd_run(args: argparse.Namespace) -> int:
    cfg = load_config()
    try:
        frames = _load_frames(cfg)
    except AssetDecodeError as exc:
        log_event("asset_decode_failed", str(exc), logging.CRITICAL, stage=exc.stage)
        print(f"fireplace: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        log_event("asset_read_failed", f"asset read failed: {exc}", logging.CRITICAL)
        print(f"fireplace: asset read failed: {exc}", file=sys.stderr)
        return 1

    output = TerminalOutput()
    driver = AnimationDriver(
        frames,
        sizer=_sizer(cfg),
        output=output,
        glyph=cfg.render.glyph,
    )
    try:
        driver.run(limit=args.ticks)
    except KeyboardInterrupt:
        output.write(RESET + "\n")
        log_event("driver_interrupted", "animation interrupted", ticks=driver.status.ticks)
        return 130
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    cfg = load_config()
    try:
        frames = _load_frames(cfg)
    except (AssetDecodeError, OSError) as exc:
        print(f"fireplace: {exc}", file=sys.stderr)
        return 1

    first, _ = frames[0]
    surface = _sizer(cfg).query()
    _print_json(
        {
            "version": _installed_version(),
            "asset": cfg.asset.path or "embedded",
            "frames": len(frames),
            "frame_size": {"width": first.width, "height": first.height},
            "durations_ms": list(frames.durations_ms),
            "loop_ms": frames.loop_ms,
            "terminal": asdict(surface),
        }
    )
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser() if args.path else config_path()
    if args.init and not path.exists():
        save_config(AppConfig(), path)
    cfg = load_config(path)
    _print_json({"path": str(path), "exists": path.exists(), "config": asdict(cfg)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fireplace", description="Animated fireplace for your terminal")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Play the animation until interrupted")
    run_cmd.add_argument("--ticks", type=int, default=None, help="Stop after this many frames")
    run_cmd.set_defaults(func=cmd_run)

    info_cmd = sub.add_parser("info", help="Describe the animation and terminal surface")
    info_cmd.set_defaults(func=cmd_info)

    config_cmd = sub.add_parser("config", help="Print the effective configuration")
    config_cmd.add_argument("--init", action="store_true", help="Write default settings if no file exists")
    config_cmd.add_argument("--path", default=None, help="Optional config file location")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    configure_logging(cfg.diagnostics)
    install_crash_hooks(cfg.diagnostics)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
