"""CLI entrypoints for the clock image feed, single frames and diagnostics."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from importlib import metadata
from pathlib import Path

from imageclock_core import (
    SIZE_TIERS,
    AppConfig,
    ClockDrawer,
    ClockRunner,
    ConfigError,
    ImageSink,
    PerformanceController,
    PerformanceTargets,
    RenderError,
    SinkError,
    build_doctor_payload,
    format_rfc3339_nano,
    load_config,
    parse_color,
    parse_interval,
    save_config,
)
from imageclock_core.config import NAMED_COLORS
from imageclock_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from imageclock_renderer import SUPPORTED_FORMATS


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _installed_version() -> str:
    try:
        return metadata.version("imageclock")
    except metadata.PackageNotFoundError:
        return "0.1.0"


def _config_file(args: argparse.Namespace) -> Path | None:
    return Path(args.config).expanduser() if args.config else None


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(_config_file(args))


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def cmd_run(args: argparse.Namespace) -> int:
    cfg = _load(args)
    basepath = args.basepath or cfg.output.basepath
    color = parse_color(args.color or cfg.render.color)
    interval_s = parse_interval(args.interval) if args.interval else cfg.schedule.interval_s
    image_format = args.format or cfg.output.image_format
    size = args.size or cfg.render.size
    label = args.label if args.label is not None else cfg.render.label
    font_path = args.font or cfg.render.font_path
    max_frames = args.max_frames if args.max_frames is not None else cfg.schedule.max_frames

    # Validate everything before touching the log directory.
    drawer = ClockDrawer(label, color, image_format, size, font_path=font_path)

    configure_logging(
        keep_files=cfg.diagnostics.keep_log_files,
        console=cfg.diagnostics.console_logging and not args.quiet,
    )
    install_crash_hooks()
    log = get_logger("cli")

    runner = ClockRunner(
        drawer,
        ImageSink(basepath, image_format),
        interval_s=interval_s,
        max_frames=max_frames,
        performance=PerformanceController(
            PerformanceTargets(
                cpu_percent_max=cfg.performance.cpu_percent_max,
                rss_mb_max=cfg.performance.rss_mb_max,
            )
        ),
    )
    try:
        runner.run()
    except KeyboardInterrupt:
        runner.stop()
        log.info("interrupted after %d frames", runner.status.frames_written, extra={"event": "interrupted"})
    return 0


def cmd_render_once(args: argparse.Namespace) -> int:
    cfg = _load(args)
    color = parse_color(args.color or cfg.render.color)
    image_format = args.format or cfg.output.image_format
    size = args.size or cfg.render.size
    label = args.label if args.label is not None else cfg.render.label

    drawer = ClockDrawer(label, color, image_format, size, font_path=args.font or cfg.render.font_path)
    sink = ImageSink(args.out or cfg.output.basepath, image_format)
    sink.ensure_dir()

    stamp = format_rfc3339_nano(drawer.start_time)
    frame = drawer.render_frame(f"time: {stamp}")
    path = sink.write(frame.image, stamp, drawer.extension())

    _print_json(
        {
            "success": True,
            "path": str(path),
            "width": drawer.width,
            "height": drawer.height,
            "format": image_format,
            "size": size,
            "lines": list(frame.lines),
        }
    )
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    payload = build_doctor_payload(_load(args))
    payload["version"] = _installed_version()
    _print_json(payload)
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    _print_json(asdict(_load(args)))
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    cfg = _load(args)
    if args.basepath is not None:
        cfg.output.basepath = args.basepath
    if args.format is not None:
        cfg.output.image_format = args.format
    if args.size is not None:
        cfg.render.size = args.size
    if args.color is not None:
        parse_color(args.color)
        cfg.render.color = args.color
    if args.label is not None:
        cfg.render.label = args.label
    if args.interval is not None:
        cfg.schedule.interval_s = parse_interval(args.interval)
    if args.max_frames is not None:
        cfg.schedule.max_frames = args.max_frames

    path = save_config(cfg, _config_file(args))
    _print_json({"success": True, "path": str(path), "config": asdict(cfg)})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imageclock", description="Timestamped heartbeat image generator")
    parser.add_argument("--config", default=None, help="Optional path to a JSON config file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_installed_version()}")
    sub = parser.add_subparsers(dest="command", required=True)

    colors_help = f"one of {' '.join(NAMED_COLORS)} or #RRGGBB[AA]"

    run_cmd = sub.add_parser("run", help="Write a clock image every interval")
    # Trailing positionals may be left off; missing ones come from the config file.
    run_cmd.add_argument("basepath", nargs="?", default=None, help="Directory the images are written to")
    run_cmd.add_argument("color", nargs="?", default=None, help=colors_help)
    run_cmd.add_argument("interval", nargs="?", default=None, help="Go-style duration, e.g. 500ms, 1s, 1m30s")
    run_cmd.add_argument("format", nargs="?", default=None, help="Image format: jpeg or png")
    run_cmd.add_argument("size", nargs="?", default=None, help="Size tier: small or big")
    run_cmd.add_argument("--label", default=None, help="Text drawn on the first line")
    run_cmd.add_argument("--font", default=None, help="Optional path to an OpenType/TrueType font")
    run_cmd.add_argument("--max-frames", type=_positive_int, default=None, help="Stop after this many frames")
    run_cmd.add_argument("--quiet", action="store_true", help="Only log to the log file")
    run_cmd.set_defaults(func=cmd_run)

    once_cmd = sub.add_parser("render-once", help="Write a single clock image and print a summary")
    once_cmd.add_argument("--out", default=None, help="Output directory")
    once_cmd.add_argument("--format", default=None, choices=list(SUPPORTED_FORMATS))
    once_cmd.add_argument("--size", default=None, choices=list(SIZE_TIERS))
    once_cmd.add_argument("--color", default=None, help=colors_help)
    once_cmd.add_argument("--label", default=None)
    once_cmd.add_argument("--font", default=None)
    once_cmd.set_defaults(func=cmd_render_once)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and font diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    config_cmd = sub.add_parser("config", help="Show or write the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print the effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write settings, applying any given overrides")
    init_cmd.add_argument("--basepath", default=None)
    init_cmd.add_argument("--format", default=None, choices=list(SUPPORTED_FORMATS))
    init_cmd.add_argument("--size", default=None, choices=list(SIZE_TIERS))
    init_cmd.add_argument("--color", default=None, help=colors_help)
    init_cmd.add_argument("--label", default=None)
    init_cmd.add_argument("--interval", default=None, help="Go-style duration, e.g. 500ms, 1s, 1m30s")
    init_cmd.add_argument("--max-frames", type=_positive_int, default=None)
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ConfigError as exc:
        print(f"imageclock: {exc}", file=sys.stderr)
        return 2
    except (RenderError, SinkError) as exc:
        print(f"imageclock: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
