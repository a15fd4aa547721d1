"""CLI entrypoints for initials, colors, badge rendering, and diagnostics."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from PIL import Image

from namicon_core import AppConfig, build_doctor_payload, load_config
from namicon_core.logging_setup import configure_logging
from namicon_renderer import (
    BadgeRequest,
    Color,
    NamiconError,
    NamiconGenerator,
    RenderError,
    get_hasher,
    list_hashers,
)

logger = logging.getLogger("namicon.cli")

# Encoders that cannot store an alpha channel; badges are flattened onto the matte first.
_OPAQUE_FORMATS = frozenset({"JPEG", "BMP", "PCX", "PPM", "EPS", "SGI"})


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _generator(cfg: AppConfig, args: argparse.Namespace) -> NamiconGenerator:
    gen_cfg = cfg.to_generator_config()
    if getattr(args, "size", None) is not None:
        gen_cfg.set_default_size(args.size)
    if getattr(args, "square", False):
        gen_cfg.round = False

    name = getattr(args, "hasher", None)
    if name or getattr(args, "seed", None) is not None:
        seed = args.seed if args.seed is not None else cfg.hasher.seed
        hasher = get_hasher(name or cfg.hasher.name, seed)
    else:
        hasher = cfg.build_hasher()
    return NamiconGenerator(config=gen_cfg, hasher=hasher)


def cmd_initials(args: argparse.Namespace) -> int:
    _print_json({"name": args.name, "initials": NamiconGenerator.get_initials(args.name)})
    return 0


def cmd_color(args: argparse.Namespace) -> int:
    generator = _generator(load_config(), args)
    color = generator.get_color_from_text(args.text)
    _print_json(
        {
            "text": args.text,
            "hasher": repr(generator.hasher),
            "rgba": list(color),
            "hex": color.to_hex(),
        }
    )
    return 0


def save_badge(image: Image.Image, out: Path, default_format: str, matte: Color) -> str:
    if out.suffix:
        fmt = Image.registered_extensions().get(out.suffix.lower())
        if fmt is None:
            raise RenderError(f"No image encoder for suffix {out.suffix!r}")
    else:
        fmt = default_format.upper()

    if fmt in _OPAQUE_FORMATS:
        flat = Image.new("RGB", image.size, matte[:3])
        flat.paste(image, mask=image.getchannel("A"))
        image = flat

    try:
        image.save(out, format=fmt)
    except (KeyError, OSError, ValueError) as exc:
        raise RenderError(f"Could not write {out} as {fmt}: {exc}") from exc
    return fmt


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    generator = _generator(cfg, args)
    text_color = Color.from_hex(args.text_color) if args.text_color else None
    background = Color.from_hex(args.background) if args.background else None

    if args.raw:
        request = BadgeRequest.for_text(args.text, text_color, background)
    else:
        request = BadgeRequest.for_name(args.text, text_color, background)

    out = Path(args.out).expanduser()
    image = generator.render(request)
    fmt = save_badge(image, out, cfg.output.format, Color.from_hex(cfg.output.matte))
    logger.info("badge written to %s", out, extra={"event": "badge_written"})

    _print_json(
        {
            "success": True,
            "out": str(out.resolve()),
            "size": list(image.size),
            "initials": None if args.raw else NamiconGenerator.get_initials(args.text),
            "round": generator.config.round,
            "format": fmt,
        }
    )
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def _add_hasher_args(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--hasher", choices=list_hashers(), default=None, help="Override configured hasher")
    cmd.add_argument("--seed", type=int, default=None, help="Seed for hashers that accept one")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="namicon", description="Deterministic initials badge generator")
    sub = parser.add_subparsers(dest="command", required=True)

    initials_cmd = sub.add_parser("initials", help="Print the initials derived from a name")
    initials_cmd.add_argument("name")
    initials_cmd.set_defaults(func=cmd_initials)

    color_cmd = sub.add_parser("color", help="Print the background color derived from text")
    color_cmd.add_argument("text")
    _add_hasher_args(color_cmd)
    color_cmd.set_defaults(func=cmd_color)

    render_cmd = sub.add_parser("render", help="Render a badge image to a file")
    render_cmd.add_argument("text", help="Name to take initials from, or literal text with --raw")
    render_cmd.add_argument("--out", required=True, help="Output image path; format follows the suffix")
    render_cmd.add_argument("--raw", action="store_true", help="Draw the text verbatim instead of initials")
    render_cmd.add_argument("--size", type=int, default=None, help="Output size in pixels")
    render_cmd.add_argument("--square", action="store_true", help="Fill the whole square instead of a circle")
    render_cmd.add_argument("--text-color", default=None, help="Text color as #RRGGBB or #RRGGBBAA")
    render_cmd.add_argument("--background", default=None, help="Background color as #RRGGBB or #RRGGBBAA")
    _add_hasher_args(render_cmd)
    render_cmd.set_defaults(func=cmd_render)

    doctor_cmd = sub.add_parser("doctor", help="Print environment and font diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(settings=cfg.diagnostics)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except NamiconError as exc:
        logger.error("%s failed: %s", args.command, exc, extra={"event": "command_failed"})
        _print_json({"success": False, "error": str(exc), "error_type": type(exc).__name__})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
