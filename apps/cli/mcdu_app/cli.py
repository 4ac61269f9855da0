"""CLI entrypoints for MCDU page rendering, config migration, and device listing."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from mcdu_core import PageConfigAdapter, get_logger, load_config, normalize_config_pages, save_config
from mcdu_core.config import config_path
from mcdu_core.logging_setup import configure_logging, install_crash_hooks
from mcdu_display import ConsoleDisplayPublisher, DisplayTransport, SerialDisplayPublisher
from mcdu_renderer import PageRenderer, is_legacy, normalize_page_lines


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _config_file(args: argparse.Namespace) -> Path:
    return Path(args.config).expanduser().resolve() if args.config else config_path()


def cmd_list_pages(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    _print_json(
        [
            {
                "id": page["id"],
                "name": page.get("name"),
                "lines": len(page.get("lines") or []),
                "legacy_lines": sum(1 for line in page.get("lines") or [] if is_legacy(line)),
                "home": page["id"] == cfg.home_page,
            }
            for page in cfg.pages
        ]
    )
    return 0


async def _render(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    page_id = args.page or cfg.home_page
    if not page_id:
        print("no page configured")
        return 2

    transport: DisplayTransport | None = None
    port = args.port or cfg.device.port_override
    if port and not args.no_device:
        transport = DisplayTransport()
        transport.open(port=port, baud=cfg.device.baud)
        publisher = SerialDisplayPublisher(transport, device_id=port)
    else:
        publisher = ConsoleDisplayPublisher()

    renderer = PageRenderer(PageConfigAdapter(cfg), publisher)
    renderer.current_page_offset = args.offset
    try:
        lines = await renderer.render_page(page_id)
    finally:
        if transport is not None:
            transport.close()

    if args.preview:
        from mcdu_renderer.preview import GridPreview

        GridPreview().save_png(lines, Path(args.preview).expanduser(), columns=cfg.display.columns)

    get_logger("cli").info(
        f"render page_id={page_id} offset={renderer.current_page_offset} total_pages={renderer.total_pages}",
        extra={"event": "cli_render"},
    )
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    return asyncio.run(_render(args))


def cmd_normalize(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    page = PageConfigAdapter(cfg).find_page(args.page)
    if page is None:
        print(f"page not found: {args.page}")
        return 2
    normalized = dict(normalize_page_lines(page))
    normalized["lines"] = [line.to_dict() if line is not None else None for line in normalized.get("lines") or []]
    _print_json(normalized)
    return 0


def cmd_migrate(args: argparse.Namespace) -> int:
    path = _config_file(args)
    cfg = load_config(path)
    converted = normalize_config_pages(cfg)
    payload = {"config": str(path), "lines_converted": converted, "dry_run": bool(args.dry_run)}
    if not args.dry_run:
        save_config(cfg, path)
    _print_json(payload)
    return 0


def cmd_list_devices(_args: argparse.Namespace) -> int:
    devices = DisplayTransport.discover()
    _print_json(
        [
            {
                "device": d.device,
                "description": d.description,
                "hwid": d.hwid,
                "vid": d.vid,
                "pid": d.pid,
            }
            for d in devices
        ]
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mcdu", description="MCDU page renderer and tools")
    parser.add_argument("--config", default=None, help="Path to config.json (defaults to the per-user config)")
    sub = parser.add_subparsers(dest="command", required=True)

    pages_cmd = sub.add_parser("list-pages", help="List configured pages")
    pages_cmd.set_defaults(func=cmd_list_pages)

    render_cmd = sub.add_parser("render", help="Render a page to the display or the console")
    render_cmd.add_argument("--page", default=None, help="Page id, defaults to the home page")
    render_cmd.add_argument("--offset", type=int, default=0, help="Pagination offset for long pages")
    render_cmd.add_argument("--port", default=None, help="Optional explicit serial port override")
    render_cmd.add_argument("--no-device", action="store_true", help="Print to the console even if a port is configured")
    render_cmd.add_argument("--preview", default=None, help="Also write a PNG preview to this path")
    render_cmd.set_defaults(func=cmd_render)

    norm_cmd = sub.add_parser("normalize", help="Print a page with canonical left/right lines")
    norm_cmd.add_argument("--page", required=True)
    norm_cmd.set_defaults(func=cmd_normalize)

    migrate_cmd = sub.add_parser("migrate", help="Rewrite legacy page lines in the config file")
    migrate_cmd.add_argument("--dry-run", action="store_true")
    migrate_cmd.set_defaults(func=cmd_migrate)

    list_cmd = sub.add_parser("list-devices", help="List serial devices")
    list_cmd.set_defaults(func=cmd_list_devices)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(console=False)
    install_crash_hooks()
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
