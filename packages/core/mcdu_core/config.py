"""Persistent MCDU settings and page definitions with load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from mcdu_renderer import Color, DisplayGeometry, is_legacy, normalize_line


CONFIG_VERSION = 2


@dataclass
class DeviceConfig:
    port_override: str | None = None
    baud: int = 115200


@dataclass
class DisplayConfig:
    columns: int = 24
    rows: int = 14
    default_color: str = Color.WHITE.value


@dataclass
class LoggingConfig:
    level: str = "INFO"
    keep_log_files: int = 7


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    device: DeviceConfig = field(default_factory=DeviceConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    home_page: str | None = None
    pages: list[dict[str, Any]] = field(default_factory=list)

    @property
    def geometry(self) -> DisplayGeometry:
        return DisplayGeometry(
            columns=self.display.columns,
            rows=self.display.rows,
            default_color=self.display.default_color,
        )


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "MCDU" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "MCDU" / "config.json"
    return Path.home() / ".config" / "mcdu" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    for k, v in (raw or {}).items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_display(cfg: AppConfig) -> None:
    cfg.display.columns = max(1, int(cfg.display.columns))
    cfg.display.rows = max(1, int(cfg.display.rows))
    if cfg.display.default_color not in {c.value for c in Color}:
        cfg.display.default_color = Color.WHITE.value


def _normalize_logging(cfg: AppConfig) -> None:
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if level in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"
    cfg.logging.keep_log_files = max(2, int(cfg.logging.keep_log_files))


def _normalize_pages(cfg: AppConfig) -> None:
    cfg.pages = [page for page in cfg.pages if isinstance(page, dict) and page.get("id")]
    ids = {page["id"] for page in cfg.pages}
    if cfg.home_page not in ids:
        cfg.home_page = cfg.pages[0]["id"] if cfg.pages else None


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("config_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 used the adapter's camelCase display keys.
        display = dict(data.get("display", {}) or {})
        if "defaultColor" in display:
            display.setdefault("default_color", display.pop("defaultColor"))
        data["display"] = display
        data.setdefault("pages", [])
        data["config_version"] = 2

    return data


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

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        device=_merge(DeviceConfig, data.get("device", {})),
        display=_merge(DisplayConfig, data.get("display", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
        home_page=data.get("home_page"),
        pages=list(data.get("pages", []) or []),
    )

    _normalize_display(cfg)
    _normalize_logging(cfg)
    _normalize_pages(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
    return path


def normalize_config_pages(cfg: AppConfig) -> int:
    """Rewrite every page line into the canonical shape, returns legacy lines converted.

    Entries that are not line mappings are kept as they are.
    """
    converted = 0
    for page in cfg.pages:
        lines = page.get("lines")
        if not isinstance(lines, list) or not lines:
            continue
        normalized = []
        for line in lines:
            canonical = normalize_line(line)
            if canonical is None:
                normalized.append(line)
                continue
            if is_legacy(line):
                converted += 1
            normalized.append(canonical.to_dict())
        page["lines"] = normalized
    return converted
