"""Config-backed page lookup for the renderer."""

from __future__ import annotations

from typing import Any

from mcdu_renderer import DisplayGeometry

from .config import AppConfig


class PageConfigAdapter:
    def __init__(self, cfg: AppConfig) -> None:
        self.config = cfg

    @property
    def geometry(self) -> DisplayGeometry:
        return self.config.geometry

    def page_ids(self) -> list[str]:
        return [str(page["id"]) for page in self.config.pages]

    def find_page(self, page_id: str) -> dict[str, Any] | None:
        for page in self.config.pages:
            if page.get("id") == page_id:
                return page
        return None
