"""Stateful page renderer wired to the config and display collaborators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, Protocol

from .layout import content_lines, layout_page, paginate, render_status_bar, status_title
from .models import DisplayGeometry, PaginationState, RenderedDisplay, RenderedLine
from .text import align_text, pad_or_truncate

logger = logging.getLogger("mcdu.renderer")


class ConfigAdapter(Protocol):
    @property
    def geometry(self) -> DisplayGeometry: ...

    def find_page(self, page_id: str) -> Mapping[str, Any] | None: ...


class DisplayPublisher(Protocol):
    async def publish_full_display(self, lines: RenderedDisplay) -> None: ...

    async def publish_line(self, line_number: int, text: str, color: str) -> None: ...


class PageRenderer:
    """Lays out pages and publishes full frames.

    Pagination is tracked per instance for the page last rendered; overlapping
    ``render_page`` calls on one instance are not supported.
    """

    def __init__(
        self,
        adapter: ConfigAdapter,
        publisher: DisplayPublisher,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.adapter = adapter
        self.publisher = publisher
        self.clock = clock
        self.pagination = PaginationState()
        self.current_page_id: str | None = None

    @property
    def current_page_offset(self) -> int:
        return self.pagination.current_page_offset

    @current_page_offset.setter
    def current_page_offset(self, value: int) -> None:
        self.pagination = PaginationState(current_page_offset=value, total_pages=self.pagination.total_pages)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages

    @total_pages.setter
    def total_pages(self, value: int) -> None:
        self.pagination = PaginationState(current_page_offset=self.pagination.current_page_offset, total_pages=value)

    async def render_page(self, page_id: str) -> RenderedDisplay:
        geometry = self.adapter.geometry
        page = self.adapter.find_page(page_id)
        if page is None:
            logger.warning(f"page not found page_id={page_id}", extra={"event": "page_not_found"})

        lines, self.pagination = layout_page(page, self.pagination, geometry, self.clock(), page_id=page_id)
        self.current_page_id = page_id
        logger.debug(
            f"rendered page_id={page_id} offset={self.current_page_offset} total_pages={self.total_pages}",
            extra={"event": "page_rendered"},
        )
        await self.publisher.publish_full_display(lines)
        return lines

    async def next_page(self) -> RenderedDisplay | None:
        if self.current_page_id is None:
            return None
        self.pagination = self.pagination.advance()
        return await self.render_page(self.current_page_id)

    async def previous_page(self) -> RenderedDisplay | None:
        if self.current_page_id is None:
            return None
        self.pagination = self.pagination.retreat()
        return await self.render_page(self.current_page_id)

    def render_status_bar(self, page_id: str) -> RenderedLine:
        page = self.adapter.find_page(page_id)
        if page is None:
            state = PaginationState()
        else:
            state = paginate(len(content_lines(page)), self.pagination)
        return render_status_bar(status_title(page, page_id), state, self.adapter.geometry, self.clock())

    @staticmethod
    def pad_or_truncate(text: str, width: int) -> str:
        return pad_or_truncate(text, width)

    @staticmethod
    def align_text(text: str, align: str, width: int) -> str:
        return align_text(text, align, width)
