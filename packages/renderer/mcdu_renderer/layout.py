"""Pure page layout for the 24x14 MCDU character grid.

Rows 1, 3, 5, 7, 9 and 11 hold content, each even row below a content row
announces the label of the content row that follows it, row 13 is the status
bar and anything after it is blank. ``layout_page`` takes the pagination
state in and hands the updated state back, callers own where it lives.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .models import (
    ERROR_COLOR,
    STATUS_BAR_COLOR,
    SUB_LABEL_COLOR,
    CanonicalLine,
    Color,
    DisplayGeometry,
    PaginationState,
    RenderedDisplay,
    RenderedLine,
)
from .normalizer import get_display_text, normalize_page_lines
from .text import align_text, blank, compose_columns, pad_or_truncate

PAGE_CAPACITY = 6
STATUS_BAR_ROW = 13
NOT_FOUND_TEXT = "NICHT GEFUNDEN"

_KNOWN_COLORS = {c.value for c in Color}


def content_lines(page: Mapping[str, Any]) -> list[CanonicalLine]:
    normalized = normalize_page_lines(page)
    lines = normalized.get("lines") or []
    items = [line for line in lines if line is not None]
    return sorted(items, key=_row_key)


def paginate(item_count: int, state: PaginationState) -> PaginationState:
    if item_count <= PAGE_CAPACITY:
        return PaginationState()
    total = math.ceil(item_count / PAGE_CAPACITY)
    return PaginationState(current_page_offset=state.current_page_offset, total_pages=total).clamped()


def status_title(page: Mapping[str, Any] | None, page_id: str) -> str:
    title = None
    if page:
        title = page.get("name") or page.get("id")
    return str(title or page_id).upper()


def render_status_bar(
    title: str,
    state: PaginationState,
    geometry: DisplayGeometry,
    now: datetime,
) -> RenderedLine:
    clock = now.strftime("%H:%M")
    if state.paginated:
        right = f"{state.current_page_offset + 1}/{state.total_pages} {clock}"
    else:
        right = clock
    return RenderedLine(text=compose_columns(title, right, geometry.columns), color=STATUS_BAR_COLOR.value)


def layout_page(
    page: Mapping[str, Any] | None,
    state: PaginationState,
    geometry: DisplayGeometry,
    now: datetime,
    page_id: str | None = None,
) -> tuple[RenderedDisplay, PaginationState]:
    if page is None:
        return error_layout(geometry), PaginationState()

    items = content_lines(page)
    state = paginate(len(items), state)
    start = state.current_page_offset * PAGE_CAPACITY
    window = items[start : start + PAGE_CAPACITY]

    lines: RenderedDisplay = []
    for slot in range(PAGE_CAPACITY):
        item = window[slot] if slot < len(window) else None
        upcoming = window[slot + 1] if slot + 1 < len(window) else None
        lines.append(_content_row(item, geometry))
        lines.append(_sub_label_row(upcoming, geometry))

    # Short geometries keep the status bar on their last row.
    status_index = min(STATUS_BAR_ROW, geometry.rows) - 1
    lines = lines[:status_index]
    title = status_title(page, page_id or str(page.get("id", "")))
    lines.append(render_status_bar(title, state, geometry, now))
    while len(lines) < geometry.rows:
        lines.append(_blank_row(geometry))
    return lines, state


def error_layout(geometry: DisplayGeometry) -> RenderedDisplay:
    lines = [_blank_row(geometry) for _ in range(geometry.rows)]
    lines[(geometry.rows - 1) // 2] = RenderedLine(
        text=align_text(NOT_FOUND_TEXT, "center", geometry.columns),
        color=ERROR_COLOR.value,
    )
    return lines


def line_color(line: CanonicalLine, geometry: DisplayGeometry) -> str:
    color = line.left.display.get("color")
    if isinstance(color, str) and color in _KNOWN_COLORS:
        return color
    return geometry.default_color


def _content_row(line: CanonicalLine | None, geometry: DisplayGeometry) -> RenderedLine:
    if line is None:
        return _blank_row(geometry)
    text = compose_columns(
        get_display_text(line.left.display),
        get_display_text(line.right.display),
        geometry.columns,
    )
    return RenderedLine(text=text, color=line_color(line, geometry))


def _sub_label_row(upcoming: CanonicalLine | None, geometry: DisplayGeometry) -> RenderedLine:
    if upcoming is None:
        text = blank(geometry.columns)
    else:
        text = compose_columns(upcoming.left.label, upcoming.right.label, geometry.columns)
    return RenderedLine(text=text, color=SUB_LABEL_COLOR.value)


def _blank_row(geometry: DisplayGeometry) -> RenderedLine:
    return RenderedLine(text=blank(geometry.columns), color=geometry.default_color)


def _row_key(line: CanonicalLine) -> int:
    try:
        return int(line.row)
    except (TypeError, ValueError, OverflowError):
        return 0
