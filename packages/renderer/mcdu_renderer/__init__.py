"""Renderer package for MCDU page layout and line normalization."""

from .layout import NOT_FOUND_TEXT, PAGE_CAPACITY, error_layout, layout_page, render_status_bar
from .models import (
    CanonicalLine,
    Color,
    DisplayGeometry,
    LegacyLine,
    PaginationState,
    RenderedDisplay,
    RenderedLine,
    Side,
)
from .normalizer import get_display_text, is_legacy, normalize_line, normalize_page_lines, parse_line
from .page_renderer import ConfigAdapter, DisplayPublisher, PageRenderer
from .text import align_text, pad_or_truncate

try:  # pragma: no cover - optional at import time for test environments
    from .preview import GridPreview
except Exception:  # pragma: no cover
    GridPreview = None  # type: ignore[assignment]

__all__ = [
    "CanonicalLine",
    "Color",
    "ConfigAdapter",
    "DisplayGeometry",
    "DisplayPublisher",
    "LegacyLine",
    "NOT_FOUND_TEXT",
    "PAGE_CAPACITY",
    "PageRenderer",
    "PaginationState",
    "RenderedDisplay",
    "RenderedLine",
    "Side",
    "align_text",
    "error_layout",
    "get_display_text",
    "is_legacy",
    "layout_page",
    "normalize_line",
    "normalize_page_lines",
    "pad_or_truncate",
    "parse_line",
    "render_status_bar",
]

if GridPreview is not None:
    __all__.append("GridPreview")
