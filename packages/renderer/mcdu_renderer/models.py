"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class Color(str, Enum):
    WHITE = "white"
    AMBER = "amber"
    CYAN = "cyan"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    YELLOW = "yellow"
    GREY = "grey"


SUB_LABEL_COLOR = Color.CYAN
STATUS_BAR_COLOR = Color.CYAN
ERROR_COLOR = Color.RED


def empty_field() -> dict[str, Any]:
    return {"type": "empty"}


@dataclass(frozen=True)
class DisplayGeometry:
    columns: int = 24
    rows: int = 14
    default_color: str = Color.WHITE.value

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"Display geometry must be positive, got {self.columns}x{self.rows}")


@dataclass
class Side:
    label: str = ""
    display: dict[str, Any] = field(default_factory=empty_field)
    button: dict[str, Any] = field(default_factory=empty_field)

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "display": dict(self.display), "button": dict(self.button)}


@dataclass
class CanonicalLine:
    row: int | None
    left: Side = field(default_factory=Side)
    right: Side = field(default_factory=Side)

    def to_dict(self) -> dict[str, Any]:
        return {"row": self.row, "left": self.left.to_dict(), "right": self.right.to_dict()}


@dataclass
class LegacyLine:
    row: int | None
    sub_label: str | None = None
    display: dict[str, Any] | None = None
    left_button: dict[str, Any] | None = None
    right_button: dict[str, Any] | None = None


LineInput = Union[LegacyLine, CanonicalLine]


@dataclass(frozen=True)
class RenderedLine:
    text: str
    color: str


RenderedDisplay = list[RenderedLine]


@dataclass(frozen=True)
class PaginationState:
    current_page_offset: int = 0
    total_pages: int = 1

    @property
    def paginated(self) -> bool:
        return self.total_pages > 1

    def clamped(self) -> PaginationState:
        total = max(1, self.total_pages)
        offset = max(0, min(total - 1, self.current_page_offset))
        return PaginationState(current_page_offset=offset, total_pages=total)

    def advance(self) -> PaginationState:
        return PaginationState(self.current_page_offset + 1, self.total_pages).clamped()

    def retreat(self) -> PaginationState:
        return PaginationState(self.current_page_offset - 1, self.total_pages).clamped()
