"""Line schema normalization.

Page lines are authored in one of two shapes:

Legacy::

    {"row": 3, "subLabel": "TEMP", "leftButton": {...},
     "display": {"type": "label", "label": "21.5 C"}, "rightButton": {...}}

Canonical::

    {"row": 3, "left": {"label", "display", "button"},
               "right": {"label", "display", "button"}}

Both are accepted indefinitely. Raw mappings are parsed once into a
``LegacyLine`` or ``CanonicalLine`` and every consumer downstream only sees
``CanonicalLine``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models import CanonicalLine, LegacyLine, LineInput, Side, empty_field

LEGACY_KEYS = ("display", "leftButton", "rightButton", "subLabel")
CANONICAL_KEYS = ("left", "right")


def empty_side() -> Side:
    return Side(label="", display=empty_field(), button=empty_field())


def is_legacy(line: Any) -> bool:
    """True when the line uses legacy fields and carries no canonical side."""
    if not isinstance(line, Mapping):
        return False
    if any(key in line for key in CANONICAL_KEYS):
        return False
    return any(key in line for key in LEGACY_KEYS)


def parse_line(raw: Any) -> LineInput | None:
    if raw is None:
        return None
    if isinstance(raw, (CanonicalLine, LegacyLine)):
        return raw
    if not isinstance(raw, Mapping):
        return None

    if not is_legacy(raw):
        return CanonicalLine(row=raw.get("row"), left=_merge_side(raw.get("left")), right=_merge_side(raw.get("right")))
    return LegacyLine(
        row=raw.get("row"),
        sub_label=raw.get("subLabel"),
        display=_mapping_or_none(raw.get("display")),
        left_button=_mapping_or_none(raw.get("leftButton")),
        right_button=_mapping_or_none(raw.get("rightButton")),
    )


def normalize_line(line: Any) -> CanonicalLine | None:
    parsed = parse_line(line)
    if parsed is None:
        return None
    if isinstance(parsed, CanonicalLine):
        return CanonicalLine(row=parsed.row, left=_merge_side(parsed.left), right=_merge_side(parsed.right))

    left = Side(
        label=_text(parsed.sub_label),
        display=empty_field(),
        button=dict(parsed.left_button) if parsed.left_button is not None else empty_field(),
    )
    right = Side(
        label="",
        display=empty_field(),
        button=dict(parsed.right_button) if parsed.right_button is not None else empty_field(),
    )
    # Legacy rows have a single display which always lands on the left column.
    if parsed.display is not None and parsed.display.get("type") != "empty":
        left.display = _canonical_display(parsed.display)
    return CanonicalLine(row=parsed.row, left=left, right=right)


def normalize_page_lines(page: Mapping[str, Any] | None) -> Any:
    if not page or page.get("lines") is None:
        return page
    data = dict(page)
    lines = page["lines"]
    if not isinstance(lines, (list, tuple)):
        data["lines"] = []
        return data
    data["lines"] = [normalize_line(line) for line in lines]
    return data


def get_display_text(display: Any) -> str:
    if not isinstance(display, Mapping):
        return ""
    value = display.get("text") or display.get("label") or ""
    return str(value)


def _mapping_or_none(value: Any) -> dict[str, Any] | None:
    if isinstance(value, Mapping):
        return dict(value)
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _canonical_display(display: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(display)
    if out.get("label") and not out.get("text"):
        out["text"] = out["label"]
    return out


def _merge_side(side: Any) -> Side:
    """Overlay supplied side fields onto a fresh empty side."""
    merged = empty_side()
    if isinstance(side, Side):
        side = side.to_dict()
    if not isinstance(side, Mapping):
        return merged

    if side.get("label") is not None:
        merged.label = _text(side["label"])
    display = side.get("display")
    if isinstance(display, Mapping):
        merged.display = _canonical_display(display)
    button = side.get("button")
    if isinstance(button, Mapping):
        merged.button = dict(button)
    return merged
