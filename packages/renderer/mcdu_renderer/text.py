"""Fixed-width text shaping for character displays."""

from __future__ import annotations

ALIGNMENTS = ("left", "right", "center")


def pad_or_truncate(text: str, width: int) -> str:
    width = max(0, width)
    if len(text) < width:
        return text + " " * (width - len(text))
    return text[:width]


def align_text(text: str, align: str, width: int) -> str:
    """Pad ``text`` to ``width``; center puts the odd space on the right."""
    width = max(0, width)
    text = text[:width]
    gap = width - len(text)
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def blank(width: int) -> str:
    return " " * max(0, width)


def compose_columns(left: str, right: str, width: int) -> str:
    """Left text flush left, right text flush right, right side wins on overlap."""
    if not right:
        return pad_or_truncate(left, width)
    right = right[:width]
    room = width - len(right) - 1
    if room <= 0:
        return align_text(right, "right", width)
    return pad_or_truncate(left, room) + " " + right
