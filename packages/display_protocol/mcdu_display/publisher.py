"""Display publishers that get rendered grids onto a device or a stream."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Protocol, TextIO

from .models import SendStats

logger = logging.getLogger("mcdu.display")


class _Line(Protocol):
    text: str
    color: str


class _Writer(Protocol):
    def write(self, payload: bytes) -> int: ...


def encode_full_display(lines: list[_Line]) -> bytes:
    payload = {"cmd": "display", "lines": [{"text": line.text, "color": line.color} for line in lines]}
    return (json.dumps(payload, ensure_ascii=False) + "\n").encode("utf-8")


def encode_line(line_number: int, text: str, color: str) -> bytes:
    payload = {"cmd": "line", "line": line_number, "text": text, "color": color}
    return (json.dumps(payload, ensure_ascii=False) + "\n").encode("utf-8")


class SerialDisplayPublisher:
    """Sends frames over a transport, skipping repeats of the last full frame."""

    def __init__(self, transport: _Writer, device_id: str = "mcdu") -> None:
        self.transport = transport
        self.device_id = device_id
        self.last_content: list[tuple[str, str]] | None = None
        self.stats = SendStats()

    async def publish_full_display(self, lines: list[_Line]) -> None:
        content = [(line.text, line.color) for line in lines]
        if content == self.last_content:
            self.stats.frames_skipped += 1
            return
        await self._send(encode_full_display(lines))
        self.last_content = content
        self.stats.frames_sent += 1

    async def publish_line(self, line_number: int, text: str, color: str) -> None:
        await self._send(encode_line(line_number, text, color))
        if self.last_content is not None and 1 <= line_number <= len(self.last_content):
            self.last_content[line_number - 1] = (text, color)
        self.stats.lines_sent += 1

    async def _send(self, payload: bytes) -> None:
        try:
            written = await asyncio.to_thread(self.transport.write, payload)
        except Exception as exc:
            self.stats.errors += 1
            logger.error(
                f"display write failed device={self.device_id} error={exc}",
                extra={"event": "display_write_failed"},
            )
            raise
        self.stats.bytes_sent += written


class ConsoleDisplayPublisher:
    """Prints frames as a bordered text grid."""

    def __init__(self, stream: TextIO | None = None, show_colors: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.show_colors = show_colors
        self.frames: list[list[Any]] = []

    async def publish_full_display(self, lines: list[_Line]) -> None:
        self.frames.append(list(lines))
        width = max((len(line.text) for line in lines), default=0)
        border = "+" + "-" * width + "+"
        out = [border]
        for line in lines:
            suffix = f" {line.color}" if self.show_colors else ""
            out.append(f"|{line.text}|{suffix}")
        out.append(border)
        self.stream.write("\n".join(out) + "\n")

    async def publish_line(self, line_number: int, text: str, color: str) -> None:
        suffix = f" {color}" if self.show_colors else ""
        self.stream.write(f"{line_number:>2}|{text}|{suffix}\n")
