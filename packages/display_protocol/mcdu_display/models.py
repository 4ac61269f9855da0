"""Typed models for display transport and publishing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerialDevice:
    device: str
    description: str
    hwid: str
    vid: int | None
    pid: int | None


@dataclass
class SendStats:
    bytes_sent: int = 0
    frames_sent: int = 0
    lines_sent: int = 0
    frames_skipped: int = 0
    errors: int = 0
