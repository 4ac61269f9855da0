"""Serial link to the MCDU display board.

The board reads one UTF-8 JSON object per line, so every write is a whole
frame ending in ``FRAME_TERMINATOR``. The link carries no flow control and
the board never answers, so the transport is write-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import SerialDevice

try:
    import serial  # type: ignore
    from serial.tools import list_ports  # type: ignore
except Exception:  # pragma: no cover
    serial = None
    list_ports = None

FRAME_TERMINATOR = b"\n"
DEFAULT_BAUD = 115200


@dataclass
class SerialConfig:
    port: str
    baud: int = DEFAULT_BAUD
    write_timeout_ms: int = 500


class DisplayTransport:
    """Write-only pyserial link sending newline-terminated frames (8N1, no handshake)."""

    def __init__(self) -> None:
        self._serial: Any | None = None
        self.config: SerialConfig | None = None

    @property
    def is_open(self) -> bool:
        return bool(self._serial and self._serial.is_open)

    def open(self, port: str, baud: int = DEFAULT_BAUD, write_timeout_ms: int = 500) -> None:
        if serial is None:
            raise RuntimeError("pyserial is required")
        if self.is_open:
            return
        self.config = SerialConfig(port=port, baud=baud, write_timeout_ms=write_timeout_ms)
        self._serial = serial.Serial(
            port=port,
            baudrate=baud,
            bytesize=serial.EIGHTBITS,
            parity=serial.PARITY_NONE,
            stopbits=serial.STOPBITS_ONE,
            xonxoff=False,
            rtscts=False,
            write_timeout=max(write_timeout_ms, 1) / 1000,
        )

    def close(self) -> None:
        if self._serial is not None:
            self._serial.close()
            self._serial = None

    def write(self, frame: bytes) -> int:
        """Send one frame, appending the terminator when the caller left it off."""
        if not self.is_open:
            raise RuntimeError("Serial port is not open")
        if not frame.endswith(FRAME_TERMINATOR):
            frame += FRAME_TERMINATOR
        written = int(self._serial.write(frame))
        self._serial.flush()
        return written

    @staticmethod
    def discover() -> list[SerialDevice]:
        if list_ports is None:
            return []
        return [
            SerialDevice(device=item.device, description=item.description, hwid=item.hwid, vid=item.vid, pid=item.pid)
            for item in list_ports.comports()
        ]
