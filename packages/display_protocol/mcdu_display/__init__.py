"""Display protocol package for serial MCDU character displays."""

from .models import SendStats, SerialDevice
from .publisher import ConsoleDisplayPublisher, SerialDisplayPublisher, encode_full_display, encode_line
from .transport import DisplayTransport

__all__ = [
    "ConsoleDisplayPublisher",
    "DisplayTransport",
    "SendStats",
    "SerialDevice",
    "SerialDisplayPublisher",
    "encode_full_display",
    "encode_line",
]
