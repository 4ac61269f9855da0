"""PNG preview of a rendered character grid."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from .models import Color, RenderedDisplay

BACKGROUND = "#05080C"

PALETTE: dict[str, str] = {
    Color.WHITE.value: "#F4F7FF",
    Color.AMBER.value: "#FFB347",
    Color.CYAN.value: "#35D9FF",
    Color.GREEN.value: "#8CFFB5",
    Color.MAGENTA.value: "#FF6BD6",
    Color.RED.value: "#FF4D4D",
    Color.YELLOW.value: "#FFE066",
    Color.GREY.value: "#A9B5D1",
}


def _rgb(hex_color: str) -> tuple[int, int, int]:
    return tuple(int(hex_color[i : i + 2], 16) for i in (1, 3, 5))  # type: ignore[return-value]


class GridPreview:
    """Draws rendered lines cell by cell with the default bitmap font."""

    def __init__(self, cell_width: int = 12, cell_height: int = 22, margin: int = 8) -> None:
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.margin = margin
        self._font = ImageFont.load_default()

    def render_image(self, lines: RenderedDisplay, columns: int | None = None) -> Image.Image:
        columns = columns or max((len(line.text) for line in lines), default=0)
        width = columns * self.cell_width + 2 * self.margin
        height = len(lines) * self.cell_height + 2 * self.margin
        image = Image.new("RGB", (max(width, 1), max(height, 1)), _rgb(BACKGROUND))
        draw = ImageDraw.Draw(image)

        for row, line in enumerate(lines):
            fill = _rgb(PALETTE.get(line.color, PALETTE[Color.WHITE.value]))
            y = self.margin + row * self.cell_height
            for col, char in enumerate(line.text[:columns]):
                if char == " ":
                    continue
                x = self.margin + col * self.cell_width
                draw.text((x, y), char, font=self._font, fill=fill)
        return image

    def save_png(self, lines: RenderedDisplay, path, columns: int | None = None):
        image = self.render_image(lines, columns)
        image.save(path, format="PNG")
        return path

    def preview_data_url(self, lines: RenderedDisplay, columns: int | None = None) -> str:
        buf = BytesIO()
        self.render_image(lines, columns).save(buf, format="PNG")
        b64 = base64.b64encode(buf.getvalue()).decode("ascii")
        return f"data:image/png;base64,{b64}"
