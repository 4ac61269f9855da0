import re
import sys
import unittest
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from mcdu_renderer.models import DisplayGeometry
from mcdu_renderer.page_renderer import PageRenderer


def _label(text):
    return {"type": "label", "label": text}


PAGES = [
    {
        "id": "home-main",
        "name": "Home",
        "lines": [
            {"row": 1, "display": _label("WELCOME")},
            {"row": 3, "subLabel": "TEMPERATUR", "display": _label("21.5 C")},
            {"row": 5, "display": _label("LIGHTS")},
        ],
    },
    {
        "id": "long-page",
        "name": "Long List",
        "lines": [{"row": 100 + i, "display": _label(f"ITEM {i}")} for i in range(1, 10)],
    },
    {
        "id": "sub-labels-page",
        "name": "Sub Labels",
        "lines": [
            {"row": 1, "display": _label("TITLE")},
            {"row": 3, "subLabel": "WOHNZIMMER", "display": _label("21.5 C")},
            {"row": 5, "subLabel": "KÜCHE", "display": _label("19.0 C")},
            {"row": 7, "display": _label("NO SUB")},
        ],
    },
]


class FakeAdapter:
    def __init__(self, pages, geometry=None):
        self.pages = list(pages)
        self.geometry = geometry or DisplayGeometry(columns=24, rows=14, default_color="white")

    def find_page(self, page_id):
        for page in self.pages:
            if page["id"] == page_id:
                return page
        return None


class FakePublisher:
    def __init__(self):
        self.published = []
        self.published_lines = []

    async def publish_full_display(self, lines):
        self.published.append(lines)

    async def publish_line(self, line_number, text, color):
        self.published_lines.append((line_number, text, color))


class PageRendererTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.adapter = FakeAdapter(PAGES)
        self.publisher = FakePublisher()
        self.renderer = PageRenderer(self.adapter, self.publisher, clock=lambda: datetime(2026, 10, 19, 14, 7))


class SubLabelRowTests(PageRendererTestCase):
    async def test_sub_labels_on_even_rows(self):
        await self.renderer.render_page("sub-labels-page")
        lines = self.publisher.published[0]
        self.assertIn("WOHNZIMMER", lines[1].text)
        self.assertEqual(lines[1].color, "cyan")
        self.assertIn("KÜCHE", lines[3].text)
        self.assertEqual(lines[3].color, "cyan")

    async def test_blank_even_row_without_sub_label(self):
        await self.renderer.render_page("sub-labels-page")
        lines = self.publisher.published[0]
        self.assertEqual(lines[5].text.strip(), "")
        self.assertEqual(lines[5].color, "cyan")

    async def test_all_even_rows_cyan(self):
        await self.renderer.render_page("home-main")
        lines = self.publisher.published[0]
        for idx in (1, 3, 5, 7, 9):
            self.assertEqual(lines[idx].color, "cyan")


class StatusBarTests(PageRendererTestCase):
    async def test_status_bar_on_row_13(self):
        await self.renderer.render_page("home-main")
        status = self.publisher.published[0][12]
        self.assertEqual(status.color, "cyan")
        self.assertIn("HOME", status.text)
        self.assertEqual(len(status.text), 24)

    async def test_status_bar_clock(self):
        await self.renderer.render_page("home-main")
        status = self.publisher.published[0][12]
        self.assertRegex(status.text, r"\d{2}:\d{2}")
        self.assertIn("14:07", status.text)

    async def test_page_indicator_when_paginated(self):
        await self.renderer.render_page("long-page")
        self.assertIn("1/2", self.publisher.published[0][12].text)

    async def test_no_page_indicator_for_single_page(self):
        await self.renderer.render_page("home-main")
        self.assertIsNone(re.search(r"\d+/\d+", self.publisher.published[0][12].text))

    def test_render_status_bar_uses_upper_name(self):
        result = self.renderer.render_status_bar("home-main")
        self.assertIn("HOME", result.text)
        self.assertEqual(result.color, "cyan")

    def test_render_status_bar_falls_back_to_id(self):
        self.adapter.pages.append({"id": "no-name-page", "lines": []})
        self.assertIn("NO-NAME-PAGE", self.renderer.render_status_bar("no-name-page").text)

    def test_render_status_bar_truncates_long_names(self):
        self.adapter.pages.append({"id": "x", "name": "A Very Long Page Name That Exceeds", "lines": []})
        self.assertEqual(len(self.renderer.render_status_bar("x").text), 24)

    async def test_render_status_bar_for_unknown_page_after_paginated_render(self):
        await self.renderer.render_page("long-page")
        result = self.renderer.render_status_bar("missing")
        self.assertEqual(result.text, "MISSING" + " " * 12 + "14:07")
        self.assertIsNone(re.search(r"\d+/\d+", result.text))
        self.assertEqual(self.renderer.total_pages, 2)


class PaginationTests(PageRendererTestCase):
    async def test_paginates_long_pages(self):
        await self.renderer.render_page("long-page")
        self.assertEqual(self.renderer.total_pages, 2)
        self.assertEqual(self.renderer.current_page_offset, 0)

    async def test_short_pages_not_paginated(self):
        await self.renderer.render_page("home-main")
        self.assertEqual(self.renderer.total_pages, 1)
        self.assertEqual(self.renderer.current_page_offset, 0)

    async def test_first_page_window(self):
        await self.renderer.render_page("long-page")
        lines = self.publisher.published[0]
        self.assertIn("ITEM 1", lines[0].text)
        self.assertIn("ITEM 6", lines[10].text)

    async def test_second_page_window(self):
        self.renderer.current_page_offset = 1
        await self.renderer.render_page("long-page")
        lines = self.publisher.published[0]
        self.assertIn("ITEM 7", lines[0].text)
        self.assertIn("ITEM 8", lines[2].text)
        self.assertIn("ITEM 9", lines[4].text)

    async def test_offset_clamped(self):
        self.renderer.current_page_offset = 99
        await self.renderer.render_page("long-page")
        self.assertEqual(self.renderer.current_page_offset, 1)

    async def test_reset_for_non_paginated_page(self):
        self.renderer.current_page_offset = 5
        self.renderer.total_pages = 10
        await self.renderer.render_page("home-main")
        self.assertEqual(self.renderer.total_pages, 1)
        self.assertEqual(self.renderer.current_page_offset, 0)

    async def test_next_and_previous_page(self):
        await self.renderer.render_page("long-page")
        await self.renderer.next_page()
        self.assertEqual(self.renderer.current_page_offset, 1)
        self.assertIn("ITEM 7", self.publisher.published[-1][0].text)
        await self.renderer.next_page()
        self.assertEqual(self.renderer.current_page_offset, 1)
        await self.renderer.previous_page()
        self.assertEqual(self.renderer.current_page_offset, 0)
        self.assertEqual(len(self.publisher.published), 4)

    async def test_next_page_without_current_page(self):
        self.assertIsNone(await self.renderer.next_page())
        self.assertEqual(self.publisher.published, [])


class RenderingOutputTests(PageRendererTestCase):
    async def test_exactly_14_lines_of_24(self):
        await self.renderer.render_page("home-main")
        lines = self.publisher.published[0]
        self.assertEqual(len(lines), 14)
        for line in lines:
            self.assertEqual(len(line.text), 24)

    async def test_unknown_page_renders_error(self):
        returned = await self.renderer.render_page("nonexistent")
        lines = self.publisher.published[0]
        self.assertIs(returned, lines)
        self.assertEqual(len(lines), 14)
        self.assertTrue(any("NICHT GEFUNDEN" in line.text and line.color == "red" for line in lines))
        self.assertEqual(self.renderer.total_pages, 1)

    async def test_config_is_not_mutated(self):
        before = repr(PAGES)
        await self.renderer.render_page("sub-labels-page")
        self.assertEqual(repr(PAGES), before)

    def test_text_helpers(self):
        self.assertEqual(self.renderer.pad_or_truncate("abc", 6), "abc   ")
        self.assertEqual(self.renderer.align_text("hi", "center", 10), "    hi    ")


if __name__ == "__main__":
    unittest.main()
