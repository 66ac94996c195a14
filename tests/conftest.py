import base64
from typing import Any, Callable, Dict, List, Optional, Tuple

import fitz  # PyMuPDF
import pytest

from inkpress.core.annotations import (
    AnnotationContent,
    AnnotationKind,
    AnnotationRecord,
    NormalizedPosition,
    NormalizedRect,
)

PAGE_WIDTH = 600
PAGE_HEIGHT = 800


class RecordingSurface:
    """PageSurface that records drawing calls instead of drawing."""

    def __init__(self, width: float = PAGE_WIDTH, height: float = PAGE_HEIGHT):
        self.width = width
        self.height = height
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def _of(self, name):
        return [args for call, args in self.calls if call == name]

    @property
    def rectangles(self):
        return self._of("rectangle")

    @property
    def texts(self):
        return self._of("text")

    @property
    def images(self):
        return self._of("image")

    def draw_rectangle(self, box, fill=None, stroke=None, stroke_width=0):
        self.calls.append(("rectangle", {
            "box": box, "fill": fill, "stroke": stroke, "stroke_width": stroke_width,
        }))

    def draw_ellipse(self, box, stroke, stroke_width):
        self.calls.append(("ellipse", {"box": box, "stroke": stroke, "stroke_width": stroke_width}))

    def draw_lines(self, segments, stroke, stroke_width):
        self.calls.append(("lines", {
            "segments": list(segments), "stroke": stroke, "stroke_width": stroke_width,
        }))

    def draw_text(self, text, x, baseline, font_size, color):
        self.calls.append(("text", {
            "text": text, "x": x, "baseline": baseline, "font_size": font_size, "color": color,
        }))

    def draw_image(self, box, data):
        self.calls.append(("image", {"box": box, "data": data}))


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def make_rect() -> Callable[..., NormalizedRect]:
    def _factory(x1=0.0, y1=0.0, x2=100.0, y2=50.0, page_width=PAGE_WIDTH,
                 page_height=PAGE_HEIGHT, page_number=1) -> NormalizedRect:
        return NormalizedRect(x1, y1, x2, y2, page_width, page_height, page_number)

    return _factory


@pytest.fixture
def make_record(make_rect) -> Callable[..., AnnotationRecord]:
    def _factory(kind: Optional[AnnotationKind] = AnnotationKind.AREA, page_number: int = 1,
                 rect: Optional[NormalizedRect] = None, rects=(), text=None, image=None,
                 record_id: str = "a1", **overrides) -> AnnotationRecord:
        bounding = rect or make_rect(page_number=page_number)
        return AnnotationRecord(
            id=record_id,
            kind=kind,
            position=NormalizedPosition(bounding_rect=bounding, rects=tuple(rects)),
            content=AnnotationContent(text=text, image=image),
            **overrides,
        )

    return _factory


@pytest.fixture
def pdf_bytes() -> bytes:
    """Two blank 600x800 pages."""
    doc = fitz.open()
    for _ in range(2):
        doc.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def png_bytes() -> bytes:
    pix = fitz.Pixmap(fitz.csRGB, fitz.IRect(0, 0, 4, 4), False)
    pix.clear_with(200)
    return pix.tobytes("png")


@pytest.fixture
def png_data_url(png_bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")
