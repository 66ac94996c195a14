"""
Drawing surface over a single PDF page.

Surfaces take coordinates in native PDF space (origin bottom-left) so they
accept the output of to_page_space unchanged.
"""
from typing import Optional, Protocol, Sequence, Tuple

import fitz  # PyMuPDF

from inkpress.core.geometry import PageBox
from inkpress.core.layout import FONT_NAME
from inkpress.core.style import RGBA

Point = Tuple[float, float]


class PageSurface(Protocol):
    """Capability interface the renderers draw against."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    def draw_rectangle(self, box: PageBox, fill: Optional[RGBA] = None,
                       stroke: Optional[RGBA] = None, stroke_width: float = 0) -> None: ...

    def draw_ellipse(self, box: PageBox, stroke: RGBA, stroke_width: float) -> None: ...

    def draw_lines(self, segments: Sequence[Tuple[Point, Point]], stroke: RGBA,
                   stroke_width: float) -> None: ...

    def draw_text(self, text: str, x: float, baseline: float, font_size: float,
                  color: RGBA) -> None: ...

    def draw_image(self, box: PageBox, data: bytes) -> None: ...


class FitzPageSurface:
    """PageSurface backed by a PyMuPDF page."""

    def __init__(self, page: fitz.Page):
        self.page = page

    @property
    def width(self) -> float:
        return self.page.rect.width

    @property
    def height(self) -> float:
        return self.page.rect.height

    def _rect(self, box: PageBox) -> fitz.Rect:
        # PyMuPDF puts the origin at the top-left
        top = self.height - box.y - box.height
        return fitz.Rect(box.x, top, box.x + box.width, top + box.height)

    def _point(self, point: Point) -> fitz.Point:
        return fitz.Point(point[0], self.height - point[1])

    def draw_rectangle(self, box: PageBox, fill: Optional[RGBA] = None,
                       stroke: Optional[RGBA] = None, stroke_width: float = 0) -> None:
        self.page.draw_rect(
            self._rect(box),
            color=stroke.rgb if stroke else None,
            fill=fill.rgb if fill else None,
            width=stroke_width if stroke else 0,
            stroke_opacity=stroke.opacity if stroke else 1,
            fill_opacity=fill.opacity if fill else 1,
        )

    def draw_ellipse(self, box: PageBox, stroke: RGBA, stroke_width: float) -> None:
        self.page.draw_oval(
            self._rect(box),
            color=stroke.rgb,
            width=stroke_width,
            stroke_opacity=stroke.opacity,
        )

    def draw_lines(self, segments: Sequence[Tuple[Point, Point]], stroke: RGBA,
                   stroke_width: float) -> None:
        shape = self.page.new_shape()
        for start, end in segments:
            shape.draw_line(self._point(start), self._point(end))
        shape.finish(color=stroke.rgb, width=stroke_width, stroke_opacity=stroke.opacity)
        shape.commit()

    def draw_text(self, text: str, x: float, baseline: float, font_size: float,
                  color: RGBA) -> None:
        self.page.insert_text(
            self._point((x, baseline)),
            text,
            fontname=FONT_NAME,
            fontsize=font_size,
            color=color.rgb,
            fill_opacity=color.opacity,
        )

    def draw_image(self, box: PageBox, data: bytes) -> None:
        self.page.insert_image(self._rect(box), stream=data, keep_proportion=False)
