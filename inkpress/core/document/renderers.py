"""
Per-kind annotation renderers.

Each renderer draws one record onto a page surface. Geometry always comes
from to_page_space and colors from the layered style resolution.
"""
import base64
import binascii
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from inkpress.core.annotations import (
    AnnotationKind,
    AnnotationRecord,
    HighlightStyle,
    NormalizedRect,
    ShapeType,
)
from inkpress.core.errors import ImageDecodeError
from inkpress.core.geometry import PageBox, scale_ratios, to_page_space
from inkpress.core.layout import helvetica_measure, wrap_text
from inkpress.core.layout.text_wrap import Measure
from inkpress.core.style import (
    ExportConfiguration,
    freetext_style_for,
    highlight_style_for,
    shape_style_for,
)

from .page_surface import PageSurface

logger = logging.getLogger(__name__)

LINE_SPACING = 1.2
# Underline/strikethrough bar thickness as a share of the line box height
RULE_THICKNESS = 0.1
MIN_RULE_THICKNESS = 1.0
ARROW_HEAD_SCALE = 10.0


@dataclass
class RenderContext:
    """Per-export resources shared by all renderers."""
    config: ExportConfiguration = field(default_factory=ExportConfiguration)
    measure_for: Callable[[float], Measure] = helvetica_measure


Renderer = Callable[[PageSurface, AnnotationRecord, RenderContext], None]


def _page_box(surface: PageSurface, rect: NormalizedRect) -> PageBox:
    return to_page_space(rect, surface.width, surface.height)


def _rule_box(box: PageBox, style: HighlightStyle) -> PageBox:
    if style == HighlightStyle.HIGHLIGHT:
        return box
    thickness = min(max(box.height * RULE_THICKNESS, MIN_RULE_THICKNESS), box.height)
    if style == HighlightStyle.UNDERLINE:
        return PageBox(box.x, box.y, box.width, thickness)
    # Strikethrough
    return PageBox(box.x, box.y + (box.height - thickness) / 2, box.width, thickness)


def render_text(surface: PageSurface, record: AnnotationRecord, context: RenderContext) -> None:
    """Fill every line box of a text selection."""
    appearance = highlight_style_for(record, context.config)
    rects = record.position.rects or (record.position.bounding_rect,)

    for rect in rects:
        box = _rule_box(_page_box(surface, rect), appearance.style)
        surface.draw_rectangle(box, fill=appearance.color)


def render_area(surface: PageSurface, record: AnnotationRecord, context: RenderContext) -> None:
    """Fill the bounding box."""
    appearance = highlight_style_for(record, context.config, area=True)
    box = _rule_box(_page_box(surface, record.position.bounding_rect), appearance.style)
    surface.draw_rectangle(box, fill=appearance.color)


def render_freetext(surface: PageSurface, record: AnnotationRecord,
                    context: RenderContext) -> None:
    """
    Draw a background box and as many wrapped lines as fit inside it.

    Font size and padding scale with the box's vertical ratio so the type
    stays proportional to the box. Lines that would fall below the padded
    bottom edge are dropped.
    """
    rect = record.position.bounding_rect
    appearance = freetext_style_for(record, context.config)
    box = _page_box(surface, rect)
    _, y_ratio = scale_ratios(rect, surface.width, surface.height)

    surface.draw_rectangle(box, fill=appearance.background_color)

    text = record.content.text or ""
    font_size = appearance.font_size * y_ratio
    padding = appearance.padding * y_ratio
    max_width = box.width - padding * 2
    if max_width <= 0 or not text:
        return

    line_height = font_size * LINE_SPACING
    baseline = box.y + box.height - line_height - padding
    floor = box.y + padding

    for line in wrap_text(text, context.measure_for(font_size), max_width):
        if baseline < floor:
            logger.debug("Freetext %s clipped at its box bottom", record.id)
            break
        if line:
            surface.draw_text(line, box.x + padding, baseline, font_size,
                              appearance.text_color)
        baseline -= line_height


def decode_data_url(data_url: str) -> bytes:
    """
    Decode a base64 data URL to raw image bytes.

    The MIME type in the header is not trusted; the embedder detects the
    image format from the bytes themselves.

    Returns:
        The decoded payload

    Raises:
        ImageDecodeError: The URL has no payload or it is not valid base64
    """
    _, sep, payload = data_url.partition(",")
    if not sep or not payload:
        raise ImageDecodeError("Data URL has no payload")

    try:
        data = base64.b64decode(payload)
    except (binascii.Error, ValueError) as e:
        raise ImageDecodeError(f"Invalid base64 payload: {e}") from e

    if not data:
        raise ImageDecodeError("Data URL payload is empty")

    return data


def render_image(surface: PageSurface, record: AnnotationRecord, context: RenderContext) -> None:
    """Embed the record's raster into its bounding box; failures skip the record."""
    data_url = record.content.image
    if not data_url:
        logger.debug("Annotation %s has no image content, skipping", record.id)
        return

    try:
        data = decode_data_url(data_url)
        surface.draw_image(_page_box(surface, record.position.bounding_rect), data)
    except Exception as e:
        # A bad raster only drops this record
        logger.warning("Failed to embed image for annotation %s: %s", record.id, e)
        return

    logger.debug("Embedded image for annotation %s", record.id)


def _arrow_segments(box: PageBox, start: Tuple[float, float], end: Tuple[float, float],
                    stroke_width: float) -> List[Tuple[Tuple[float, float], Tuple[float, float]]]:
    # Endpoints are fractions of the box measured from its top-left corner
    start_x = box.x + start[0] * box.width
    start_y = box.top - start[1] * box.height
    end_x = box.x + end[0] * box.width
    end_y = box.top - end[1] * box.height

    dx = end_x - start_x
    dy = end_y - start_y
    length = math.hypot(dx, dy)
    if length == 0:
        return []

    arrow_size = ARROW_HEAD_SCALE * (stroke_width / 2.0)
    # Stop the shaft short of the tip so the head stays sharp
    shaft_end = (end_x - dx / length * arrow_size * 0.5,
                 end_y - dy / length * arrow_size * 0.5)

    angle = math.atan2(dy, dx)
    head_left = (end_x - arrow_size * math.cos(angle - math.pi / 6),
                 end_y - arrow_size * math.sin(angle - math.pi / 6))
    head_right = (end_x - arrow_size * math.cos(angle + math.pi / 6),
                  end_y - arrow_size * math.sin(angle + math.pi / 6))
    tip = (end_x, end_y)

    return [
        ((start_x, start_y), shaft_end),
        (head_left, tip),
        (head_right, tip),
    ]


def render_shape(surface: PageSurface, record: AnnotationRecord, context: RenderContext) -> None:
    """Stroke a rectangle, ellipse or arrow inside the bounding box."""
    rect = record.position.bounding_rect
    appearance = shape_style_for(record, context.config)
    box = _page_box(surface, rect)
    _, y_ratio = scale_ratios(rect, surface.width, surface.height)
    stroke_width = appearance.stroke_width * y_ratio

    if appearance.shape_type == ShapeType.CIRCLE:
        surface.draw_ellipse(box, appearance.stroke_color, stroke_width)
    elif appearance.shape_type == ShapeType.ARROW:
        segments = _arrow_segments(
            box,
            record.start_point or (0.0, 0.5),
            record.end_point or (1.0, 0.5),
            stroke_width,
        )
        if segments:
            surface.draw_lines(segments, appearance.stroke_color, stroke_width)
    else:
        surface.draw_rectangle(box, stroke=appearance.stroke_color, stroke_width=stroke_width)


RENDERERS: Dict[AnnotationKind, Renderer] = {
    AnnotationKind.TEXT: render_text,
    AnnotationKind.AREA: render_area,
    AnnotationKind.FREETEXT: render_freetext,
    AnnotationKind.IMAGE: render_image,
    AnnotationKind.DRAWING: render_image,
    AnnotationKind.SHAPE: render_shape,
}

# Records without a recognized kind are drawn as area highlights
DEFAULT_RENDERER: Renderer = render_area


def renderer_for(kind: Optional[AnnotationKind]) -> Renderer:
    if kind is None:
        return DEFAULT_RENDERER
    return RENDERERS.get(kind, DEFAULT_RENDERER)


def render_record(surface: PageSurface, record: AnnotationRecord,
                  context: RenderContext) -> None:
    renderer_for(record.kind)(surface, record, context)
