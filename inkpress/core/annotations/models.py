"""
Data model for annotation records in normalized, page-relative coordinates.

Records arrive as camelCase wire dicts from the viewer and are parsed into
frozen dataclasses; unknown enum values are tolerated as None.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class AnnotationKind(Enum):
    TEXT = "text"
    AREA = "area"
    FREETEXT = "freetext"
    IMAGE = "image"
    DRAWING = "drawing"
    SHAPE = "shape"

    @classmethod
    def parse(cls, value: Any) -> Optional["AnnotationKind"]:
        """Return the matching kind, or None for a missing/unknown value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class HighlightStyle(Enum):
    HIGHLIGHT = "highlight"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"


class ShapeType(Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ARROW = "arrow"


@dataclass(frozen=True)
class NormalizedRect:
    """
    A rectangle in page-relative units.

    page_width/page_height record the reference frame the rectangle was
    captured in; origin is the top-left corner of the page.
    """
    x1: float
    y1: float
    x2: float
    y2: float
    page_width: float
    page_height: float
    page_number: int  # 1-based

    def __post_init__(self):
        if self.x1 > self.x2 or self.y1 > self.y2:
            raise ValueError(
                f"Inverted rectangle: ({self.x1}, {self.y1}) - ({self.x2}, {self.y2})"
            )
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError(
                f"Reference frame must be positive, got {self.page_width}x{self.page_height}"
            )

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y2 - self.y1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'x1': self.x1,
            'y1': self.y1,
            'x2': self.x2,
            'y2': self.y2,
            'width': self.page_width,
            'height': self.page_height,
            'pageNumber': self.page_number,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any],
                  page_number: Optional[int] = None) -> "NormalizedRect":
        """
        Create a rectangle from its wire shape.

        Args:
            data: Mapping with x1, y1, x2, y2, width, height and pageNumber
            page_number: Page to use when the mapping carries none

        Returns:
            The parsed rectangle
        """
        number = data.get('pageNumber')
        if number is None:
            number = page_number
        if number is None:
            raise ValueError("Rectangle has no pageNumber")

        return NormalizedRect(
            x1=float(data['x1']),
            y1=float(data['y1']),
            x2=float(data['x2']),
            y2=float(data['y2']),
            page_width=float(data['width']),
            page_height=float(data['height']),
            page_number=int(number),
        )


@dataclass(frozen=True)
class NormalizedPosition:
    """Placement of an annotation: its bounding box plus optional sub-regions."""
    bounding_rect: NormalizedRect
    # Per-line boxes for text selections; empty for single-region kinds
    rects: Tuple[NormalizedRect, ...] = ()

    @property
    def page_number(self) -> int:
        return self.bounding_rect.page_number

    def to_dict(self) -> Dict[str, Any]:
        return {
            'boundingRect': self.bounding_rect.to_dict(),
            'rects': [rect.to_dict() for rect in self.rects],
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "NormalizedPosition":
        bounding = NormalizedRect.from_dict(data['boundingRect'])
        rects = tuple(
            NormalizedRect.from_dict(rect, bounding.page_number)
            for rect in data.get('rects') or []
        )
        return NormalizedPosition(bounding_rect=bounding, rects=rects)


@dataclass(frozen=True)
class AnnotationContent:
    text: Optional[str] = None
    image: Optional[str] = None  # base64 data URL


@dataclass(frozen=True)
class AnnotationRecord:
    """A single annotation handed to the export pipeline."""
    id: str
    kind: Optional[AnnotationKind]
    position: NormalizedPosition
    content: AnnotationContent = field(default_factory=AnnotationContent)

    # Text/area highlight overrides
    highlight_color: Optional[str] = None
    highlight_style: Optional[HighlightStyle] = None

    # Freetext overrides
    color: Optional[str] = None
    background_color: Optional[str] = None
    font_size: Optional[str] = None
    font_family: Optional[str] = None  # kept for round-tripping, export always uses Helvetica

    # Shape overrides
    shape_type: Optional[ShapeType] = None
    stroke_color: Optional[str] = None
    stroke_width: Optional[float] = None
    # Arrow endpoints as fractions of the bounding box, top-left origin
    start_point: Optional[Tuple[float, float]] = None
    end_point: Optional[Tuple[float, float]] = None

    @property
    def page_number(self) -> int:
        return self.position.page_number

    def to_dict(self) -> Dict[str, Any]:
        """Convert the record to its camelCase wire shape."""
        data: Dict[str, Any] = {
            'id': self.id,
            'position': self.position.to_dict(),
        }
        if self.kind is not None:
            data['type'] = self.kind.value

        content = {}
        if self.content.text is not None:
            content['text'] = self.content.text
        if self.content.image is not None:
            content['image'] = self.content.image
        if content:
            data['content'] = content

        optional = {
            'highlightColor': self.highlight_color,
            'highlightStyle': self.highlight_style.value if self.highlight_style else None,
            'color': self.color,
            'backgroundColor': self.background_color,
            'fontSize': self.font_size,
            'fontFamily': self.font_family,
            'shapeType': self.shape_type.value if self.shape_type else None,
            'strokeColor': self.stroke_color,
            'strokeWidth': self.stroke_width,
            'startPoint': _point_to_dict(self.start_point),
            'endPoint': _point_to_dict(self.end_point),
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "AnnotationRecord":
        """
        Create a record from the wire shape produced by the viewer.

        Unknown kinds, highlight styles and shape types are tolerated and
        become None so the renderer fallbacks apply.
        """
        content = data.get('content') or {}
        font_size = data.get('fontSize')
        stroke_width = data.get('strokeWidth')

        return AnnotationRecord(
            id=str(data['id']),
            kind=AnnotationKind.parse(data.get('type', data.get('kind'))),
            position=NormalizedPosition.from_dict(data['position']),
            content=AnnotationContent(
                text=content.get('text'),
                image=content.get('image'),
            ),
            highlight_color=data.get('highlightColor'),
            highlight_style=_parse_enum(HighlightStyle, data.get('highlightStyle')),
            color=data.get('color'),
            background_color=data.get('backgroundColor'),
            font_size=str(font_size) if font_size is not None else None,
            font_family=data.get('fontFamily'),
            shape_type=_parse_enum(ShapeType, data.get('shapeType')),
            stroke_color=data.get('strokeColor'),
            stroke_width=float(stroke_width) if stroke_width is not None else None,
            start_point=_point_from_dict(data.get('startPoint')),
            end_point=_point_from_dict(data.get('endPoint')),
        )


def _parse_enum(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _point_from_dict(data):
    if not data:
        return None
    return (float(data['x']), float(data['y']))


def _point_to_dict(point):
    if point is None:
        return None
    return {'x': point[0], 'y': point[1]}
