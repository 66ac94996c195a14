"""
Export options and layered style resolution.

Every style value is resolved as: record override, then export
configuration, then built-in default.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from inkpress.core.annotations.models import (
    AnnotationRecord,
    HighlightStyle,
    ShapeType,
)
from .colors import RGBA, parse_color

T = TypeVar("T")

ProgressCallback = Callable[[int, int], None]

# Built-in defaults
HIGHLIGHT_COLOR = "rgba(255, 226, 143, 0.5)"
FREETEXT_COLOR = "#333333"
FREETEXT_BACKGROUND_COLOR = "#ffffc8"
FREETEXT_FONT_SIZE = 14.0
FREETEXT_PADDING = 4.0
SHAPE_STROKE_COLOR = "#000000"
SHAPE_STROKE_WIDTH = 2.0

_LEADING_NUMBER = re.compile(r"^\s*(\d+(?:\.\d+)?)")


@dataclass(frozen=True)
class ExportConfiguration:
    """Export-wide defaults. None means "use the built-in default"."""
    text_highlight_color: Optional[str] = None
    area_highlight_color: Optional[str] = None
    freetext_color: Optional[str] = None
    freetext_background_color: Optional[str] = None
    freetext_font_size: Optional[float] = None
    shape_stroke_color: Optional[str] = None
    shape_stroke_width: Optional[float] = None
    padding: Optional[float] = None
    on_progress: Optional[ProgressCallback] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ExportConfiguration":
        """Build a configuration from camelCase option keys."""
        return ExportConfiguration(
            text_highlight_color=data.get('textHighlightColor'),
            area_highlight_color=data.get('areaHighlightColor'),
            freetext_color=data.get('defaultFreetextColor'),
            freetext_background_color=data.get('defaultFreetextBgColor'),
            freetext_font_size=data.get('defaultFreetextFontSize'),
            shape_stroke_color=data.get('defaultShapeStrokeColor'),
            shape_stroke_width=data.get('defaultShapeStrokeWidth'),
            padding=data.get('padding'),
            on_progress=data.get('onProgress'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the set options to camelCase keys, leaving out on_progress."""
        options = {
            'textHighlightColor': self.text_highlight_color,
            'areaHighlightColor': self.area_highlight_color,
            'defaultFreetextColor': self.freetext_color,
            'defaultFreetextBgColor': self.freetext_background_color,
            'defaultFreetextFontSize': self.freetext_font_size,
            'defaultShapeStrokeColor': self.shape_stroke_color,
            'defaultShapeStrokeWidth': self.shape_stroke_width,
            'padding': self.padding,
        }
        return {key: value for key, value in options.items() if value is not None}


def resolve(record_value: Optional[T], config_value: Optional[T], builtin: T) -> T:
    """Return the first value that is set; empty strings count as unset."""
    for value in (record_value, config_value):
        if value is not None and value != "":
            return value
    return builtin


def parse_font_size(value: Any) -> Optional[float]:
    """
    Read a font size override such as 14, "14" or "14px".

    Returns:
        The size, or None when it is missing, unparsable or not positive
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        size = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return None
        size = float(match.group(1))
    return size if size > 0 else None


@dataclass(frozen=True)
class HighlightAppearance:
    color: RGBA
    style: HighlightStyle


@dataclass(frozen=True)
class FreetextAppearance:
    text_color: RGBA
    background_color: RGBA
    font_size: float
    padding: float


@dataclass(frozen=True)
class ShapeAppearance:
    shape_type: ShapeType
    stroke_color: RGBA
    stroke_width: float


def highlight_style_for(record: AnnotationRecord, config: ExportConfiguration,
                        area: bool = False) -> HighlightAppearance:
    config_color = config.area_highlight_color if area else config.text_highlight_color
    return HighlightAppearance(
        color=parse_color(resolve(record.highlight_color, config_color, HIGHLIGHT_COLOR)),
        style=record.highlight_style or HighlightStyle.HIGHLIGHT,
    )


def freetext_style_for(record: AnnotationRecord,
                       config: ExportConfiguration) -> FreetextAppearance:
    return FreetextAppearance(
        text_color=parse_color(resolve(record.color, config.freetext_color, FREETEXT_COLOR)),
        background_color=parse_color(resolve(
            record.background_color, config.freetext_background_color,
            FREETEXT_BACKGROUND_COLOR)),
        font_size=resolve(
            parse_font_size(record.font_size),
            parse_font_size(config.freetext_font_size),
            FREETEXT_FONT_SIZE),
        padding=resolve(None, config.padding, FREETEXT_PADDING),
    )


def shape_style_for(record: AnnotationRecord,
                    config: ExportConfiguration) -> ShapeAppearance:
    return ShapeAppearance(
        shape_type=record.shape_type or ShapeType.RECTANGLE,
        stroke_color=parse_color(resolve(
            record.stroke_color, config.shape_stroke_color, SHAPE_STROKE_COLOR)),
        stroke_width=resolve(record.stroke_width, config.shape_stroke_width,
                             SHAPE_STROKE_WIDTH),
    )
