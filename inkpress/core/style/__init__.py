"""
Colors, export options and style resolution.
"""
from .colors import FALLBACK_COLOR, RGBA, parse_color
from .defaults import (
    ExportConfiguration,
    FreetextAppearance,
    HighlightAppearance,
    ShapeAppearance,
    freetext_style_for,
    highlight_style_for,
    parse_font_size,
    resolve,
    shape_style_for,
)

__all__ = [
    'FALLBACK_COLOR',
    'RGBA',
    'parse_color',
    'ExportConfiguration',
    'FreetextAppearance',
    'HighlightAppearance',
    'ShapeAppearance',
    'freetext_style_for',
    'highlight_style_for',
    'parse_font_size',
    'resolve',
    'shape_style_for',
]
