"""
Annotation records and their wire shape.
"""
from .models import (
    AnnotationContent,
    AnnotationKind,
    AnnotationRecord,
    HighlightStyle,
    NormalizedPosition,
    NormalizedRect,
    ShapeType,
)

__all__ = [
    'AnnotationContent',
    'AnnotationKind',
    'AnnotationRecord',
    'HighlightStyle',
    'NormalizedPosition',
    'NormalizedRect',
    'ShapeType',
]
