"""
Inkpress - burns viewer annotations into PDF documents.
"""
from inkpress.core import (
    AnnotationKind,
    AnnotationRecord,
    ExportConfiguration,
    NormalizedPosition,
    NormalizedRect,
    PDFExporter,
    export_annotated,
)

__all__ = [
    "AnnotationKind",
    "AnnotationRecord",
    "ExportConfiguration",
    "NormalizedPosition",
    "NormalizedRect",
    "PDFExporter",
    "export_annotated",
]
