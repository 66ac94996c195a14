"""
Core business logic for Inkpress.
"""

from .annotations import (
    AnnotationKind,
    AnnotationRecord,
    NormalizedPosition,
    NormalizedRect,
)
from .errors import DocumentLoadError, ImageDecodeError, InkpressError, PayloadError
from .geometry import PageBox, from_page_space, to_page_space
from .layout import wrap_text
from .style import ExportConfiguration, parse_color
from .document import (
    ExportPayload,
    PDFExporter,
    export_annotated,
    group_by_page,
    load_payload,
    save_payload,
)

__all__ = [
    "AnnotationKind",
    "AnnotationRecord",
    "NormalizedPosition",
    "NormalizedRect",
    "DocumentLoadError",
    "ImageDecodeError",
    "InkpressError",
    "PayloadError",
    "PageBox",
    "from_page_space",
    "to_page_space",
    "wrap_text",
    "ExportConfiguration",
    "parse_color",
    "ExportPayload",
    "PDFExporter",
    "export_annotated",
    "group_by_page",
    "load_payload",
    "save_payload",
]
