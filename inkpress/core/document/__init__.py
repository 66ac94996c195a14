"""
PDF document loading, drawing and export.
"""
from .loader import load_source, open_document
from .payload import ExportPayload, load_payload, save_payload
from .page_surface import FitzPageSurface, PageSurface
from .pdf_exporter import PDFExporter, export_annotated, group_by_page
from .renderers import RenderContext, decode_data_url, render_record, renderer_for

__all__ = [
    'load_source',
    'open_document',
    'ExportPayload',
    'load_payload',
    'save_payload',
    'FitzPageSurface',
    'PageSurface',
    'PDFExporter',
    'export_annotated',
    'group_by_page',
    'RenderContext',
    'decode_data_url',
    'render_record',
    'renderer_for',
]
