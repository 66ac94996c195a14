"""
Page-grouped export of annotation records into a PDF document.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import fitz  # PyMuPDF
import httpx

from inkpress.core.annotations import AnnotationRecord
from inkpress.core.layout import helvetica_measure
from inkpress.core.style import ExportConfiguration

from .loader import Source, open_document
from .page_surface import FitzPageSurface
from .renderers import RenderContext, render_record

logger = logging.getLogger(__name__)


def group_by_page(records: Iterable[AnnotationRecord]) -> Dict[int, List[AnnotationRecord]]:
    """
    Group records by 1-based page number.

    Pages keep the order in which they were first seen and records keep their
    input order within a page; both drive the stacking order on export.
    """
    by_page: Dict[int, List[AnnotationRecord]] = {}
    for record in records:
        by_page.setdefault(record.page_number, []).append(record)
    return by_page


class PDFExporter:
    """Burns annotation records into a copy of a PDF document."""

    def __init__(self, config: Optional[ExportConfiguration] = None,
                 client: Optional[httpx.Client] = None):
        self.config = config or ExportConfiguration()
        self.client = client

    def export(self, source: Source, records: Iterable[AnnotationRecord]) -> bytes:
        """
        Export annotations into the source document.

        Args:
            source: http(s) URL, filesystem path or raw PDF bytes
            records: Annotation records to draw

        Returns:
            The annotated document's bytes

        Raises:
            DocumentLoadError: The source could not be loaded
        """
        doc = open_document(source, self.client)
        try:
            self._render(doc, records)
            return doc.tobytes(garbage=4, deflate=True)
        finally:
            doc.close()

    def export_to_file(self, source: Source, output_path: Union[str, Path],
                       records: Iterable[AnnotationRecord]) -> None:
        """Export annotations and write the result to output_path."""
        data = self.export(source, records)
        Path(output_path).write_bytes(data)
        logger.info("Wrote annotated PDF to %s", output_path)

    def _render(self, doc: fitz.Document, records: Iterable[AnnotationRecord]) -> None:
        context = RenderContext(config=self.config, measure_for=helvetica_measure)
        annotations_by_page = group_by_page(records)

        total = len(annotations_by_page)
        completed = 0

        for page_number, page_records in annotations_by_page.items():
            if not 1 <= page_number <= doc.page_count:
                logger.debug(
                    "Skipping %d annotation(s) for missing page %d",
                    len(page_records), page_number,
                )
                continue

            surface = FitzPageSurface(doc[page_number - 1])
            for record in page_records:
                render_record(surface, record, context)

            completed += 1
            if self.config.on_progress is not None:
                self.config.on_progress(completed, total)

        logger.info(
            "Exported %d page group(s) of %d into a %d page document",
            completed, total, doc.page_count,
        )


def export_annotated(source: Source, records: Iterable[AnnotationRecord],
                     config: Optional[ExportConfiguration] = None) -> bytes:
    """Convenience wrapper around PDFExporter.export."""
    return PDFExporter(config).export(source, records)
