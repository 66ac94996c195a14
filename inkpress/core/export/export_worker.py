# inkpress/core/export/export_worker.py

import logging
import os
import shutil
import tempfile
from dataclasses import replace

from PyQt5.QtCore import QThread, pyqtSignal

from inkpress.core.document import PDFExporter
from inkpress.core.errors import InkpressError
from inkpress.core.style import ExportConfiguration

logger = logging.getLogger(__name__)


class ExportWorker(QThread):
    """Worker thread for exporting annotations to PDF without freezing the UI."""

    # Signals
    finished = pyqtSignal(bool, str)  # success, message
    progress = pyqtSignal(str)  # status message
    page_progress = pyqtSignal(int, int)  # completed, total page groups

    def __init__(self, source_pdf, output_pdf, records, config=None, use_temp_file=False):
        super().__init__()
        self.source_pdf = source_pdf
        self.output_pdf = output_pdf
        self.records = list(records)
        self.use_temp_file = use_temp_file
        self.temp_path = None

        # Route page progress through our signal, keeping the caller's callback
        config = config or ExportConfiguration()
        self._user_progress = config.on_progress
        self.exporter = PDFExporter(replace(config, on_progress=self._on_page_progress))

    def run(self):
        """Execute the export in a background thread."""
        try:
            self.progress.emit("Exporting annotations...")

            if self.use_temp_file:
                # Temp file beside the output so the move is a rename
                output_dir = os.path.dirname(os.path.abspath(self.output_pdf))
                temp_fd, self.temp_path = tempfile.mkstemp(suffix='.pdf', dir=output_dir)
                os.close(temp_fd)

                self.exporter.export_to_file(self.source_pdf, self.temp_path, self.records)

                self.progress.emit("Finalizing...")
                shutil.move(self.temp_path, self.output_pdf)
                self.temp_path = None
            else:
                self.exporter.export_to_file(self.source_pdf, self.output_pdf, self.records)

            self.finished.emit(True, "Annotations saved successfully to PDF!")

        except InkpressError as e:
            logger.error("Export to %s failed: %s", self.output_pdf, e)
            self._remove_temp_file()
            self.finished.emit(False, f"Failed to export annotations to PDF: {e}")

        except Exception as e:
            logger.exception("Export to %s failed: %s", self.output_pdf, e)
            self._remove_temp_file()
            self.finished.emit(False, f"Error during export: {e}")

    def _remove_temp_file(self):
        if self.temp_path and os.path.exists(self.temp_path):
            os.remove(self.temp_path)
        self.temp_path = None

    def _on_page_progress(self, current, total):
        """Handle page-level progress updates."""
        self.page_progress.emit(current, total)
        if self._user_progress is not None:
            self._user_progress(current, total)
