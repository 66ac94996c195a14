"""
Background export for Qt applications.
"""
from .export_worker import ExportWorker

__all__ = ['ExportWorker']
