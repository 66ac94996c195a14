"""
Source document loading: the only I/O boundary of an export.
"""
import logging
from pathlib import Path
from typing import Optional, Union
from urllib.parse import urlparse

import fitz  # PyMuPDF
import httpx

from inkpress.core.errors import DocumentLoadError

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, bytearray, memoryview]

FETCH_TIMEOUT = 30.0


def _fetch(url: str, client: Optional[httpx.Client] = None) -> bytes:
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(follow_redirects=True, timeout=FETCH_TIMEOUT) as owned:
                response = owned.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise DocumentLoadError(f"Failed to fetch {url}: {e}") from e
    return response.content


def load_source(source: Source, client: Optional[httpx.Client] = None) -> bytes:
    """
    Materialize the source document as bytes.

    Args:
        source: http(s) URL, filesystem path, or raw PDF bytes
        client: Optional httpx client used for URL sources

    Returns:
        The document bytes

    Raises:
        DocumentLoadError: The source could not be read or is empty
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
    elif isinstance(source, str) and urlparse(source).scheme in ("http", "https"):
        logger.debug("Fetching source document from %s", source)
        data = _fetch(source, client)
    elif isinstance(source, (str, Path)):
        try:
            data = Path(source).read_bytes()
        except OSError as e:
            raise DocumentLoadError(f"Failed to read {source}: {e}") from e
    else:
        raise DocumentLoadError(f"Unsupported source type: {type(source).__name__}")

    if not data:
        raise DocumentLoadError("Source document is empty")
    return data


def open_document(source: Source, client: Optional[httpx.Client] = None) -> fitz.Document:
    """
    Load the source and open it as a PDF.

    Raises:
        DocumentLoadError: The source could not be loaded or parsed
    """
    data = load_source(source, client)
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DocumentLoadError(f"Failed to open PDF: {e}") from e

    if doc.page_count == 0:
        doc.close()
        raise DocumentLoadError("Source document has no pages")
    return doc
