"""Tests for source document loading."""

import httpx
import pytest

from inkpress.core.document import PDFExporter, load_source, open_document
from inkpress.core.errors import DocumentLoadError


def mock_client(status_code=200, content=b""):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, content=content)

    return httpx.Client(transport=httpx.MockTransport(handler)), requests


@pytest.mark.parametrize("wrap", [bytes, bytearray, memoryview])
def test_buffers_are_copied_to_bytes(wrap, pdf_bytes) -> None:
    data = load_source(wrap(pdf_bytes))

    assert isinstance(data, bytes)
    assert data == pdf_bytes


def test_url_is_fetched(pdf_bytes) -> None:
    client, requests = mock_client(content=pdf_bytes)

    data = load_source("https://example.com/doc.pdf", client)

    assert data == pdf_bytes
    assert str(requests[0].url) == "https://example.com/doc.pdf"


def test_http_error_is_a_load_error() -> None:
    with pytest.raises(DocumentLoadError, match="Failed to fetch"):
        load_source("http://example.com/missing.pdf", mock_client(status_code=404)[0])


def test_path_is_read(tmp_path, pdf_bytes) -> None:
    path = tmp_path / "doc.pdf"
    path.write_bytes(pdf_bytes)

    assert load_source(path) == pdf_bytes
    assert load_source(str(path)) == pdf_bytes


def test_missing_file_is_a_load_error(tmp_path) -> None:
    with pytest.raises(DocumentLoadError, match="Failed to read"):
        load_source(tmp_path / "nope.pdf")


def test_empty_source_is_a_load_error() -> None:
    with pytest.raises(DocumentLoadError, match="empty"):
        load_source(b"")


def test_unsupported_source_type() -> None:
    with pytest.raises(DocumentLoadError, match="Unsupported"):
        load_source(42)


def test_open_document_counts_pages(pdf_bytes) -> None:
    doc = open_document(pdf_bytes)
    try:
        assert doc.page_count == 2
    finally:
        doc.close()


def test_exporter_uses_injected_client(pdf_bytes, make_record) -> None:
    client, requests = mock_client(content=pdf_bytes)

    data = PDFExporter(client=client).export("https://example.com/doc.pdf", [make_record()])

    assert data.startswith(b"%PDF")
    assert len(requests) == 1
