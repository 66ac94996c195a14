"""Tests for the Qt background export worker, run synchronously."""

import fitz  # PyMuPDF
import pytest

QtCore = pytest.importorskip("PyQt5.QtCore")

from inkpress.core.export import ExportWorker  # noqa: E402
from inkpress.core.style import ExportConfiguration  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


@pytest.fixture
def source_pdf(tmp_path, pdf_bytes):
    path = tmp_path / "source.pdf"
    path.write_bytes(pdf_bytes)
    return str(path)


def collect(worker):
    events = {"finished": [], "progress": [], "page_progress": []}
    worker.finished.connect(lambda ok, message: events["finished"].append((ok, message)))
    worker.progress.connect(events["progress"].append)
    worker.page_progress.connect(lambda done, total: events["page_progress"].append((done, total)))
    return events


@pytest.mark.parametrize("use_temp_file", [False, True])
def test_successful_export(qt_app, tmp_path, source_pdf, make_record, use_temp_file) -> None:
    output = tmp_path / "annotated.pdf"
    user_progress = []
    worker = ExportWorker(
        source_pdf, str(output),
        [make_record(page_number=1), make_record(page_number=2)],
        config=ExportConfiguration(on_progress=lambda done, total: user_progress.append(done)),
        use_temp_file=use_temp_file,
    )
    events = collect(worker)

    worker.run()

    assert events["finished"] == [(True, "Annotations saved successfully to PDF!")]
    assert events["page_progress"] == [(1, 2), (2, 2)]
    assert user_progress == [1, 2]
    assert events["progress"][0] == "Exporting annotations..."
    with fitz.open(str(output)) as doc:
        assert len(doc[1].get_drawings()) == 1
    assert sorted(p.name for p in tmp_path.iterdir()) == ["annotated.pdf", "source.pdf"]


def test_load_failure_is_reported(qt_app, tmp_path, make_record) -> None:
    worker = ExportWorker(str(tmp_path / "missing.pdf"), str(tmp_path / "out.pdf"),
                          [make_record()], use_temp_file=True)
    events = collect(worker)

    worker.run()

    ((ok, message),) = events["finished"]
    assert not ok
    assert message.startswith("Failed to export annotations to PDF")
    # Temp file is cleaned up
    assert list(tmp_path.iterdir()) == []
