import json
from pathlib import Path

import pytest

from gdocs_parser.errors import DocumentFetchError
from gdocs_parser.sources.file import FileDocumentSource

DOCUMENT = {"documentId": "resume", "body": {"content": []}}


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create a temp directory with exported documents."""
    (tmp_path / "resume.json").write_text(json.dumps(DOCUMENT))
    (tmp_path / "broken.json").write_text("{not json")
    (tmp_path / "array.json").write_text("[]")
    return tmp_path


class TestFileDocumentSource:
    def test_reads_document(self, docs_dir: Path) -> None:
        assert FileDocumentSource(docs_dir).fetch("resume") == DOCUMENT

    def test_missing_document(self, docs_dir: Path) -> None:
        with pytest.raises(DocumentFetchError, match="not found") as exc_info:
            FileDocumentSource(docs_dir).fetch("nope")

        assert exc_info.value.document_id == "nope"
        assert isinstance(exc_info.value.original_error, FileNotFoundError)

    def test_invalid_json(self, docs_dir: Path) -> None:
        with pytest.raises(DocumentFetchError, match="Invalid document JSON"):
            FileDocumentSource(str(docs_dir)).fetch("broken")

    def test_non_object_json(self, docs_dir: Path) -> None:
        with pytest.raises(DocumentFetchError, match="does not contain a JSON object"):
            FileDocumentSource(docs_dir).fetch("array")
