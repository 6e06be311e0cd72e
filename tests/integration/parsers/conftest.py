import json
from pathlib import Path
from typing import Any

import pytest

from gdocs_parser.client import get_parsed_document
from gdocs_parser.parsers.models import ParsedDocument
from gdocs_parser.schema.loader import load_schema
from gdocs_parser.sources.file import FileDocumentSource


def _paragraph(text: str, style: str | None = "NORMAL_TEXT") -> dict[str, Any]:
    return {
        "paragraph": {
            "elements": [{"textRun": {"content": f"{text}\n"}}],
            "paragraphStyle": {"namedStyleType": style} if style else {},
        }
    }


def _document(document_id: str, content: list[dict[str, Any]]) -> dict[str, Any]:
    return {"documentId": document_id, "title": document_id, "body": {"content": content}}


def _create_resume_document(path: Path) -> None:
    """A resume exported from Google Docs, with noise a real export carries."""
    content = [
        {"sectionBreak": {"sectionStyle": {}}},
        _paragraph("Jane Doe", "TITLE"),
        _paragraph("Profile", "HEADING_2"),
        _paragraph("Backend engineer focused on data pipelines."),
        _paragraph("", None),
        _paragraph("Enjoys teaching."),
        _paragraph("Skills", "HEADING_2"),
        _paragraph("Python, Go"),
        _paragraph("SQL, , Kafka"),
        _paragraph("Languages", "HEADING_2"),
        _paragraph("English: native"),
        _paragraph("German: B2, reading"),
        _paragraph("Experience", "HEADING_2"),
        _paragraph("Previous employers, most recent first."),
        _paragraph("Acme | Staff Engineer", "HEADING_3"),
        _paragraph("Platform", "HEADING_4"),
        _paragraph("  Led ingestion rewrite  "),
        _paragraph("Cut costs by 30%"),
        _paragraph("Mentoring", "HEADING_4"),
        _paragraph("Ran weekly office hours"),
        {"table": {"rows": 1, "columns": 2, "tableRows": []}},
        _paragraph("Initech | Engineer", "HEADING_3"),
        _paragraph("Loose text under a company is dropped"),
        _paragraph("Reports", "HEADING_4"),
        _paragraph("TPS", "HEADING_5"),
        _paragraph("Hobbies", "HEADING_2"),
        _paragraph("Climbing"),
    ]
    path.write_text(json.dumps(_document("resume", content)))


def _create_duplicate_section_document(path: Path) -> None:
    content = [
        _paragraph("Profile", "HEADING_2"),
        _paragraph("Old summary."),
        _paragraph("PROFILE", "HEADING_2"),
        _paragraph("New summary."),
    ]
    path.write_text(json.dumps(_document("duplicate", content)))


SCHEMA_YAML = """sections:
  - title: {name: Profile, namedStyleType: HEADING_2}
  - title: {name: Skills, namedStyleType: HEADING_2}
    content: {kind: list, isFlatten: true}
  - title: {name: Languages, namedStyleType: HEADING_2}
    content: {kind: list, keyDelimiter: ":"}
  - title: {name: Experience, namedStyleType: HEADING_2}
    content:
      kind: tree
      node:
        title: {namedStyleType: HEADING_3, keys: [company, role], delimiter: "|"}
        content:
          kind: tree
          node:
            title: {namedStyleType: HEADING_4}
            content: {kind: list}
"""


@pytest.fixture(scope="module")
def docs_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create the exported documents and schema once per module."""
    dir_path: Path = tmp_path_factory.mktemp("docs")

    _create_resume_document(dir_path / "resume.json")
    _create_duplicate_section_document(dir_path / "duplicate.json")
    (dir_path / "schema.yaml").write_text(SCHEMA_YAML)

    return dir_path


@pytest.fixture(scope="module")
def parsed_resume(docs_dir: Path) -> ParsedDocument:
    return get_parsed_document(
        "resume",
        load_schema(docs_dir / "schema.yaml"),
        source=FileDocumentSource(docs_dir),
    )
