from pathlib import Path

import pytest

from gdocs_parser.client import get_parsed_document
from gdocs_parser.errors import DocumentFetchError
from gdocs_parser.parsers.models import ParsedDocument
from gdocs_parser.schema.loader import load_schema
from gdocs_parser.sources.file import FileDocumentSource

# --- Section-level tests ---


def test_only_declared_sections_are_returned(parsed_resume: ParsedDocument) -> None:
    assert list(parsed_resume) == ["Profile", "Skills", "Languages", "Experience"]


def test_profile_is_joined_text_block(parsed_resume: ParsedDocument) -> None:
    assert parsed_resume["Profile"] == (
        "Backend engineer focused on data pipelines. Enjoys teaching."
    )


def test_skills_are_flattened(parsed_resume: ParsedDocument) -> None:
    assert parsed_resume["Skills"] == ["Python", "Go", "SQL", "Kafka"]


def test_languages_are_keyed_lists(parsed_resume: ParsedDocument) -> None:
    assert parsed_resume["Languages"] == [
        {"key": "English", "value": ["native"]},
        {"key": "German", "value": ["B2", "reading"]},
    ]


# --- Tree tests ---


def test_experience_tree(parsed_resume: ParsedDocument) -> None:
    assert parsed_resume["Experience"] == [
        {
            "title": {"company": "Acme", "role": "Staff Engineer"},
            "content": [
                {
                    "title": "Platform",
                    "content": ["Led ingestion rewrite", "Cut costs by 30%"],
                },
                {"title": "Mentoring", "content": ["Ran weekly office hours"]},
            ],
        },
        {
            "title": {"company": "Initech", "role": "Engineer"},
            "content": [{"title": "Reports", "content": []}],
        },
    ]


# --- Document-level tests ---


def test_duplicate_section_keeps_last(docs_dir: Path) -> None:
    result = get_parsed_document(
        "duplicate",
        load_schema(docs_dir / "schema.yaml"),
        source=FileDocumentSource(docs_dir),
    )

    assert result == {"Profile": "New summary."}


def test_parsing_is_deterministic(docs_dir: Path) -> None:
    schema = load_schema(docs_dir / "schema.yaml")
    source = FileDocumentSource(docs_dir)

    first = get_parsed_document("resume", schema, source=source)
    second = get_parsed_document("resume", schema, source=source)

    assert first == second


def test_missing_document_is_fetch_error(docs_dir: Path) -> None:
    with pytest.raises(DocumentFetchError, match="missing"):
        get_parsed_document(
            "missing",
            load_schema(docs_dir / "schema.yaml"),
            source=FileDocumentSource(docs_dir),
        )
