# parsers/normalize.py

"""Reduce raw Google Docs API paragraphs to ``Paragraph`` values."""

from collections.abc import Iterable, Mapping
from typing import Any

from gdocs_parser.schema.styles import NamedStyle, resolve_style

from .models import Paragraph


def extract_paragraph_text(paragraph: Mapping[str, Any]) -> str:
    """Join the text runs of a raw paragraph.

    Non-text elements contribute nothing. The result is stripped and
    embedded newlines become spaces.
    """
    elements = paragraph.get("elements") or []
    text = "".join(
        (element.get("textRun") or {}).get("content") or "" for element in elements
    )
    return text.strip().replace("\n", " ")


def resolve_paragraph_style(paragraph: Mapping[str, Any]) -> NamedStyle | None:
    """Resolve the named style of a raw paragraph.

    - no style and no elements: None
    - no style, or a style without ``namedStyleType``: NORMAL_TEXT
    - a known style: that style
    - an unknown style string: None
    """
    paragraph_style = paragraph.get("paragraphStyle")
    if paragraph_style is None and not paragraph.get("elements"):
        return None
    if paragraph_style is None:
        return NamedStyle.NORMAL_TEXT

    named_style_type = paragraph_style.get("namedStyleType")
    if not named_style_type:
        return NamedStyle.NORMAL_TEXT

    return resolve_style(named_style_type)


def normalize_paragraph(paragraph: Mapping[str, Any]) -> Paragraph | None:
    """Returns None for paragraphs that carry no text."""
    text = extract_paragraph_text(paragraph)
    if not text:
        return None
    return Paragraph(text=text, style=resolve_paragraph_style(paragraph))


def normalize_paragraphs(paragraphs: Iterable[Mapping[str, Any]]) -> list[Paragraph]:
    result = []
    for raw in paragraphs:
        paragraph = normalize_paragraph(raw)
        if paragraph is not None:
            result.append(paragraph)
    return result


def paragraphs_from_document(document: Mapping[str, Any]) -> list[Paragraph]:
    """Extract normalized paragraphs from a raw document body.

    Structural elements without a ``paragraph`` (tables, section breaks)
    are skipped, as are paragraphs with no text.
    """
    body = document.get("body") or {}
    content = body.get("content") or []
    return normalize_paragraphs(
        element["paragraph"] for element in content if element.get("paragraph")
    )
