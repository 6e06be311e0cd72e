from .base import DocumentParser
from .cursor import ParagraphCursor
from .document import SchemaParser, parse_paragraphs
from .models import KeyedList, Paragraph, ParsedDocument, ParsedNode
from .normalize import normalize_paragraph, paragraphs_from_document
from .text import parse_structured_text

__all__ = [
    "DocumentParser",
    "KeyedList",
    "ParagraphCursor",
    "Paragraph",
    "ParsedDocument",
    "ParsedNode",
    "SchemaParser",
    "normalize_paragraph",
    "paragraphs_from_document",
    "parse_paragraphs",
    "parse_structured_text",
]
