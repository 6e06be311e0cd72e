# parsers/document.py

import logging
from collections.abc import Mapping, Sequence
from time import monotonic
from typing import Any

from gdocs_parser.observability import names
from gdocs_parser.observability.base import MetricsHook, NoOpMetricsHook
from gdocs_parser.schema.models import ParseSchema

from .base import DocumentParser
from .cursor import ParagraphCursor
from .models import Paragraph, ParsedDocument
from .normalize import paragraphs_from_document
from .section import parse_section_content

logger = logging.getLogger(__name__)


def parse_paragraphs(
    paragraphs: Sequence[Paragraph], schema: ParseSchema
) -> ParsedDocument:
    """Walk the paragraphs once, parsing every section the schema names.

    Paragraphs outside any section are skipped. If a section appears twice,
    the later occurrence replaces the earlier result.
    """
    result: ParsedDocument = {}
    cursor = ParagraphCursor(paragraphs, schema)

    while not cursor.at_end():
        name = cursor.current_section_name()
        if name is not None:
            section = schema.section_named(name)
            if section is not None:
                logger.debug("Section %r starts at paragraph %d", name, cursor.position)
                cursor.advance()
                if name in result:
                    logger.debug("Section %r appears again, replacing", name)
                result[name] = parse_section_content(cursor, section)
                continue
        cursor.advance()

    return result


class SchemaParser(DocumentParser):
    """
    Schema-driven Google Docs parser.
    - Normalizes raw paragraphs to (text, style)
    - Matches top-level sections by heading style and title text
    - Parses each section as a text block, list, or tree
    """

    def __init__(
        self,
        schema: ParseSchema,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.schema = schema
        self.metrics_hook = metrics_hook

    def parse(self, document: Mapping[str, Any]) -> ParsedDocument:
        return self.parse_paragraphs(paragraphs_from_document(document))

    def parse_paragraphs(self, paragraphs: Sequence[Paragraph]) -> ParsedDocument:
        start = monotonic()
        result = parse_paragraphs(paragraphs, self.schema)
        elapsed_ms = 1000 * (monotonic() - start)

        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_PARAGRAPHS_TOTAL, len(paragraphs))
        self.metrics_hook.increment(names.PARSE_SECTIONS_TOTAL, len(result))

        logger.info(
            "Parsed %d paragraphs into %d sections in %.0fms",
            len(paragraphs),
            len(result),
            elapsed_ms,
        )
        return result
