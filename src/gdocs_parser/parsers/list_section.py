# parsers/list_section.py

from typing import Any

from gdocs_parser.schema.models import ListContent, SectionSchema

from .cursor import ParagraphCursor
from .text import parse_structured_text


def parse_list_section(cursor: ParagraphCursor, section: SectionSchema) -> list[Any]:
    """Parse each paragraph as one list item until a boundary or heading.

    With ``is_flatten``, list-valued lines are spliced into the result;
    records and plain strings are always appended whole.
    """
    content = section.content
    if not isinstance(content, ListContent):
        return []

    result: list[Any] = []
    while not cursor.at_end():
        paragraph = cursor.current()
        if paragraph is None:
            cursor.advance()
            continue

        if cursor.at_section_boundary() or cursor.at_heading():
            break

        parsed = parse_structured_text(paragraph.text, content)
        if content.is_flatten and isinstance(parsed, list):
            result.extend(parsed)
        else:
            result.append(parsed)
        cursor.advance()

    return result
