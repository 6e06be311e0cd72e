# parsers/text_block.py

from .cursor import ParagraphCursor


def parse_text_block_section(cursor: ParagraphCursor) -> str:
    """Join paragraphs with spaces until a section boundary or any heading.

    The stopping paragraph is left unconsumed.
    """
    parts: list[str] = []

    while not cursor.at_end():
        paragraph = cursor.current()
        if paragraph is None:
            cursor.advance()
            continue

        if cursor.at_section_boundary() or cursor.at_heading():
            break

        parts.append(paragraph.text)
        cursor.advance()

    return " ".join(parts)
