# parsers/matcher.py

from gdocs_parser.schema.models import ParseSchema
from gdocs_parser.schema.styles import NamedStyle

from .models import Paragraph


def has_named_style(paragraph: Paragraph, style: NamedStyle | None) -> bool:
    if style is None:
        return False
    return paragraph.style == style


def match_section(paragraph: Paragraph, schema: ParseSchema) -> str | None:
    """Return the name of the first section this paragraph opens.

    A match needs both the section's heading style and its name
    (case-insensitive, surrounding whitespace ignored). Sections without a
    name never match.
    """
    normalized = paragraph.text.strip().lower()
    for section in schema.sections:
        name = section.title.name
        if not name:
            continue
        if (
            has_named_style(paragraph, section.title.named_style_type)
            and normalized == name.strip().lower()
        ):
            return name
    return None
