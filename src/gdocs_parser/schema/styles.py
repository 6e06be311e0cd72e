# src/gdocs_parser/schema/styles.py

from enum import Enum


class NamedStyle(str, Enum):
    """Paragraph named style, as reported by the Google Docs API."""

    HEADING_1 = "HEADING_1"
    HEADING_2 = "HEADING_2"
    HEADING_3 = "HEADING_3"
    HEADING_4 = "HEADING_4"
    HEADING_5 = "HEADING_5"
    HEADING_6 = "HEADING_6"
    TITLE = "TITLE"
    SUBTITLE = "SUBTITLE"
    NORMAL_TEXT = "NORMAL_TEXT"


# Styles that mark document structure. NORMAL_TEXT is not one of them.
HEADING_STYLES: frozenset[NamedStyle] = frozenset(
    {
        NamedStyle.HEADING_1,
        NamedStyle.HEADING_2,
        NamedStyle.HEADING_3,
        NamedStyle.HEADING_4,
        NamedStyle.HEADING_5,
        NamedStyle.HEADING_6,
        NamedStyle.TITLE,
        NamedStyle.SUBTITLE,
    }
)


def is_heading_style(style: NamedStyle | None) -> bool:
    return style is not None and style in HEADING_STYLES


def resolve_style(value: str | None) -> NamedStyle | None:
    """Map a raw style string to a NamedStyle; unknown strings map to None."""
    if value is None:
        return None
    try:
        return NamedStyle(value)
    except ValueError:
        return None
