# parsers/models.py

from dataclasses import dataclass
from typing import Any, TypedDict

from gdocs_parser.schema.styles import NamedStyle, is_heading_style


@dataclass(frozen=True)
class Paragraph:
    """A normalized paragraph: its text and its named style.

    ``style`` is None when the source style is missing or unrecognized.
    """

    text: str
    style: NamedStyle | None = NamedStyle.NORMAL_TEXT

    @property
    def is_heading(self) -> bool:
        return is_heading_style(self.style)


class KeyedList(TypedDict):
    key: str
    value: list[str]


class ParsedNode(TypedDict):
    title: Any
    content: list[Any]


# Section name -> text block (str), list items, or tree nodes.
ParsedDocument = dict[str, Any]
