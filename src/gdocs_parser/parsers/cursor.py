# parsers/cursor.py

from collections.abc import Sequence

from gdocs_parser.schema.models import ParseSchema

from .matcher import match_section
from .models import Paragraph


class ParagraphCursor:
    """Forward-only position over a paragraph sequence.

    The cursor never skips empty paragraphs on its own: ``current()``
    returns None for them and callers advance past explicitly, so an empty
    line is never taken for a heading or a section boundary.
    """

    def __init__(self, paragraphs: Sequence[Paragraph], schema: ParseSchema) -> None:
        self._paragraphs = paragraphs
        self._schema = schema
        self._index = 0

    @property
    def position(self) -> int:
        return self._index

    def current(self) -> Paragraph | None:
        """The paragraph at the cursor, or None at the end or on an empty line."""
        if self.at_end():
            return None
        paragraph = self._paragraphs[self._index]
        if not paragraph.text:
            return None
        return paragraph

    def advance(self) -> Paragraph | None:
        """Step forward one paragraph and return the new current one.

        A no-op once the end is reached.
        """
        if self.at_end():
            return None
        self._index += 1
        return self.current()

    def at_end(self) -> bool:
        return self._index >= len(self._paragraphs)

    def current_section_name(self) -> str | None:
        paragraph = self.current()
        if paragraph is None:
            return None
        return match_section(paragraph, self._schema)

    def at_section_boundary(self) -> bool:
        return self.current_section_name() is not None

    def at_heading(self) -> bool:
        paragraph = self.current()
        return paragraph is not None and paragraph.is_heading
