from gdocs_parser.parsers.cursor import ParagraphCursor
from gdocs_parser.parsers.models import Paragraph
from gdocs_parser.parsers.text_block import parse_text_block_section
from gdocs_parser.schema.models import ParseSchema, SectionSchema, TitleSchema
from gdocs_parser.schema.styles import NamedStyle

SCHEMA = ParseSchema(
    sections=(
        SectionSchema(
            title=TitleSchema(name="Next", named_style_type=NamedStyle.HEADING_2)
        ),
    )
)


def _p(text: str, style: NamedStyle | None = NamedStyle.NORMAL_TEXT) -> Paragraph:
    return Paragraph(text=text, style=style)


class TestParseTextBlockSection:
    def test_joins_lines_with_spaces(self) -> None:
        cursor = ParagraphCursor([_p("First line."), _p("Second line.")], SCHEMA)

        assert parse_text_block_section(cursor) == "First line. Second line."
        assert cursor.at_end()

    def test_stops_before_section_boundary(self) -> None:
        cursor = ParagraphCursor(
            [_p("Body"), _p("Next", NamedStyle.HEADING_2), _p("After")], SCHEMA
        )

        assert parse_text_block_section(cursor) == "Body"
        assert cursor.current() == _p("Next", NamedStyle.HEADING_2)

    def test_stops_before_any_heading(self) -> None:
        cursor = ParagraphCursor(
            [_p("Body"), _p("Sub", NamedStyle.HEADING_3), _p("More")], SCHEMA
        )

        assert parse_text_block_section(cursor) == "Body"
        assert cursor.current() == _p("Sub", NamedStyle.HEADING_3)

    def test_skips_empty_lines(self) -> None:
        cursor = ParagraphCursor([_p("A"), _p(""), _p("B")], SCHEMA)

        assert parse_text_block_section(cursor) == "A B"

    def test_empty_document(self) -> None:
        assert parse_text_block_section(ParagraphCursor([], SCHEMA)) == ""

    def test_immediate_heading_gives_empty_string(self) -> None:
        cursor = ParagraphCursor([_p("Title", NamedStyle.HEADING_1)], SCHEMA)

        assert parse_text_block_section(cursor) == ""
        assert cursor.position == 0
