# src/gdocs_parser/schema/models.py

"""Declarative parse schema.

A schema names the top-level sections of a document, the heading style that
opens each one, and how the paragraphs under it become data:

- no content: the paragraphs are joined into one text block
- ``ListContent``: each paragraph is parsed into a list item
- ``TreeContent``: nested headings become ``{title, content}`` nodes

Field names accept both snake_case and the camelCase keys used by JSON/YAML
schema files (``keyDelimiter``, ``isFlatten``, ``namedStyleType``). Unknown keys
are ignored. Content without a recognized ``kind`` is parsed as a text block.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .styles import NamedStyle, is_heading_style


class LineSchema(BaseModel):
    """How a single line of text is turned into structured data.

    Priority: ``key_delimiter`` (keyed list), then ``keys`` (fixed fields),
    then a plain delimited list. ``delimiter`` defaults to ",".
    """

    delimiter: str | None = None
    keys: tuple[str, ...] | None = None
    key_delimiter: str | None = None
    is_flatten: bool = False

    class Config:
        extra = "ignore"
        frozen = True
        populate_by_name = True
        alias_generator = to_camel

    @property
    def is_structured(self) -> bool:
        """True when any parsing rule is declared."""
        return bool(self.key_delimiter or self.keys or self.delimiter)


class TitleSchema(LineSchema):
    """A heading: its style, its output name, and optional parsing rules."""

    name: str | None = None
    named_style_type: NamedStyle

    @field_validator("named_style_type")
    @classmethod
    def _require_heading_style(cls, value: NamedStyle) -> NamedStyle:
        if not is_heading_style(value):
            raise ValueError(
                f"title style must be a heading style, got '{value.value}'"
            )
        return value


class ListContent(LineSchema):
    kind: Literal["list"]


class TreeContent(BaseModel):
    kind: Literal["tree"]
    node: "NodeSchema | None" = None

    class Config:
        extra = "ignore"
        frozen = True


class UnknownContent(BaseModel):
    """Content with a missing or unrecognized kind. Parsed as a text block."""

    kind: str | None = None

    class Config:
        extra = "allow"
        frozen = True

    @field_validator("kind")
    @classmethod
    def _reject_known_kinds(cls, value: str | None) -> str | None:
        if value in ("list", "tree"):
            raise ValueError(f"content of kind '{value}' is malformed")
        return value


ContentSchema = Annotated[
    Union[ListContent, TreeContent, UnknownContent],
    Field(union_mode="left_to_right"),
]


class NodeSchema(BaseModel):
    title: TitleSchema
    content: ContentSchema | None = None

    class Config:
        extra = "ignore"
        frozen = True

    @property
    def child(self) -> "NodeSchema | None":
        """Schema of the next nesting level, if this node holds a tree."""
        if isinstance(self.content, TreeContent):
            return self.content.node
        return None


class SectionSchema(NodeSchema):
    """A top-level section. ``title.name`` is its key in the parsed output."""

    pass


class ParseSchema(BaseModel):
    """Ordered top-level sections.

    Section names are expected to be unique. When a document contains the
    same section twice, the later occurrence overwrites the earlier one.
    """

    sections: tuple[SectionSchema, ...] = ()

    class Config:
        extra = "ignore"
        frozen = True

    def section_named(self, name: str) -> SectionSchema | None:
        for section in self.sections:
            if section.title.name == name:
                return section
        return None


TreeContent.model_rebuild()
