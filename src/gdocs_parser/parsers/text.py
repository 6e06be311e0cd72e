# parsers/text.py

"""Structured parsing of a single line of text.

``parse_structured_text`` applies the first rule the schema enables:

1. ``key_delimiter``: "Team: A, B" -> {"key": "Team", "value": ["A", "B"]}
2. ``keys``: "Google | Engineer" -> {"company": "Google", "role": "Engineer"}
3. otherwise: "A, , B" -> ["A", "B"]

Empty tokens are dropped for keyed values and plain lists but kept for fixed
fields, where position matters.
"""

from collections.abc import Sequence

from gdocs_parser.schema.models import LineSchema

from .models import KeyedList

DEFAULT_DELIMITER = ","


def split_and_trim(text: str, delimiter: str, filter_empty: bool = False) -> list[str]:
    if text == "":
        return []
    items = [item.strip() for item in text.split(delimiter)]
    if filter_empty:
        return [item for item in items if item]
    return items


def parse_keyed_list(
    text: str, key_delimiter: str, delimiter: str
) -> KeyedList | str:
    """Split on the first ``key_delimiter``.

    Returns the text unchanged when the delimiter is missing or the key
    would be empty.
    """
    index = text.find(key_delimiter)
    if index <= 0:
        return text

    key = text[:index].strip()
    value_part = text[index + len(key_delimiter) :].strip()
    value = split_and_trim(value_part, delimiter, filter_empty=True) if value_part else []
    return {"key": key, "value": value}


def parse_fields(text: str, keys: Sequence[str], delimiter: str) -> dict[str, str]:
    """Map delimited values onto ``keys`` by position.

    Missing values become "", surplus values are discarded.
    """
    values = split_and_trim(text, delimiter)
    return {key: values[i] if i < len(values) else "" for i, key in enumerate(keys)}


def parse_delimited_list(text: str, delimiter: str) -> list[str]:
    return split_and_trim(text, delimiter, filter_empty=True)


def parse_structured_text(
    text: str, schema: LineSchema
) -> KeyedList | dict[str, str] | list[str] | str:
    delimiter = schema.delimiter or DEFAULT_DELIMITER

    if schema.key_delimiter:
        return parse_keyed_list(text, schema.key_delimiter, delimiter)

    if schema.keys:
        return parse_fields(text, schema.keys, delimiter)

    return parse_delimited_list(text, delimiter)
