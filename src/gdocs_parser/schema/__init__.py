from .loader import load_schema, schema_from_dict
from .models import (
    ContentSchema,
    LineSchema,
    ListContent,
    NodeSchema,
    ParseSchema,
    SectionSchema,
    TitleSchema,
    TreeContent,
    UnknownContent,
)
from .styles import HEADING_STYLES, NamedStyle, is_heading_style

__all__ = [
    # Styles
    "HEADING_STYLES",
    "NamedStyle",
    "is_heading_style",
    # Models
    "ContentSchema",
    "LineSchema",
    "ListContent",
    "NodeSchema",
    "ParseSchema",
    "SectionSchema",
    "TitleSchema",
    "TreeContent",
    "UnknownContent",
    # Loading
    "load_schema",
    "schema_from_dict",
]
