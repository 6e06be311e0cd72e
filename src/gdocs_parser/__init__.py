# Client
from .client import get_parsed_document

# Errors
from .errors import DocumentFetchError, GDocsParserError, SchemaLoadError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    Paragraph,
    ParsedDocument,
    SchemaParser,
    parse_paragraphs,
    parse_structured_text,
)

# Schema
from .schema import (
    LineSchema,
    ListContent,
    NamedStyle,
    NodeSchema,
    ParseSchema,
    SectionSchema,
    TitleSchema,
    TreeContent,
    load_schema,
    schema_from_dict,
)

# Sources
from .sources import (
    DocumentSource,
    FileDocumentSource,
    GoogleDocsSource,
    SourceConfig,
    create_document_source,
)

__all__ = [
    # Client
    "get_parsed_document",
    # Errors
    "DocumentFetchError",
    "GDocsParserError",
    "SchemaLoadError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "Paragraph",
    "ParsedDocument",
    "SchemaParser",
    "parse_paragraphs",
    "parse_structured_text",
    # Schema
    "LineSchema",
    "ListContent",
    "NamedStyle",
    "NodeSchema",
    "ParseSchema",
    "SectionSchema",
    "TitleSchema",
    "TreeContent",
    "load_schema",
    "schema_from_dict",
    # Sources
    "DocumentSource",
    "FileDocumentSource",
    "GoogleDocsSource",
    "SourceConfig",
    "create_document_source",
]
