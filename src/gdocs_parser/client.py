# src/gdocs_parser/client.py

import logging
from collections.abc import Mapping
from typing import Any

from gdocs_parser.errors import DocumentFetchError
from gdocs_parser.observability.base import MetricsHook, NoOpMetricsHook
from gdocs_parser.parsers.document import SchemaParser
from gdocs_parser.parsers.models import ParsedDocument
from gdocs_parser.schema.loader import schema_from_dict
from gdocs_parser.schema.models import ParseSchema
from gdocs_parser.sources.base import DocumentSource
from gdocs_parser.sources.config import SourceConfig
from gdocs_parser.sources.factory import create_document_source

logger = logging.getLogger(__name__)


def get_parsed_document(
    document_id: str,
    schema: ParseSchema | Mapping[str, Any],
    *,
    source: DocumentSource | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Fetch a Google Doc and parse it with ``schema``.

    Args:
        document_id: Id of the document to fetch.
        schema: A ParseSchema, or a mapping in schema-file form.
        source: Where to read the document from. Defaults to the Google
            Docs API with the token from GOOGLE_DOCS_ACCESS_TOKEN.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Mapping of section name to parsed content.

    Raises:
        DocumentFetchError: If the document cannot be fetched. The message
            names the document and carries the original error message.

    Example:
        >>> schema = {"sections": [{"title": {"name": "Profile", "namedStyleType": "HEADING_2"}}]}
        >>> get_parsed_document("1AbC...", schema)
        {'Profile': 'Frontend developer.'}
    """
    parse_schema = schema if isinstance(schema, ParseSchema) else schema_from_dict(schema)

    try:
        if source is None:
            source = create_document_source(
                SourceConfig(provider="google_docs"), metrics_hook=metrics_hook
            )
        document = source.fetch(document_id)
    except Exception as e:
        logger.error("Failed to fetch document %s: %s", document_id, e)
        raise DocumentFetchError(
            document_id,
            f"Google Docs API call failed for document '{document_id}'. "
            f"Check Doc ID and access token permissions. Original error: {e}",
            status_code=getattr(e, "status_code", None),
            original_error=e,
        ) from e

    return SchemaParser(parse_schema, metrics_hook=metrics_hook).parse(document)
