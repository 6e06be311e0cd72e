"""Exception hierarchy for gdocs-parser.

Parsing itself is permissive and raises nothing for malformed schema
content. Errors surface only at the edges: fetching a document and
loading a schema file.
"""


class GDocsParserError(Exception):
    """Base exception for all gdocs-parser errors."""

    pass


class DocumentFetchError(GDocsParserError):
    """Raised when the raw document cannot be produced.

    Attributes:
        document_id: The document that was requested
        message: Human-readable description of the failure
        status_code: HTTP status code, when the failure came from the API
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        document_id: str,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.document_id = document_id
        self.message = message
        self.status_code = status_code
        self.original_error = original_error
        super().__init__(message)


class SchemaLoadError(GDocsParserError):
    """Raised when a schema file cannot be read or validated.

    Attributes:
        source: Path (or description) of the schema that failed to load
        message: Description of what went wrong
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"Failed to load schema from '{source}': {message}")
