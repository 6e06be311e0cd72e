# src/gdocs_parser/sources/base.py

from typing import Any, Protocol

from gdocs_parser.observability.base import MetricsHook


class DocumentSource(Protocol):
    """Protocol for document sources.

    A source produces the raw Google Docs document JSON for an id.
    Authentication, transport and retries are its concern; parsing is not.
    """

    metrics_hook: MetricsHook

    def fetch(self, document_id: str) -> dict[str, Any]:
        """Fetch the raw document.

        Raises:
            DocumentFetchError: If the document cannot be produced.
        """
        ...
