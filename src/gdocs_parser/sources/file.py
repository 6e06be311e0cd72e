# src/gdocs_parser/sources/file.py

import json
import logging
from pathlib import Path
from time import monotonic
from typing import Any

from gdocs_parser.errors import DocumentFetchError
from gdocs_parser.observability import names
from gdocs_parser.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource

logger = logging.getLogger(__name__)


class FileDocumentSource(DocumentSource):
    """
    Reads exported Google Docs JSON from a local directory.

    Document ``<id>`` is read from ``<directory>/<id>.json``.
    """

    def __init__(
        self,
        directory: str | Path,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._directory = Path(directory)
        self.metrics_hook = metrics_hook
        logger.info("Initialized FileDocumentSource with directory=%s", self._directory)

    def fetch(self, document_id: str) -> dict[str, Any]:
        start = monotonic()
        path = self._directory / f"{document_id}.json"
        logger.debug("Reading document %s from %s", document_id, path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            self.metrics_hook.increment(
                names.FETCH_ERRORS_TOTAL, labels={"source": "file"}
            )
            raise DocumentFetchError(
                document_id, f"Document file not found: {path}", original_error=e
            ) from e
        except json.JSONDecodeError as e:
            self.metrics_hook.increment(
                names.FETCH_ERRORS_TOTAL, labels={"source": "file"}
            )
            raise DocumentFetchError(
                document_id, f"Invalid document JSON in {path}: {e}", original_error=e
            ) from e

        if not isinstance(data, dict):
            self.metrics_hook.increment(
                names.FETCH_ERRORS_TOTAL, labels={"source": "file"}
            )
            raise DocumentFetchError(
                document_id, f"Document file {path} does not contain a JSON object"
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.FETCH_REQUESTS_TOTAL, labels={"source": "file"}
        )
        return data
