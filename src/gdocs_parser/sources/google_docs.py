# src/gdocs_parser/sources/google_docs.py

import logging
import os
from time import monotonic
from typing import Any
from urllib.parse import quote

import google.auth
import requests
from google.auth.exceptions import DefaultCredentialsError
from google.auth.transport.requests import AuthorizedSession
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import JSONDecodeError, Timeout
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from gdocs_parser.errors import DocumentFetchError
from gdocs_parser.observability import names
from gdocs_parser.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource
from .config import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

ACCESS_TOKEN_ENV_VAR = "GOOGLE_DOCS_ACCESS_TOKEN"
DOCUMENTS_READONLY_SCOPE = "https://www.googleapis.com/auth/documents.readonly"
RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


class _RetryableStatusError(Exception):
    def __init__(self, response: requests.Response) -> None:
        self.response = response
        super().__init__(f"HTTP {response.status_code}")


class GoogleDocsSource(DocumentSource):
    """Google Docs REST API source.

    Read-only. Transport-only retries.

    Authenticates with an explicit bearer token (argument or
    GOOGLE_DOCS_ACCESS_TOKEN) when one is given, otherwise with Application
    Default Credentials scoped to documents.readonly.
    """

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        max_retries: int = 3,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._access_token = access_token or os.environ.get(ACCESS_TOKEN_ENV_VAR)
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_retries = max_retries
        self._headers = {"Accept": "application/json"}
        if self._access_token:
            self._headers["Authorization"] = f"Bearer {self._access_token}"
            self._session = requests.Session()
        else:
            self._session = _default_credentials_session()
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized GoogleDocsSource with base_url=%s, timeout=%s",
            self._base_url,
            timeout,
        )

    def fetch(self, document_id: str) -> dict[str, Any]:
        start = monotonic()
        url = f"{self._base_url}/v1/documents/{quote(document_id, safe='')}"
        logger.debug("Fetching Google Doc %s", document_id)

        try:
            response = self._get(url)
        except (Timeout, RequestsConnectionError) as e:
            self._record_error("transport")
            raise DocumentFetchError(
                document_id,
                f"Google Docs API request failed: {e}",
                original_error=e,
            ) from e
        except _RetryableStatusError as e:
            response = e.response

        if not response.ok:
            self._record_error(str(response.status_code))
            raise DocumentFetchError(
                document_id,
                f"Google Docs API request failed: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except JSONDecodeError as e:
            self._record_error("invalid_json")
            raise DocumentFetchError(
                document_id,
                f"Google Docs API returned invalid JSON: {e}",
                status_code=response.status_code,
                original_error=e,
            ) from e
        if not data:
            self._record_error("empty")
            raise DocumentFetchError(
                document_id, "Empty document response from Google Docs API."
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.FETCH_REQUESTS_TOTAL, labels={"source": "google_docs"}
        )
        logger.info("Fetched Google Doc %s in %.0fms", document_id, elapsed_ms)
        return data

    def _get(self, url: str) -> requests.Response:
        """GET with retries on connection errors, timeouts, 429 and 5xx."""
        for attempt in Retrying(
            stop=stop_after_attempt(max(1, self._max_retries)),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(
                (Timeout, RequestsConnectionError, _RetryableStatusError)
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = self._session.get(
                    url,
                    headers=self._headers,
                    timeout=self._timeout,
                )
                if response.status_code in RETRYABLE_STATUS_CODES:
                    raise _RetryableStatusError(response)
                return response

    def _record_error(self, reason: str) -> None:
        self.metrics_hook.increment(
            names.FETCH_ERRORS_TOTAL,
            labels={"source": "google_docs", "reason": reason},
        )


def _default_credentials_session() -> AuthorizedSession:
    """Session authorized with Application Default Credentials."""
    try:
        credentials, project = google.auth.default(scopes=[DOCUMENTS_READONLY_SCOPE])
    except DefaultCredentialsError as e:
        raise ValueError(
            f"No access token given, {ACCESS_TOKEN_ENV_VAR} is not set and "
            f"Application Default Credentials are unavailable: {e}"
        ) from e
    logger.debug("Using Application Default Credentials (project=%s)", project)
    return AuthorizedSession(credentials)
