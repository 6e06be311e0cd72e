# src/gdocs_parser/sources/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["google_docs", "file"]

DEFAULT_BASE_URL = "https://docs.googleapis.com"


@dataclass(frozen=True)
class SourceConfig:
    """Configuration for document sources.

    Immutable. Explicit. Only the access token falls back to the environment.
    """

    provider: Provider
    access_token: str | None = None  # Falls back to GOOGLE_DOCS_ACCESS_TOKEN
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    max_retries: int = 3

    # file provider only
    directory: str | None = None
