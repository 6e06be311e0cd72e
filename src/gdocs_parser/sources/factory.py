# src/gdocs_parser/sources/factory.py

from gdocs_parser.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSource
from .config import SourceConfig


def create_document_source(
    config: SourceConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentSource:
    """Create a document source from config.

    Args:
        config: Source configuration specifying provider and transport.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured DocumentSource implementation.

    Raises:
        ValueError: If provider is unknown, or required settings are missing.

    Example:
        >>> config = SourceConfig(provider="file", directory="./docs")
        >>> source = create_document_source(config)
        >>> document = source.fetch("resume")
    """
    if config.provider == "google_docs":
        from .google_docs import GoogleDocsSource

        return GoogleDocsSource(
            access_token=config.access_token,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        )

    if config.provider == "file":
        from .file import FileDocumentSource

        if not config.directory:
            raise ValueError("The file provider requires a directory")
        return FileDocumentSource(
            directory=config.directory,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown document source provider: {config.provider}")
