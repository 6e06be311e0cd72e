from .base import DocumentSource
from .config import SourceConfig
from .factory import create_document_source
from .file import FileDocumentSource
from .google_docs import GoogleDocsSource

__all__ = [
    # Factory
    "create_document_source",
    # Protocol
    "DocumentSource",
    # Config
    "SourceConfig",
    # Sources
    "FileDocumentSource",
    "GoogleDocsSource",
]
