from unittest.mock import patch

import pytest

from gdocs_parser.sources import SourceConfig, create_document_source
from gdocs_parser.sources.file import FileDocumentSource
from gdocs_parser.sources.google_docs import GoogleDocsSource


class TestFactory:
    def test_create_google_docs_source(self) -> None:
        """Test creating a Google Docs source."""
        with patch("gdocs_parser.sources.google_docs.requests.Session"):
            config = SourceConfig(provider="google_docs", access_token="test")
            source = create_document_source(config)
            assert isinstance(source, GoogleDocsSource)

    def test_create_file_source(self, tmp_path) -> None:
        config = SourceConfig(provider="file", directory=str(tmp_path))
        source = create_document_source(config)
        assert isinstance(source, FileDocumentSource)

    def test_file_source_requires_directory(self) -> None:
        with pytest.raises(ValueError, match="requires a directory"):
            create_document_source(SourceConfig(provider="file"))

    def test_unknown_provider_raises(self) -> None:
        config = SourceConfig(provider="dropbox")  # type: ignore
        with pytest.raises(ValueError, match="Unknown document source provider"):
            create_document_source(config)

    def test_config_values_passed_through(self) -> None:
        with patch("gdocs_parser.sources.google_docs.requests.Session"):
            config = SourceConfig(
                provider="google_docs",
                access_token="my-token",
                base_url="http://localhost:9000",
                timeout=5.0,
                max_retries=7,
            )
            source = create_document_source(config)

            assert source._access_token == "my-token"
            assert source._base_url == "http://localhost:9000"
            assert source._timeout == 5.0
            assert source._max_retries == 7
