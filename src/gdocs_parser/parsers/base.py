# parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import ParsedDocument


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, document: Mapping[str, Any]) -> ParsedDocument:
        """
        Parse a raw document and return its schema-shaped representation.

        Requirements:
        - Deterministic output for same input
        - Single forward pass over the paragraphs
        - No exceptions for malformed schema content
        """
        raise NotImplementedError
