# src/gdocs_parser/schema/loader.py

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from gdocs_parser.errors import SchemaLoadError

from .models import ParseSchema

logger = logging.getLogger(__name__)


def schema_from_dict(data: Mapping[str, Any]) -> ParseSchema:
    """Validate a mapping (e.g. decoded JSON) into a ParseSchema.

    Raises:
        pydantic.ValidationError: If the mapping does not describe a schema.
    """
    return ParseSchema.model_validate(dict(data))


def load_schema(path: str | Path) -> ParseSchema:
    """Load a ParseSchema from a YAML or JSON file.

    Files ending in ``.json`` are decoded as JSON, anything else as YAML.

    Raises:
        SchemaLoadError: If the file is missing, malformed, or invalid.
    """
    file_path = Path(path)
    logger.debug("Loading schema from %s", file_path)

    try:
        with open(file_path, encoding="utf-8") as f:
            if file_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise SchemaLoadError(str(file_path), "file not found") from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemaLoadError(str(file_path), f"syntax error: {e}") from e

    if not isinstance(data, Mapping):
        raise SchemaLoadError(
            str(file_path), "top-level value must be a mapping with 'sections'"
        )

    try:
        schema = schema_from_dict(data)
    except PydanticValidationError as e:
        raise SchemaLoadError(str(file_path), str(e)) from e

    logger.info("Loaded schema with %d sections from %s", len(schema.sections), file_path)
    return schema
