"""Loading of the compliance data type catalog from YAML or JSON files."""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from waivern_dataset_compliance.config import CatalogConfiguration
from waivern_dataset_compliance.errors import (
    CatalogLoadError,
    InvalidCatalogFormatError,
    InvalidCatalogSchemaError,
)
from waivern_dataset_compliance.options import ComplianceDataType

logger = logging.getLogger(__name__)


def parse_compliance_data_types(data: Any) -> list[ComplianceDataType]:
    """Validate raw catalog data into compliance data types.

    Accepts either a list of ``{id, title}`` entries or a mapping holding
    that list under ``complianceDataTypes``, the shape returned by the
    catalog API.

    Args:
        data: Parsed catalog content

    Returns:
        Compliance data types in catalog order

    Raises:
        InvalidCatalogSchemaError: If the data is not a list of valid,
            uniquely identified entries

    """
    if isinstance(data, dict) and "complianceDataTypes" in data:
        data = data["complianceDataTypes"]

    if not isinstance(data, list):
        raise InvalidCatalogSchemaError(
            f"Catalog must be a list of data types, but got {type(data)}"
        )

    try:
        data_types = [ComplianceDataType.model_validate(entry) for entry in data]
    except ValidationError as e:
        raise InvalidCatalogSchemaError(f"Error validating catalog entry: {e}") from e

    id_counts = Counter(data_type.id for data_type in data_types)
    duplicates = sorted(id_ for id_, count in id_counts.items() if count > 1)
    if duplicates:
        raise InvalidCatalogSchemaError(f"Duplicate data type ids found: {duplicates}")

    return data_types


def load_compliance_data_types(path: Path) -> list[ComplianceDataType]:
    """Load the compliance data type catalog from a file.

    Files ending in ``.json`` are parsed as JSON; anything else as YAML.
    An empty YAML file yields an empty catalog.

    Args:
        path: Path to the catalog file

    Returns:
        Compliance data types in file order

    Raises:
        CatalogLoadError: If the file cannot be read
        InvalidCatalogFormatError: If the file is not valid UTF-8 YAML or JSON
        InvalidCatalogSchemaError: If the content is not a valid catalog

    """
    try:
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidCatalogFormatError(
            f"Error parsing catalog file {path}: {e}"
        ) from e
    except OSError as e:
        raise CatalogLoadError(f"Error reading catalog file {path}: {e}") from e

    if data is None:
        logger.debug(f"Catalog file {path} is empty")
        return []

    data_types = parse_compliance_data_types(data)
    logger.debug(f"Loaded {len(data_types)} compliance data types from {path}")
    return data_types


def load_compliance_data_types_from_config(
    config: CatalogConfiguration,
) -> list[ComplianceDataType]:
    """Load the compliance data type catalog named by a configuration."""
    return load_compliance_data_types(config.data_types_path)
