"""Configuration for loading the compliance data type catalog.

Configuration supports both explicit instantiation and environment variable
fallback, following the framework's component configuration conventions.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATA_TYPES_PATH_ENV_VAR = "WAIVERN_COMPLIANCE_DATA_TYPES_PATH"


class CatalogConfiguration(BaseModel):
    """Configuration for the compliance data type catalog source.

    Attributes:
        data_types_path: Path to a YAML or JSON catalog file

    Example:
        ```python
        # Explicit configuration
        config = CatalogConfiguration(data_types_path=Path("catalog.yaml"))

        # Environment fallback for the catalog path
        config = CatalogConfiguration.from_properties({})
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    data_types_path: Path = Field(description="Path to a YAML or JSON catalog file")

    @field_validator("data_types_path")
    @classmethod
    def validate_catalog_suffix(cls, v: Path) -> Path:
        """Validate that the catalog file has a supported extension."""
        allowed = {".yaml", ".yml", ".json"}
        if v.suffix.lower() not in allowed:
            raise ValueError(
                f"data_types_path must end with one of {sorted(allowed)}, got: {v}"
            )
        return v

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Explicit properties take priority. When ``data_types_path`` is not
        given, it is read from the ``WAIVERN_COMPLIANCE_DATA_TYPES_PATH``
        environment variable.

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If properties are invalid or no catalog path is
                available from either source

        """
        config_data = properties.copy()

        if "data_types_path" not in config_data:
            env_path = os.getenv(DATA_TYPES_PATH_ENV_VAR)
            if env_path:
                config_data["data_types_path"] = env_path

        return cls.model_validate(config_data)
