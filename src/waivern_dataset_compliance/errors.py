"""Error classes for the dataset compliance editing core.

This module provides:
- DatasetComplianceError: Base exception class for all package errors
- CatalogLoadError, InvalidCatalogFormatError, InvalidCatalogSchemaError:
  Compliance data type catalog loading exceptions

The option, entity and step functions never raise; only catalog loading does.
"""


class DatasetComplianceError(Exception):
    """Base exception for all dataset compliance errors."""

    pass


class CatalogLoadError(DatasetComplianceError):
    """Raised when a compliance data type catalog file cannot be read."""

    pass


class InvalidCatalogFormatError(CatalogLoadError):
    """Raised when a catalog file is not valid YAML or JSON."""

    pass


class InvalidCatalogSchemaError(CatalogLoadError):
    """Raised when catalog data does not describe a list of data types."""

    pass
