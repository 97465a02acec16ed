"""Waivern Dataset Compliance - Compliance Editing Core.

This package provides the data-shaping core of the dataset compliance
editor: dropdown options, wizard step sequencing, and filtering and
sanitisation of compliance entities.
"""

__version__ = "0.1.0"

from waivern_dataset_compliance.catalog import (
    load_compliance_data_types,
    load_compliance_data_types_from_config,
    parse_compliance_data_types,
)
from waivern_dataset_compliance.config import CatalogConfiguration
from waivern_dataset_compliance.entities import (
    filter_editable_entities,
    is_editable_compliance_entity,
    remove_readonly_attr,
)
from waivern_dataset_compliance.errors import (
    CatalogLoadError,
    DatasetComplianceError,
    InvalidCatalogFormatError,
    InvalidCatalogSchemaError,
)
from waivern_dataset_compliance.options import (
    ComplianceDataType,
    ComplianceFieldFormatOption,
    ComplianceFieldIdentifierOption,
    FieldIdentifierOption,
    SecurityClassificationOption,
    get_field_format_options,
    get_field_identifier_option,
    get_field_identifier_options,
    get_security_classification_options,
)
from waivern_dataset_compliance.steps import (
    COMPLIANCE_STEPS,
    ComplianceStepName,
    WizardStep,
    get_compliance_steps,
)
from waivern_dataset_compliance.strings import (
    COMPLIANCE_POLICY_STRINGS,
    HIDDEN_TRACKING_FIELDS,
)
from waivern_dataset_compliance.types import (
    Classification,
    ComplianceEntity,
    ComplianceFieldIdValue,
    IdLogicalType,
)
from waivern_dataset_compliance.utils import fleece

__all__ = [
    # Version
    "__version__",
    # Types
    "Classification",
    "ComplianceEntity",
    "ComplianceFieldIdValue",
    "IdLogicalType",
    # Options
    "ComplianceDataType",
    "ComplianceFieldFormatOption",
    "ComplianceFieldIdentifierOption",
    "FieldIdentifierOption",
    "SecurityClassificationOption",
    "get_field_format_options",
    "get_field_identifier_option",
    "get_field_identifier_options",
    "get_security_classification_options",
    # Entities
    "filter_editable_entities",
    "is_editable_compliance_entity",
    "remove_readonly_attr",
    # Steps
    "COMPLIANCE_STEPS",
    "ComplianceStepName",
    "WizardStep",
    "get_compliance_steps",
    # Strings
    "COMPLIANCE_POLICY_STRINGS",
    "HIDDEN_TRACKING_FIELDS",
    # Catalog
    "CatalogConfiguration",
    "load_compliance_data_types",
    "load_compliance_data_types_from_config",
    "parse_compliance_data_types",
    # Utilities
    "fleece",
    # Errors
    "DatasetComplianceError",
    "CatalogLoadError",
    "InvalidCatalogFormatError",
    "InvalidCatalogSchemaError",
]
