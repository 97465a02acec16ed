"""Shared type definitions for dataset compliance editing.

Enumerations mirror the wire values used by the compliance API, so an option
value can be submitted back without translation.
"""

from enum import Enum
from typing import Any, TypedDict


class ComplianceFieldIdValue(str, Enum):
    """Identifier categories a dataset field can be tagged with."""

    NONE = "none"
    MEMBER = "member"
    ORGANIZATION = "organization"
    GROUP = "group"
    MIXED = "mixed"
    CUSTOM = "custom"


class IdLogicalType(str, Enum):
    """Logical formats an identifier field value can take."""

    NUMERIC = "NUMERIC"
    URN = "URN"
    REVERSED_URN = "REVERSED_URN"
    COMPOSITE_URN = "COMPOSITE_URN"


class Classification(str, Enum):
    """Security classification levels for fields and datasets."""

    CONFIDENTIAL = "confidential"
    LIMITED_DISTRIBUTION = "limitedDistribution"
    HIGHLY_CONFIDENTIAL = "highlyConfidential"

    @property
    def label(self) -> str:
        """Human-readable name for dropdowns."""
        match self:
            case Classification.CONFIDENTIAL:
                return "Confidential"
            case Classification.LIMITED_DISTRIBUTION:
                return "Limited Distribution"
            case Classification.HIGHLY_CONFIDENTIAL:
                return "Highly Confidential"


class ComplianceEntity(TypedDict, total=False):
    """Compliance annotation for a single dataset field.

    Entities travel as plain mappings between the UI and the persistence
    layer. Only the keys below are known; any other key is carried through
    untouched by this package.

    Attributes:
        identifierField: Field path within the dataset schema
        identifierType: Identifier category, usually a ComplianceFieldIdValue
        logicalType: Identifier format, usually an IdLogicalType
        securityClassification: Field-level classification
        nonOwner: Whether the dataset is not the owner of this field's data
        valuePattern: Pattern for custom identifier values
        readonly: Transient marker, never persisted

    """

    identifierField: str
    identifierType: str | None
    logicalType: str | None
    securityClassification: str | None
    nonOwner: bool | None
    valuePattern: str | None
    readonly: Any
