"""Dropdown option models and builders for compliance editing.

Options are display-ready value/label pairs. The value is opaque to the
renderer and is submitted back unchanged when the user selects it.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from waivern_dataset_compliance.types import (
    Classification,
    ComplianceFieldIdValue,
    IdLogicalType,
)


class ComplianceDataType(BaseModel):
    """Entry in the compliance data type catalog.

    The upstream catalog carries more attributes than are needed to build
    options; unknown keys are ignored rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1, description="Compliance field identifier value")
    title: str = Field(min_length=1, description="Display title for the data type")


T = TypeVar("T")


class FieldIdentifierOption(BaseModel, Generic[T]):
    """Generic dropdown option.

    Attributes:
        value: Value submitted when the option is selected
        label: Text shown to the user
        is_disabled: Whether the option is shown but not selectable (unset by default)

    """

    model_config = ConfigDict(frozen=True)

    value: T
    label: str
    is_disabled: bool | None = None


class ComplianceFieldIdentifierOption(FieldIdentifierOption[ComplianceFieldIdValue | str]):
    """Field identifier option.

    Known identifier values are coerced to ComplianceFieldIdValue; catalog ids
    outside the enumeration are kept as plain strings.
    """

    value: ComplianceFieldIdValue | str = Field(union_mode="left_to_right")


# Option types for nullable closed value sets
ComplianceFieldFormatOption = FieldIdentifierOption[IdLogicalType | None]
SecurityClassificationOption = FieldIdentifierOption[Classification | None]

UNSET_FIELD_FORMAT_LABEL = "Select Format"
UNSET_CLASSIFICATION_LABEL = "Unspecified"


def get_field_identifier_option(
    compliance_data_type: ComplianceDataType,
) -> ComplianceFieldIdentifierOption:
    """Transform a compliance data type into a field identifier option."""
    return ComplianceFieldIdentifierOption(
        value=compliance_data_type.id, label=compliance_data_type.title
    )


def get_field_identifier_options(
    compliance_data_types: Iterable[ComplianceDataType],
) -> list[ComplianceFieldIdentifierOption]:
    """Map compliance data types to field identifier options, preserving order."""
    return [get_field_identifier_option(dt) for dt in compliance_data_types]


def get_field_format_options(
    logical_types: Iterable[IdLogicalType] = IdLogicalType,
) -> list[ComplianceFieldFormatOption]:
    """Build field format options, led by an unset option.

    Args:
        logical_types: Logical types to offer, in display order

    Returns:
        Options whose first entry has a None value

    """
    options: list[ComplianceFieldFormatOption] = [
        ComplianceFieldFormatOption(value=None, label=UNSET_FIELD_FORMAT_LABEL)
    ]
    options.extend(
        ComplianceFieldFormatOption(value=logical_type, label=logical_type.value)
        for logical_type in logical_types
    )
    return options


def get_security_classification_options(
    classifications: Iterable[Classification] = Classification,
) -> list[SecurityClassificationOption]:
    """Build security classification options, led by an unset option.

    Args:
        classifications: Classifications to offer, in display order

    Returns:
        Options whose first entry has a None value

    """
    options: list[SecurityClassificationOption] = [
        SecurityClassificationOption(value=None, label=UNSET_CLASSIFICATION_LABEL)
    ]
    options.extend(
        SecurityClassificationOption(value=classification, label=classification.label)
        for classification in classifications
    )
    return options
