"""Wizard step sequencing for the compliance policy editor.

The editor walks through a fixed sequence of steps keyed by their 0-based
position. Datasets without a schema have no individual fields to classify,
so their first step tags the dataset as a whole instead.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ComplianceStepName(str, Enum):
    """Names of the compliance editor wizard steps."""

    EDIT_COMPLIANCE_POLICY = "editCompliancePolicy"
    EDIT_PURGE_POLICY = "editPurgePolicy"
    EDIT_DATASET_CLASSIFICATION = "editDatasetClassification"
    EDIT_DATASET_LEVEL_COMPLIANCE_POLICY = "editDatasetLevelCompliancePolicy"


class WizardStep(BaseModel):
    """Descriptor for a single wizard step."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Name the UI driver dispatches on")


# Default edit sequence for datasets with a known field schema
COMPLIANCE_STEPS: Mapping[int, WizardStep] = MappingProxyType(
    {
        0: WizardStep(name=ComplianceStepName.EDIT_COMPLIANCE_POLICY.value),
        1: WizardStep(name=ComplianceStepName.EDIT_PURGE_POLICY.value),
        2: WizardStep(name=ComplianceStepName.EDIT_DATASET_CLASSIFICATION.value),
    }
)

# Schema-less datasets are tagged at the dataset level; overrides step 0 only
_DATASET_LEVEL_TAGGING_STEP: Mapping[int, WizardStep] = MappingProxyType(
    {0: WizardStep(name=ComplianceStepName.EDIT_DATASET_LEVEL_COMPLIANCE_POLICY.value)}
)


def get_compliance_steps(has_schema: bool | None = True) -> dict[int, WizardStep]:
    """Construct the compliance edit wizard steps for a dataset.

    For schema-less datasets the default steps are merged with the
    dataset-level tagging step, which replaces step 0 and leaves every other
    default step in place.

    Args:
        has_schema: Whether the dataset has a known field schema. Only False
            selects the dataset-level sequence; None falls back to the default.

    Returns:
        New mapping of 0-based step position to step descriptor

    """
    if has_schema is False:
        steps = {**COMPLIANCE_STEPS, **_DATASET_LEVEL_TAGGING_STEP}
    else:
        steps = dict(COMPLIANCE_STEPS)

    logger.debug(
        f"Compliance steps for has_schema={has_schema}: "
        f"{[step.name for step in steps.values()]}"
    )
    return steps
