"""Workspace-level pytest configuration and fixtures.

This file provides shared fixtures for all dataset compliance tests.
"""

from typing import Any

import pytest

from waivern_dataset_compliance.options import ComplianceDataType


@pytest.fixture
def compliance_data_types() -> list[ComplianceDataType]:
    """Provide a small compliance data type catalog in a fixed order."""
    return [
        ComplianceDataType(id="member", title="Member ID"),
        ComplianceDataType(id="organization", title="Organization ID"),
        ComplianceDataType(id="group", title="Group ID"),
        ComplianceDataType(id="custom", title="Custom ID"),
    ]


@pytest.fixture
def compliance_entities() -> list[dict[str, Any]]:
    """Provide compliance entities covering every readonly marker variant."""
    return [
        {"identifierField": "header.memberId", "identifierType": "member", "readonly": True},
        {"identifierField": "memberUrn", "identifierType": "member", "logicalType": "URN"},
        {"identifierField": "orgId", "identifierType": "organization", "readonly": False},
        {"identifierField": "groupId", "identifierType": "group", "readonly": "true"},
        {"identifierField": "requestHeader", "identifierType": None, "readonly": True},
        {"identifierField": "customId", "identifierType": "custom", "readonly": 1},
    ]
