"""Tests for compliance editor user-facing strings."""

import pytest

from waivern_dataset_compliance.strings import (
    COMPLIANCE_POLICY_STRINGS,
    HIDDEN_TRACKING_FIELDS,
)


class TestCompliancePolicyStrings:
    """Tests for the COMPLIANCE_POLICY_STRINGS table."""

    @pytest.mark.parametrize(
        "key",
        [
            "complianceDataException",
            "complianceFieldNotUnique",
            "missingTypes",
            "successUpdating",
            "failedUpdating",
            "successUploading",
            "invalidPolicyData",
            "missingPurgePolicy",
            "missingDatasetSecurityClassification",
        ],
    )
    def test_message_keys_map_to_non_empty_text(self, key: str) -> None:
        """Every message key the presentation layer uses is present."""
        value = COMPLIANCE_POLICY_STRINGS[key]
        assert isinstance(value, str)
        assert value.strip()

    def test_help_text_has_classification_entry(self) -> None:
        """Nested help text exposes the classification hint."""
        help_text = COMPLIANCE_POLICY_STRINGS["helpText"]
        assert not isinstance(help_text, str)
        assert help_text["classification"].startswith("This security classification")

    def test_table_is_read_only(self) -> None:
        """The string table cannot be modified."""
        with pytest.raises(TypeError):
            COMPLIANCE_POLICY_STRINGS["failedUpdating"] = "changed"  # type: ignore[index]

    def test_messages_are_fixed_english_text(self) -> None:
        """Messages are plain strings, not templates."""
        assert COMPLIANCE_POLICY_STRINGS["successUpdating"] == (
            "Changes have been successfully saved!"
        )
        assert COMPLIANCE_POLICY_STRINGS["missingPurgePolicy"] == (
            "Please specify a Compliance Purge Policy"
        )


class TestHiddenTrackingFields:
    """Tests for the hidden tracking fields markup."""

    def test_is_paragraph_markup_naming_example_fields(self) -> None:
        """Fragment is two paragraphs listing example tracking fields."""
        assert HIDDEN_TRACKING_FIELDS.startswith("<p>")
        assert HIDDEN_TRACKING_FIELDS.count("<p>") == 2
        assert "<code>header.memberId</code>" in HIDDEN_TRACKING_FIELDS
        assert "<code>requestHeader</code>" in HIDDEN_TRACKING_FIELDS
