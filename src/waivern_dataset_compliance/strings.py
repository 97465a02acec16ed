"""User-facing strings for the compliance policy editor.

The presentation layer decides when to show each message; nothing in this
package selects between them.
"""

from collections.abc import Mapping
from types import MappingProxyType

COMPLIANCE_POLICY_STRINGS: Mapping[str, str | Mapping[str, str]] = MappingProxyType(
    {
        "complianceDataException": "Unexpected discrepancy in compliance data.",
        "complianceFieldNotUnique": (
            "Compliance fields have failed to verify a uniqueness check."
        ),
        "missingTypes": (
            "Looks like you may have forgotten to specify a `Field Format` "
            "for all ID fields?"
        ),
        "successUpdating": "Changes have been successfully saved!",
        "failedUpdating": "An error occurred while saving.",
        "successUploading": 'Metadata successfully updated! Please "Save" when ready.',
        "invalidPolicyData": (
            "Received policy in an unexpected format! "
            "Please check the provided attributes and try again."
        ),
        "helpText": MappingProxyType(
            {
                "classification": (
                    "This security classification is from go/dht and should be "
                    "good enough in most cases. You can optionally override it "
                    "if required by house security."
                ),
            }
        ),
        "missingPurgePolicy": "Please specify a Compliance Purge Policy",
        "missingDatasetSecurityClassification": (
            "Please specify a security classification for this dataset."
        ),
    }
)

# Trusted markup, rendered as-is by the presentation layer
HIDDEN_TRACKING_FIELDS = (
    "<p>Some fields in this dataset have been hidden from the table(s) below. "
    "These are tracking fields for which we've been able to predetermine the "
    "compliance classification.</p>"
    "<p>For example: <code>header.memberId</code>, <code>requestHeader</code>. "
    "Hopefully, this saves you some scrolling!</p>"
)
