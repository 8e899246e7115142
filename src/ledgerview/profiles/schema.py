"""
LedgerView Display Profile Schemas

Pydantic models for validating display profile YAML/JSON files.

A display profile names one hardware target and carries the two pieces of
configuration the pipeline needs: the display geometry and the policy
thresholds.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check that the major version matches
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Section Schemas
# =============================================================================

class GeometrySchema(BaseModel):
    """Schema for the display geometry section."""
    max_chars_per_line: int = Field(..., gt=0, description="Characters per value line")
    max_lines_per_page: int = Field(..., gt=0, description="Value lines per page")
    max_label_chars: int = Field(11, gt=0, description="Characters available for a page title")

    model_config = {"extra": "forbid"}


class PolicySchema(BaseModel):
    """Schema for the policy thresholds section. Omitted limits are disabled."""
    max_regular_pages: Optional[int] = Field(None, gt=0, description="Page limit in regular mode")
    max_expert_pages: Optional[int] = Field(None, gt=0, description="Page limit in expert mode")
    max_pages_per_field: Optional[int] = Field(
        None, gt=0, description="Pages one element may span before a warning"
    )

    @model_validator(mode="after")
    def validate_mode_limits(self) -> "PolicySchema":
        """Expert mode shows a superset of regular mode, so its limit cannot be lower."""
        if (
            self.max_regular_pages is not None
            and self.max_expert_pages is not None
            and self.max_expert_pages < self.max_regular_pages
        ):
            raise ValueError("max_expert_pages cannot be lower than max_regular_pages")
        return self

    model_config = {"extra": "forbid"}


class DisplayProfileSchema(BaseModel):
    """Schema for a complete display profile file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Profile schema version")
    name: str = Field(..., min_length=1, description="Profile name")
    description: Optional[str] = Field(None, description="Human-readable description")
    geometry: GeometrySchema
    policy: PolicySchema = Field(default_factory=PolicySchema)

    model_config = {"extra": "forbid"}


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_profile(data: dict[str, Any]) -> DisplayProfileSchema:
    """
    Validate a profile dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return DisplayProfileSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that the profile's major schema version matches ours."""
    profile_version = str(data.get("schema_version", SCHEMA_VERSION))
    return profile_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
