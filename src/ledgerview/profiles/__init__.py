"""
LedgerView Display Profiles

Schema validation and loading for display profiles.

A display profile is a YAML or JSON file naming a hardware target and its
display geometry and policy thresholds. Profiles shipped with the library
live next to this module.

Usage:
    from ledgerview.profiles import load_profile, ProfileLoader

    profile = load_profile()                 # packaged "default"
    profile = load_profile("wide")
    profile = load_profile("path/to/custom.yaml")
"""
from __future__ import annotations

from .loader import (
    DEFAULT_PROFILE,
    PROFILES_DIR,
    DisplayProfile,
    ProfileLoader,
    list_profiles,
    load_profile,
    load_profile_from_string,
)
from .schema import (
    SCHEMA_VERSION,
    DisplayProfileSchema,
    GeometrySchema,
    PolicySchema,
    check_schema_version,
    validate_profile,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "DEFAULT_PROFILE",
    "PROFILES_DIR",
    "DisplayProfile",
    "ProfileLoader",
    "list_profiles",
    "load_profile",
    "load_profile_from_string",
    # Validation
    "check_schema_version",
    "validate_profile",
    # Schemas
    "DisplayProfileSchema",
    "GeometrySchema",
    "PolicySchema",
]
