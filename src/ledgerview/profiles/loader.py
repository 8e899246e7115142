"""
LedgerView Display Profile Loader

Loads and validates display profiles from YAML or JSON files.

Converts Pydantic schema models to LedgerView domain models.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ProfileLoadError, ProfileValidationError, ProfileVersionMismatch
from ..models import DisplayGeometry, PolicyThresholds
from .schema import SCHEMA_VERSION, DisplayProfileSchema, check_schema_version, validate_profile

logger = logging.getLogger(__name__)

PROFILES_DIR = Path(__file__).parent
DEFAULT_PROFILE = "default"


# =============================================================================
# Domain Model
# =============================================================================

@dataclass(frozen=True)
class DisplayProfile:
    """
    A named display configuration.

    Attributes:
        name: Profile name
        geometry: Display geometry for pagination
        thresholds: Policy limits for the checker
        description: Optional human-readable description
    """
    name: str
    geometry: DisplayGeometry
    thresholds: PolicyThresholds
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "name": self.name,
            "description": self.description,
            "geometry": self.geometry.to_dict(),
            "policy": self.thresholds.to_dict(),
        }


def _convert_profile(schema: DisplayProfileSchema) -> DisplayProfile:
    """Convert DisplayProfileSchema to DisplayProfile model."""
    return DisplayProfile(
        name=schema.name,
        description=schema.description,
        geometry=DisplayGeometry(
            max_chars_per_line=schema.geometry.max_chars_per_line,
            max_lines_per_page=schema.geometry.max_lines_per_page,
            max_label_chars=schema.geometry.max_label_chars,
        ),
        thresholds=PolicyThresholds(
            max_regular_pages=schema.policy.max_regular_pages,
            max_expert_pages=schema.policy.max_expert_pages,
            max_pages_per_field=schema.policy.max_pages_per_field,
        ),
    )


# =============================================================================
# Loader
# =============================================================================

class ProfileLoader:
    """
    Loads display profiles from YAML or JSON files.

    Usage:
        loader = ProfileLoader()
        profile = loader.load("profiles/wide.yaml")
        profile = loader.load_named("default")
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject profiles with incompatible schema versions
        """
        self.strict_version = strict_version
        self._packaged: dict[str, DisplayProfile] = {}

    def load(self, path: Union[str, Path]) -> DisplayProfile:
        """
        Load a display profile from a file.

        Raises:
            ProfileLoadError: If file cannot be read
            ProfileValidationError: If validation fails
            ProfileVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ProfileLoadError(
                message=f"Failed to load display profile: {e}",
                details={"path": str(path), "error": str(e)},
            ) from e

        profile = self.load_data(data, source=str(path))
        logger.debug("Loaded display profile %r from %s", profile.name, path)
        return profile

    def load_data(self, data: Any, source: str = "<data>") -> DisplayProfile:
        """Validate and convert an already parsed profile document."""
        if not isinstance(data, dict):
            raise ProfileLoadError(
                message="Display profile must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            profile_version = data.get("schema_version", "unknown")
            raise ProfileVersionMismatch(
                message=(
                    f"Schema version mismatch: profile has {profile_version}, "
                    f"expected {SCHEMA_VERSION}"
                ),
                details={
                    "profile_version": profile_version,
                    "expected_version": SCHEMA_VERSION,
                    "path": source,
                },
            )

        try:
            schema = validate_profile(data)
        except ValidationError as e:
            raise ProfileValidationError(
                message=f"Display profile validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False), "path": source},
            ) from e

        return _convert_profile(schema)

    def load_named(self, name: str) -> DisplayProfile:
        """Load one of the profiles packaged with the library."""
        if name in self._packaged:
            return self._packaged[name]
        path = PROFILES_DIR / f"{name}.yaml"
        if not path.is_file():
            raise ProfileLoadError(
                message=f"Unknown display profile: {name}",
                details={"name": name, "available": list_profiles()},
            )
        profile = self.load(path)
        self._packaged[name] = profile
        return profile

    def resolve(self, name_or_path: Union[str, Path]) -> DisplayProfile:
        """Load by file path when one exists, otherwise by packaged name."""
        path = Path(name_or_path)
        if path.suffix.lower() in {".yaml", ".yml", ".json"} or path.is_file():
            return self.load(path)
        return self.load_named(str(name_or_path))

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def get_profile(self, name: str) -> Optional[DisplayProfile]:
        """Get a cached packaged profile by its packaged name."""
        return self._packaged.get(name)


# =============================================================================
# Convenience Functions
# =============================================================================

def list_profiles() -> list[str]:
    """Names of the packaged profiles."""
    return sorted(p.stem for p in PROFILES_DIR.glob("*.yaml"))


def load_profile(name_or_path: Union[str, Path] = DEFAULT_PROFILE) -> DisplayProfile:
    """Load a profile by packaged name or file path."""
    return ProfileLoader().resolve(name_or_path)


def load_profile_from_string(content: str, format: str = "yaml") -> DisplayProfile:
    """Load a profile from a YAML or JSON string."""
    if format.lower() == "json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)
    return ProfileLoader().load_data(data, source="<string>")
