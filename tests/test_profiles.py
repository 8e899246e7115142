"""
Tests for display profile loading.

Validates:
- Packaged profiles load
- Malformed YAML fails
- Missing/extra keys fail
- Version mismatch fails
- Policy cross-field validation
"""
import json

import pytest
import yaml

from ledgerview.exceptions import ProfileLoadError, ProfileValidationError, ProfileVersionMismatch
from ledgerview.models import DisplayGeometry, PolicyThresholds
from ledgerview.profiles import (
    SCHEMA_VERSION,
    ProfileLoader,
    check_schema_version,
    list_profiles,
    load_profile,
    load_profile_from_string,
)


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def minimal_profile():
    """Minimal valid profile document."""
    return {
        "schema_version": SCHEMA_VERSION,
        "name": "test",
        "geometry": {"max_chars_per_line": 20, "max_lines_per_page": 3},
    }


# ============================================================================
# PACKAGED PROFILES
# ============================================================================

class TestPackagedProfiles:
    def test_list(self):
        assert {"default", "wide"} <= set(list_profiles())

    def test_default(self):
        profile = load_profile()
        assert profile.name == "default"
        assert profile.geometry == DisplayGeometry(max_chars_per_line=17, max_lines_per_page=2, max_label_chars=17)
        assert profile.thresholds == PolicyThresholds(
            max_regular_pages=24, max_expert_pages=48, max_pages_per_field=4
        )

    def test_wide(self):
        assert load_profile("wide").geometry.max_chars_per_line == 35

    def test_unknown_name(self):
        with pytest.raises(ProfileLoadError) as exc_info:
            load_profile("no-such-profile")
        assert "default" in exc_info.value.details["available"]

    def test_loader_caches(self):
        loader = ProfileLoader()
        first = loader.load_named("default")
        assert loader.get_profile("default") is first
        assert loader.load_named("default") is first

    def test_file_named_like_packaged_profile_does_not_shadow_it(self, tmp_path, minimal_profile):
        minimal_profile["name"] = "default"
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(minimal_profile))
        loader = ProfileLoader()
        custom = loader.load(path)
        assert custom.geometry.max_chars_per_line == 20
        packaged = loader.load_named("default")
        assert packaged.geometry.max_chars_per_line == 17
        assert loader.get_profile("default") is packaged

    def test_to_dict_round_trips(self):
        profile = load_profile("wide")
        assert ProfileLoader().load_data(profile.to_dict()) == profile


# ============================================================================
# FILES
# ============================================================================

class TestProfileFiles:
    def test_load_yaml_file(self, tmp_path, minimal_profile):
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump(minimal_profile))
        profile = load_profile(path)
        assert profile.geometry.max_lines_per_page == 3
        assert profile.geometry.max_label_chars == 11
        assert profile.thresholds == PolicyThresholds()

    def test_load_json_file(self, tmp_path, minimal_profile):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps(minimal_profile))
        assert load_profile(str(path)).name == "test"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileLoadError):
            load_profile(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed")
        with pytest.raises(ProfileLoadError):
            load_profile(path)


# ============================================================================
# VALIDATION
# ============================================================================

class TestProfileValidation:
    def test_not_a_mapping(self):
        with pytest.raises(ProfileLoadError):
            load_profile_from_string("- just\n- a list\n")

    def test_missing_geometry(self, minimal_profile):
        del minimal_profile["geometry"]
        with pytest.raises(ProfileValidationError):
            ProfileLoader().load_data(minimal_profile)

    def test_zero_chars_rejected(self, minimal_profile):
        minimal_profile["geometry"]["max_chars_per_line"] = 0
        with pytest.raises(ProfileValidationError) as exc_info:
            ProfileLoader().load_data(minimal_profile)
        assert exc_info.value.code == "LV_PROFILE_VALIDATION_ERROR"

    def test_unknown_key_rejected(self, minimal_profile):
        minimal_profile["geometry"]["colour"] = "amber"
        with pytest.raises(ProfileValidationError):
            ProfileLoader().load_data(minimal_profile)

    def test_expert_limit_below_regular_rejected(self, minimal_profile):
        minimal_profile["policy"] = {"max_regular_pages": 30, "max_expert_pages": 10}
        with pytest.raises(ProfileValidationError):
            ProfileLoader().load_data(minimal_profile)

    def test_version_mismatch(self, minimal_profile):
        minimal_profile["schema_version"] = "2.0.0"
        with pytest.raises(ProfileVersionMismatch):
            ProfileLoader().load_data(minimal_profile)

    def test_version_check_can_be_relaxed(self, minimal_profile):
        minimal_profile["schema_version"] = "2.0.0"
        assert ProfileLoader(strict_version=False).load_data(minimal_profile).name == "test"

    def test_minor_version_accepted(self):
        assert check_schema_version({"schema_version": "1.4.0"})
        assert check_schema_version({})

    def test_from_json_string(self, minimal_profile):
        profile = load_profile_from_string(json.dumps(minimal_profile), format="json")
        assert profile.geometry.max_chars_per_line == 20
