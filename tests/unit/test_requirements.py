"""Unit tests for requirement sources."""

import json

from baseline_audit.core.requirements import (
    FileRequirementSource,
    RequirementSource,
    StaticRequirementSource,
)
from baseline_audit.models.compliance import ComponentKind, Requirements


class TestRequirements:
    """Tests for the Requirements model."""

    def test_defaults(self):
        requirements = Requirements.defaults()
        assert requirements.minimum_for(ComponentKind.OS_BUILD) == "26100"
        assert requirements.minimum_for(ComponentKind.BIOS) == "1.5.0"
        assert requirements.minimum_for(ComponentKind.GPU_DRIVER) == "536.23"
        assert requirements.minimum_for(ComponentKind.NPU_DRIVER) == "31.0.16000"

    def test_generic_has_no_minimum(self):
        assert Requirements.defaults().minimum_for(ComponentKind.GENERIC) == "Unknown"

    def test_aliases(self):
        requirements = Requirements.model_validate({"osBuild": "26200", "gpuDriver": "560.1"})
        assert requirements.os_build == "26200"
        assert requirements.minimum_for(ComponentKind.GPU_DRIVER) == "560.1"
        assert requirements.minimum_for(ComponentKind.BIOS) == "Unknown"

    def test_numbers_coerced(self):
        requirements = Requirements.model_validate({"osBuild": 26100})
        assert requirements.os_build == "26100"

    def test_serializes_with_aliases(self):
        data = Requirements.defaults().model_dump(by_alias=True)
        assert data["osBuild"] == "26100"
        assert data["npuDriver"] == "31.0.16000"


class TestStaticRequirementSource:
    """Tests for StaticRequirementSource."""

    def test_default(self):
        assert StaticRequirementSource().load() == Requirements.defaults()

    def test_protocol(self):
        assert isinstance(StaticRequirementSource(), RequirementSource)


class TestFileRequirementSource:
    """Tests for FileRequirementSource."""

    def test_load_json(self, requirements_file):
        requirements = FileRequirementSource(requirements_file).load()
        assert requirements.os_build == "26100.2000"
        assert requirements.bios_version == "2.0.0"

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "baseline.yaml"
        path.write_text('osBuild: "26200"\nbiosVersion: FP7T110\n')

        requirements = FileRequirementSource(path).load()
        assert requirements.os_build == "26200"
        assert requirements.bios_version == "FP7T110"
        assert requirements.gpu_driver is None

    def test_missing_file_uses_defaults(self, tmp_path):
        source = FileRequirementSource(tmp_path / "missing.json")
        assert source.load() == Requirements.defaults()

    def test_invalid_json_uses_defaults(self, tmp_path):
        path = tmp_path / "minRequirements.json"
        path.write_text("{not json")
        assert FileRequirementSource(path).load() == Requirements.defaults()

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "baseline.yml"
        path.write_text("osBuild: [unclosed")
        assert FileRequirementSource(path).load() == Requirements.defaults()

    def test_non_mapping_uses_defaults(self, tmp_path):
        path = tmp_path / "minRequirements.json"
        path.write_text(json.dumps(["26100", "1.5.0"]))
        assert FileRequirementSource(path).load() == Requirements.defaults()

    def test_wrong_value_type_uses_defaults(self, tmp_path):
        path = tmp_path / "minRequirements.json"
        path.write_text(json.dumps({"osBuild": ["26100"]}))
        assert FileRequirementSource(path).load() == Requirements.defaults()

    def test_reloads_on_each_call(self, tmp_path):
        path = tmp_path / "minRequirements.json"
        path.write_text(json.dumps({"osBuild": "26100"}))
        source = FileRequirementSource(path)
        assert source.load().os_build == "26100"

        path.write_text(json.dumps({"osBuild": "26200"}))
        assert source.load().os_build == "26200"

    def test_failure_is_logged(self, tmp_path, caplog):
        source = FileRequirementSource(tmp_path / "missing.json")
        with caplog.at_level("WARNING", logger="baseline_audit"):
            source.load()
        assert "using default requirements" in caplog.text
