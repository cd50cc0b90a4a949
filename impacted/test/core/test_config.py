"""Tests for impacted.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from impacted.core.config import (
    DEFAULT_BASE_REF,
    DEFAULT_HEAD_REF,
    DEFAULT_RELEASE_CONFIG_PATH,
    DEFAULT_SFDX_PROJECT_PATH,
    DetectInputs,
    action_input_env,
)


class TestActionInputEnv:
    def test_keeps_hyphens(self) -> None:
        assert action_input_env("base-ref") == "INPUT_BASE-REF"

    def test_replaces_spaces(self) -> None:
        assert action_input_env("my input") == "INPUT_MY_INPUT"


class TestDetectInputs:
    def test_defaults(self) -> None:
        inputs = DetectInputs()
        assert inputs.release_config_path == "config/release-config-*.yaml"
        assert inputs.base_ref == "origin/main"
        assert inputs.head_ref == "HEAD"
        assert inputs.sfdx_project_path == "sfdx-project.json"

    def test_frozen(self) -> None:
        inputs = DetectInputs()
        with pytest.raises(AttributeError):
            inputs.base_ref = "main"  # type: ignore[misc]

    def test_from_env_empty(self) -> None:
        assert DetectInputs.from_env({}) == DetectInputs()

    def test_from_env_reads_action_inputs(self) -> None:
        inputs = DetectInputs.from_env(
            {
                "INPUT_RELEASE-CONFIG-PATH": "release/*.yml",
                "INPUT_BASE-REF": "origin/develop",
                "INPUT_HEAD-REF": "feature",
                "INPUT_SFDX-PROJECT-PATH": "force-app/sfdx-project.json",
            }
        )
        assert inputs.release_config_path == "release/*.yml"
        assert inputs.base_ref == "origin/develop"
        assert inputs.head_ref == "feature"
        assert inputs.sfdx_project_path == "force-app/sfdx-project.json"

    def test_from_env_blank_falls_back(self) -> None:
        inputs = DetectInputs.from_env({"INPUT_BASE-REF": "   ", "INPUT_HEAD-REF": ""})
        assert inputs.base_ref == DEFAULT_BASE_REF
        assert inputs.head_ref == DEFAULT_HEAD_REF

    def test_with_overrides_ignores_none_and_blank(self) -> None:
        inputs = DetectInputs(base_ref="origin/develop").with_overrides(
            base_ref=None,
            head_ref="  ",
            release_config_path="cfg/*.yaml",
        )
        assert inputs.base_ref == "origin/develop"
        assert inputs.head_ref == DEFAULT_HEAD_REF
        assert inputs.release_config_path == "cfg/*.yaml"
        assert inputs.sfdx_project_path == DEFAULT_SFDX_PROJECT_PATH

    def test_manifest_file_relative(self, tmp_path: Path) -> None:
        assert DetectInputs().manifest_file(tmp_path) == tmp_path / "sfdx-project.json"

    def test_manifest_file_absolute(self, tmp_path: Path) -> None:
        manifest = tmp_path / "elsewhere" / "sfdx-project.json"
        inputs = DetectInputs(sfdx_project_path=str(manifest))
        assert inputs.manifest_file(Path("/unused")) == manifest

    def test_default_glob_constant(self) -> None:
        assert DetectInputs().release_config_path == DEFAULT_RELEASE_CONFIG_PATH
