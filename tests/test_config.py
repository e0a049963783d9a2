"""Tests for configuration loading."""

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from prior_inventions.config import Config, GitHubConfig, load_config
from prior_inventions.errors import ConfigurationError


class TestLoadConfig:
    """Test load_config."""

    def test_load_yaml(self, config_file: Path) -> None:
        """Test a complete YAML file is parsed with camelCase keys."""
        config = load_config(config_file)

        assert config.document.description == "Everything I have built."
        assert config.document.markdown_header is not None
        assert config.document.markdown_header.startswith("---\ngeometry")
        assert config.github.username == "alice"
        assert config.github.organizations == [("acme", ["rocket"])]
        assert config.github.repo_overrides[0].slug == "alice/cool-app"
        assert config.projects[0].name == "Widget"
        assert config.projects[0].link is None

    def test_load_json(self, tmp_path: Path) -> None:
        """Test JSON configuration files are accepted."""
        path = tmp_path / "config.json"
        path.write_text(
            '{"document": {"file": "out.md", "description": "Intro."},'
            ' "github": {"username": "alice"}}',
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.github.organizations == []
        assert config.github.repo_overrides == []
        assert config.projects == []

    def test_null_link_override_is_explicit(self, tmp_path: Path) -> None:
        """Test link: null is distinguishable from an omitted link."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "document: {file: out.md, description: Intro.}\n"
            "github:\n"
            "  username: alice\n"
            "  repoOverrides:\n"
            "    - {slug: alice/a, link: null}\n"
            "    - {slug: alice/b, name: B}\n",
            encoding="utf-8",
        )

        first, second = load_config(path).github.repo_overrides

        assert "link" in first.model_fields_set
        assert "link" not in second.model_fields_set

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test unparsable YAML is a configuration error."""
        path = tmp_path / "config.yaml"
        path.write_text("document: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a top-level list is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_missing_required_field(self, tmp_path: Path) -> None:
        """Test schema violations are configuration errors."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "document: {file: out.md}\ngithub: {username: alice}\n", encoding="utf-8"
        )

        with pytest.raises(ConfigurationError, match="description"):
            load_config(path)


class TestConfigModels:
    """Test configuration model validation."""

    def test_duplicate_organization_rejected(
        self, config_data: dict[str, Any]
    ) -> None:
        """Test an organization may only be listed once."""
        config_data["github"]["organizations"] = [["acme", ["a"]], ["acme", ["b"]]]

        with pytest.raises(ValueError, match="listed more than once"):
            Config.model_validate(config_data)

    def test_duplicate_override_rejected(self, config_data: dict[str, Any]) -> None:
        """Test a repository may only be overridden once."""
        config_data["github"]["repoOverrides"] = [
            {"slug": "alice/a", "name": "A"},
            {"slug": "alice/a", "description": "B"},
        ]

        with pytest.raises(ValueError, match="more than one override"):
            Config.model_validate(config_data)

    def test_unknown_key_rejected(self, config_data: dict[str, Any]) -> None:
        """Test misspelled keys are reported."""
        config_data["github"]["organisations"] = []

        with pytest.raises(ValueError):
            Config.model_validate(config_data)

    @patch.dict(os.environ, {"GITHUB_TOKEN": "env_token"})
    def test_token_falls_back_to_environment(self) -> None:
        """Test GITHUB_TOKEN is used when no token is configured."""
        assert GitHubConfig(username="alice").resolved_token() == "env_token"
        assert (
            GitHubConfig(username="alice", token="cfg").resolved_token() == "cfg"
        )

    @patch.dict(os.environ, {}, clear=True)
    def test_token_missing(self) -> None:
        """Test no token resolves to None."""
        assert GitHubConfig(username="alice").resolved_token() is None
