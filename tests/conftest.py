"""Shared fixtures for the chartwizard test suite."""

from __future__ import annotations

from typing import Any

import pytest
import yaml

from chartwizard.resolver import ValueResolver
from chartwizard.wizard import ConfigurationWizard


# === Values documents ===


@pytest.fixture
def saas_values() -> dict[str, Any]:
    """Values with only the SaaS branch set."""
    return {"deployment": {"saas": {"repository": {"branch": "develop"}}}}


@pytest.fixture
def combined_values() -> dict[str, Any]:
    """Values with both editions configured and unrelated siblings around them."""
    return yaml.safe_load(
        """
global:
  repoBranch: global-main
deployment:
  saas:
    enabled: true
    repository:
      branch: saas-develop
      password: hidden
      url: https://github.com/org/saas-repo.git
  oss:
    enabled: false
    repository:
      branch: oss-main
"""
    )


# === Components ===


@pytest.fixture
def resolver() -> ValueResolver:
    return ValueResolver()


@pytest.fixture
def wizard() -> ConfigurationWizard:
    return ConfigurationWizard()


@pytest.fixture
def settings_yaml(tmp_path: Any) -> str:
    """Write a wizard settings file and return its path."""
    yaml_file = tmp_path / "wizard.yaml"
    yaml_file.write_text("wizard:\n  default_branch: trunk\n")
    return str(yaml_file)
