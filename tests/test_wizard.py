"""Tests for ConfigurationWizard branch helpers and the OSS branch modifier."""

from __future__ import annotations

from typing import Any

import pytest

from chartwizard.document import Document
from chartwizard.modifier import BranchModifier, ValuesModifier
from chartwizard.resolver import ValueResolver
from chartwizard.wizard import BranchState, ConfigurationWizard


class StaticModifier:
    """Modifier stub that always reports the same OSS branch."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        self.calls: list[Any] = []

    def get_current_oss_branch(self, values: Document) -> str:
        self.calls.append(values)
        return self.branch


# === ValuesModifier ===


class TestValuesModifier:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(ValuesModifier(), BranchModifier)
        assert isinstance(StaticModifier("x"), BranchModifier)

    def test_reads_oss_branch(self, combined_values: dict[str, Any]) -> None:
        assert ValuesModifier().get_current_oss_branch(combined_values) == "oss-main"

    def test_saas_branch_does_not_leak(self, saas_values: dict[str, Any]) -> None:
        assert ValuesModifier().get_current_oss_branch(saas_values) == "main"

    def test_uses_resolver_default(self) -> None:
        modifier = ValuesModifier(ValueResolver(default_branch="trunk"))
        assert modifier.get_current_oss_branch(None) == "trunk"


# === ConfigurationWizard ===


class TestConfigurationWizard:
    def test_saas_branch_extraction(self, wizard: ConfigurationWizard, combined_values: dict[str, Any]) -> None:
        assert wizard.get_saas_branch_from_values(combined_values) == "saas-develop"
        assert wizard.modifier.get_current_oss_branch(combined_values) == "oss-main"

    def test_saas_config_structure(self, wizard: ConfigurationWizard) -> None:
        values = {"deployment": {"saas": {"repository": {"branch": "main"}}}}
        assert wizard.get_saas_branch_from_values(values) == "main"

        values_no_repo = {"deployment": {"saas": {"enabled": True}}}
        assert wizard.get_saas_branch_from_values(values_no_repo) == "main"

    @pytest.mark.parametrize("values", [None, {}])
    def test_absent_values_use_default(self, wizard: ConfigurationWizard, values: Any) -> None:
        assert wizard.get_saas_branch_from_values(values) == "main"
        assert wizard.get_oss_branch_from_values(values) == "main"

    def test_default_modifier_shares_resolver(self) -> None:
        wizard = ConfigurationWizard(resolver=ValueResolver(default_branch="trunk"))
        assert wizard.get_oss_branch_from_values({}) == "trunk"

    def test_custom_modifier_is_consulted(self, saas_values: dict[str, Any]) -> None:
        modifier = StaticModifier("oss-custom")
        wizard = ConfigurationWizard(modifier=modifier)
        assert wizard.get_oss_branch_from_values(saas_values) == "oss-custom"
        assert modifier.calls == [saas_values]


# === BranchState ===


class TestBranchState:
    def test_snapshot(self, wizard: ConfigurationWizard, combined_values: dict[str, Any]) -> None:
        state = wizard.branch_state(combined_values)
        assert state == BranchState(saas="saas-develop", oss="oss-main")
        assert state.in_sync is False

    def test_in_sync_when_both_default(self, wizard: ConfigurationWizard) -> None:
        assert wizard.branch_state(None).in_sync is True

    def test_frozen(self) -> None:
        state = BranchState(saas="a", oss="b")
        with pytest.raises(AttributeError):
            state.saas = "c"  # type: ignore[misc]
