"""Branch helpers of the interactive chart configuration wizard."""

from __future__ import annotations

from dataclasses import dataclass

from chartwizard.document import Document
from chartwizard.modifier import BranchModifier, ValuesModifier
from chartwizard.resolver import Section, ValueResolver

__all__ = ["BranchState", "ConfigurationWizard"]


@dataclass(frozen=True)
class BranchState:
    """SaaS and OSS branches read from one values document."""

    saas: str
    oss: str

    @property
    def in_sync(self) -> bool:
        """True when both editions track the same branch."""
        return self.saas == self.oss


class ConfigurationWizard:
    """Reads deployment branch settings for the configuration wizard.

    Args:
        resolver: Resolver for the SaaS section. Defaults to ``ValueResolver()``.
        modifier: Source of the current OSS branch. Defaults to a
            ``ValuesModifier`` sharing ``resolver``.
    """

    def __init__(
        self,
        resolver: ValueResolver | None = None,
        modifier: BranchModifier | None = None,
    ) -> None:
        self.resolver = resolver if resolver is not None else ValueResolver()
        self.modifier = modifier if modifier is not None else ValuesModifier(self.resolver)

    def get_saas_branch_from_values(self, values: Document) -> str:
        return self.resolver.resolve_branch(values, Section.SAAS)

    def get_oss_branch_from_values(self, values: Document) -> str:
        return self.modifier.get_current_oss_branch(values)

    def branch_state(self, values: Document) -> BranchState:
        """Snapshot both branches so the wizard can compare them."""
        return BranchState(
            saas=self.get_saas_branch_from_values(values),
            oss=self.get_oss_branch_from_values(values),
        )
