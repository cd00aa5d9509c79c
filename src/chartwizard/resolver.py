"""Branch resolution for the deployment sections of a values document."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from chartwizard.config import Config, WizardSettings
from chartwizard.document import MISSING, Document, walk
from chartwizard.errors import ConfigError, InvalidSectionError

__all__ = ["DEFAULT_BRANCH", "Section", "ValueResolver", "branch_path"]

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"


class Section(str, Enum):
    """Deployment edition whose repository branch is being resolved."""

    SAAS = "saas"
    OSS = "oss"

    @classmethod
    def parse(cls, raw: Any) -> Section:
        """Convert a Section or a case-insensitive name into a Section."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw.strip().lower())
            except ValueError:
                pass
        raise InvalidSectionError(raw)


def branch_path(section: Section | str) -> tuple[str, ...]:
    """Key path of the repository branch for ``section``.

    Raises:
        InvalidSectionError: If section is not a known deployment section.
    """
    return ("deployment", Section.parse(section).value, "repository", "branch")


class ValueResolver:
    """Resolves branch names from a values document with a fixed default.

    Resolution is a pure read of the document. Any absent document, missing
    key, empty mapping, non-mapping intermediate node or non-string leaf
    yields the default branch.
    """

    def __init__(self, default_branch: str = DEFAULT_BRANCH) -> None:
        if not isinstance(default_branch, str) or not default_branch:
            raise ConfigError(f"Default branch must be a non-empty string, got {default_branch!r}")
        self._default_branch = default_branch

    @classmethod
    def from_config(cls, config: Config) -> ValueResolver:
        """Create a resolver using ``wizard.default_branch`` from config."""
        settings = WizardSettings.from_config(config)
        return cls(default_branch=settings.default_branch)

    @property
    def default_branch(self) -> str:
        return self._default_branch

    def resolve_branch(self, document: Document, section: Section | str) -> str:
        """Return the branch configured for ``section``, or the default branch.

        ``section`` may also be a section name; an unknown name yields the
        default branch.
        """
        try:
            path = branch_path(section)
        except InvalidSectionError:
            logger.debug("Unknown section %r, using default %r", section, self._default_branch)
            return self._default_branch
        value = walk(document, path)
        if value is MISSING:
            logger.debug("Branch path %s not found, using default %r", ".".join(path), self._default_branch)
            return self._default_branch
        if not isinstance(value, str) or not value:
            logger.debug(
                "Branch at %s is %s, not a non-empty string; using default %r",
                ".".join(path),
                type(value).__name__,
                self._default_branch,
            )
            return self._default_branch
        return value

    def resolve_saas_branch(self, document: Document) -> str:
        return self.resolve_branch(document, Section.SAAS)

    def resolve_oss_branch(self, document: Document) -> str:
        return self.resolve_branch(document, Section.OSS)
