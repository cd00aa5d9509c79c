"""OSS branch lookup consumed by the configuration wizard."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from chartwizard.document import Document
from chartwizard.resolver import Section, ValueResolver

__all__ = ["BranchModifier", "ValuesModifier"]


@runtime_checkable
class BranchModifier(Protocol):
    """Anything that can report the OSS branch currently set in a values document."""

    def get_current_oss_branch(self, values: Document) -> str: ...


class ValuesModifier:
    """Read-only BranchModifier backed by a ValueResolver."""

    def __init__(self, resolver: ValueResolver | None = None) -> None:
        self._resolver = resolver if resolver is not None else ValueResolver()

    def get_current_oss_branch(self, values: Document) -> str:
        """Return ``deployment.oss.repository.branch`` or the resolver's default."""
        return self._resolver.resolve_branch(values, Section.OSS)
