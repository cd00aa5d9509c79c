"""chartwizard - Deployment branch resolution for the chart configuration wizard."""

from __future__ import annotations

# Resolution
from chartwizard.document import MISSING, Document, try_get_mapping, walk
from chartwizard.resolver import DEFAULT_BRANCH, Section, ValueResolver, branch_path

# Wizard
from chartwizard.modifier import BranchModifier, ValuesModifier
from chartwizard.wizard import BranchState, ConfigurationWizard

# Config
from chartwizard.config import Config, WizardSettings

# Errors
from chartwizard.errors import (
    ConfigError,
    ConfigNotFoundError,
    ErrorCodes,
    InvalidSectionError,
    WizardError,
)

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "Document",
    "MISSING",
    "try_get_mapping",
    "walk",
    "DEFAULT_BRANCH",
    "Section",
    "ValueResolver",
    "branch_path",
    # Wizard
    "BranchModifier",
    "ValuesModifier",
    "BranchState",
    "ConfigurationWizard",
    # Config
    "Config",
    "WizardSettings",
    # Errors
    "ErrorCodes",
    "WizardError",
    "ConfigError",
    "ConfigNotFoundError",
    "InvalidSectionError",
]
