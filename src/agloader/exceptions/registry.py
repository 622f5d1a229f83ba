"""Registry selection exceptions."""

from __future__ import annotations

from agloader.exceptions.base import AgLoaderError


class RegistryError(AgLoaderError, LookupError):
    """Raised when a registry selection cannot be resolved."""


class UnknownEditorError(RegistryError):
    """Raised for an editor key outside the supported profiles."""


class UnknownStackError(RegistryError):
    """Raised when a requested stack is not present in the registry."""


class UnknownCategoryError(RegistryError):
    """Raised when a requested category is not present in a stack."""
