"""Registry scanning and scaffolding."""

from .scaffold import ensure_registry_exists
from .scanner import editor_path, list_categories, list_stacks, list_tree

__all__ = ["editor_path", "ensure_registry_exists", "list_categories", "list_stacks", "list_tree"]
