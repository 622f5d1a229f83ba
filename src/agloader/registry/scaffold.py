"""First-run scaffolding of the global registry."""

from __future__ import annotations

import logging
from pathlib import Path

from agloader.constants.scaffold import DEMO_LAYOUT

logger = logging.getLogger(__name__)


def ensure_registry_exists(root: Path) -> bool:
    """Create a demo registry at *root* if it does not exist yet.

    Returns ``True`` when the demo tree was written. An existing root is left
    untouched, even if it is empty.
    """
    if root.exists():
        return False

    for editor, stacks in DEMO_LAYOUT.items():
        for stack, categories in stacks.items():
            for category, (file_name, content) in categories.items():
                directory = root / editor / stack / category
                directory.mkdir(parents=True, exist_ok=True)
                (directory / file_name).write_text(content, encoding="utf-8")

    logger.debug("Created demo registry at %s", root)
    return True
