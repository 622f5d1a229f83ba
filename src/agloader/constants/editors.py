"""Destination conventions for each supported editor profile."""

from __future__ import annotations

EDITOR_KEYS: tuple[str, ...] = ("antigravity", "cursor", "vscode")

ANTIGRAVITY_DIR: str = ".agents"
CURSOR_RULES_DIR: tuple[str, ...] = (".cursor", "rules")
CURSOR_RULE_SUFFIX: str = ".mdc"
CLINE_RULES_NAME: str = ".clinerules"
ROO_RULES_DIR: tuple[str, ...] = (".roo", "rules")

VSCODE_MODES: tuple[str, ...] = ("directory", "single")

SECTION_SEPARATOR: str = "\n\n---\n\n"

# Ordered; the first keyword contained in the lower-cased stack name wins.
STACK_GLOBS: tuple[tuple[str, str], ...] = (
    ("react", "**/*.{tsx,jsx,ts,js}"),
    ("next", "**/*.{tsx,jsx,ts,js}"),
    ("vue", "**/*.{vue,ts,js}"),
    ("angular", "**/*.{ts,html}"),
    ("svelte", "**/*.{svelte,ts}"),
    ("shopify", "**/*.{liquid,json}"),
    ("node", "**/*.{ts,js}"),
    ("python", "**/*.py"),
    ("laravel", "**/*.{php,blade.php}"),
    ("nuxt", "**/*.{vue,ts}"),
)
FALLBACK_GLOB: str = "**/*"
