"""Constants for stdout formatting."""

from __future__ import annotations

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_CYAN: str = "\033[36m"
ANSI_MAGENTA: str = "\033[35;1m"
ANSI_DIM: str = "\033[2m"

CHECK_MARK: str = "✔"
BULLET: str = "•"
CATEGORY_MARKER: str = "▸"
TREE_RULE_WIDTH: int = 45
