"""Human-readable stdout rendering for registry trees and emit events."""

from __future__ import annotations

from pathlib import Path

from agloader.constants.branding import BRAND_NAME, LIST_TITLE, TAGLINE
from agloader.constants.editors import CLINE_RULES_NAME, ROO_RULES_DIR
from agloader.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_MAGENTA,
    ANSI_RESET,
    ANSI_YELLOW,
    BULLET,
    CATEGORY_MARKER,
    CHECK_MARK,
    TREE_RULE_WIDTH,
)
from agloader.emit.profiles import EditorProfile, glob_for_stack
from agloader.model import EmitOptions, EmitReport, StackTree, WrittenFile


class StdoutReporter:
    """Formats registry listings and emit progress for the terminal."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _paint(self, text: str, *codes: str) -> str:
        if not self._color or not codes:
            return text
        return f"{''.join(codes)}{text}{ANSI_RESET}"

    def render_banner(self) -> str:
        return "\n" + self._paint(f"  {BRAND_NAME} ", ANSI_BOLD) + self._paint(f"- {TAGLINE}", ANSI_DIM) + "\n"

    def render_tree(self, registry_path: Path, editors: list[tuple[EditorProfile, list[StackTree]]]) -> str:
        """Render the registry inventory for one or more editors."""
        lines = ["", self._paint(LIST_TITLE, ANSI_BOLD), self._paint(f"   {registry_path}", ANSI_DIM), ""]
        for profile, tree in editors:
            lines.append(
                self._paint(f"  ┌─ {profile.label.upper()} ", ANSI_MAGENTA) + self._paint(f"({len(tree)} stack(s))", ANSI_DIM)
            )
            if not tree:
                hint = f"  │   (no stacks, add folders in {registry_path / profile.key})"
                lines.append(self._paint(hint, ANSI_DIM))
            for stack in tree:
                lines.extend(self._render_stack(stack))
            lines.append(self._paint(f"  └{'─' * TREE_RULE_WIDTH}", ANSI_MAGENTA))
            lines.append("")
        return "\n".join(lines)

    def _render_stack(self, stack: StackTree) -> list[str]:
        lines = [f"  │  {self._paint(f'[{stack.stack}]', ANSI_BOLD, ANSI_CYAN)} {self._paint(f'{stack.file_count} file(s)', ANSI_DIM)}"]
        bullet = self._paint(BULLET, ANSI_DIM)
        for category in stack.categories:
            if category.is_root:
                lines.extend(f"  │     {bullet} {name}" for name in category.files)
                continue
            marker = self._paint(CATEGORY_MARKER, ANSI_YELLOW)
            count = self._paint(f"({len(category.files)})", ANSI_DIM)
            lines.append(f"  │     {marker} {self._paint(category.name, ANSI_BOLD)} {count}")
            lines.extend(f"  │        {bullet} {name}" for name in category.files)
        return lines

    def render_written(self, item: WrittenFile) -> str:
        line = f"   {self._paint(CHECK_MARK, ANSI_GREEN)} {self._paint(item.display_path, ANSI_CYAN)}"
        if item.note:
            line += f" {self._paint(f'({item.note})', ANSI_DIM)}"
        return line

    def render_summary(self, report: EmitReport, options: EmitOptions) -> str:
        """Render the closing line for one emitted category."""
        count = report.file_count
        if report.editor == "antigravity":
            return "\n" + self._paint(f"{count} file(s) -> ", ANSI_BOLD, ANSI_GREEN) + ".agents/" + self._paint(
                "  (Antigravity loads these skills automatically)", ANSI_DIM
            )
        if report.editor == "cursor":
            details = f"  (globs: {glob_for_stack(options.stack)}, alwaysApply: {str(options.always_apply).lower()})"
            return "\n" + self._paint(f"{count} rule(s) -> ", ANSI_BOLD, ANSI_GREEN) + ".cursor/rules/" + self._paint(
                details, ANSI_DIM
            )
        if options.vscode_mode == "single":
            return "\n" + self._paint("Consolidated into ", ANSI_BOLD, ANSI_GREEN) + CLINE_RULES_NAME
        destinations = f"{CLINE_RULES_NAME}/  {'/'.join(ROO_RULES_DIR)}/"
        return "\n" + self._paint(f"{count} rule(s) -> ", ANSI_BOLD, ANSI_GREEN) + destinations

    def render_skipped(self, category: str) -> str:
        return self._paint(f"  Skipping {category!r}: no .md files", ANSI_DIM)

    def render_loading(self, category: str) -> str:
        return self._paint(f"  -> loading category: {category}", ANSI_DIM)

    def render_total(self, stack: str, total: int) -> str:
        return "\n" + self._paint(f"Full stack {stack!r} loaded: {total} file(s) in total", ANSI_BOLD, ANSI_GREEN)

    def render_warning(self, message: str) -> str:
        return self._paint(message, ANSI_YELLOW)
