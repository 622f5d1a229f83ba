"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

EditorKey: TypeAlias = Literal["antigravity", "cursor", "vscode"]
VsCodeMode: TypeAlias = Literal["directory", "single"]
