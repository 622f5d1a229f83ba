"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from agloader.cli.prompts import ReadFn, WriteFn, prompt_select
from agloader.config import AgLoaderConfig, get_active_registry_path, load_config, reset_config, save_config
from agloader.constants.registry import ROOT_CATEGORY
from agloader.emit import EDITOR_PROFILES, emit_category, get_profile
from agloader.exceptions import ConfigError, UnknownCategoryError, UnknownStackError
from agloader.model import CategoryEntry, EmitOptions
from agloader.registry import ensure_registry_exists, list_categories, list_stacks, list_tree
from agloader.reporting import StdoutReporter
from agloader.types import EditorKey, VsCodeMode

logger = logging.getLogger(__name__)


def handle_list(args: argparse.Namespace, reporter: StdoutReporter) -> int:
    """Print the registry tree for every editor, or the one requested."""
    registry = get_active_registry_path(args.config)
    profiles = [get_profile(args.editor)] if args.editor else list(EDITOR_PROFILES)
    editors = [(profile, list_tree(registry, profile.key)) for profile in profiles]
    print(reporter.render_tree(registry, editors))
    return 0


def handle_config(args: argparse.Namespace) -> int:
    """Dispatch ``config`` subcommands."""
    if args.config_command == "set-path":
        resolved = args.path.expanduser().resolve()
        if not resolved.exists():
            raise ConfigError(f"Path does not exist: {resolved}")
        save_config(AgLoaderConfig(registry_path=resolved), args.config)
        print(f"Registry path updated -> {resolved}")
        print('Run "ag-loader list" to check your layout.')
        return 0

    if args.config_command == "get-path":
        print(f"Active registry: {load_config(args.config).registry_path}")
        return 0

    config = reset_config(args.config)
    print(f"Registry path reset -> {config.registry_path}")
    return 0


def handle_init(
    args: argparse.Namespace,
    reporter: StdoutReporter,
    *,
    read: ReadFn = input,
    write: WriteFn = print,
) -> int:
    """Run the editor -> stack -> category selection and load the chosen skills."""
    registry = get_active_registry_path(args.config)
    if ensure_registry_exists(registry):
        print(f"Created a demo registry at {registry}")
    project_root = (args.project or Path.cwd()).resolve()

    print(reporter.render_banner())

    try:
        editor = args.editor or _prompt_editor(read=read, write=write)
        stacks = list_stacks(registry, editor)
        if not stacks:
            print(reporter.render_warning(f'No stacks for "{editor}".'))
            print(f"   Add folders in: {registry / editor}")
            return 0

        stack = _resolve_stack(args.stack, stacks, read=read, write=write)
        categories = list_categories(registry, editor, stack)
        selected = _resolve_categories(
            args.category, args.all_categories, stack, categories, read=read, write=write
        )
        options = _resolve_options(args, editor, stack, read=read, write=write)
    except (EOFError, KeyboardInterrupt):
        print("Init cancelled.", file=sys.stderr)
        return 130

    print("")
    for category in selected:
        if not category.files:
            print(reporter.render_skipped(category.name))
            continue
        if len(selected) > 1:
            print(reporter.render_loading(category.name))
        report = emit_category(
            category,
            editor,
            options,
            project_root=project_root,
            on_write=lambda item: print(reporter.render_written(item)),
        )
        print(reporter.render_summary(report, options))

    if len(selected) > 1:
        print(reporter.render_total(stack, sum(len(category.files) for category in selected)))
    print("")
    return 0


def _prompt_editor(*, read: ReadFn, write: WriteFn) -> EditorKey:
    choices = [(f"{profile.label:<16} {profile.hint}", profile.key) for profile in EDITOR_PROFILES]
    return prompt_select("Which AI tool are you using?", choices, read=read, write=write)


def _resolve_stack(requested: str | None, stacks: list[str], *, read: ReadFn, write: WriteFn) -> str:
    if requested is None:
        return prompt_select("Which stack?", [(stack, stack) for stack in stacks], read=read, write=write)
    if requested not in stacks:
        raise UnknownStackError(f"Unknown stack {requested!r}; available: {', '.join(stacks)}")
    return requested


def _resolve_categories(
    requested: str | None,
    all_categories: bool,
    stack: str,
    categories: list[CategoryEntry],
    *,
    read: ReadFn,
    write: WriteFn,
) -> list[CategoryEntry]:
    if len(categories) == 1 and categories[0].is_root:
        if requested is not None and requested != ROOT_CATEGORY:
            raise UnknownCategoryError(f"Stack {stack!r} has no categories; drop --category {requested!r}")
        return categories

    if all_categories:
        return categories

    if requested is None:
        choices: list[tuple[str, list[CategoryEntry]]] = [("All categories (load the whole stack)", categories)]
        choices.extend(
            (f"{category.name:<16} {len(category.files)} file(s)", [category]) for category in categories
        )
        return prompt_select(f'Which category of "{stack}"?', choices, read=read, write=write)

    for category in categories:
        if category.name == requested:
            return [category]
    names = ", ".join(category.name for category in categories)
    raise UnknownCategoryError(f"Unknown category {requested!r} in stack {stack!r}; available: {names}")


def _resolve_options(
    args: argparse.Namespace,
    editor: EditorKey,
    stack: str,
    *,
    read: ReadFn,
    write: WriteFn,
) -> EmitOptions:
    always_apply = False
    vscode_mode: VsCodeMode = "directory"

    if editor == "cursor":
        always_apply = args.always_apply
        if always_apply is None:
            always_apply = prompt_select(
                "When should the rules apply?",
                [
                    ("Always (alwaysApply: true)       active for every file", True),
                    ("By context (alwaysApply: false)  only when the globs match", False),
                ],
                read=read,
                write=write,
            )

    if editor == "vscode":
        vscode_mode = args.mode
        if vscode_mode is None:
            vscode_mode = prompt_select(
                "How should the rules be written?",
                [
                    (".clinerules/ directory   one .md file per skill (Cline v3+ and RooCode)", "directory"),
                    (".clinerules single file  everything concatenated (classic mode)", "single"),
                ],
                read=read,
                write=write,
            )

    logger.debug("Options: editor=%s stack=%s alwaysApply=%s mode=%s", editor, stack, always_apply, vscode_mode)
    return EmitOptions(stack=stack, always_apply=always_apply, vscode_mode=vscode_mode)
