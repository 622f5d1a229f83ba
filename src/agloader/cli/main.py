"""CLI entrypoint for ag-loader."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from agloader import __version__
from agloader.cli.handlers import handle_config, handle_init, handle_list
from agloader.constants.branding import CLI_DESCRIPTION
from agloader.constants.editors import EDITOR_KEYS, VSCODE_MODES
from agloader.exceptions import AgLoaderError, ConfigError, RegistryError
from agloader.reporting import StdoutReporter


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="ag-loader",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: ~/.ag-loader.yaml)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init = subparsers.add_parser("init", help="Load skills into the current project (interactive)")
    init.add_argument("-e", "--editor", choices=EDITOR_KEYS, default=None, help="Target editor")
    init.add_argument("-s", "--stack", default=None, help="Stack name inside the registry")
    category_source = init.add_mutually_exclusive_group()
    category_source.add_argument("-c", "--category", default=None, help="Category folder to load")
    category_source.add_argument(
        "-a",
        "--all-categories",
        action="store_true",
        help="Load every category of the stack",
    )
    init.add_argument(
        "--always-apply",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Cursor only: set alwaysApply in the generated rules",
    )
    init.add_argument(
        "-m",
        "--mode",
        choices=VSCODE_MODES,
        default=None,
        help="VS Code only: directory (.clinerules/ + .roo/rules/) or single (.clinerules file)",
    )
    init.add_argument("-p", "--project", type=Path, default=None, help="Project root (default: current directory)")

    list_cmd = subparsers.add_parser("list", help="Show the stacks and files available per editor")
    list_cmd.add_argument("-e", "--editor", choices=EDITOR_KEYS, default=None, help="Only show one editor")

    config = subparsers.add_parser("config", help="Manage the ag-loader configuration")
    config_commands = config.add_subparsers(dest="config_command", required=True)
    set_path = config_commands.add_parser("set-path", help="Set the root directory of your skills")
    set_path.add_argument("path", type=Path, help="Registry directory")
    config_commands.add_parser("get-path", help="Show the active registry directory")
    config_commands.add_parser("reset", help="Restore the default registry directory (~/.ag-skills/)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    use_color = not args.no_color and sys.stdout.isatty()
    reporter = StdoutReporter(color=use_color)

    try:
        if args.command == "init":
            return handle_init(args, reporter)
        if args.command == "list":
            return handle_list(args, reporter)
        if args.command == "config":
            return handle_config(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except RegistryError as exc:
        print(f"Selection error: {exc}", file=sys.stderr)
        return 2
    except (AgLoaderError, OSError) as exc:
        print(f"Loader error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
