"""Minimal numbered-menu prompts driven by injectable read/write callables."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeAlias, TypeVar

ReadFn: TypeAlias = Callable[[str], str]
WriteFn: TypeAlias = Callable[[str], None]

T = TypeVar("T")


def prompt_select(
    message: str,
    choices: Sequence[tuple[str, T]],
    *,
    read: ReadFn,
    write: WriteFn,
    default_index: int = 0,
) -> T:
    """Ask the user to pick one of *choices* by number.

    An empty answer selects ``default_index``. Invalid answers re-prompt.
    ``EOFError`` and ``KeyboardInterrupt`` propagate to the caller.
    """
    if not choices:
        raise ValueError("prompt_select requires at least one choice")

    write(message)
    for number, (label, _value) in enumerate(choices, start=1):
        write(f"  {number}) {label}")

    while True:
        raw = read(f"Select [1-{len(choices)}] (default {default_index + 1}): ").strip()
        if not raw:
            return choices[default_index][1]
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return choices[int(raw) - 1][1]
        write(f"Please enter a number between 1 and {len(choices)}.")
