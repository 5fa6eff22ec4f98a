"""Numbered-option menu used for the interactive project questions."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _display_options(message, labels, default, output):
    print("", file=output)
    print(message, file=output)
    for i, label in enumerate(labels):
        line = f"  {i + 1}) {label}"
        if i + 1 == default:
            line += " [default]"
        print(line, file=output)
    print("", file=output)


def _build_prompt_text(option_count, default):
    prompt_text = f"Enter your choice (1-{option_count})"
    if default:
        prompt_text += f" [default: {default}]"
    prompt_text += ": "
    return prompt_text


def _parse_choice(raw_input, option_count, default):
    raw_input = raw_input.strip()
    if raw_input == "" and default:
        return default
    if raw_input.isdigit() and 1 <= int(raw_input) <= option_count:
        return int(raw_input)
    return None


def ask(message, choices, *, default=1, config=None) -> Optional[object]:
    """Ask a single-choice question and return the chosen value.

    Args:
        message: Question displayed above the options.
        choices: List of (label, value) pairs.
        default: 1-based index picked on empty input (0 for none).
        config: MenuConfig with input_fn and output stream (defaults apply).

    Returns:
        The value of the chosen pair, or None when input is closed (EOF),
        which callers treat as a cancelled question.
    """
    if config is None:
        config = MenuConfig()

    labels = [label for label, _ in choices]
    _display_options(message, labels, default, config.output)
    prompt_text = _build_prompt_text(len(choices), default)

    while True:
        try:
            raw = config.input_fn(prompt_text)
        except EOFError:
            print("", file=config.output)
            return None
        parsed = _parse_choice(raw, len(choices), default)
        if parsed is not None:
            return choices[parsed - 1][1]
        print(
            f"Invalid choice. Please enter a number between 1 and {len(choices)}.",
            file=config.output,
        )
