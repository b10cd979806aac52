"""Numbered multi-choice menu for picking editor configuration groups."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from ai_editor_setup.install_cmd.selection import resolve_selection


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stdout)


def display_group_menu(groups, output):
    print("", file=output)
    print("Which editor configurations would you like to install?", file=output)
    for i, group in enumerate(groups):
        print(f"  {i + 1}) {group.display_name}", file=output)
    print(f"  {len(groups) + 1}) All of the above", file=output)
    print("", file=output)


def _build_prompt_text(option_count):
    return f"Enter your choice(s), comma-separated (1-{option_count}) [default: all]: "


def read_selection(groups, *, config=None):
    """Display the group menu and return the raw line the user entered.

    This is the only blocking read of the install workflow; it waits
    indefinitely for a line.

    Args:
        groups: Ordered sequence of TemplateGroup to offer.
        config: MenuConfig with input_fn and output stream (defaults apply).

    Returns:
        The line as typed. Closed input returns an empty string, which
        selects every group.
    """
    if config is None:
        config = MenuConfig()

    display_group_menu(groups, config.output)
    try:
        return config.input_fn(_build_prompt_text(len(groups) + 1))
    except EOFError:
        print("", file=config.output)
        return ""


def prompt_for_groups(groups, *, config=None):
    """Ask the user which groups to install and return their ids."""
    return resolve_selection(read_selection(groups, config=config), groups)
