"""Catalog of editor configuration groups shipped in the templates directory."""

import os
from dataclasses import dataclass

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "templates")


@dataclass(frozen=True)
class TemplateGroup:
    """A named bundle of top-level template paths for one editor or tool."""

    id: str
    display_name: str
    paths: tuple[str, ...]


DEFAULT_GROUPS = (
    TemplateGroup("cursor", "Cursor", (".cursor",)),
    TemplateGroup("claude", "Claude Code", (".claude", "CLAUDE.md")),
    TemplateGroup("windsurf", "Windsurf", (".windsurf",)),
    TemplateGroup("copilot", "GitHub Copilot", (".github",)),
)

# Installed whatever the selection.
COMMON_PATHS = ("AGENTS.md", ".editorconfig")


def group_ids(groups):
    return [group.id for group in groups]
