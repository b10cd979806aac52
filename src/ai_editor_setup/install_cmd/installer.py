"""Install workflow: validate templates, select groups, copy, collect results."""

import os
from dataclasses import dataclass
from enum import Enum

from ai_editor_setup.install_cmd.copy_engine import CopyResult, copy_path
from ai_editor_setup.install_cmd.groups import COMMON_PATHS, DEFAULT_GROUPS, TemplateGroup
from ai_editor_setup.install_cmd.selection import expand_selection


class InstallStatus(str, Enum):
    COMPLETED = "completed"
    NO_TEMPLATES = "no-templates"
    EMPTY_TEMPLATES = "empty-templates"
    CANCELLED = "cancelled"


@dataclass
class InstallOpts:
    """Inputs of one install run."""

    templates_dir: str
    project_root: str
    groups: tuple[TemplateGroup, ...] = DEFAULT_GROUPS
    common_paths: tuple[str, ...] = COMMON_PATHS


@dataclass(frozen=True)
class InstallResult:
    status: InstallStatus
    project_root: str
    created_paths: tuple[str, ...] = ()


def install(opts, choose_groups):
    """Copy the selected template groups into the project root.

    Args:
        opts: InstallOpts describing the source, destination and catalog.
        choose_groups: Callable(groups) -> list of selected group ids.
            Only called when there is something to copy.

    Returns:
        InstallResult. Missing or empty templates and an empty selection
        are reported through the status rather than raised.

    Raises:
        OSError: If copying fails part way. Files copied before the
            failure stay in place.
    """
    if not os.path.isdir(opts.templates_dir):
        return InstallResult(InstallStatus.NO_TEMPLATES, opts.project_root)
    if not os.listdir(opts.templates_dir):
        return InstallResult(InstallStatus.EMPTY_TEMPLATES, opts.project_root)

    selected = choose_groups(opts.groups)
    if not selected:
        return InstallResult(InstallStatus.CANCELLED, opts.project_root)

    result = CopyResult()
    for path in expand_selection(selected, opts.groups, opts.common_paths):
        result = result.merge(copy_path(
            os.path.join(opts.templates_dir, path),
            os.path.join(opts.project_root, path),
            opts.project_root,
        ))
    return InstallResult(InstallStatus.COMPLETED, opts.project_root, result.created_paths)
