"""Click commands for installing editor configuration templates."""

import sys

import click
import jinja2

from ai_editor_setup.install_cmd.groups import COMMON_PATHS, DEFAULT_GROUPS, TEMPLATES_DIR, group_ids
from ai_editor_setup.install_cmd.installer import InstallOpts, install
from ai_editor_setup.install_cmd.menu import prompt_for_groups
from ai_editor_setup.install_cmd.report import report_lines
from ai_editor_setup.install_cmd.root_resolver import resolve_project_root
from ai_editor_setup.install_cmd.selection import select_by_ids


def _group_chooser(requested_groups, interactive):
    """Pick how groups are chosen: --group ids, the menu, or everything."""
    if requested_groups:
        return lambda groups: select_by_ids(requested_groups, groups)
    if interactive:
        return prompt_for_groups
    return group_ids


@click.command("install")
@click.option(
    "--project-root",
    default=None,
    type=click.Path(file_okay=False),
    help="Install into this directory instead of the detected project root.",
)
@click.option(
    "--interactive/--no-interactive",
    default=None,
    help="Ask which editors to set up (default: only when stdin is a terminal).",
)
@click.option(
    "--group",
    "requested_groups",
    multiple=True,
    type=click.Choice(group_ids(DEFAULT_GROUPS)),
    help="Editor group to install without prompting. Repeatable.",
)
@click.option("--templates-dir", default=TEMPLATES_DIR, hidden=True, type=click.Path(file_okay=False))
def install_cmd(project_root, interactive, requested_groups, templates_dir):
    """Copy editor configuration templates into the project."""
    if interactive is None:
        interactive = sys.stdin.isatty()
    root = resolve_project_root(project_root)

    click.echo("")
    click.echo(f"Setting up editor configuration in {root}")
    click.echo("")

    opts = InstallOpts(templates_dir=templates_dir, project_root=root)
    try:
        result = install(opts, _group_chooser(requested_groups, interactive))
        lines = report_lines(result, templates_dir)
    except (OSError, jinja2.TemplateError) as exc:
        click.echo(f"Error: setup failed: {exc}", err=True)
        sys.exit(1)

    for line in lines:
        click.echo(line)


@click.command("list-groups")
def list_groups_cmd():
    """Show the editor groups that can be installed."""
    for group in DEFAULT_GROUPS:
        click.echo(f"{group.id}: {group.display_name} ({', '.join(group.paths)})")
    click.echo(f"always installed: {', '.join(COMMON_PATHS)}")
