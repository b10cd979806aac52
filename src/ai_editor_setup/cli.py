"""Top-level Click group for the ai-editor-setup CLI."""

import click

from ai_editor_setup.install_cmd.cli import install_cmd, list_groups_cmd


@click.group()
@click.version_option(package_name="ai-editor-setup")
def main():
    """ai-editor-setup - install AI editor configuration into a project."""


main.add_command(install_cmd)
main.add_command(list_groups_cmd)
