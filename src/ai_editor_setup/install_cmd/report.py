"""Console messages for the outcome of an install run."""

from ai_editor_setup.install_cmd.installer import InstallStatus
from ai_editor_setup.template_renderer import render_template

_STATUS_MESSAGES = {
    InstallStatus.EMPTY_TEMPLATES: [
        "Templates folder is empty (nothing to copy)",
        "",
        "Setup completed successfully!",
    ],
    InstallStatus.CANCELLED: [
        "No editor configuration selected. Setup cancelled.",
    ],
}


def format_summary(created_paths):
    return render_template("install_summary.j2", package=__package__, created_paths=list(created_paths))


def report_lines(result, templates_dir):
    """Return the lines describing ``result`` to the user."""
    if result.status == InstallStatus.NO_TEMPLATES:
        return [
            f"Warning: Templates folder not found at {templates_dir}",
            "",
            "Setup completed (no templates to copy)",
        ]
    if result.status in _STATUS_MESSAGES:
        return list(_STATUS_MESSAGES[result.status])
    return format_summary(result.created_paths).splitlines() + [
        "",
        "Setup completed successfully!",
    ]
