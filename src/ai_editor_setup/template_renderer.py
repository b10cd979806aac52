"""Jinja2 rendering for console reports kept in ``templates`` subpackages."""

import importlib.resources

import jinja2

_ENVIRONMENT = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False)


def load_template(template_name: str, *, package: str) -> jinja2.Template:
    """Return the compiled template ``template_name`` from ``{package}.templates``.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    resource = importlib.resources.files(f"{package}.templates").joinpath(template_name)
    if not resource.is_file():
        raise FileNotFoundError(f"Template not found: {package}.templates/{template_name}")
    return _ENVIRONMENT.from_string(resource.read_text(encoding="utf-8"))


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a packaged template with the given variables.

    Args:
        template_name: Template filename (e.g. "install_summary.j2")
        package: The caller's package (pass __package__).
        **kwargs: Template variables. Missing variables raise
            jinja2.UndefinedError.

    Returns:
        The rendered text.
    """
    return load_template(template_name, package=package).render(**kwargs)
