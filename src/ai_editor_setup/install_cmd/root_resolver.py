"""Locate the project directory that editor configuration is installed into."""

import os

PROJECT_ROOT_ENV = "AI_EDITOR_SETUP_INIT_CWD"
MANIFEST_FILES = ("pyproject.toml", "setup.py", "setup.cfg")
DEPENDENCY_CACHE_DIRS = ("site-packages", "dist-packages", "node_modules")
MAX_SEARCH_LEVELS = 10


def _inside_dependency_cache(directory):
    parts = os.path.normpath(directory).split(os.sep)
    return any(part in DEPENDENCY_CACHE_DIRS for part in parts)


def _has_manifest(directory):
    return any(os.path.isfile(os.path.join(directory, name)) for name in MANIFEST_FILES)


def _search_upward(start_dir, max_levels):
    current = start_dir
    for _ in range(max_levels):
        if _has_manifest(current) and not _inside_dependency_cache(current):
            return current
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return None


def resolve_project_root(hint=None, *, environ=None, cwd=None, max_levels=MAX_SEARCH_LEVELS):
    """Return the absolute path of the consumer project's root directory.

    Preference order: the explicit ``hint``, the ``AI_EDITOR_SETUP_INIT_CWD``
    environment variable, the nearest ancestor of ``cwd`` holding a project
    manifest outside any dependency cache, and finally ``cwd`` itself.

    Args:
        hint: Directory supplied by the caller (e.g. ``--project-root``).
        environ: Environment mapping (defaults to ``os.environ``).
        cwd: Directory the upward search starts from (defaults to the
            process working directory).
        max_levels: Number of directories examined, the start included.

    Returns:
        Absolute path string. Never raises for a missing match.
    """
    if environ is None:
        environ = os.environ
    if cwd is None:
        cwd = os.getcwd()
    cwd = os.path.abspath(cwd)

    root = hint or environ.get(PROJECT_ROOT_ENV)
    if not root:
        root = _search_upward(cwd, max_levels) or cwd
    return os.path.abspath(root)
