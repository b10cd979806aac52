"""Copy template trees into a project without overwriting anything."""

import os
import shutil
from dataclasses import dataclass


@dataclass(frozen=True)
class CopyResult:
    """Root-relative paths created by a copy, each listed once."""

    created_paths: tuple[str, ...] = ()

    def merge(self, other):
        """Return a new result with other's paths appended, skipping repeats."""
        merged = list(self.created_paths)
        for path in other.created_paths:
            if path not in merged:
                merged.append(path)
        return CopyResult(tuple(merged))


def _copy_file(source, dest, project_root):
    if os.path.lexists(dest):
        return CopyResult()
    os.makedirs(os.path.dirname(dest), exist_ok=True)
    shutil.copy2(source, dest)
    return CopyResult((os.path.relpath(dest, project_root),))


def _copy_directory(source, dest, project_root):
    os.makedirs(dest, exist_ok=True)
    result = CopyResult()
    for entry in sorted(os.listdir(source)):
        result = result.merge(
            copy_path(os.path.join(source, entry), os.path.join(dest, entry), project_root)
        )
    return result


def copy_path(source, dest, project_root):
    """Copy ``source`` to ``dest``, creating only what does not exist yet.

    Directories are created as needed and walked recursively. A file is
    copied only when nothing, not even a dangling symlink, sits at
    ``dest``; existing entries are left untouched so user customizations
    survive re-runs. A missing ``source`` is not an
    error, there is simply nothing to copy.

    Args:
        source: Template file or directory.
        dest: Destination path inside the project.
        project_root: Directory the reported paths are made relative to.

    Returns:
        CopyResult listing the files created by this call.

    Raises:
        OSError: If a directory cannot be created or a file cannot be copied.
    """
    if not os.path.exists(source):
        return CopyResult()
    if os.path.isdir(source):
        return _copy_directory(source, dest, project_root)
    return _copy_file(source, dest, project_root)
