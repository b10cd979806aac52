"""Tests for the shipped template catalog."""

import os

import pytest

from ai_editor_setup.install_cmd.groups import COMMON_PATHS, DEFAULT_GROUPS, TEMPLATES_DIR, group_ids


@pytest.mark.unit
class TestCatalog:

    def test_group_ids_are_unique(self):
        ids = group_ids(DEFAULT_GROUPS)
        assert len(ids) == len(set(ids))

    def test_common_paths_have_no_empty_entries(self):
        assert all(COMMON_PATHS)

    def test_every_declared_path_is_shipped(self):
        declared = [p for g in DEFAULT_GROUPS for p in g.paths] + list(COMMON_PATHS)
        for path in declared:
            assert os.path.exists(os.path.join(TEMPLATES_DIR, path)), path

    def test_every_shipped_entry_is_declared(self):
        declared = {p for g in DEFAULT_GROUPS for p in g.paths} | set(COMMON_PATHS)
        assert set(os.listdir(TEMPLATES_DIR)) == declared
