"""Tests for install_cmd.menu — numbered multi-choice group menu."""

import io

import pytest

from ai_editor_setup.install_cmd.groups import TemplateGroup
from ai_editor_setup.install_cmd.menu import MenuConfig, prompt_for_groups, read_selection

GROUPS = (
    TemplateGroup("a", "Alpha", ("x",)),
    TemplateGroup("b", "Beta", ("y",)),
)


def _config(input_fn, output=None):
    if output is None:
        output = io.StringIO()
    return MenuConfig(input_fn=input_fn, output=output)


def _raise_eof(_prompt):
    raise EOFError


@pytest.mark.unit
class TestReadSelectionDisplaysMenu:

    def test_lists_groups_with_numbers(self):
        buf = io.StringIO()
        read_selection(GROUPS, config=_config(lambda _: "1", output=buf))
        displayed = buf.getvalue()
        assert "1) Alpha" in displayed
        assert "2) Beta" in displayed

    def test_offers_all_option_after_groups(self):
        buf = io.StringIO()
        read_selection(GROUPS, config=_config(lambda _: "1", output=buf))
        assert "3) All of the above" in buf.getvalue()

    def test_prompt_mentions_range_and_default(self):
        prompts = []

        def input_fn(prompt):
            prompts.append(prompt)
            return ""

        read_selection(GROUPS, config=_config(input_fn))
        assert "(1-3)" in prompts[0]
        assert "[default: all]" in prompts[0]


@pytest.mark.unit
class TestReadSelectionInput:

    def test_returns_raw_line(self):
        assert read_selection(GROUPS, config=_config(lambda _: " 2, 1 ")) == " 2, 1 "

    def test_reads_exactly_once(self):
        calls = []

        def input_fn(prompt):
            calls.append(prompt)
            return "abc"

        read_selection(GROUPS, config=_config(input_fn))
        assert len(calls) == 1

    def test_eof_returns_empty_line(self):
        assert read_selection(GROUPS, config=_config(_raise_eof)) == ""


@pytest.mark.unit
class TestPromptForGroups:

    def test_resolves_typed_indexes(self):
        assert prompt_for_groups(GROUPS, config=_config(lambda _: "2")) == ["b"]

    def test_empty_line_selects_all(self):
        assert prompt_for_groups(GROUPS, config=_config(lambda _: "")) == ["a", "b"]

    def test_eof_selects_all(self):
        assert prompt_for_groups(GROUPS, config=_config(_raise_eof)) == ["a", "b"]

    def test_garbage_selects_nothing(self):
        assert prompt_for_groups(GROUPS, config=_config(lambda _: "nope")) == []
