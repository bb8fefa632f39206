"""Tests for the rich-select CLI."""

import pytest

from rich_select import cli
from rich_select.prompt import SelectionPrompt
from rich_select.themes import DEFAULT_THEME


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real config out of CLI tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


@pytest.fixture
def captured_prompt(monkeypatch):
    """Replace the interactive loop; records the prompt and returns a value."""
    seen = {}

    def _show(self):
        seen["prompt"] = self
        return seen.get("result", self.state.current.data)

    monkeypatch.setattr(SelectionPrompt, "show", _show)
    return seen


class TestParseChoices:
    def test_flat_lines(self):
        choices = cli.parse_choices(["one", "two", "", "# comment", "three"])
        assert [c.data for c in choices] == ["one", "two", "three"]

    def test_groups(self):
        choices = cli.parse_choices(["Fruit:", "  apple", "  banana", "carrot"])
        assert [c.data for c in choices] == ["Fruit", "carrot"]
        assert [c.data for c in choices[0].children] == ["apple", "banana"]

    def test_indented_line_without_group_is_top_level(self):
        choices = cli.parse_choices(["  lonely"])
        assert [c.data for c in choices] == ["lonely"]

    def test_top_level_line_closes_group(self):
        choices = cli.parse_choices(["G:", "  a", "b", "  c"])
        assert [c.data for c in choices] == ["G", "b", "c"]

    def test_header_without_children_kept_as_written(self):
        choices = cli.parse_choices(["Fruit:", "carrot", "Ratio: 3:", "  half"])
        assert [c.data for c in choices] == ["Fruit:", "carrot", "Ratio: 3"]
        assert choices[0].children == []
        assert [c.data for c in choices[2].children] == ["half"]


class TestBuildParser:
    def test_defaults_leave_config_in_charge(self):
        args = cli.build_parser().parse_args(["a"])
        assert args.items == ["a"]
        assert args.page_size is None
        assert args.wrap_around is None
        assert args.search_enabled is None

    def test_flags(self):
        args = cli.build_parser().parse_args(
            ["--wrap", "--filter", "--skip-groups", "--page-size", "3", "--mode", "leaf_or_group"]
        )
        assert args.wrap_around is True
        assert args.only_show_searched_text is True
        assert args.skip_unselectable_items is True
        assert args.page_size == 3
        assert args.mode == "leaf_or_group"


class TestMain:
    def test_prints_selection(self, captured_prompt, capsys):
        cli.main(["red", "green"])
        assert capsys.readouterr().out == "red\n"

    def test_filter_implies_search(self, captured_prompt):
        cli.main(["--filter", "red"])
        options = captured_prompt["prompt"].options
        assert options.search_enabled is True
        assert options.only_show_searched_text is True

    def test_reads_item_file(self, captured_prompt, tmp_path):
        path = tmp_path / "items.txt"
        path.write_text("Colors:\n  red\n  blue\n")
        cli.main(["--file", str(path), "--skip-groups"])
        prompt = captured_prompt["prompt"]
        assert len(prompt.state.catalog) == 3
        assert prompt.state.current.data == "red"

    def test_config_file_supplies_defaults(self, captured_prompt, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("page_size: 4\nwrap_around: true\n")
        cli.main(["--config", str(path), "x"])
        options = captured_prompt["prompt"].options
        assert options.page_size == 4
        assert options.wrap_around is True

    def test_malformed_theme_falls_back_to_default(self, captured_prompt, tmp_path, capsys):
        path = tmp_path / "config.yaml"
        path.write_text("theme: dark\n")
        cli.main(["--config", str(path), "a"])
        assert captured_prompt["prompt"].theme == DEFAULT_THEME
        assert capsys.readouterr().out == "a\n"

    def test_bad_theme_value_ignored(self, captured_prompt, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("theme:\n  panel_width: wide\n  cursor_icon: '>'\n")
        cli.main(["--config", str(path), "a"])
        theme = captured_prompt["prompt"].theme
        assert theme.panel_width == DEFAULT_THEME.panel_width
        assert theme.cursor_icon == ">"

    def test_cancel_exits_nonzero(self, captured_prompt, capsys):
        captured_prompt["result"] = None
        with pytest.raises(SystemExit) as exc:
            cli.main(["x"])
        assert exc.value.code == 1
        assert capsys.readouterr().out == ""

    def test_no_items(self, captured_prompt, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 1
        assert "No items" in capsys.readouterr().err

    def test_missing_file(self, captured_prompt, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--file", str(tmp_path / "nope.txt")])
        assert exc.value.code == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_invalid_page_size(self, captured_prompt, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["--page-size", "0", "x"])
        assert exc.value.code == 2
        assert "page_size" in capsys.readouterr().err
