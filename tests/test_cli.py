"""
Tests for the parseargs CLI.

Tests the check, render, wrap and version commands through Typer's runner.
"""

from typer.testing import CliRunner

from parseargs import __version__
from parseargs.cli import app
from parseargs.cli.declare import parse_option_declaration, parse_positional_declaration

runner = CliRunner()


class TestDeclarations:
    """Parsing of --pos/--opt declarations."""

    def test_positional_defaults_name_to_uid(self) -> None:
        assert parse_positional_declaration("input") == ("input", "input", "")

    def test_positional_description_may_contain_colons(self) -> None:
        assert parse_positional_declaration("in:file:Path: absolute") == (
            "in",
            "file",
            "Path: absolute",
        )

    def test_option_defaults_to_flag(self) -> None:
        assert parse_option_declaration("v:v:verbose") == ("v", "v", "verbose", 0, 0, "", "")

    def test_option_max_defaults_to_min(self) -> None:
        assert parse_option_declaration("o:o:output:1") == ("o", "o", "output", 1, 1, "", "")

    def test_option_all_fields(self) -> None:
        assert parse_option_declaration("d::define:1:2:<k> [<v>]:Set: a value") == (
            "d",
            "",
            "define",
            1,
            2,
            "<k> [<v>]",
            "Set: a value",
        )


class TestCheckCommand:
    """Test the check command."""

    def test_binds_positionals_and_options(self) -> None:
        result = runner.invoke(
            app,
            [
                "check", "-p", "input", "-o", "out:o:output:1:1",
                "--", "data.txt", "-o", "result.txt",
            ],
        )  # fmt: skip

        assert result.exit_code == 0
        assert "'data.txt'" in result.output
        assert "'result.txt'" in result.output

    def test_flag_shows_no_values(self) -> None:
        result = runner.invoke(app, ["check", "-o", "v:v:verbose", "--", "-v"])

        assert result.exit_code == 0
        assert "(no values)" in result.output

    def test_nothing_bound(self) -> None:
        result = runner.invoke(app, ["check"])

        assert result.exit_code == 0
        assert "Nothing bound." in result.output

    def test_errors_exit_with_user_error(self) -> None:
        result = runner.invoke(app, ["check", "--", "--bogus"])

        assert result.exit_code == 2
        assert "Unknown option '--bogus'." in result.output

    def test_warnings_are_shown(self) -> None:
        result = runner.invoke(app, ["check", "--", "extra"])

        assert result.exit_code == 0
        assert "Skipping positional 'extra' (index 0)..." in result.output

    def test_strict_fails_on_warnings(self) -> None:
        result = runner.invoke(app, ["check", "--strict", "--", "extra"])

        assert result.exit_code == 2

    def test_help_flag_prints_help(self) -> None:
        result = runner.invoke(
            app,
            ["check", "-o", "v:v:verbose", "--with-help", "--prog", "tool", "--", "x", "--help"],
        )

        assert result.exit_code == 0
        assert result.stdout.startswith("Usage: tool [options]\n")
        assert "  -v,--verbose" in result.stdout

    def test_double_dash_switch(self) -> None:
        result = runner.invoke(
            app, ["check", "--double-dash", "-p", "arg", "--", "--", "-x"]
        )

        assert result.exit_code == 0
        assert "'-x'" in result.output

    def test_conflicting_grammar(self) -> None:
        result = runner.invoke(app, ["check", "-o", "a:x:same", "-o", "b:y:same"])

        assert result.exit_code == 1
        assert "Invalid grammar" in result.output

    def test_malformed_declaration(self) -> None:
        result = runner.invoke(app, ["check", "-o", "onlyuid"])

        assert result.exit_code == 2


class TestRenderCommand:
    """Test the render command."""

    def test_render_help(self) -> None:
        result = runner.invoke(
            app, ["render", "-p", "input:file:The file to read.", "--with-help"]
        )

        assert result.exit_code == 0
        assert result.stdout == (
            "Usage: prog [options] <file>\n"
            "\n"
            "Positionals:\n"
            "  <file>" + " " * 12 + "The file to read.\n"
            "\n"
            "Options:\n"
            "  -h,--help" + " " * 9 + "Shows this list of arguments, then quits.\n"
            "\n"
        )

    def test_render_usage_only(self) -> None:
        result = runner.invoke(app, ["render", "-p", "input:file", "--usage", "--prog", "tool"])

        assert result.exit_code == 0
        assert result.stdout == "Usage: tool <file>\n"

    def test_render_rejects_bad_layout(self) -> None:
        result = runner.invoke(app, ["render", "--indent", "50", "--width", "40"])

        assert result.exit_code == 1
        assert "Invalid help layout" in result.output


class TestWrapCommand:
    """Test the wrap command."""

    def test_wrap_argument(self) -> None:
        result = runner.invoke(app, ["wrap", "aaa bbb ccc", "--indent", "4", "--width", "12"])

        assert result.exit_code == 0
        assert result.stdout == "    aaa \n    bbb \n    ccc\n"

    def test_wrap_from_column(self) -> None:
        result = runner.invoke(
            app, ["wrap", "aaa bbb ccc", "--indent", "4", "--width", "12", "--column", "0"]
        )

        assert result.exit_code == 0
        assert result.stdout == "aaa bbb \n    ccc\n"

    def test_wrap_stdin(self) -> None:
        result = runner.invoke(app, ["wrap", "--indent", "0"], input="hello world")

        assert result.exit_code == 0
        assert result.stdout == "hello world\n"

    def test_wrap_rejects_bad_widths(self) -> None:
        result = runner.invoke(app, ["wrap", "text", "--indent", "10", "--width", "10"])

        assert result.exit_code == 1
        assert "Invalid wrap widths" in result.output


class TestMisc:
    """Version and global flags."""

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"parseargs version {__version__}" in result.output

    def test_debug_flag(self) -> None:
        result = runner.invoke(app, ["--debug", "check", "--", "x"])

        assert result.exit_code == 0
