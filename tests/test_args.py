"""
Tests for ls flag parsing and alias handling.
"""

import pytest

from ls_wrapper.args import alias_flags, parse_args
from ls_wrapper.domain import ColorOption, FlagSet, Mode, SortKey
from ls_wrapper.exceptions import UnknownFlagError


class TestParseArgs:
    """Test cases for parse_args."""

    def test_no_arguments(self):
        """Test that an empty command line lists the current directory."""
        invocation = parse_args([])

        assert invocation.flags == FlagSet()
        assert invocation.paths == (".",)
        assert invocation.mode() is Mode.EXECUTE

    def test_combined_flags(self):
        """Test that -la is parsed as -l plus -a."""
        invocation = parse_args(["-la"])

        assert invocation.flags.long is True
        assert invocation.flags.all is True
        assert parse_args(["-al"]) == invocation
        assert parse_args(["-l", "-a"]) == invocation

    def test_path(self):
        """Test a flag followed by a trailing path."""
        invocation = parse_args(["-l", "./src"])

        assert invocation.flags.long is True
        assert invocation.paths == ("./src",)

    def test_multiple_paths_keep_order(self):
        """Test that several paths are kept in command-line order."""
        invocation = parse_args(["b", "-R", "a"])

        assert invocation.paths == ("b", "a")
        assert invocation.flags.recursive is True

    def test_double_dash_ends_options(self):
        """Test that tokens after -- are paths even if they look like flags."""
        invocation = parse_args(["--", "-l"])

        assert invocation.flags == FlagSet()
        assert invocation.paths == ("-l",)

    def test_single_dash_is_a_path(self):
        """Test that a lone dash is treated as a path."""
        assert parse_args(["-"]).paths == ("-",)

    @pytest.mark.parametrize("tokens", [["-t", "-S"], ["-S", "-t"], ["-tS"], ["-St"]])
    def test_time_sort_wins_over_size(self, tokens):
        """Test that -t beats -S whatever the order."""
        assert parse_args(tokens).flags.sort_by is SortKey.TIME

    def test_size_sort(self):
        """Test -S on its own."""
        assert parse_args(["-S"]).flags.sort_by is SortKey.SIZE

    def test_long_options(self):
        """Test GNU style long options."""
        invocation = parse_args(["--all", "--recursive", "--reverse", "--classify"])

        assert invocation.flags.all is True
        assert invocation.flags.recursive is True
        assert invocation.flags.reverse is True
        assert invocation.flags.classify is True

    def test_mode_flags(self):
        """Test that educational flags land on the invocation, not the flag set."""
        invocation = parse_args(["--explain", "--teach", "--native", "--ps", "--cmd"])

        assert invocation.explain and invocation.teach and invocation.native
        assert invocation.powershell and invocation.cmd
        assert invocation.flags == FlagSet()

    def test_cheatsheet_is_rosetta(self):
        """Test the --cheatsheet synonym."""
        assert parse_args(["--cheatsheet"]).rosetta is True

    def test_question_mark_is_help(self):
        """Test that -? asks for help."""
        assert parse_args(["-?"]).mode() is Mode.HELP

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("--color", ColorOption.AUTO),
            ("--color=tty", ColorOption.AUTO),
            ("--color=always", ColorOption.ALWAYS),
            ("--color=force", ColorOption.ALWAYS),
            ("--color=never", ColorOption.NEVER),
            ("--color=no", ColorOption.NEVER),
        ],
    )
    def test_color_values(self, token, expected):
        """Test the accepted --color values."""
        assert parse_args([token]).flags.color is expected


class TestUnknownFlags:
    """Test cases for rejected tokens."""

    def test_unknown_short_flag(self):
        """Test that -z is rejected and named."""
        with pytest.raises(UnknownFlagError, match="Unknown option: -z") as exc_info:
            parse_args(["-z"])

        assert exc_info.value.token == "-z"

    def test_unknown_flag_inside_combination(self):
        """Test that the offending character of a combined flag is named."""
        with pytest.raises(UnknownFlagError) as exc_info:
            parse_args(["-lzR"])

        assert exc_info.value.token == "-z"

    def test_unknown_long_flag(self):
        """Test that an unknown long option is named."""
        with pytest.raises(UnknownFlagError, match="Unknown option: --bogus"):
            parse_args(["--bogus"])

    def test_unknown_color_value(self):
        """Test that a bad --color value is rejected."""
        with pytest.raises(UnknownFlagError, match="Unknown color option: sometimes") as exc_info:
            parse_args(["--color=sometimes"])

        assert exc_info.value.token == "--color=sometimes"

    def test_value_on_switch(self):
        """Test that a switch given a value is rejected."""
        with pytest.raises(UnknownFlagError) as exc_info:
            parse_args(["--explain=yes"])

        assert exc_info.value.token == "--explain=yes"


class TestAliases:
    """Test cases for executable-name aliases."""

    @pytest.mark.parametrize(
        "prog,expected",
        [
            ("ll", ("-l",)),
            ("la", ("-la",)),
            ("l", ("-F",)),
            ("/usr/local/bin/ll", ("-l",)),
            (r"C:\Tools\LA.EXE", ("-la",)),
            (r"C:\Tools\ll.exe", ("-l",)),
            ("ls", ()),
            ("ls-wrapper", ()),
            (None, ()),
            ("", ()),
        ],
    )
    def test_alias_flags(self, prog, expected):
        """Test alias detection from the invoked executable name."""
        assert alias_flags(prog) == expected

    def test_ll_is_long(self):
        """Test that ll with no flags equals an explicit -l."""
        assert parse_args([], prog="ll") == parse_args(["-l"])

    def test_la_is_long_all(self):
        """Test that la with no flags equals an explicit -la."""
        assert parse_args([], prog="la") == parse_args(["-la"])

    def test_explicit_flags_add_to_alias(self):
        """Test that explicit flags combine with alias flags."""
        assert parse_args(["-a"], prog="ll") == parse_args(["-la"])
        assert parse_args(["-t", "src"], prog="la") == parse_args(["-lat", "src"])

    def test_explicit_flags_cannot_remove_alias_flags(self):
        """Test that alias flags survive explicit ones."""
        invocation = parse_args(["-R"], prog="la")

        assert invocation.flags.long is True
        assert invocation.flags.all is True
        assert invocation.flags.recursive is True

    def test_alias_debug_logging(self, mock_logger):
        """Test that the implied flags are logged."""
        parse_args([], prog="ll", logger=mock_logger)

        mock_logger.debug.assert_any_call("Alias 'll' implies flags -l")


class TestModePrecedence:
    """Test cases for Invocation.mode precedence."""

    @pytest.mark.parametrize(
        "tokens,expected",
        [
            (["--rosetta", "--help", "--explain", "--teach"], Mode.ROSETTA),
            (["--help", "--version", "--tree"], Mode.HELP),
            (["--version", "--tree", "--explain"], Mode.VERSION),
            (["--tree", "--explain"], Mode.TREE),
            (["--teach", "--explain", "--native"], Mode.EXPLAIN),
            (["--teach", "--native"], Mode.NATIVE),
            (["--teach"], Mode.TEACH),
            (["-la"], Mode.EXECUTE),
        ],
    )
    def test_precedence(self, tokens, expected):
        """Test the documented mode precedence."""
        assert parse_args(tokens).mode() is expected
