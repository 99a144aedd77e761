"""Tests for the date and duration commands."""

import pytest

from timeman.cli.main import cli

LATER = "Tue, 23 Apr 2024 11:48:52 +0300"
EARLIER = "Tue, 23 Apr 2024 11:40:37 +0300"


def _run(runner, args):
    result = runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    return result.output.strip()


# ------------------------------------------------------------------ #
# Group
# ------------------------------------------------------------------ #


class TestGroup:
    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ["now", "since", "sub", "sub-duration", "add-duration", "translate"]:
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(cli, ["yesterday"])
        assert result.exit_code == 2


# ------------------------------------------------------------------ #
# now
# ------------------------------------------------------------------ #


class TestNow:
    def test_default_format(self, runner, frozen_now):
        assert _run(runner, ["-o", "+03:00", "now"]) == LATER

    def test_offset(self, runner, frozen_now):
        assert _run(runner, ["-o", "+00:00", "now"]) == "Tue, 23 Apr 2024 08:48:52 +0000"

    def test_format(self, runner, frozen_now):
        assert _run(runner, ["-o", "-05:00", "-f", "%F %T %:z", "now"]) == "2024-04-23 03:48:52 -05:00"

    def test_empty_format(self, runner, frozen_now):
        assert _run(runner, ["-f", "", "now"]) == ""

    def test_real_clock(self, runner):
        result = runner.invoke(cli, ["-f", "%Y", "now"])
        assert result.exit_code == 0
        assert result.output.strip().isdigit()

    def test_invalid_format(self, runner):
        result = runner.invoke(cli, ["-f", "%Ω", "now"])
        assert result.exit_code == 11
        assert "directive" in result.output

    def test_invalid_offset(self, runner):
        result = runner.invoke(cli, ["-o", "3 hours", "now"])
        assert result.exit_code == 1
        assert "offset" in result.output


# ------------------------------------------------------------------ #
# since
# ------------------------------------------------------------------ #


class TestSince:
    def test_since(self, runner, frozen_now):
        assert _run(runner, ["since", EARLIER]) == "PT8M15S"

    def test_alias(self, runner, frozen_now):
        assert _run(runner, ["s", EARLIER]) == "PT8M15S"

    def test_duration_flags(self, runner, frozen_now):
        assert _run(runner, ["since", EARLIER, "s"]) == "PT495S"

    def test_pretty(self, runner, frozen_now):
        assert _run(runner, ["since", EARLIER, "-p"]) == "8 Minutes, 15 Seconds"

    def test_future_date_is_negative(self, runner, frozen_now):
        assert _run(runner, ["since", "Tue, 23 Apr 2024 11:49:52 +0300"]) == "-PT1M0S"

    def test_bad_date(self, runner, frozen_now):
        result = runner.invoke(cli, ["since", "2024-04-23"])
        assert result.exit_code == 5
        assert "date" in result.output


# ------------------------------------------------------------------ #
# sub
# ------------------------------------------------------------------ #


class TestSub:
    def test_sub(self, runner):
        assert _run(runner, ["sub", LATER, EARLIER]) == "PT8M15S"

    def test_negative(self, runner):
        assert _run(runner, ["sub", EARLIER, LATER]) == "-PT8M15S"

    def test_duration_flags(self, runner):
        assert _run(runner, ["sub", LATER, EARLIER, "m"]) == "PT8M"

    def test_pretty(self, runner):
        assert _run(runner, ["sub", "-p", LATER, EARLIER]) == "8 Minutes, 15 Seconds"

    def test_custom_format(self, runner):
        args = ["-f", "%F %T %:z", "sub", "2024-04-24 00:00:00 +00:00", "2024-04-23 00:00:00 +00:00"]
        assert _run(runner, args) == "P1DT0S"

    def test_format_without_offset(self, runner):
        result = runner.invoke(cli, ["-f", "%F", "sub", "2024-04-24", "2024-04-23"])
        assert result.exit_code == 5
        assert "offset" in result.output

    def test_unparsable_format(self, runner):
        result = runner.invoke(cli, ["-f", "%s %z", "sub", "1 +0000", "0 +0000"])
        assert result.exit_code == 11


# ------------------------------------------------------------------ #
# add-duration / sub-duration
# ------------------------------------------------------------------ #


class TestAddDuration:
    def test_add_duration(self, runner):
        assert _run(runner, ["add-duration", EARLIER, "PT8M15S"]) == LATER

    @pytest.mark.parametrize("alias", ["ad", "+d"])
    def test_aliases(self, runner, alias):
        assert _run(runner, [alias, EARLIER, "PT8M15S"]) == LATER

    def test_negative_duration(self, runner):
        assert _run(runner, ["add-duration", "--", LATER, "-PT8M15S"]) == EARLIER

    def test_reads_back_sub(self, runner):
        delta = _run(runner, ["sub", LATER, EARLIER])
        assert _run(runner, ["add-duration", EARLIER, delta]) == LATER

    def test_bad_duration(self, runner):
        result = runner.invoke(cli, ["add-duration", EARLIER, "8 minutes"])
        assert result.exit_code == 10
        assert "duration" in result.output


class TestSubDuration:
    def test_sub_duration(self, runner):
        assert _run(runner, ["sub-duration", LATER, "PT8M15S"]) == EARLIER

    def test_alias(self, runner):
        assert _run(runner, ["sd", LATER, "PT8M15S"]) == EARLIER

    def test_days(self, runner):
        assert _run(runner, ["sd", LATER, "P7D"]) == "Tue, 16 Apr 2024 11:48:52 +0300"


# ------------------------------------------------------------------ #
# translate
# ------------------------------------------------------------------ #


class TestTranslate:
    def test_same_format(self, runner):
        assert _run(runner, ["translate", EARLIER]) == EARLIER

    def test_to_format(self, runner):
        assert _run(runner, ["translate", "-F", "%F", EARLIER]) == "2024-04-23"

    def test_to_offset(self, runner):
        result = _run(runner, ["t", "-F", "%+", "-O", "+00:00", EARLIER])
        assert result == "2024-04-23T08:40:37.000000+00:00"

    def test_from_custom_format(self, runner):
        args = ["-f", "%F %T %:z", "translate", "-F", "%D %r", "2024-04-23 19:08:29 +02:00"]
        assert _run(runner, args) == "04/23/24 07:08:29 PM"

    def test_bad_to_format(self, runner):
        result = runner.invoke(cli, ["translate", "-F", "%Q", EARLIER])
        assert result.exit_code == 11

    def test_bad_to_offset(self, runner):
        result = runner.invoke(cli, ["translate", "-O", "abc", EARLIER])
        assert result.exit_code == 1


# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #


class TestConfigDefaults:
    def test_config_format_and_flags(self, runner, sample_config):
        args = ["-c", str(sample_config), "sub", "2024-04-23 11:48:52 +03:00", "2024-04-23 11:40:37 +03:00"]
        assert _run(runner, args) == "PT495S"

    def test_config_offset(self, runner, sample_config, frozen_now):
        assert _run(runner, ["-c", str(sample_config), "now"]) == "2024-04-23 08:48:52 +00:00"

    def test_option_beats_config(self, runner, sample_config, frozen_now):
        args = ["-c", str(sample_config), "-f", "%T", "-o", "+01:00", "now"]
        assert _run(runner, args) == "09:48:52"

    def test_discovered_config(self, runner, isolated):
        (isolated / "timeman.toml").write_text('[defaults]\nformat = "%F %T %z"\npretty = true\n')
        args = ["sub", "2024-04-23 11:48:52 +0300", "2024-04-23 11:40:37 +0300"]
        assert _run(runner, args) == "8 Minutes, 15 Seconds"

    def test_env_override(self, runner, monkeypatch, frozen_now):
        monkeypatch.setenv("TIMEMAN_FORMAT", "%R")
        monkeypatch.setenv("TIMEMAN_OFFSET", "+00:00")
        assert _run(runner, ["now"]) == "08:48"

    def test_bad_config(self, runner, isolated):
        (isolated / "timeman.toml").write_text("[defaults]\ncolour = 1\n")
        result = runner.invoke(cli, ["sub", LATER, EARLIER])
        assert result.exit_code == 2
        assert "colour" in result.output


class TestVerbose:
    def test_verbose_still_prints_result(self, runner):
        result = runner.invoke(cli, ["-v", "sub", LATER, EARLIER])
        assert result.exit_code == 0
        assert "PT8M15S" in result.output


# ------------------------------------------------------------------ #
# Exact output
# ------------------------------------------------------------------ #


class TestExactOutput:
    """Rendered text reaches stdout byte for byte."""

    def _output(self, runner, args):
        result = runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        return result.output

    def test_tab(self, runner, frozen_now):
        assert self._output(runner, ["-o", "+03:00", "-f", "%H%t%M", "now"]) == "11\t48\n"

    def test_newline(self, runner, frozen_now):
        assert self._output(runner, ["-o", "+03:00", "-f", "%H%n%M", "now"]) == "11\n48\n"

    def test_leading_and_trailing_whitespace(self, runner, frozen_now):
        assert self._output(runner, ["-o", "+03:00", "-f", "%t%H%n", "now"]) == "\t11\n\n"

    def test_emoji_code_is_literal(self, runner, frozen_now):
        assert self._output(runner, ["-o", "+03:00", "-f", "%H:smile:%M", "now"]) == "11:smile:48\n"

    def test_markup_is_literal(self, runner, frozen_now):
        assert self._output(runner, ["-o", "+03:00", "-f", "[bold]%H[/bold]", "now"]) == "[bold]11[/bold]\n"

    def test_translate_keeps_tabs(self, runner):
        args = ["translate", "-F", "%F%t%T", EARLIER]
        assert self._output(runner, args) == "2024-04-23\t11:40:37\n"

    def test_duration(self, runner):
        assert self._output(runner, ["sub", LATER, EARLIER]) == "PT8M15S\n"


# ------------------------------------------------------------------ #
# Errors reported without a traceback
# ------------------------------------------------------------------ #


class TestReportedErrors:
    def test_add_duration_out_of_range(self, runner):
        result = runner.invoke(cli, ["add-duration", EARLIER, "P9000Y"])
        assert result.exit_code == 10
        assert not isinstance(result.exception, OverflowError)
        assert "range" in result.output

    def test_sub_duration_out_of_range(self, runner):
        result = runner.invoke(cli, ["sd", EARLIER, "P3000Y"])
        assert result.exit_code == 10
        assert "range" in result.output

    def test_huge_duration(self, runner):
        result = runner.invoke(cli, ["ad", EARLIER, "P9999999999D"])
        assert result.exit_code == 10

    def test_repeated_directive(self, runner):
        args = ["-f", "%d %d %b %Y %T %z", "translate", "23 23 Apr 2024 11:40:37 +0300"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 11
        assert "field" in result.output

    def test_repeated_offset_directive(self, runner):
        args = ["-f", "%F %T %z %:z", "sub", "2024-04-23 11:48:52 +0300 +03:00", "2024-04-23 11:40:37 +0300 +03:00"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 11

    def test_repeated_directive_still_renders(self, runner, frozen_now):
        result = runner.invoke(cli, ["-o", "+03:00", "-f", "%d %d", "now"])
        assert result.exit_code == 0
        assert result.output == "23 23\n"

    def test_iso_year_alone(self, runner):
        result = runner.invoke(cli, ["-f", "%G %z", "translate", "2024 +0300"])
        assert result.exit_code == 11
        assert "%V" in result.output
