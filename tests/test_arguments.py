"""Tests for command-line parsing (``cli.app.parse_arguments``)."""

from __future__ import annotations

import pytest

from quantcycle.cli.app import parse_arguments
from quantcycle.core.models import CliArguments


class TestVerboseFlag:
    @pytest.mark.parametrize(
        "argv",
        [
            ["-v"],
            ["--verbose"],
            ["-i", "in.csv", "-v"],
            ["--output", "out.csv", "--verbose", "--input", "in.csv"],
        ],
    )
    def test_present_sets_true(self, argv: list[str]) -> None:
        assert parse_arguments(argv).verbose is True

    @pytest.mark.parametrize(
        "argv",
        [[], ["-i", "in.csv"], ["--output", "out.csv"]],
    )
    def test_absent_is_false(self, argv: list[str]) -> None:
        assert parse_arguments(argv).verbose is False


class TestPathOptions:
    @pytest.mark.parametrize("flag", ["-i", "--input"])
    def test_input_passed_through(self, flag: str) -> None:
        assert parse_arguments([flag, "data/prices.csv"]).input == "data/prices.csv"

    @pytest.mark.parametrize("flag", ["-o", "--output"])
    def test_output_passed_through(self, flag: str) -> None:
        assert parse_arguments([flag, "report.json"]).output == "report.json"

    def test_equals_form(self) -> None:
        args = parse_arguments(["--input=a b.csv", "--output=c.csv"])
        assert args.input == "a b.csv"
        assert args.output == "c.csv"

    def test_values_are_not_coerced(self) -> None:
        args = parse_arguments(["-i", "42", "-o", "  spaced  "])
        assert args.input == "42"
        assert args.output == "  spaced  "

    def test_absent_fields_are_none(self) -> None:
        args = parse_arguments(["-v"])
        assert args.input is None
        assert args.output is None

    def test_bare_flag_yields_empty_string(self) -> None:
        args = parse_arguments(["-i"])
        assert args.input == ""

    def test_fields_are_independent(self) -> None:
        assert parse_arguments(["-o", "out"]) == CliArguments(output="out")


class TestUnrecognizedArguments:
    def test_unknown_long_flag_ignored(self) -> None:
        assert parse_arguments(["--unknown", "-v"]) == CliArguments(verbose=True)

    def test_unknown_short_flag_ignored(self) -> None:
        assert parse_arguments(["-x"]) == CliArguments()

    def test_positionals_ignored(self) -> None:
        assert parse_arguments(["run", "now"]) == CliArguments()

    def test_abbreviation_is_not_expanded(self) -> None:
        assert parse_arguments(["--verb"]).verbose is False


class TestGroupedShortFlags:
    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["-vx"], CliArguments(verbose=True)),
            (["-xv"], CliArguments(verbose=True)),
            (["--input", "a", "-vq"], CliArguments(verbose=True, input="a")),
            (["-vi", "in.csv"], CliArguments(verbose=True, input="in.csv")),
            (["-vo", "out.csv"], CliArguments(verbose=True, output="out.csv")),
            (["-viin.csv"], CliArguments(verbose=True, input="in.csv")),
            (["-iin.csv"], CliArguments(input="in.csv")),
            (["-xq"], CliArguments()),
        ],
    )
    def test_group_is_split(self, argv: list[str], expected: CliArguments) -> None:
        assert parse_arguments(argv) == expected

    def test_tokens_after_separator_are_not_split(self) -> None:
        assert parse_arguments(["--", "-vi", "x"]) == CliArguments()


class TestAttachedVerboseValue:
    @pytest.mark.parametrize(
        "argv",
        [
            ["--verbose=true"],
            ["--verbose=1"],
            ["--verbose=yes"],
            ["-v=true"],
            ["-v", "true"],
        ],
    )
    def test_any_value_but_false_sets_true(self, argv: list[str]) -> None:
        assert parse_arguments(argv).verbose is True

    @pytest.mark.parametrize(
        "argv",
        [["--verbose=false"], ["-v=false"], ["-v", "false"]],
    )
    def test_false_value_clears(self, argv: list[str]) -> None:
        assert parse_arguments(argv).verbose is False

    def test_attached_value_does_not_swallow_next_option(self) -> None:
        args = parse_arguments(["--verbose", "-o", "out.csv"])
        assert args == CliArguments(verbose=True, output="out.csv")
