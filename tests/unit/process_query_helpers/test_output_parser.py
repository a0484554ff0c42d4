"""Tests for pgrep output parsing."""

import pytest

from unixproc.errors import PidParseError
from unixproc.process_query_helpers.output_parser import (
    ProcessMatch,
    get_pid_or_throw,
    non_blank_lines,
    parse_pid_lines,
    parse_process_match,
    parse_process_matches,
)


class TestGetPidOrThrow:
    def test_parses_digits(self) -> None:
        assert get_pid_or_throw("12345") == 12345
        assert get_pid_or_throw("0") == 0

    @pytest.mark.parametrize("token", ["a", "", "foo", "12_000", "-5", "+5", " 12", "1.5", "²"])
    def test_rejects_non_numeric(self, token: str) -> None:
        with pytest.raises(PidParseError) as exc_info:
            get_pid_or_throw(token)
        assert exc_info.value.line == token


class TestParsePidLines:
    def test_one_pid_per_non_blank_line(self) -> None:
        assert parse_pid_lines(["101", "", "  ", "202 ", "303"]) == [101, 202, 303]

    def test_bad_line_is_a_hard_failure(self) -> None:
        with pytest.raises(PidParseError) as exc_info:
            parse_pid_lines(["101", "pgrep: invalid user name"])
        assert exc_info.value.line == "pgrep: invalid user name"

    def test_empty_output(self) -> None:
        assert parse_pid_lines([]) == []


class TestParseProcessMatch:
    def test_splits_on_first_whitespace(self) -> None:
        assert parse_process_match("12345 java -jar app.jar") == ProcessMatch(pid=12345, command="java -jar app.jar")

    def test_keeps_command_verbatim(self) -> None:
        match = parse_process_match("42\t  sleep   123  --flag")
        assert match.pid == 42
        assert match.command == "sleep   123  --flag"

    def test_pid_without_command(self) -> None:
        assert parse_process_match("42") == ProcessMatch(pid=42, command="")

    def test_rejects_non_numeric_pid(self) -> None:
        with pytest.raises(PidParseError) as exc_info:
            parse_process_match("java -jar app.jar")
        assert exc_info.value.line == "java -jar app.jar"

    def test_one_match_per_non_blank_line_in_order(self) -> None:
        lines = ["3 c", "", "1 a b", "2 b"]
        matches = parse_process_matches(lines)
        assert [match.pid for match in matches] == [3, 1, 2]
        assert [match.command for match in matches] == ["c", "a b", "b"]


def test_non_blank_lines() -> None:
    assert non_blank_lines(["a", "", " ", "\t", "b"]) == ["a", "b"]
