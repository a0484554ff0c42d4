"""Tests for pgrep command construction."""

import pytest

from unixproc.errors import InvalidArgumentError
from unixproc.process_query_helpers.command_builder import (
    build_child_pgrep_command,
    build_pgrep_command,
    validate_pgrep_pattern,
)


class TestBuildPgrepCommand:
    def test_without_user(self) -> None:
        assert build_pgrep_command(None, "-f", "java") == ["pgrep", "-f", "java"]

    def test_with_user(self) -> None:
        assert build_pgrep_command("alice", "-fa", "java") == ["pgrep", "-u", "alice", "-fa", "java"]

    @pytest.mark.parametrize("user", ["", "   "])
    def test_blank_user_is_not_a_scope(self, user: str) -> None:
        assert build_pgrep_command(user, "-fl", "java") == ["pgrep", "-fl", "java"]

    def test_pattern_with_spaces_is_one_token(self) -> None:
        assert build_pgrep_command(None, "-f", "java -jar app.jar") == ["pgrep", "-f", "java -jar app.jar"]

    @pytest.mark.parametrize("flags", ["-f l", " -fa", "-fa\t", "", "   "])
    def test_rejects_flags_with_whitespace(self, flags: str) -> None:
        with pytest.raises(InvalidArgumentError):
            build_pgrep_command(None, flags, "java")

    @pytest.mark.parametrize("pattern", ["", "  "])
    def test_rejects_blank_pattern(self, pattern: str) -> None:
        with pytest.raises(InvalidArgumentError):
            build_pgrep_command(None, "-f", pattern)

    @pytest.mark.parametrize("pattern", ["", " \t", None])
    def test_validate_pgrep_pattern_rejects_blank(self, pattern) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be blank"):
            validate_pgrep_pattern(pattern)

    def test_validate_pgrep_pattern_accepts_text(self) -> None:
        assert validate_pgrep_pattern("java -jar") is None


class TestBuildChildPgrepCommand:
    def test_builds_parent_query(self) -> None:
        assert build_child_pgrep_command(2970) == ["pgrep", "-P", "2970"]

    @pytest.mark.parametrize("parent_pid", [-1, True, "12"])
    def test_rejects_invalid_parent(self, parent_pid) -> None:
        with pytest.raises(InvalidArgumentError):
            build_child_pgrep_command(parent_pid)
