"""Unit tests for shell sanitization."""

import string

import pytest

from asciirename.processors.sanitizer import HAZARDOUS_CHARACTERS, PLACEHOLDER, sanitize_for_shell


class TestSanitizeForShell:
    """Tests for sanitize_for_shell."""

    @pytest.mark.parametrize("char", sorted(HAZARDOUS_CHARACTERS))
    def test_hazardous_character_replaced(self, char):
        """Test that every hazardous character maps to the placeholder."""
        assert sanitize_for_shell(char) == PLACEHOLDER

    def test_hazardous_set_contents(self):
        """Test the exact set of hazardous characters."""
        assert HAZARDOUS_CHARACTERS == set(";$`|&><'\"\\*?[]()!~#\r\n")

    def test_other_characters_unchanged(self):
        """Test that characters outside the set pass through."""
        safe = "".join(char for char in string.printable if char not in HAZARDOUS_CHARACTERS)

        assert sanitize_for_shell(safe) == safe

    def test_path_separator_untouched(self):
        """Test that separators are not this function's concern."""
        assert sanitize_for_shell("a/b") == "a/b"

    def test_mixed_name(self):
        """Test a realistic name with several metacharacters."""
        assert sanitize_for_shell("Rock & Roll (Live) [2001]!.mp3") == "Rock _ Roll _Live_ _2001__.mp3"

    def test_length_preserved(self):
        """Test that the mapping is one-to-one."""
        name = "a;b$c`d|e\nf"

        assert len(sanitize_for_shell(name)) == len(name)

    @pytest.mark.parametrize("name", ["it's a \"test\"", "~/$HOME", "plain", "", "#!?*"])
    def test_idempotent(self, name):
        """Test that sanitizing twice equals sanitizing once."""
        once = sanitize_for_shell(name)

        assert sanitize_for_shell(once) == once

    def test_custom_placeholder(self):
        """Test that a different placeholder can be supplied."""
        assert sanitize_for_shell("a;b", placeholder="-") == "a-b"
