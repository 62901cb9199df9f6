"""Unit tests for package list loading."""

from pathlib import Path

import pytest

from archsetup.core.errors import ConfigurationError
from archsetup.core.package_list import load_package_list, parse_package_list


class TestParsePackageList:
    """Tests for parse_package_list function."""

    def test_filters_comments_and_blank_lines(self, package_list_text: str) -> None:
        """Comments and blank lines are dropped, names keep file order."""
        assert parse_package_list(package_list_text) == ["vim", "google-chrome", "neovim", "htop"]

    def test_keeps_duplicates(self) -> None:
        """Duplicate names are kept in order."""
        assert parse_package_list("vim\nhtop\nvim\n") == ["vim", "htop", "vim"]

    def test_empty_text(self) -> None:
        """An empty file yields an empty list."""
        assert parse_package_list("") == []

    def test_only_comments(self) -> None:
        """A file of comments yields an empty list."""
        assert parse_package_list("# one\n#two\n\n") == []

    def test_no_entry_starts_with_comment_prefix(self) -> None:
        """Retained entries are never empty and never start with '#'."""
        text = "#a\n  #b\nvim\n\t\n c \n"

        packages = parse_package_list(text)

        assert packages == ["vim", "c"]
        assert all(p and not p.startswith("#") for p in packages)
        assert len(packages) <= len(text.splitlines())

    def test_crlf_line_endings(self) -> None:
        """Windows line endings do not leak into names."""
        assert parse_package_list("vim\r\nhtop\r\n") == ["vim", "htop"]

    def test_name_with_whitespace_rejected(self) -> None:
        """Two words on one line are not a package name."""
        with pytest.raises(ConfigurationError, match="line 2: .*contains whitespace"):
            parse_package_list("vim\nfoo bar\n")

    def test_option_like_name_rejected(self) -> None:
        """A line starting with a dash would be read as a pacman option."""
        with pytest.raises(ConfigurationError, match="line 3: .*command-line option"):
            parse_package_list("# list\nvim\n-Syu\n")

    @pytest.mark.parametrize("name", [".", ".."])
    def test_directory_names_rejected(self, name: str) -> None:
        """Names that refer to a directory are rejected."""
        with pytest.raises(ConfigurationError, match="not a valid name"):
            parse_package_list(f"{name}\n")

    def test_repository_prefix_allowed(self) -> None:
        """pacman's repo/name form is kept as is."""
        assert parse_package_list("extra/vim\n") == ["extra/vim"]


class TestLoadPackageList:
    """Tests for load_package_list function."""

    def test_loads_file(self, package_file: Path) -> None:
        """Names are read from a UTF-8 file."""
        assert load_package_list(package_file) == ["vim", "google-chrome", "htop"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing list raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Package list not found"):
            load_package_list(tmp_path / "missing.txt")

    def test_directory_is_rejected(self, tmp_path: Path) -> None:
        """A directory is not a package list."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_package_list(tmp_path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        """Undecodable content raises ConfigurationError."""
        path = tmp_path / "packages.txt"
        path.write_bytes(b"vim\n\xff\xfe\n")

        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_package_list(path)

    def test_invalid_name_reports_file(self, tmp_path: Path) -> None:
        """The error names the file and the offending line."""
        path = tmp_path / "packages.txt"
        path.write_text("vim\n\n--noconfirm\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            load_package_list(path)

        assert str(path) in str(exc_info.value)
        assert "line 3" in str(exc_info.value)
