"""Tests for path normalization utilities."""

import os

from dirtree import paths


class TestJoin:
    """Tests for join()."""

    def test_normalizes_segments(self):
        """Test that redundant separators and "." segments are collapsed."""
        assert paths.join("foo//bar", ".", "baz") == "foo/bar/baz"

    def test_collapses_parent_segments(self):
        """Test that ".." segments are resolved lexically."""
        assert paths.join("foo/bar", "..", "baz") == "foo/baz"

    def test_keeps_trailing_separator(self):
        """Test that a trailing separator on the result is kept."""
        assert paths.join("foo/", "bar/") == "foo/bar/"

    def test_empty_segment_returns_directory(self):
        """Test that joining an empty name returns the directory path."""
        assert paths.join("foo/bar/", "") == "foo/bar/"
        assert paths.join("./", "") == "./"
        assert paths.join(os.sep, "") == os.sep

    def test_drops_current_directory_prefix(self):
        """Test that "./" prefixes are removed like other "." segments."""
        assert paths.join("./", "src") == "src"


class TestNormalize:
    """Tests for normalize()."""

    def test_collapses_leading_double_separator(self):
        """Test that a leading "//" becomes a single separator."""
        assert paths.normalize("//") == "/"
        assert paths.normalize("//srv//app/") == "/srv/app"

    def test_keeps_relative_paths(self):
        """Test that relative paths are only normalized."""
        assert paths.normalize("foo/./bar") == "foo/bar"

    def test_join_collapses_leading_double_separator(self):
        """Test that join() uses the same rule."""
        assert paths.join("//", "srv") == "/srv"

    def test_resolve_collapses_leading_double_separator(self, cwd):
        """Test that resolve() uses the same rule."""
        assert paths.resolve("//srv/app", cwd) == "/srv/app"


class TestWithTrailingSeparator:
    """Tests for with_trailing_separator()."""

    def test_appends_separator(self):
        """Test that a separator is added when missing."""
        assert paths.with_trailing_separator("foo") == "foo/"

    def test_does_not_double_separator(self):
        """Test that an existing trailing separator is kept as is."""
        assert paths.with_trailing_separator("foo/") == "foo/"
        assert paths.with_trailing_separator("/") == "/"


class TestResolve:
    """Tests for resolve()."""

    def test_resolves_relative_against_cwd(self, cwd):
        """Test that relative paths are resolved against the given cwd."""
        assert paths.resolve("foo/bar", cwd) == "/work/project/foo/bar"

    def test_absolute_path_ignores_cwd(self, cwd):
        """Test that absolute paths are only normalized."""
        assert paths.resolve("/foo/./bar/", cwd) == "/foo/bar"

    def test_empty_path_is_cwd(self, cwd):
        """Test that an empty path resolves to cwd itself."""
        assert paths.resolve("", cwd) == cwd


class TestStripCwd:
    """Tests for strip_cwd()."""

    def test_strips_leading_cwd(self, cwd):
        """Test that a leading cwd and its separator are removed."""
        assert paths.strip_cwd("/work/project/foo", cwd) == "foo"

    def test_leaves_other_paths(self, cwd):
        """Test that paths without the cwd prefix are unchanged."""
        assert paths.strip_cwd("foo/bar", cwd) == "foo/bar"


class TestNormalizeRelativePath:
    """Tests for normalize_relative_path()."""

    def test_current_directory_inputs(self, cwd):
        """Test that current-directory inputs normalize to "./"."""
        for path in ["", ".", "./", "./."]:
            assert paths.normalize_relative_path(path, cwd) == "./"

    def test_root(self, cwd):
        """Test that the root stays a single separator."""
        assert paths.normalize_relative_path(os.sep, cwd) == os.sep

    def test_relative_path(self, cwd):
        """Test that relative paths stay relative with one trailing separator."""
        assert paths.normalize_relative_path("foo/bar", cwd) == "foo/bar/"
        assert paths.normalize_relative_path("foo/bar//", cwd) == "foo/bar/"

    def test_absolute_path(self, cwd):
        """Test that absolute paths stay absolute."""
        assert paths.normalize_relative_path("/foo/bar", cwd) == "/foo/bar/"


class TestNormalizeAbsolutePath:
    """Tests for normalize_absolute_path()."""

    def test_relative_path(self, cwd):
        """Test that relative paths become absolute with a trailing separator."""
        assert paths.normalize_absolute_path("foo", cwd) == "/work/project/foo/"

    def test_root(self, cwd):
        """Test that the root is not given a second separator."""
        assert paths.normalize_absolute_path(os.sep, cwd) == os.sep


class TestCurrentWorkingDirectory:
    """Tests for current_working_directory()."""

    def test_returns_process_cwd(self, tmp_path, monkeypatch):
        """Test that the process working directory is used."""
        monkeypatch.chdir(tmp_path)

        assert paths.current_working_directory() == os.getcwd()
