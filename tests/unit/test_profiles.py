"""Unit tests for the language profile registry."""

import pytest

from fastcat.profiles import (
    CPP_PROFILE,
    JSON_PROFILE,
    MARKDOWN_PROFILE,
    PYTHON_PROFILE,
    ProfileKind,
    detect,
    get_extension,
    get_profile,
    normalize_profile_name,
    resolve_profile,
)


@pytest.mark.unit
class TestGetExtension:
    """Test extension extraction from source names."""

    def test_simple_name(self):
        """Test a plain file name."""
        assert get_extension("main.c") == ".c"

    def test_extension_is_lowercased(self):
        """Test that extensions are lowercased."""
        assert get_extension("README.MD") == ".md"

    def test_only_last_dot_counts(self):
        """Test names with several dots."""
        assert get_extension("archive.tar.json") == ".json"

    def test_directory_dots_ignored(self):
        """Test that dots in directory components are not extensions."""
        assert get_extension("src.c/Makefile") == ""

    def test_no_extension(self):
        """Test a name without a dot."""
        assert get_extension("Makefile") == ""


@pytest.mark.unit
class TestDetect:
    """Test extension-based profile detection."""

    @pytest.mark.parametrize(
        "name",
        ["a.c", "a.h", "a.cpp", "a.hpp", "a.cxx", "a.hxx", "a.cc", "a.hh", "A.CPP"],
    )
    def test_cfamily_extensions(self, name):
        """Test every C-family extension."""
        assert detect(name) is CPP_PROFILE

    @pytest.mark.parametrize("name", ["x.py", "x.pyw", "dir/x.PY"])
    def test_python_extensions(self, name):
        """Test Python extensions."""
        assert detect(name) is PYTHON_PROFILE

    @pytest.mark.parametrize("name", ["notes.md", "notes.markdown"])
    def test_markdown_extensions(self, name):
        """Test Markdown extensions."""
        assert detect(name) is MARKDOWN_PROFILE

    def test_json_extension(self):
        """Test the JSON extension."""
        assert detect("data.json") is JSON_PROFILE

    @pytest.mark.parametrize("name", ["data.csv", "notes.txt", "Makefile", "", None])
    def test_unknown_names_resolve_to_none(self, name):
        """Test that unmatched names give no profile."""
        assert detect(name) is None


@pytest.mark.unit
class TestExplicitProfiles:
    """Test lookup by explicit name."""

    @pytest.mark.parametrize(
        "name,kind",
        [
            ("c", ProfileKind.CPP),
            ("cpp", ProfileKind.CPP),
            ("c++", ProfileKind.CPP),
            ("py", ProfileKind.PYTHON),
            ("python", ProfileKind.PYTHON),
            ("md", ProfileKind.MARKDOWN),
            ("markdown", ProfileKind.MARKDOWN),
            ("json", ProfileKind.JSON),
            ("JSON", ProfileKind.JSON),
        ],
    )
    def test_aliases(self, name, kind):
        """Test that aliases resolve to their canonical profile."""
        profile = get_profile(name)
        assert profile is not None
        assert profile.kind is kind

    def test_unknown_name(self):
        """Test that unknown names give None."""
        assert get_profile("rust") is None
        assert normalize_profile_name("rust") is None

    def test_profile_name_property(self):
        """Test the canonical profile name."""
        assert MARKDOWN_PROFILE.name == "markdown"
        assert CPP_PROFILE.line_comment == "//"
        assert PYTHON_PROFILE.line_comment == "#"


@pytest.mark.unit
class TestResolveProfile:
    """Test session profile resolution."""

    def test_override_bypasses_detection(self):
        """Test that an explicit override wins over the extension."""
        assert resolve_profile("main.c", "md") is MARKDOWN_PROFILE

    def test_unknown_override_is_pass_through(self):
        """Test that an unknown override does not fall back to detection."""
        assert resolve_profile("main.c", "nonsense") is None

    def test_detection_without_override(self):
        """Test extension detection when no override is given."""
        assert resolve_profile("main.c") is CPP_PROFILE
        assert resolve_profile(None) is None
