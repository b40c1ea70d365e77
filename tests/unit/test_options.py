"""Unit tests for render options and the exception hierarchy."""

import dataclasses

import pytest

from fastcat.exceptions import (
    FastcatError,
    FileAccessError,
    FileError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from fastcat.exceptions import FileNotFoundError as FastcatFileNotFoundError
from fastcat.options import RenderOptions


@pytest.mark.unit
class TestRenderOptions:
    """Test the frozen options record."""

    def test_defaults(self):
        """Test default values."""
        options = RenderOptions()
        assert options.profile_override is None
        assert options.theme_enabled is False
        assert options.rainbow_enabled is False
        assert options.force_table_mode is False
        assert options.max_table_rows == 0
        assert options.align_markdown_tables is False
        assert options.line_numbers is False

    def test_frozen(self):
        """Test that options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderOptions().theme_enabled = True

    def test_create_updated(self):
        """Test cloning with changed fields."""
        base = RenderOptions()
        updated = base.create_updated(rainbow_enabled=True, max_table_rows=5)
        assert updated.rainbow_enabled is True
        assert updated.max_table_rows == 5
        assert base.rainbow_enabled is False

    def test_negative_max_rows_rejected(self):
        """Test that a negative row limit raises ValueError."""
        with pytest.raises(ValueError):
            RenderOptions(max_table_rows=-1)

    def test_from_mapping(self):
        """Test building options from config values."""
        options = RenderOptions.from_mapping({"theme_enabled": True, "profile_override": "md"})
        assert options.theme_enabled is True
        assert options.profile_override == "md"

    def test_from_mapping_unknown_key(self):
        """Test that unknown config keys are rejected."""
        with pytest.raises(ValueError, match="colour"):
            RenderOptions.from_mapping({"colour": True})

    def test_every_field_has_cli_metadata(self):
        """Test that every field carries help text and a CLI name."""
        for field in dataclasses.fields(RenderOptions):
            assert field.metadata.get("help")
            assert field.metadata.get("cli_name")


@pytest.mark.unit
class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Test base classes."""
        assert issubclass(ValidationError, FastcatError)
        assert issubclass(InvalidOptionsError, ValidationError)
        assert issubclass(FastcatFileNotFoundError, FileError)
        assert issubclass(FileAccessError, FileError)
        assert issubclass(OutputWriteError, RenderingError)

    def test_original_error_kept(self):
        """Test that the wrapped exception is available."""
        cause = OSError("disk")
        error = FileAccessError("/x", original_error=cause)
        assert error.original_error is cause
        assert error.file_path == "/x"
        assert "/x" in str(error)

    def test_invalid_options_message(self):
        """Test the generated message for a wrong options type."""
        error = InvalidOptionsError("Renderer", RenderOptions, dict)
        assert "RenderOptions" in error.message
        assert "dict" in error.message

    def test_output_write_error_stage(self):
        """Test the rendering stage of write failures."""
        assert OutputWriteError("<stdout>").rendering_stage == "write"
