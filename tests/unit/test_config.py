"""
Unit tests for ResponderConfig.
"""

import pytest

from publicset.config import ResponderConfig


class TestFromEnv:
    """Tests for ResponderConfig.from_env()."""

    def test_defaults(self, monkeypatch):
        """Test defaults when nothing is set."""
        for name in ("PUBLICSET_DOCROOT", "PUBLICSET_LOG_LEVEL", "PUBLICSET_BUFFER_SIZE"):
            monkeypatch.delenv(name, raising=False)
        config = ResponderConfig.from_env()
        assert config.docroot is None
        assert config.log_level == "WARNING"
        assert config.buffer_size == 64 * 1024

    def test_overrides(self, monkeypatch, tmp_path):
        """Test values read from the environment."""
        monkeypatch.setenv("PUBLICSET_DOCROOT", str(tmp_path))
        monkeypatch.setenv("PUBLICSET_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PUBLICSET_BUFFER_SIZE", "4096")
        config = ResponderConfig.from_env()
        assert config.docroot == str(tmp_path)
        assert config.log_level == "DEBUG"
        assert config.buffer_size == 4096

    def test_empty_docroot_is_none(self, monkeypatch):
        """Test an empty variable counts as unset."""
        monkeypatch.setenv("PUBLICSET_DOCROOT", "")
        assert ResponderConfig.from_env().docroot is None


class TestValidate:
    """Tests for validate()."""

    def test_valid(self):
        """Test defaults validate, level case-insensitively."""
        ResponderConfig().validate()
        ResponderConfig(log_level="info").validate()

    def test_bad_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log level"):
            ResponderConfig(log_level="VERBOSE").validate()

    def test_small_buffer(self):
        """Test tiny buffers are rejected."""
        with pytest.raises(ValueError, match="buffer_size"):
            ResponderConfig(buffer_size=10).validate()


class TestResolveDocroot:
    """Tests for resolve_docroot()."""

    def test_none(self):
        """Test no docroot."""
        assert ResponderConfig().resolve_docroot() is None

    def test_directory(self, tmp_path):
        """Test an existing directory comes back absolute."""
        path = ResponderConfig(docroot=str(tmp_path)).resolve_docroot()
        assert path == tmp_path.absolute()
        assert path.is_absolute()

    def test_relative_directory(self, tmp_path, monkeypatch):
        """Test relative paths are made absolute."""
        (tmp_path / "public").mkdir()
        monkeypatch.chdir(tmp_path)
        assert ResponderConfig(docroot="public").resolve_docroot() == tmp_path.absolute() / "public"

    def test_missing(self, tmp_path):
        """Test a path that does not exist."""
        assert ResponderConfig(docroot=str(tmp_path / "nope")).resolve_docroot() is None

    def test_file(self, tmp_path):
        """Test a regular file is not a docroot."""
        target = tmp_path / "f"
        target.write_text("x")
        assert ResponderConfig(docroot=str(target)).resolve_docroot() is None
