"""Tests for AideProvConfig: env-driven settings and builders."""

from __future__ import annotations

import pytest

from aideprov.config import AideProvConfig
from aideprov.core.directory_walker import DEFAULT_EXCLUDES


class TestAideProvConfig:
    def test_defaults(self):
        config = AideProvConfig()
        assert config.environment == "development"
        assert config.log_level == "INFO"
        assert config.namespace == "swh"
        assert config.schema_version == 1
        assert config.max_content_bytes is None
        assert config.walk_excludes == list(DEFAULT_EXCLUDES)
        assert config.walk_workers == 4
        assert config.skip_walk_errors is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("AIDEPROV_MAX_CONTENT_BYTES", "1024")
        monkeypatch.setenv("AIDEPROV_WALK_WORKERS", "8")
        config = AideProvConfig()
        assert config.max_content_bytes == 1024
        assert config.walk_workers == 8

    def test_build_codec(self):
        codec = AideProvConfig(schema_version=2).build_codec()
        assert codec.schema_version == 2
        assert codec.namespace == "swh"

    def test_build_content_addresser(self):
        addresser = AideProvConfig(max_content_bytes=10).build_content_addresser()
        assert addresser.max_content_bytes == 10

    def test_build_walker_skip_policy(self, tmp_path):
        (tmp_path / "big").write_bytes(b"x" * 20)
        walker = AideProvConfig(max_content_bytes=10, skip_walk_errors=True).build_walker()
        result = walker.address_directory(tmp_path)
        assert len(result.failures) == 1

    def test_build_walker_overrides(self):
        walker = AideProvConfig().build_walker(excludes=["*.tmp"])
        assert walker.is_excluded("x.tmp")
        assert not walker.is_excluded(".git")
