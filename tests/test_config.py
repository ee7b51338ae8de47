"""Tests for configuration loading."""

import os
from unittest.mock import patch

import pytest

from upbit_mcp.config import SystemConfig


class TestSystemConfig:
    """Tests for SystemConfig."""

    @patch.dict(
        os.environ,
        {"UPBIT_ACCESS_KEY": " access-1234 ", "UPBIT_SECRET_KEY": "secret-5678"},
        clear=True,
    )
    def test_from_env_defaults(self):
        config = SystemConfig.from_env()

        assert config.access_key == "access-1234"
        assert config.secret_key == "secret-5678"
        assert config.base_url == "https://api.upbit.com/v1/"
        assert config.timeout == 10.0
        config.validate()

    @patch.dict(
        os.environ,
        {
            "UPBIT_ACCESS_KEY": "a",
            "UPBIT_SECRET_KEY": "s",
            "UPBIT_BASE_URL": "http://localhost:9000/v1",
            "UPBIT_TIMEOUT": "2.5",
        },
        clear=True,
    )
    def test_from_env_overrides(self):
        config = SystemConfig.from_env()

        assert config.base_url == "http://localhost:9000/v1"
        assert config.timeout == 2.5

    @patch.dict(os.environ, {"UPBIT_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="UPBIT_TIMEOUT"):
            SystemConfig.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_missing_keys_fail_validation(self):
        config = SystemConfig.from_env()
        with pytest.raises(ValueError, match="UPBIT_ACCESS_KEY"):
            config.validate()

    def test_invalid_base_url(self):
        config = SystemConfig(access_key="a", secret_key="s", base_url="api.upbit.com")
        with pytest.raises(ValueError, match="UPBIT_BASE_URL"):
            config.validate()

    def test_non_positive_timeout(self):
        config = SystemConfig(access_key="a", secret_key="s", timeout=0)
        with pytest.raises(ValueError, match="UPBIT_TIMEOUT"):
            config.validate()

    def test_masked_access_key(self):
        assert SystemConfig(access_key="abcdefgh", secret_key="s").masked_access_key() == "...efgh"
        assert SystemConfig(access_key="abc", secret_key="s").masked_access_key() == "****"
