"""
Tests for environment configuration and logging setup.
"""

import io
import json
import logging

import pytest

from unistore.config import Settings
from unistore.core.errors import ConfigError
from unistore.logging_config import get_logger, setup_logging


def test_settings_defaults():
    settings = Settings.from_env({})

    assert settings.log_level == "INFO"
    assert settings.log_format == "json"
    assert settings.api_base_url == "http://localhost:8000/api"
    assert settings.http_timeout == 10.0
    assert settings.metrics_enabled is False
    assert settings.metrics_port == 9100


def test_settings_from_env():
    settings = Settings.from_env({
        "UNISTORE_LOG_LEVEL": "debug",
        "UNISTORE_LOG_FORMAT": "TEXT",
        "UNISTORE_API_BASE_URL": "http://api.test/",
        "UNISTORE_HTTP_TIMEOUT": "2.5",
        "UNISTORE_METRICS_ENABLED": "yes",
        "UNISTORE_METRICS_PORT": "9200",
    })

    assert settings.log_level == "DEBUG"
    assert settings.log_format == "text"
    assert settings.api_base_url == "http://api.test"
    assert settings.http_timeout == 2.5
    assert settings.metrics_enabled is True
    assert settings.metrics_port == 9200


@pytest.mark.parametrize(
    "env",
    [
        {"UNISTORE_HTTP_TIMEOUT": "soon"},
        {"UNISTORE_HTTP_TIMEOUT": "0"},
        {"UNISTORE_METRICS_ENABLED": "maybe"},
        {"UNISTORE_METRICS_PORT": "70000"},
        {"UNISTORE_LOG_FORMAT": "xml"},
    ],
)
def test_settings_invalid_values(env):
    with pytest.raises(ConfigError):
        Settings.from_env(env)


def test_with_base_url():
    assert Settings().with_base_url("http://x.test/").api_base_url == "http://x.test"


def test_json_logging_includes_trace_id():
    stream = io.StringIO()
    setup_logging(Settings(log_format="json", log_level="INFO"), stream=stream)
    get_logger("unistore.test", trace_id="SELECT_TAB").info("hello")
    logging.getLogger("unistore.test").info("plain")

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert lines[0]["message"] == "hello"
    assert lines[0]["trace_id"] == "SELECT_TAB"
    assert lines[0]["level"] == "INFO"
    assert lines[1]["trace_id"] == "N/A"
