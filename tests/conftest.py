"""Shared fixtures for base-url-detector tests"""

import pytest

from base_url_detector.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from environment-provided settings"""
    monkeypatch.delenv("BASE_URL_DETECTOR_CHECK_URL_VALID", raising=False)
    monkeypatch.delenv("BASE_URL_DETECTOR_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
