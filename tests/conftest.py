"""Pytest configuration and shared fixtures."""

import httpx
import pytest
from rest_framework.test import APIClient

from tests.fakes import InlineExecutor, RecordingObserver, WebhookRecorder


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def executor() -> InlineExecutor:
    return InlineExecutor()


@pytest.fixture
def webhook() -> WebhookRecorder:
    return WebhookRecorder()


@pytest.fixture
def http_client(webhook) -> httpx.Client:
    client = httpx.Client(transport=httpx.MockTransport(webhook))
    yield client
    client.close()
