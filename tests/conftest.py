from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


_SETTINGS_ENV = (
    "STUDY_NOTES_CONFIG",
    "STUDY_NOTES_INFERENCE_URL",
    "STUDY_NOTES_MODEL",
    "STUDY_NOTES_GATEWAY_URL",
    "STUDY_NOTES_LOG_LEVEL",
    "CORS_ORIGINS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gateway():
    import study_notes.api.app as gateway_app

    return gateway_app


@pytest.fixture
def client(gateway):
    return TestClient(gateway.app)


@pytest.fixture
def inference_url(gateway) -> str:
    return gateway.inference_client.url
