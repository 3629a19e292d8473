import json
from types import SimpleNamespace
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from hayyak.advisor import MoodAdvisor
from hayyak.config import Settings
from hayyak.main import create_app
from hayyak.storage import DocumentStore

VALID_REPLY = {
    "response": "Love that energy! Here are three places to match it:",
    "places": [
        {"name": "Motiongate Dubai", "info": "Rides to keep the excitement going."},
        {"name": "Kite Beach", "info": "Water sports in a lively setting."},
        {"name": "City Walk", "info": "Street art, shops and buzz."},
    ],
}


class InMemoryStore(DocumentStore):
    def __init__(self, collections: Optional[Dict[str, Dict[str, Dict[str, Any]]]] = None) -> None:
        super().__init__()
        self.collections = {name: dict(docs) for name, docs in (collections or {}).items()}
        self.closed = False

    def stream(self, collection):
        for doc_id, fields in self.collections.get(collection, {}).items():
            yield doc_id, dict(fields)

    def replace_document(self, collection, doc_id, fields):
        self.collections.setdefault(collection, {})[doc_id] = dict(fields)

    def close(self):
        self.closed = True


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        gcp_project_id="hayyak-test",
        firestore_database=None,
        cors_origins=("http://localhost:5173",),
        api_url="http://testserver",
        log_level="INFO",
    )


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def model_client():
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=json.dumps(VALID_REPLY))
    return client


@pytest.fixture
def advisor(model_client):
    return MoodAdvisor(api_key=None, model_name="gemini-test", client=model_client)


@pytest.fixture
def app(settings, store, advisor):
    return create_app(settings=settings, store=store, advisor=advisor)


@pytest.fixture
def client(app):
    return TestClient(app)
