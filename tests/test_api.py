from fastapi.testclient import TestClient
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions

from hayyak.main import STORE_UNAVAILABLE, create_app

from .conftest import InMemoryStore


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_routes_fall_back_to_catalog(client):
    response = client.get("/api/routes")

    assert response.status_code == 200
    routes = response.json()
    assert [r["id"] for r in routes] == ["burj_khalifa", "dubai_mall", "lunch_timeout", "fountain_show"]
    assert routes[0]["coords"] == [25.1972, 55.2744]
    assert routes[0]["crowdLevel"] == 95


def test_suggestions_from_store(client, store):
    store.replace_document(
        "suggestions",
        "metro",
        {"id": "ignored", "title": "Metro running", "info": "Red line on time.", "icon": "fa-train", "realTime": True},
    )

    response = client.get("/api/suggestions")

    assert response.json() == [
        {
            "id": "metro",
            "title": "Metro running",
            "info": "Red line on time.",
            "icon": "fa-train",
            "realTime": True,
            "rating": None,
            "coords": None,
        }
    ]


def test_mood_suggestions_fall_back_to_catalog(client):
    moods = client.get("/api/mood-suggestions").json()

    assert len(moods) == 8
    sad = moods["sad-lonely"]
    assert [p["name"] for p in sad["places"]] == [
        "Jumeirah Public Beach",
        "Ailuromania Cat Cafe",
        "A quiet coffee shop",
    ]
    assert sad["places"][2]["coords"] is None


def test_restaurants(client):
    names = [r["name"] for r in client.get("/api/restaurants").json()]

    assert names == ["At.mosphere, Burj Khalifa", "Pierchic", "Zuma Dubai"]


def test_unknown_path_uses_error_body(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_store_failure_is_reported_upstream(settings, advisor):
    class DownStore(InMemoryStore):
        def stream(self, collection):
            raise google_exceptions.ServiceUnavailable("Firestore unreachable")

    client = TestClient(create_app(settings=settings, store=DownStore(), advisor=advisor))

    response = client.get("/api/routes")

    assert response.status_code == 502
    assert "Firestore unreachable" in response.json()["error"]


def test_missing_credentials_use_error_body(settings, advisor):
    class UnconfiguredStore(InMemoryStore):
        def stream(self, collection):
            raise google_auth_exceptions.DefaultCredentialsError("Your default credentials were not found.")

    client = TestClient(create_app(settings=settings, store=UnconfiguredStore(), advisor=advisor))

    response = client.get("/api/routes")

    assert response.status_code == 500
    assert response.json() == {"error": STORE_UNAVAILABLE}


def test_unexpected_errors_use_error_body(settings, advisor):
    class BrokenStore(InMemoryStore):
        def stream(self, collection):
            raise KeyError("collection")

    client = TestClient(
        create_app(settings=settings, store=BrokenStore(), advisor=advisor),
        raise_server_exceptions=False,
    )

    response = client.get("/api/suggestions")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_shutdown_closes_store(settings, store, advisor, model_client):
    app = create_app(settings=settings, store=store, advisor=advisor)

    with TestClient(app) as client:
        client.get("/api/health")
        assert store.closed is False

    assert store.closed is True
    model_client.close.assert_called_once_with()


def test_cors_allows_configured_origin(client):
    response = client.get("/api/health", headers={"Origin": "http://localhost:5173"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
