from hayyak import seed
from hayyak.catalog import DEFAULT_MOOD_SUGGESTIONS, DEFAULT_ROUTES, DEFAULT_SUGGESTIONS
from hayyak.storage import get_mood_suggestions_data, get_route_data, get_suggestions_data

from .conftest import InMemoryStore

CATALOG_SIZE = len(DEFAULT_ROUTES) + len(DEFAULT_SUGGESTIONS) + len(DEFAULT_MOOD_SUGGESTIONS)


def test_dry_run_writes_nothing(store):
    assert seed.seed_catalog(store, dry_run=True) == CATALOG_SIZE
    assert store.collections == {}


def test_seeded_store_serves_the_catalog(store):
    assert seed.seed_catalog(store) == CATALOG_SIZE

    routes = get_route_data(store)
    assert routes is not DEFAULT_ROUTES
    assert list(routes) == list(DEFAULT_ROUTES)
    assert list(get_suggestions_data(store)) == list(DEFAULT_SUGGESTIONS)
    assert dict(get_mood_suggestions_data(store)) == dict(DEFAULT_MOOD_SUGGESTIONS)


def test_route_documents_do_not_store_their_id(store):
    seed.seed_catalog(store)

    assert "id" not in store.collections["routes"]["burj_khalifa"]
    assert store.collections["routes"]["burj_khalifa"]["coords"] == [25.1972, 55.2744]


def test_main_closes_the_store(monkeypatch):
    store = InMemoryStore()
    monkeypatch.setattr(seed.DocumentStore, "from_settings", classmethod(lambda cls, settings: store))

    assert seed.main(["--dry-run"]) == 0
    assert store.closed is True
    assert store.collections == {}
