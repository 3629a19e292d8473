from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from google.cloud import firestore
from pydantic import BaseModel, ValidationError

from .catalog import (
    DEFAULT_MOOD_SUGGESTIONS,
    DEFAULT_ROUTES,
    DEFAULT_SUGGESTIONS,
    LUXURY_RESTAURANTS,
)
from .config import (
    MOOD_SUGGESTIONS_COLLECTION,
    ROUTES_COLLECTION,
    SUGGESTIONS_COLLECTION,
    Settings,
)
from .models import MoodCategory, Restaurant, RouteStop, Suggestion

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DocumentStore:
    """Thin wrapper over a Firestore client.

    The underlying client is created on first use; missing credentials surface
    on the first query rather than at startup.
    """

    def __init__(
        self,
        project: Optional[str] = None,
        database: Optional[str] = None,
        client: Optional[firestore.Client] = None,
    ) -> None:
        self._project = project
        self._database = database
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocumentStore":
        return cls(project=settings.gcp_project_id, database=settings.firestore_database)

    def _get_client(self) -> firestore.Client:
        if self._client is None:
            kwargs: Dict[str, Any] = {}
            if self._project:
                kwargs["project"] = self._project
            if self._database:
                kwargs["database"] = self._database
            self._client = firestore.Client(**kwargs)
        return self._client

    def stream(self, collection: str) -> Iterator[Tuple[str, Dict[str, Any]]]:
        """Yield ``(document_id, fields)`` for every document in ``collection``."""
        for snapshot in self._get_client().collection(collection).stream():
            yield snapshot.id, snapshot.to_dict() or {}

    def replace_document(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> None:
        self._get_client().collection(collection).document(doc_id).set(fields)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


def _fetch_records(
    store: DocumentStore,
    collection: str,
    model: Type[RecordT],
    fallback: Sequence[RecordT],
) -> Sequence[RecordT]:
    records: List[RecordT] = []
    seen = 0
    for doc_id, fields in store.stream(collection):
        seen += 1
        # the document id is applied last so it wins over a stored "id" field
        data = {**fields, "id": doc_id}
        try:
            records.append(model.model_validate(data))
        except ValidationError as exc:
            logger.warning("Skipping malformed %s document %r: %s", collection, doc_id, exc)
    if seen == 0:
        logger.warning("No documents found in Firestore collection %r. Using default data.", collection)
        return fallback
    return records


def get_route_data(store: DocumentStore) -> Sequence[RouteStop]:
    return _fetch_records(store, ROUTES_COLLECTION, RouteStop, DEFAULT_ROUTES)


def get_suggestions_data(store: DocumentStore) -> Sequence[Suggestion]:
    return _fetch_records(store, SUGGESTIONS_COLLECTION, Suggestion, DEFAULT_SUGGESTIONS)


def get_mood_suggestions_data(store: DocumentStore) -> Mapping[str, MoodCategory]:
    """Mood categories keyed by document id (the mood tag)."""
    suggestions: Dict[str, MoodCategory] = {}
    seen = 0
    for doc_id, fields in store.stream(MOOD_SUGGESTIONS_COLLECTION):
        seen += 1
        try:
            suggestions[doc_id] = MoodCategory.model_validate(fields)
        except ValidationError as exc:
            logger.warning("Skipping malformed mood category %r: %s", doc_id, exc)
    if seen == 0:
        logger.warning("No mood suggestions found in Firestore. Using default data.")
        return DEFAULT_MOOD_SUGGESTIONS
    return suggestions


def get_luxury_restaurants() -> Sequence[Restaurant]:
    return LUXURY_RESTAURANTS
