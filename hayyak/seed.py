"""Write the built-in Dubai catalog into Firestore."""
from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .catalog import DEFAULT_MOOD_SUGGESTIONS, DEFAULT_ROUTES, DEFAULT_SUGGESTIONS
from .config import (
    MOOD_SUGGESTIONS_COLLECTION,
    ROUTES_COLLECTION,
    SUGGESTIONS_COLLECTION,
    load_settings,
)
from .storage import DocumentStore

logger = logging.getLogger(__name__)


def catalog_documents() -> Iterable[Tuple[str, str, Dict[str, Any]]]:
    """Yield ``(collection, document_id, fields)`` for every catalog record."""
    for collection, records in ((ROUTES_COLLECTION, DEFAULT_ROUTES), (SUGGESTIONS_COLLECTION, DEFAULT_SUGGESTIONS)):
        for record in records:
            yield collection, record.id, record.model_dump(mode="json", exclude={"id"})
    for mood, category in DEFAULT_MOOD_SUGGESTIONS.items():
        yield MOOD_SUGGESTIONS_COLLECTION, mood, category.model_dump(mode="json")


def seed_catalog(store: DocumentStore, dry_run: bool = False) -> int:
    written = 0
    for collection, doc_id, fields in catalog_documents():
        if dry_run:
            logger.info("Would write %s/%s", collection, doc_id)
        else:
            store.replace_document(collection, doc_id, fields)
            logger.info("Wrote %s/%s", collection, doc_id)
        written += 1
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed Firestore with the built-in Dubai catalog.")
    parser.add_argument("--dry-run", action="store_true", help="log the documents without writing them")
    args = parser.parse_args(argv)

    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    store = DocumentStore.from_settings(settings)
    try:
        count = seed_catalog(store, dry_run=args.dry_run)
    finally:
        store.close()
    logger.info("%s %d catalog documents", "Checked" if args.dry_run else "Seeded", count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
