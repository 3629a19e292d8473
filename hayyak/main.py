# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from starlette.exceptions import HTTPException as StarletteHTTPException

from .advisor import MESSAGE_REQUIRED, MoodAdvisor
from .advisor import router as advisor_router
from .config import API_PREFIX, Settings, load_settings
from .models import MoodCategory, Restaurant, RouteStop, Suggestion
from .storage import (
    DocumentStore,
    get_luxury_restaurants,
    get_mood_suggestions_data,
    get_route_data,
    get_suggestions_data,
)

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE = "The data store is not available. Check the service credentials."

router = APIRouter()


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


@router.get(f"{API_PREFIX}/health")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(f"{API_PREFIX}/routes", response_model=List[RouteStop])
def list_routes(store: DocumentStore = Depends(get_store)):
    return list(get_route_data(store))


@router.get(f"{API_PREFIX}/suggestions", response_model=List[Suggestion])
def list_suggestions(store: DocumentStore = Depends(get_store)):
    return list(get_suggestions_data(store))


@router.get(f"{API_PREFIX}/mood-suggestions", response_model=Dict[str, MoodCategory])
def list_mood_suggestions(store: DocumentStore = Depends(get_store)):
    return dict(get_mood_suggestions_data(store))


@router.get(f"{API_PREFIX}/restaurants", response_model=List[Restaurant])
def list_restaurants():
    return list(get_luxury_restaurants())


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": MESSAGE_REQUIRED}, status_code=400)


async def _store_error(request: Request, exc: google_exceptions.GoogleAPIError) -> JSONResponse:
    logger.error("Firestore request failed: %s", exc, exc_info=exc)
    return JSONResponse({"error": str(exc)}, status_code=502)


async def _auth_error(request: Request, exc: google_auth_exceptions.GoogleAuthError) -> JSONResponse:
    logger.error("Google credentials unavailable for %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse({"error": STORE_UNAVAILABLE}, status_code=500)


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse({"error": "Internal Server Error"}, status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    advisor: Optional[MoodAdvisor] = None,
) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.store.close()
        app.state.advisor.close()

    app = FastAPI(title="Hayyak Dubai Assistant API", version="0.1.0", lifespan=lifespan)
    app.state.store = store or DocumentStore.from_settings(settings)
    app.state.advisor = advisor or MoodAdvisor.from_settings(settings)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(google_exceptions.GoogleAPIError, _store_error)
    app.add_exception_handler(google_auth_exceptions.GoogleAuthError, _auth_error)
    app.add_exception_handler(Exception, _unexpected_error)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    app.include_router(advisor_router)
    return app


def run() -> None:
    import uvicorn

    uvicorn.run(
        "hayyak.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
