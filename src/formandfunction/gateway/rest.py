# SPDX-License-Identifier: Apache-2.0
"""File: src/formandfunction/gateway/rest.py
Project: Form & Function API
Description:
    FastAPI application exposing the beam catalogue and the stock lookup as a
    JSON REST API for frontend consumption.

Routes:
- GET    /                      service descriptor
- GET    /health                liveness payload
- GET    /beams                 list all beams
- GET    /beams/{designation}   one beam, 404 if absent
- POST   /beams                 append a beam, 201
- PUT    /beams/{designation}   full replace, 404 if absent
- DELETE /beams/{designation}   remove, 204 / 404
- GET    /stock                 stock status for ?productId=&postcode=

Errors:
- Every `CatalogueError` is rendered as `{"error", "code", "source"}` with
  the error's HTTP status. Body decode failures are 400 `INVALID_BODY`; the
  decoder's own message is logged, not returned.
- Router misses use the same body: 404 `ROUTE_NOT_FOUND`, 405
  `METHOD_NOT_ALLOWED` (with the `Allow` header kept).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .. import __service_name__, get_package_info
from ..clients.stock import StockLookupClient
from ..config import Settings
from ..exceptions import (
    CatalogueError,
    InternalError,
    InvalidBodyError,
    MissingParameterError,
    RouteError,
)
from ..models import Beam
from ..store import BeamStore
from .middleware import BodyLimitMiddleware, RequestLogMiddleware

logger = logging.getLogger(__name__)

SOURCE = "http_rest_api"

ENDPOINTS = [
    "GET /beams",
    "GET /beams/:sectionDesignation",
    "POST /beams",
    "PUT /beams/:sectionDesignation",
    "DELETE /beams/:sectionDesignation",
    "GET /stock?productId=<product_id>&postcode=<postcode>",
]

router = APIRouter()


# --- Dependencies -------------------------------------------------------------

def get_store(request: Request) -> BeamStore:
    return request.app.state.store


def get_stock_client(request: Request) -> StockLookupClient:
    return request.app.state.stock_client


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _beam_json(beam: Beam) -> Dict[str, Any]:
    return beam.model_dump()


# --- Service endpoints ----------------------------------------------------------

@router.get("/")
async def describe(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    info = get_package_info()
    return {
        "message": __service_name__,
        "version": info["version"],
        "description": info["description"],
        "endpoints": ENDPOINTS,
        "grpc_port": str(settings.grpc_port),
        "http_port": str(settings.http_port),
    }


@router.get("/health")
async def health(
    settings: Settings = Depends(get_settings),
    store: BeamStore = Depends(get_store),
) -> Dict[str, Any]:
    """Liveness check."""
    return {
        "status": "healthy",
        "service": __service_name__,
        "http_port": str(settings.http_port),
        "grpc_port": str(settings.grpc_port),
        "endpoints": "HTTP REST for frontend, gRPC for backend services",
        "beam_count": store.count(),
        "architecture": "Hybrid HTTP/gRPC",
    }


# --- Catalogue ----------------------------------------------------------------

@router.get("/beams")
async def list_beams(store: BeamStore = Depends(get_store)) -> Dict[str, Any]:
    beams = store.list_all()
    return {"beams": [_beam_json(b) for b in beams], "count": len(beams), "source": SOURCE}


@router.get("/beams/{designation}")
async def get_beam(designation: str, store: BeamStore = Depends(get_store)) -> Dict[str, Any]:
    return {"beam": _beam_json(store.get(designation)), "source": SOURCE}


@router.post("/beams", status_code=status.HTTP_201_CREATED)
async def create_beam(beam: Beam, store: BeamStore = Depends(get_store)) -> Dict[str, Any]:
    created = store.create(beam)
    logger.info(f"Created beam {created.section_designation}")
    return {"beam": _beam_json(created), "message": "Beam created successfully", "source": SOURCE}


@router.put("/beams/{designation}")
async def update_beam(
    designation: str, beam: Beam, store: BeamStore = Depends(get_store)
) -> Dict[str, Any]:
    updated = store.replace(designation, beam)
    logger.info(f"Replaced beam {designation}")
    return {"beam": _beam_json(updated), "message": "Beam updated successfully", "source": SOURCE}


@router.delete("/beams/{designation}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beam(designation: str, store: BeamStore = Depends(get_store)) -> Response:
    store.delete(designation)
    logger.info(f"Deleted beam {designation}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Stock --------------------------------------------------------------------

@router.get("/stock")
async def stock_status(
    product_id: Optional[str] = Query(None, alias="productId"),
    postcode: Optional[str] = Query(None),
    stock_client: StockLookupClient = Depends(get_stock_client),
) -> Dict[str, Any]:
    if not product_id:
        raise MissingParameterError("productId")
    if not postcode:
        raise MissingParameterError("postcode")

    result = await stock_client.check_stock(product_id, postcode)
    return {"productId": product_id, "postcode": postcode, "status": result.value, "source": SOURCE}


# --- Error handlers -----------------------------------------------------------

async def catalogue_error_handler(request: Request, exc: CatalogueError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(SOURCE))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error = RouteError(exc.status_code, str(exc.detail))
    logger.warning(f"{request.method} {request.url.path} failed: {error}")
    return JSONResponse(
        status_code=error.status_code, content=error.to_payload(SOURCE), headers=exc.headers
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = InvalidBodyError(str(exc.errors()))
    logger.warning(f"{request.method} {request.url.path} body rejected: {error.message}")
    return JSONResponse(status_code=error.status_code, content=error.to_payload(SOURCE))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = InternalError(repr(exc))
    logger.critical(f"Unexpected error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=error.status_code, content=error.to_payload(SOURCE))


def create_app(
    store: Optional[BeamStore] = None,
    stock_client: Optional[StockLookupClient] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the REST application around a shared store and stock client."""
    app = FastAPI(title=__service_name__, version=get_package_info()["version"])
    app.state.store = store if store is not None else BeamStore.seeded()
    app.state.stock_client = stock_client if stock_client is not None else StockLookupClient()
    app.state.settings = settings if settings is not None else Settings()

    app.add_middleware(BodyLimitMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "HEAD", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization", "X-Requested-With"],
        allow_credentials=False,
    )
    app.add_middleware(RequestLogMiddleware)

    app.add_exception_handler(CatalogueError, catalogue_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router)
    return app
