"""Storefront draft order service entrypoint."""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from packages.shared.schemas.draft_order_v1 import DraftOrderFailedV1
from starlette.exceptions import HTTPException as StarletteHTTPException

from services.storefront.app.routers.draft_order import router as draft_order_router

logger = logging.getLogger("microsite")

app = FastAPI(title="Storefront Draft Orders")


def _allowed_origins() -> list[str]:
    raw = os.getenv("MICROSITE_ALLOWED_ORIGINS", "*")
    return [item.strip() for item in raw.split(",") if item.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(draft_order_router)


# Starlette's base class also covers routing 404/405 and FastAPI's HTTPException.
@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = DraftOrderFailedV1(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid draft order request: %s", exc.errors())
    body = DraftOrderFailedV1(error="Invalid order request", detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
