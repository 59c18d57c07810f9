"""Narrative Engine routes.

POST /api/generate-narrative runs the four-stage pipeline. The body is read as
raw JSON rather than a pydantic model so that field errors come back in the
pipeline's own 400 envelope instead of FastAPI's 422.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.logging_config import bind_request_context
from app.services.narrative_service import NarrativeService
from narrative_engine.pipeline import generation_error_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["narrative"])

_narrative_service: NarrativeService | None = None


def _get_narrative_service() -> NarrativeService:
    """Lazy-init the narrative service."""
    global _narrative_service
    if _narrative_service is None:
        _narrative_service = NarrativeService()
    return _narrative_service


# --- Response schemas (OpenAPI documentation) ---


class NarrativeBundleModel(BaseModel):
    short_description: str
    long_ritual_description: str
    ritual_intention_prompt: str
    care_use_note: str
    alt_text: str
    one_line_drop_tagline: str = Field(description="Empty when no drop_name was given.")


class NarrativeSuccessResponse(BaseModel):
    success: bool = True
    data: NarrativeBundleModel


class ErrorBody(BaseModel):
    type: str = Field(description="validation, style_violation or generation")
    message: str
    details: list[dict[str, Any]]


class NarrativeErrorResponse(BaseModel):
    success: bool = False
    error: ErrorBody


class NarrativeOptionsResponse(BaseModel):
    item_type: list[str]
    primary_symbol: list[str]
    emotional_core: list[str]
    energy_tone: list[str]
    limited: list[str]
    intended_use: list[str]


# --- Endpoints ---


@router.post(
    "/api/generate-narrative",
    response_model=NarrativeSuccessResponse,
    summary="Generate on-brand product copy",
    responses={
        400: {"model": NarrativeErrorResponse, "description": "Input validation failed"},
        422: {"model": NarrativeErrorResponse, "description": "Generated copy violates style rules"},
        500: {"model": NarrativeErrorResponse, "description": "Unexpected generation failure"},
    },
)
async def generate_narrative(request: Request) -> JSONResponse:
    """Validate the request, generate, apply tone and check the style charter."""
    try:
        body = await request.json()
        status_code, payload = _get_narrative_service().generate(body)
    except Exception:
        logger.exception("Narrative generation failed")
        bind_request_context(narrative_outcome="generation")
        status_code, payload = generation_error_response()
    return JSONResponse(status_code=status_code, content=payload)


@router.get(
    "/api/narrative/options",
    response_model=NarrativeOptionsResponse,
    summary="Allowed values for the enum fields",
)
def narrative_options() -> NarrativeOptionsResponse:
    return NarrativeOptionsResponse(**_get_narrative_service().options())
