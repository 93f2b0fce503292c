"""Validation API: validate JSON and TOML documents against a schema."""

from fastapi import APIRouter, HTTPException

import structlog

from schemalab.config import get_settings
from schemalab.models.requests import ValidateRequest
from schemalab.models.responses import ValidateResponse
from schemalab.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()


def _check_size(request: ValidateRequest) -> None:
    limit = get_settings().MAX_DOCUMENT_BYTES
    size = len(request.document.encode("utf-8")) + len(request.schema_text.encode("utf-8"))
    if size > limit:
        logger.warning("document_too_large", size=size, limit=limit)
        raise HTTPException(status_code=413, detail=f"Document and schema exceed {limit} bytes")


@router.post("/validate/json", response_model=ValidateResponse)
def validate_json_document(request: ValidateRequest):
    """Validate a JSON document. Always 200; `valid` and `errors` carry the outcome."""
    _check_size(request)
    result = validation_engine.validate_json(request.document, request.schema_text)
    return ValidateResponse.from_result(result)


@router.post("/validate/toml", response_model=ValidateResponse)
def validate_toml_document(request: ValidateRequest):
    """Validate a TOML document against a JSON-encoded schema."""
    _check_size(request)
    result = validation_engine.validate_toml(request.document, request.schema_text)
    return ValidateResponse.from_result(result)
