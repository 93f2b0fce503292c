"""Samples API: list, read and validate the bundled sample documents."""

from fastapi import APIRouter, HTTPException

import structlog

from schemalab.models.responses import SampleResponse, ValidateResponse
from schemalab.samples import (
    list_samples,
    load_sample_bytes,
    load_sample_document,
    load_sample_schema,
    schema_for,
)
from schemalab.samples.loader import sample_format
from schemalab.validators import validation_engine
from schemalab.validators.adapters import ParseError
from schemalab.validators.models import ValidationResult

logger = structlog.get_logger()

router = APIRouter()


def _require_sample(name: str) -> str:
    schema_name = schema_for(name)
    if schema_name is None:
        raise HTTPException(status_code=404, detail=f"Sample '{name}' not found")
    return schema_name


@router.get("/samples", response_model=list[SampleResponse])
def get_samples():
    """List bundled sample documents."""
    return [
        SampleResponse(name=s["name"], schema_name=s["schema"], format=s["format"])
        for s in list_samples()
    ]


@router.get("/samples/{name}", response_model=SampleResponse)
def get_sample(name: str):
    """Sample document content."""
    schema_name = _require_sample(name)
    try:
        content = load_sample_bytes(name)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Sample file for '{name}' is missing")
    return SampleResponse(
        name=name,
        schema_name=schema_name,
        format=sample_format(name),
        content=content.decode("utf-8"),
    )


@router.post("/samples/{name}/validate", response_model=ValidateResponse)
def validate_sample(name: str):
    """Validate a sample document against its bundled schema."""
    schema_name = _require_sample(name)
    format = sample_format(name)
    try:
        document = load_sample_document(name)
        schema = load_sample_schema(schema_name)
    except FileNotFoundError as e:
        logger.warning("sample_missing", sample=name, error=str(e))
        raise HTTPException(status_code=404, detail=f"Sample file for '{name}' is missing")
    except ParseError as e:
        logger.warning("sample_parse_failed", sample=name, source=e.source, error=e.message)
        return ValidateResponse.from_result(ValidationResult.parse_failure(format, e.message))

    result = validation_engine.validate_parsed(format, document, schema)
    logger.info("sample_validated", sample=name, valid=result.ok)
    return ValidateResponse.from_result(result)
