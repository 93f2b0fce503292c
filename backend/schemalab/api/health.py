"""Health check endpoint."""

import time
from fastapi import APIRouter

from schemalab import __version__
from schemalab.models.responses import HealthResponse, HealthDependency
from schemalab.samples import load_sample_schema
from schemalab.samples.loader import SAMPLE_SCHEMAS
from schemalab.validators.adapters import ParseError

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """System health check with dependency status."""
    dependencies = {}

    # Check sample fixtures
    try:
        start = time.time()
        for name in SAMPLE_SCHEMAS:
            load_sample_schema(name)
        latency = (time.time() - start) * 1000
        dependencies["samples"] = HealthDependency(status="healthy", latency_ms=round(latency, 2))
    except (OSError, ParseError) as e:
        dependencies["samples"] = HealthDependency(status="degraded", message=str(e))

    # Overall status
    if all(d.status == "healthy" for d in dependencies.values()):
        status = "healthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
