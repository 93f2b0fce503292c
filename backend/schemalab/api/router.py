"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from schemalab.api.health import router as health_router
from schemalab.api.samples import router as samples_router
from schemalab.api.validation import router as validation_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Document validation
api_router.include_router(validation_router, tags=["Validation"])

# Bundled samples
api_router.include_router(samples_router, tags=["Samples"])
