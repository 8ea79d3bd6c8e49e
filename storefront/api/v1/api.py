"""
V1 API router aggregator: wires all endpoint modules together.
"""

from fastapi import APIRouter

from storefront.api.v1.endpoints import health, products, users

api_router = APIRouter()

# User CRUD, lookups and searches
api_router.include_router(users.router)

# Product CRUD, catalogue filters and stock patch
api_router.include_router(products.router)

# Liveness / readiness probes
api_router.include_router(health.router)
