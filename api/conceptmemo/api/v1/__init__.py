"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from conceptmemo.api.v1.endpoints import session, concepts, words, public

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(session.router)
api_router.include_router(concepts.router)
api_router.include_router(words.router)
api_router.include_router(public.router)
