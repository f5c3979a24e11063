"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from flashdeck.api.v1.endpoints import (
    decks, cards, sessions, study, explanations, preferences
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(decks.router)
api_router.include_router(cards.router)
api_router.include_router(sessions.router)
api_router.include_router(study.router)
api_router.include_router(explanations.router)
api_router.include_router(preferences.router)
