from fastapi import APIRouter

from opening_notifier.api.venue import router as venue_router

api_router = APIRouter()
api_router.include_router(venue_router)
