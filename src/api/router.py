from fastapi import APIRouter

from src.api.feedback.router import router as feedback_router
from src.api.health.router import router as health_router
from src.api.history.router import router as history_router
from src.api.identify.router import router as identify_router
from src.api.search.router import router as search_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(identify_router)
api_router.include_router(search_router)
api_router.include_router(history_router)
api_router.include_router(feedback_router)
