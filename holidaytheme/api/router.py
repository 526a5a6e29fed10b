"""
API router - aggregates all route modules.
"""
from fastapi import APIRouter
from holidaytheme.api.holidays import router as holidays_router
from holidaytheme.api.health import router as health_router

api_router = APIRouter()
api_router.include_router(holidays_router)
api_router.include_router(health_router)
