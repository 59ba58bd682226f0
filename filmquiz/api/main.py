from fastapi import APIRouter

from .endpoints.health import router as health_router
from .endpoints.quiz import router as quiz_router
from .endpoints.recommendations import router as recommendations_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Filmquiz API is running"}


api_router.include_router(health_router)
api_router.include_router(quiz_router)
api_router.include_router(recommendations_router)
