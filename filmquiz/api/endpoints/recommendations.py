from fastapi import APIRouter, Depends
from pydantic import BaseModel

from filmquiz.api.deps import Services, get_services
from filmquiz.models.movie import Movie
from filmquiz.models.quiz import AnswerSet
from filmquiz.services.share import SharePayload, build_share_payload

router = APIRouter(prefix="/api", tags=["recommendations"])


class ShareRequest(BaseModel):
    movies: list[Movie]
    origin: str | None = None


@router.post("/recommendations")
async def get_recommendations(answers: AnswerSet, services: Services = Depends(get_services)) -> list[Movie]:
    """
    Run the recommendation pipeline for a completed answer set.

    Configuration and discovery failures propagate to the app's error handlers.
    """
    return await services.engine().recommend(answers)


@router.get("/movies/{movie_id}")
async def get_movie(movie_id: int, services: Services = Depends(get_services)) -> Movie:
    """Detail view for a single movie; failed lookups leave their fields empty."""
    return await services.enricher().open_detail(Movie(id=movie_id))


@router.post("/share")
async def share_recommendations(body: ShareRequest, services: Services = Depends(get_services)) -> SharePayload:
    return build_share_payload(body.movies, body.origin or services.settings.HOST_NAME)
