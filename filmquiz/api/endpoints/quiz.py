from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel

from filmquiz.api.deps import Services, get_services
from filmquiz.core.errors import FilmquizError
from filmquiz.models.movie import Movie
from filmquiz.models.quiz import Question, QuizPhase, QuizState
from filmquiz.services import comparison
from filmquiz.services.quiz import state as quiz
from filmquiz.services.quiz.questions import QUESTIONS, progress_percentage

router = APIRouter(prefix="/api", tags=["quiz"])


class AnswerRequest(BaseModel):
    state: QuizState
    value: str


class StateRequest(BaseModel):
    state: QuizState


class MovieRequest(BaseModel):
    state: QuizState
    movie: Movie


class QuizView(BaseModel):
    """State plus what the renderer needs for the current question."""

    state: QuizState
    question: Question | None = None
    progress: float | None = None


def _view(state: QuizState) -> QuizView:
    question = quiz.current_question(state)
    progress = progress_percentage(state.question_index) if question else None
    return QuizView(state=state, question=question, progress=progress)


@router.get("/questions")
async def get_questions() -> list[Question]:
    return QUESTIONS


@router.get("/quiz/start")
async def start_quiz(services: Services = Depends(get_services)) -> QuizView:
    return _view(quiz.start(config_error=services.config_error()))


@router.post("/quiz/answer")
async def answer_question(body: AnswerRequest, services: Services = Depends(get_services)) -> QuizView:
    try:
        state = quiz.answer(body.state, body.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if state.phase != QuizPhase.LOADING:
        return _view(state)

    try:
        engine = services.engine()
        movies = await engine.recommend(state.answers)
    except FilmquizError as e:
        logger.error(f"Recommendation attempt failed: {e}")
        return _view(quiz.fail(state, e.user_message))
    logger.info(f"Returning {len(movies)} recommendations")
    return _view(quiz.show_results(state, movies))


@router.post("/quiz/back")
async def previous_question(body: StateRequest) -> QuizView:
    return _view(quiz.go_back(body.state))


@router.post("/quiz/reset")
async def reset_quiz(body: StateRequest) -> QuizView:
    return _view(quiz.reset(body.state))


@router.post("/quiz/detail")
async def open_detail(body: MovieRequest, services: Services = Depends(get_services)) -> QuizView:
    movie = await services.enricher().open_detail(body.movie)
    return _view(quiz.open_detail(body.state, movie))


@router.post("/quiz/detail/close")
async def close_detail(body: StateRequest) -> QuizView:
    return _view(quiz.close_detail(body.state))


@router.post("/quiz/comparison")
async def toggle_comparison(body: MovieRequest, services: Services = Depends(get_services)) -> QuizView:
    updated = await comparison.toggle_with_details(
        body.state.comparison,
        body.movie,
        services.enricher().enrich,
        limit=services.settings.COMPARISON_LIMIT,
    )
    return _view(quiz.with_comparison(body.state, updated))


@router.post("/quiz/comparison/clear")
async def clear_comparison(body: StateRequest) -> QuizView:
    return _view(quiz.clear_comparison(body.state))
