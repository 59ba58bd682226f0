"""
Quiz state machine.

Every transition is a pure function from one ``QuizState`` to the next.
Network work happens outside: the caller runs the pipeline while the state
is ``loading`` and feeds the outcome back through ``show_results`` or ``fail``.
"""

from filmquiz.models.movie import Movie
from filmquiz.models.quiz import Question, QuizPhase, QuizState
from filmquiz.services.quiz.questions import QUESTIONS


def start(config_error: str | None = None) -> QuizState:
    if config_error:
        return QuizState(phase=QuizPhase.ERROR, error=config_error)
    return QuizState()


def current_question(state: QuizState) -> Question | None:
    if state.phase != QuizPhase.QUESTION:
        return None
    return QUESTIONS[state.question_index]


def answer(state: QuizState, value: str) -> QuizState:
    """Record the answer to the current question and advance."""
    question = current_question(state)
    if question is None:
        raise ValueError(f"Cannot answer a question in phase '{state.phase.value}'")
    if not question.has_option(value):
        raise ValueError(f"'{value}' is not an option for question '{question.id}'")

    answers = {**state.answers, question.id: value}
    if state.question_index < len(QUESTIONS) - 1:
        return state.model_copy(update={"answers": answers, "question_index": state.question_index + 1})
    return state.model_copy(update={"answers": answers, "phase": QuizPhase.LOADING, "error": None})


def go_back(state: QuizState) -> QuizState:
    if state.phase != QuizPhase.QUESTION or state.question_index == 0:
        return state
    return state.model_copy(update={"question_index": state.question_index - 1})


def show_results(state: QuizState, movies: list[Movie]) -> QuizState:
    return state.model_copy(update={"phase": QuizPhase.RESULTS, "results": movies, "error": None})


def fail(state: QuizState, message: str) -> QuizState:
    return state.model_copy(update={"phase": QuizPhase.ERROR, "error": message})


def open_detail(state: QuizState, movie: Movie) -> QuizState:
    return state.model_copy(update={"phase": QuizPhase.DETAIL, "selected": movie})


def close_detail(state: QuizState) -> QuizState:
    return state.model_copy(update={"phase": QuizPhase.RESULTS, "selected": None})


def reset(state: QuizState) -> QuizState:
    """Start over. The comparison set survives a restart."""
    return QuizState(comparison=state.comparison)


def with_comparison(state: QuizState, movies: list[Movie]) -> QuizState:
    return state.model_copy(update={"comparison": movies})


def clear_comparison(state: QuizState) -> QuizState:
    return state.model_copy(update={"comparison": []})
