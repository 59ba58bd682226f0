from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from filmquiz.models.movie import Movie

# question id -> selected option value
AnswerSet = dict[str, str]


class QuestionOption(BaseModel):
    value: str
    label: str


class Question(BaseModel):
    """A single quiz question with its ordered options."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    options: list[QuestionOption]

    def has_option(self, value: str) -> bool:
        return any(option.value == value for option in self.options)


class QuizPhase(str, Enum):
    QUESTION = "question"
    LOADING = "loading"
    RESULTS = "results"
    DETAIL = "detail"
    ERROR = "error"


class QuizState(BaseModel):
    """
    Complete state of one quiz session.

    The server keeps none of it; clients send the state back with every event.
    """

    model_config = ConfigDict(frozen=True)

    phase: QuizPhase = QuizPhase.QUESTION
    question_index: int = 0
    answers: AnswerSet = Field(default_factory=dict)
    results: list[Movie] = Field(default_factory=list)
    selected: Movie | None = None
    comparison: list[Movie] = Field(default_factory=list)
    error: str | None = None
