from filmquiz.models.quiz import Question, QuestionOption
from filmquiz.services.tmdb.genre import QUIZ_GENRE_IDS, movie_genres


def _options(*pairs: tuple[str, str]) -> list[QuestionOption]:
    return [QuestionOption(value=value, label=label) for value, label in pairs]


QUESTIONS: list[Question] = [
    Question(
        id="mood",
        text="How are you feeling right now?",
        options=_options(
            ("happy", "Happy and cheerful"),
            ("sad", "Sad or thoughtful"),
            ("excited", "Excited and energetic"),
            ("relaxed", "Calm and relaxed"),
            ("stressed", "Stressed or tense"),
        ),
    ),
    Question(
        id="genre",
        text="Which genre do you prefer?",
        options=_options(*[(str(genre_id), movie_genres[genre_id]) for genre_id in QUIZ_GENRE_IDS]),
    ),
    Question(
        id="length",
        text="How long should the movie be?",
        options=_options(
            ("short", "Short (under 90 minutes)"),
            ("medium", "Medium (90-120 minutes)"),
            ("long", "Long (over 120 minutes)"),
        ),
    ),
    Question(
        id="company",
        text="Who are you watching with?",
        options=_options(
            ("alone", "Alone"),
            ("partner", "With my partner"),
            ("family", "With my family"),
            ("friends", "With my friends"),
        ),
    ),
    Question(
        id="era",
        text="Which era do you prefer?",
        options=_options(
            ("new", "New releases (last 5 years)"),
            ("recent", "Recent (5-15 years)"),
            ("classic", "Classics (15+ years)"),
            ("any", "Doesn't matter"),
        ),
    ),
]


def progress_percentage(question_index: int) -> float:
    return ((question_index + 1) / len(QUESTIONS)) * 100
