from pydantic import BaseModel

from filmquiz.models.movie import Movie

SHARE_TITLE = "My Movie Recommendations"
SHARE_HEADER = "Movies Filmquiz picked for me:"
SHARE_FOOTER = "Try Filmquiz:"
CLIPBOARD_CONFIRMATION = "Movie list copied to clipboard!"


class SharePayload(BaseModel):
    """
    What the client shares.

    Clients hand ``title``/``text``/``url`` to a native share sheet when they
    have one; otherwise they copy ``text`` to the clipboard and show
    ``confirmation``.
    """

    title: str
    text: str
    url: str
    confirmation: str = CLIPBOARD_CONFIRMATION


def build_share_text(movies: list[Movie], origin: str) -> str:
    lines = [f"{rank}. {movie.title} ({movie.release_year or 'Unknown'})" for rank, movie in enumerate(movies, 1)]
    return f"{SHARE_HEADER}\n\n" + "\n".join(lines) + f"\n\n{SHARE_FOOTER} {origin}"


def build_share_payload(movies: list[Movie], origin: str) -> SharePayload:
    return SharePayload(title=SHARE_TITLE, text=build_share_text(movies, origin), url=origin)
