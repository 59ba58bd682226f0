import pytest
from fastapi.testclient import TestClient

from filmquiz.api.deps import Services, get_services
from filmquiz.core.app import app
from filmquiz.core.config import Settings
from filmquiz.core.errors import CATALOG_ERROR_MESSAGE, CONFIGURATION_ERROR_MESSAGE

ANSWERS = ["relaxed", "35", "medium", "friends", "any"]


@pytest.fixture
def catalog(fake_tmdb):
    fake_tmdb.discover_pages = {
        1: [{"id": 1, "title": "One", "release_date": "2010-01-01", "vote_average": 6.5}],
        2: [{"id": 2, "title": "Two", "release_date": "2012-01-01", "vote_average": 8.1}],
        3: [{"id": 3, "title": "Three", "release_date": "2014-01-01", "vote_average": 7.3}],
    }
    fake_tmdb.details = {
        1: {"id": 1, "title": "One", "runtime": 100, "genres": [{"id": 35, "name": "Comedy"}]},
        2: {"id": 2, "title": "Two", "runtime": 150, "genres": []},
        3: {"id": 3, "title": "Three", "runtime": None, "genres": []},
    }
    fake_tmdb.credits[1] = {"cast": [{"name": "Lead", "character": "Hero"}], "crew": [{"name": "D", "job": "Director"}]}
    fake_tmdb.similar[1] = {"results": [{"id": 9, "title": "Nine"}]}
    fake_tmdb.videos[1] = {"results": [{"key": "xyz", "site": "YouTube"}]}
    return fake_tmdb


def _client(settings: Settings, fake_tmdb) -> TestClient:
    services = Services(settings, transport=fake_tmdb.transport)
    app.dependency_overrides[get_services] = lambda: services
    return TestClient(app)


@pytest.fixture
def client(test_settings, catalog):
    with _client(test_settings, catalog) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(fake_tmdb):
    with _client(Settings(TMDB_API_KEY=None, _env_file=None), fake_tmdb) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _play(client, answers=ANSWERS) -> dict:
    view = client.get("/api/quiz/start").json()
    for value in answers:
        response = client.post("/api/quiz/answer", json={"state": view["state"], "value": value})
        assert response.status_code == 200
        view = response.json()
    return view


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_questions(client):
    questions = client.get("/api/questions").json()
    assert [q["id"] for q in questions] == ["mood", "genre", "length", "company", "era"]


def test_start_returns_first_question(client):
    view = client.get("/api/quiz/start").json()
    assert view["state"]["phase"] == "question"
    assert view["question"]["id"] == "mood"
    assert view["progress"] == 20


def test_full_quiz_returns_results(client, catalog):
    view = _play(client)

    assert view["state"]["phase"] == "results"
    results = view["state"]["results"]
    # runtime 150 is outside the medium bucket; missing runtime passes
    assert [m["id"] for m in results] == [3, 1]
    assert len(catalog.discover_requests()) == 3


def test_invalid_answer_is_rejected(client):
    view = client.get("/api/quiz/start").json()
    response = client.post("/api/quiz/answer", json={"state": view["state"], "value": "nope"})
    assert response.status_code == 422


def test_back_and_reset(client):
    view = client.get("/api/quiz/start").json()
    view = client.post("/api/quiz/answer", json={"state": view["state"], "value": "happy"}).json()
    assert view["question"]["id"] == "genre"

    view = client.post("/api/quiz/back", json={"state": view["state"]}).json()
    assert view["question"]["id"] == "mood"

    view = client.post("/api/quiz/reset", json={"state": view["state"]}).json()
    assert view["state"]["answers"] == {}


def test_discovery_failure_produces_error_state(client, catalog):
    catalog.failing.add("/discover/movie")
    view = _play(client)
    assert view["state"]["phase"] == "error"
    assert view["state"]["error"] == CATALOG_ERROR_MESSAGE


def test_detail_and_close(client):
    state = _play(client)["state"]
    movie = state["results"][1]

    view = client.post("/api/quiz/detail", json={"state": state, "movie": movie}).json()
    assert view["state"]["phase"] == "detail"
    selected = view["state"]["selected"]
    assert selected["director"] == "D"
    assert selected["cast"] == [{"name": "Lead", "character": "Hero"}]
    assert selected["videos"][0]["key"] == "xyz"

    view = client.post("/api/quiz/detail/close", json={"state": view["state"]}).json()
    assert view["state"]["phase"] == "results"
    assert view["state"]["selected"] is None


def test_comparison_toggle_enriches_and_caps(client):
    state = _play(client)["state"]
    first, second = state["results"]

    state = client.post("/api/quiz/comparison", json={"state": state, "movie": second}).json()["state"]
    assert [m["id"] for m in state["comparison"]] == [1]
    assert state["comparison"][0]["director"] == "D"

    # movie 3 has no credits, so enrichment falls back to the basic record
    state = client.post("/api/quiz/comparison", json={"state": state, "movie": first}).json()["state"]
    assert [m["id"] for m in state["comparison"]] == [1, 3]
    assert state["comparison"][1]["director"] is None

    extra = {"id": 42, "title": "Extra", "vote_average": 5.0}
    state = client.post("/api/quiz/comparison", json={"state": state, "movie": extra}).json()["state"]
    assert [m["id"] for m in state["comparison"]] == [1, 3]

    state = client.post("/api/quiz/comparison", json={"state": state, "movie": first}).json()["state"]
    assert [m["id"] for m in state["comparison"]] == [1]

    state = client.post("/api/quiz/comparison/clear", json={"state": state}).json()["state"]
    assert state["comparison"] == []


def test_recommendations_endpoint(client):
    answers = dict(zip(["mood", "genre", "length", "company", "era"], ANSWERS))
    movies = client.post("/api/recommendations", json=answers).json()
    assert [m["id"] for m in movies] == [3, 1]


def test_recommendations_endpoint_discovery_failure(client, catalog):
    catalog.failing.add("/discover/movie")
    response = client.post("/api/recommendations", json={"genre": "35"})
    assert response.status_code == 502
    assert response.json() == {"detail": CATALOG_ERROR_MESSAGE}


def test_movie_detail_endpoint(client):
    movie = client.get("/api/movies/1").json()
    assert movie["title"] == "One"
    assert movie["runtime"] == 100
    assert movie["similar_movies"][0]["id"] == 9


def test_share_endpoint(client):
    movies = [{"id": 1, "title": "One", "release_date": "2010-01-01"}]
    payload = client.post("/api/share", json={"movies": movies}).json()
    assert payload["url"] == "https://filmquiz.test"
    assert "1. One (2010)" in payload["text"]
    assert payload["confirmation"] == "Movie list copied to clipboard!"


def test_missing_api_key_blocks_before_any_request(unconfigured_client, fake_tmdb):
    view = unconfigured_client.get("/api/quiz/start").json()
    assert view["state"]["phase"] == "error"
    assert view["state"]["error"] == CONFIGURATION_ERROR_MESSAGE
    assert fake_tmdb.requests == []


def test_missing_api_key_on_final_answer(unconfigured_client, fake_tmdb):
    state = {}
    for value in ANSWERS:
        state = unconfigured_client.post("/api/quiz/answer", json={"state": state, "value": value}).json()["state"]

    assert state["phase"] == "error"
    assert state["error"] == CONFIGURATION_ERROR_MESSAGE
    assert fake_tmdb.requests == []


def test_missing_api_key_on_recommendations_endpoint(unconfigured_client, fake_tmdb):
    response = unconfigured_client.post("/api/recommendations", json={"genre": "35"})
    assert response.status_code == 503
    assert response.json() == {"detail": CONFIGURATION_ERROR_MESSAGE}
    assert fake_tmdb.requests == []


@pytest.mark.parametrize(
    "body",
    ["<html>gateway</html>", '{"results": [{"id": 1, "vote_average": null}]}'],
)
def test_malformed_discovery_response_produces_error_state(client, catalog, body):
    catalog.raw["/discover/movie"] = body
    view = _play(client)
    assert view["state"]["phase"] == "error"
    assert view["state"]["error"] == CATALOG_ERROR_MESSAGE


def test_movie_links_are_serialized(client):
    movie = client.get("/api/movies/1").json()
    assert movie["tmdb_url"] == "https://www.themoviedb.org/movie/1"
    assert movie["trailer_url"] == "https://www.youtube.com/embed/xyz"
    assert movie["poster_url"] is None
