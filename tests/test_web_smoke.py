from __future__ import annotations

from fastapi.testclient import TestClient

from amnezic.config import AppConfig
from amnezic.data.catalog import CatalogMusic, CatalogQuestion, CatalogTheme, InMemoryThemeCatalog
from amnezic.web.app import create_app


def test_health_and_store_backed_game() -> None:
    music = CatalogMusic(id=1, name="Intro", artist_name="The xx")
    catalog = InMemoryThemeCatalog(
        [CatalogTheme(id=1, title="Indie", questions=(CatalogQuestion(id=1, music=music, text="The xx"),))]
    )
    client = TestClient(create_app(AppConfig(media_root="http://media"), catalog))

    assert client.get("/healthz").json() == {"status": "ok"}

    response = client.put(
        "/api/v1/game/new",
        json={"seed": 3, "nb_question": 5, "nb_answer": 4, "nb_player": 2, "sources": ["store"]},
    )
    assert response.status_code == 200
    questions = response.json()["game"]["questions"]
    assert len(questions) == 1
    assert questions[0]["theme"]["title"] == "Indie"
    assert questions[0]["music"]["artist"]["name"] == "The xx"
    assert questions[0]["answers"] == [{"id": questions[0]["id"] + 100, "text": "The xx", "correct": True}]


def test_media_root_reaches_dataset_urls() -> None:
    client = TestClient(create_app(AppConfig(media_root="http://media")))
    response = client.put(
        "/api/game/new",
        json={"seed": 1, "nb_question": 3, "nb_answer": 2, "nb_player": 2, "sources": "decade"},
    )
    assert response.status_code == 200
    for question in response.json()["game"]["questions"]:
        assert question["music"]["mp3Url"].startswith("http://media/")
