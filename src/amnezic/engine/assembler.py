from __future__ import annotations

from ..core.ids import new_answer_id, new_player_id, new_question_id
from ..core.models import (
    ContentEntry,
    Game,
    GameAlbum,
    GameAnswer,
    GameArtist,
    GameMusic,
    GamePlayer,
    GameQuestion,
    GameTheme,
    Genre,
)

__all__ = ["assign_ids", "create_players", "to_question"]


def to_question(entry: ContentEntry, genre: Genre, answers: list[GameAnswer]) -> GameQuestion:
    artist = GameArtist(name=entry.artist_name) if entry.artist_name else None
    album = GameAlbum(name=entry.album_name) if entry.album_name else None
    return GameQuestion(
        theme=GameTheme(id=genre.genre_id, title=genre.title),
        music=GameMusic(
            id=entry.music_id or entry.entry_id,
            name=entry.title,
            mp3_url=entry.media_url,
            deezer_id=entry.deezer_id,
            artist=artist,
            album=album,
        ),
        answers=answers,
    )


def create_players(count: int) -> list[GamePlayer]:
    return [
        GamePlayer(id=new_player_id(number), name=f"Player {number:02d}")
        for number in range(1, count + 1)
    ]


def assign_ids(game: Game) -> Game:
    """Number questions and answers under ``game.id``, in list order."""

    for question_number, question in enumerate(game.questions, start=1):
        question.id = new_question_id(game.id, question_number)
        for answer_number, answer in enumerate(question.answers, start=1):
            answer.id = new_answer_id(question.id, answer_number)
    return game
