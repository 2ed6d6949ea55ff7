from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ...core.models import Game, GameAnswer, GameMusic, GamePlayer, GameQuestion, GameSettings

__all__ = [
    "AlbumPayload",
    "AnswerPayload",
    "ArtistPayload",
    "GamePayload",
    "GameResponse",
    "MusicPayload",
    "PlayerPayload",
    "QuestionPayload",
    "SettingsPayload",
    "ThemePayload",
    "game_payload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SettingsPayload(_APIModel):
    seed: int
    nb_question: int = Field(..., alias="nbQuestion")
    nb_answer: int = Field(..., alias="nbAnswer")
    nb_player: int = Field(..., alias="nbPlayer")
    sources: list[str]


class PlayerPayload(_APIModel):
    id: int
    name: str
    active: bool
    score: int


class ThemePayload(_APIModel):
    id: int
    title: str


class ArtistPayload(_APIModel):
    id: int
    deezer_id: int = Field(0, alias="deezerId")
    name: str
    img_url: str | None = Field(None, alias="imgUrl")


class AlbumPayload(_APIModel):
    id: int
    deezer_id: int = Field(0, alias="deezerId")
    name: str
    img_url: str | None = Field(None, alias="imgUrl")


class MusicPayload(_APIModel):
    id: int
    deezer_id: int = Field(0, alias="deezerId")
    name: str
    mp3_url: str = Field(..., alias="mp3Url")
    artist: ArtistPayload | None = None
    album: AlbumPayload | None = None


class AnswerPayload(_APIModel):
    id: int
    text: str
    hint: str | None = None
    correct: bool


class QuestionPayload(_APIModel):
    id: int
    theme: ThemePayload
    music: MusicPayload
    answers: list[AnswerPayload]


class GamePayload(_APIModel):
    id: int
    version: int
    settings: SettingsPayload
    players: list[PlayerPayload]
    questions: list[QuestionPayload]


class GameResponse(_APIModel):
    success: bool = True
    game: GamePayload | None = None


def _settings_payload(settings: GameSettings) -> SettingsPayload:
    return SettingsPayload(
        seed=settings.seed,
        nb_question=settings.question_count,
        nb_answer=settings.answer_count,
        nb_player=settings.player_count,
        sources=[source.value for source in settings.sources],
    )


def _player_payload(player: GamePlayer) -> PlayerPayload:
    return PlayerPayload(id=player.id, name=player.name, active=player.active, score=player.score)


def _music_payload(music: GameMusic) -> MusicPayload:
    artist = music.artist
    album = music.album
    return MusicPayload(
        id=music.id,
        deezer_id=music.deezer_id,
        name=music.name,
        mp3_url=music.mp3_url,
        artist=(
            ArtistPayload(id=artist.id, deezer_id=artist.deezer_id, name=artist.name, img_url=artist.img_url or None)
            if artist
            else None
        ),
        album=(
            AlbumPayload(id=album.id, deezer_id=album.deezer_id, name=album.name, img_url=album.img_url or None)
            if album
            else None
        ),
    )


def _answer_payload(answer: GameAnswer) -> AnswerPayload:
    return AnswerPayload(id=answer.id, text=answer.text, hint=answer.hint or None, correct=answer.correct)


def _question_payload(question: GameQuestion) -> QuestionPayload:
    return QuestionPayload(
        id=question.id,
        theme=ThemePayload(id=question.theme.id, title=question.theme.title),
        music=_music_payload(question.music),
        answers=[_answer_payload(answer) for answer in question.answers],
    )


def game_payload(game: Game) -> GamePayload:
    return GamePayload(
        id=game.id,
        version=game.version,
        settings=_settings_payload(game.settings),
        players=[_player_payload(player) for player in game.players],
        questions=[_question_payload(question) for question in game.questions],
    )
