from __future__ import annotations

import random

import pytest

from amnezic.core.models import ContentEntry, Genre
from amnezic.engine.answers import build_answers, to_answer


def _genre(size: int) -> Genre:
    entries = tuple(
        ContentEntry(entry_id=100 + i, genre_id=100, title=f"Title {i}", artist_name=f"Artist {i}")
        for i in range(1, size + 1)
    )
    return Genre(genre_id=100, title="Test", entries=entries)


@pytest.mark.parametrize("seed", range(10))
def test_exactly_one_correct_answer(seed: int) -> None:
    genre = _genre(8)
    entry = genre.entries[3]

    answers = build_answers(entry, genre, 4, random.Random(seed))

    assert len(answers) == 4
    correct = [answer for answer in answers if answer.correct]
    assert len(correct) == 1
    assert correct[0].text == "Artist 4"
    assert correct[0].hint == "Title 4"
    assert len({answer.text for answer in answers}) == 4


def test_short_genre_gives_short_answer_set() -> None:
    genre = _genre(2)
    answers = build_answers(genre.entries[0], genre, 5, random.Random(1))
    assert len(answers) == 2
    assert sum(answer.correct for answer in answers) == 1


def test_single_entry_genre_still_has_the_correct_answer() -> None:
    genre = _genre(1)
    answers = build_answers(genre.entries[0], genre, 3, random.Random(1))
    assert [(answer.text, answer.correct) for answer in answers] == [("Artist 1", True)]


def test_answer_texts() -> None:
    with_album = ContentEntry(entry_id=1, genre_id=1, title="Creep", artist_name="Radiohead", album_name="Pablo Honey")
    no_artist = ContentEntry(entry_id=2, genre_id=1, title="Ring my bell")
    authored = ContentEntry(entry_id=3, genre_id=1, title="Song", artist_name="Band", text="Who sings?", hint="90s")

    assert (to_answer(with_album, True).text, to_answer(with_album, True).hint) == ("Radiohead", "Creep (Pablo Honey)")
    assert (to_answer(no_artist, False).text, to_answer(no_artist, False).hint) == ("Ring my bell", "")
    assert (to_answer(authored, False).text, to_answer(authored, False).hint) == ("Who sings?", "90s")
