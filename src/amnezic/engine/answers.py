from __future__ import annotations

import random

from ..core.models import ContentEntry, GameAnswer, Genre
from ..core.shuffle import shuffle

__all__ = ["build_answers", "to_answer"]


def to_answer(entry: ContentEntry, correct: bool) -> GameAnswer:
    if entry.text:
        return GameAnswer(text=entry.text, hint=entry.hint, correct=correct)
    if not entry.artist_name:
        return GameAnswer(text=entry.title, hint="", correct=correct)
    hint = f"{entry.title} ({entry.album_name})" if entry.album_name else entry.title
    return GameAnswer(text=entry.artist_name, hint=hint, correct=correct)


def build_answers(
    entry: ContentEntry,
    genre: Genre,
    answer_count: int,
    rng: random.Random,
    *,
    uniform: bool = False,
) -> list[GameAnswer]:
    """Return a shuffled answer set with ``entry`` as the single correct answer.

    Distractors come from the same genre.  A genre with fewer than
    ``answer_count - 1`` other entries gives a shorter set.
    """

    others = [other for other in genre.entries if other.entry_id != entry.entry_id]
    shuffle(others, rng, uniform=uniform)
    others = others[: max(0, answer_count - 1)]

    answers = [to_answer(other, False) for other in others]
    answers.append(to_answer(entry, True))
    shuffle(answers, rng, uniform=uniform)
    return answers
