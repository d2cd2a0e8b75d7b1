"""Shared test fixtures."""
from __future__ import annotations

import copy

import pytest

from grammar_trainer.store import QuestionStore, load_store


def make_record(**overrides) -> dict:
    """A valid raw question record; keyword arguments replace fields."""
    record = {
        "id": "q1",
        "sentence": "The book ______ I bought yesterday is very interesting.",
        "options": ["who", "which", "where", "whose"],
        "correct_answer": "which",
        "category": "relative_clause",
        "difficulty": "beginner",
        "explanation": {
            "rule": "Relative pronoun for things, object of the clause.",
            "example": "The movie which we saw was great.",
            "common_mistake": "Using who, which refers to people.",
            "translation": "我昨天买的那本书很有趣。",
        },
    }
    record.update(copy.deepcopy(overrides))
    return record


@pytest.fixture
def two_records():
    """Two questions in different categories and difficulties."""
    return [
        make_record(),
        make_record(
            id="q2",
            sentence="I won't go to the party ______ I am invited.",
            options=["if", "unless", "because", "since"],
            correct_answer="unless",
            category="adverbial_clause",
            difficulty="intermediate",
        ),
    ]


@pytest.fixture
def two_store(two_records):
    return QuestionStore(two_records)


@pytest.fixture
def bank():
    """The built-in question bank."""
    return load_store()
