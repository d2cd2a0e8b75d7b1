"""Tests for data models."""
from __future__ import annotations

import dataclasses

import pytest

from grammar_trainer.models import (
    BLANK,
    Difficulty,
    Explanation,
    GrammarCategory,
    Question,
)


def _question(sentence="He is the man ______ son won the first prize."):
    return Question(
        id="6",
        sentence=sentence,
        options=("who", "whom", "whose", "that"),
        correct_answer="whose",
        category=GrammarCategory.RELATIVE_CLAUSE,
        difficulty=Difficulty.INTERMEDIATE,
        explanation=Explanation("rule", "example", "mistake", "translation"),
    )


class TestQuestion:
    def test_prefix_and_suffix(self):
        q = _question()
        assert q.prefix == "He is the man "
        assert q.suffix == " son won the first prize."

    def test_blank_at_start(self):
        q = _question(f"{BLANK} tired, she still finished the report.")
        assert q.prefix == ""
        assert q.suffix == " tired, she still finished the report."

    def test_filled(self):
        assert _question().filled("whose") == "He is the man whose son won the first prize."

    def test_frozen(self):
        q = _question()
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.correct_answer = "who"


class TestExplanation:
    def test_to_dict(self):
        e = Explanation("r", "e", "m", "t")
        assert e.to_dict() == {
            "rule": "r",
            "example": "e",
            "common_mistake": "m",
            "translation": "t",
        }


class TestEnums:
    def test_difficulty_ordering(self):
        assert Difficulty.BEGINNER < Difficulty.INTERMEDIATE < Difficulty.ADVANCED
        assert Difficulty.ADVANCED >= Difficulty.INTERMEDIATE
        assert max(Difficulty) == Difficulty.ADVANCED

    def test_labels(self):
        assert GrammarCategory.NOUN_CLAUSE.label == "名词性从句"
        assert Difficulty.BEGINNER.label == "初级"
        assert all(c.label for c in GrammarCategory)

    def test_string_values(self):
        assert GrammarCategory("tense") is GrammarCategory.TENSE
        assert Difficulty.ADVANCED == "advanced"
