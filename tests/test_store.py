"""Tests for question loading and validation."""
from __future__ import annotations

import pytest

from conftest import make_record
from grammar_trainer.models import Difficulty, GrammarCategory
from grammar_trainer.question_bank import QUESTIONS
from grammar_trainer.store import (
    QuestionStore,
    QuestionValidationError,
    load_store,
    parse_question,
)


class TestParseQuestion:
    def test_valid_record(self):
        q = parse_question(make_record())
        assert q.id == "q1"
        assert q.options == ("who", "which", "where", "whose")
        assert q.category is GrammarCategory.RELATIVE_CLAUSE
        assert q.difficulty is Difficulty.BEGINNER
        assert q.explanation.common_mistake.startswith("Using who")

    def test_integer_id_becomes_string(self):
        assert parse_question(make_record(id=7)).id == "7"

    def test_no_blank(self):
        with pytest.raises(QuestionValidationError, match="exactly one blank"):
            parse_question(make_record(sentence="No blank here."))

    def test_two_blanks(self):
        with pytest.raises(QuestionValidationError, match="found 2"):
            parse_question(make_record(sentence="______ and ______."))

    def test_empty_options(self):
        with pytest.raises(QuestionValidationError, match="options are empty"):
            parse_question(make_record(options=[]))

    def test_correct_answer_not_in_options(self):
        with pytest.raises(QuestionValidationError, match="not one of the options"):
            parse_question(make_record(correct_answer="that"))

    def test_duplicate_options(self):
        with pytest.raises(QuestionValidationError, match="duplicates"):
            parse_question(make_record(options=["which", "which", "who"]))

    def test_unknown_category(self):
        with pytest.raises(QuestionValidationError, match="unknown category"):
            parse_question(make_record(category="phonetics"))

    def test_unknown_difficulty(self):
        with pytest.raises(QuestionValidationError, match="unknown difficulty"):
            parse_question(make_record(difficulty="expert"))

    def test_missing_explanation_field(self):
        record = make_record()
        del record["explanation"]["translation"]
        with pytest.raises(QuestionValidationError, match="translation"):
            parse_question(record)

    def test_missing_id(self):
        with pytest.raises(QuestionValidationError, match="missing id"):
            parse_question(make_record(id=""))

    def test_all_problems_reported(self):
        with pytest.raises(QuestionValidationError) as exc_info:
            parse_question(make_record(sentence="none", options=[], category="x"))
        err = exc_info.value
        assert err.question_id == "q1"
        assert len(err.problems) >= 3

    def test_non_string_sentence(self):
        with pytest.raises(QuestionValidationError, match="sentence must be a string"):
            parse_question(make_record(sentence=42))

    def test_string_options_not_split_into_characters(self):
        with pytest.raises(QuestionValidationError, match="options must be a list"):
            parse_question(make_record(options="which", correct_answer="w"))

    def test_non_string_option(self):
        with pytest.raises(QuestionValidationError, match="options must all be strings"):
            parse_question(make_record(options=["which", 3]))

    def test_non_string_correct_answer(self):
        with pytest.raises(QuestionValidationError, match="correct answer must be a string"):
            parse_question(make_record(correct_answer=None))

    def test_non_mapping_explanation(self):
        with pytest.raises(QuestionValidationError, match="explanation must be a mapping"):
            parse_question(make_record(explanation="see the rule"))

    def test_non_mapping_record(self):
        with pytest.raises(QuestionValidationError, match="record must be a mapping"):
            parse_question(["q1", "______ x"])

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_question(make_record(options=[]))


class TestQuestionStore:
    def test_preserves_order(self, two_records):
        store = QuestionStore(two_records)
        assert [q.id for q in store] == ["q1", "q2"]
        assert len(store) == 2

    def test_get(self, two_store):
        assert two_store.get("q2").correct_answer == "unless"
        assert two_store.get("missing") is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(QuestionValidationError, match="duplicate id"):
            QuestionStore([make_record(), make_record()])

    def test_one_bad_record_aborts_load(self, two_records):
        records = two_records + [make_record(id="bad", sentence="no marker")]
        with pytest.raises(QuestionValidationError) as exc_info:
            QuestionStore(records)
        assert exc_info.value.question_id == "bad"

    def test_counts(self, two_store):
        counts = two_store.counts()
        assert counts["total"] == 2
        assert counts["by_category"]["relative_clause"] == 1
        assert counts["by_category"]["adverbial_clause"] == 1
        assert counts["by_category"]["tense"] == 0
        assert counts["by_difficulty"] == {"beginner": 1, "intermediate": 1, "advanced": 0}

    def test_empty_store(self):
        store = QuestionStore([])
        assert len(store) == 0
        assert list(store) == []


class TestBuiltInBank:
    def test_loads(self):
        store = load_store()
        assert len(store) == len(QUESTIONS) == 10

    def test_every_question_splits_in_two(self, bank):
        for q in bank:
            assert q.filled(q.correct_answer).count("______") == 0
            assert q.correct_answer in q.options

    def test_ids_in_order(self, bank):
        assert [q.id for q in bank] == [str(i) for i in range(1, 11)]

    def test_counts(self, bank):
        counts = bank.counts()
        assert counts["by_category"]["non_finite"] == 3
        assert counts["by_category"]["noun_clause"] == 3
        assert counts["by_difficulty"]["advanced"] == 1
