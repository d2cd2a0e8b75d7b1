"""Validated, read-only question store built from raw question records."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from grammar_trainer.models import (
    BLANK,
    Difficulty,
    Explanation,
    GrammarCategory,
    Question,
)

_log = logging.getLogger("grammar_trainer.store")

EXPLANATION_FIELDS = ("rule", "example", "common_mistake", "translation")


class QuestionValidationError(ValueError):
    """Raised when a question record is malformed. Fatal at startup."""

    def __init__(self, question_id: str, problems: list[str]):
        self.question_id = question_id
        self.problems = problems
        super().__init__(f"Question {question_id!r} is malformed: " + "; ".join(problems))


def parse_question(raw: dict) -> Question:
    """Validate one raw record and build a Question.

    Collects every problem with the record before raising, so a broken
    record is reported in full.
    """
    if not isinstance(raw, dict):
        raise QuestionValidationError("?", [f"record must be a mapping, got {type(raw).__name__}"])

    qid = str(raw.get("id", "")).strip()
    problems: list[str] = []

    if not qid:
        problems.append("missing id")

    sentence = raw.get("sentence")
    if not isinstance(sentence, str):
        problems.append(f"sentence must be a string, got {type(sentence).__name__}")
        sentence = ""
    else:
        blanks = sentence.count(BLANK)
        if blanks != 1:
            problems.append(f"sentence must contain exactly one blank marker {BLANK!r}, found {blanks}")

    raw_options = raw.get("options")
    if raw_options is None:
        raw_options = ()
    if not isinstance(raw_options, (list, tuple)):
        problems.append(f"options must be a list, got {type(raw_options).__name__}")
        raw_options = ()
    elif not all(isinstance(o, str) for o in raw_options):
        problems.append("options must all be strings")
        raw_options = ()
    options = tuple(raw_options)
    correct = raw.get("correct_answer")
    if not options:
        problems.append("options are empty")
    elif len(set(options)) != len(options):
        problems.append("options contain duplicates")
    if not isinstance(correct, str):
        problems.append(f"correct answer must be a string, got {type(correct).__name__}")
    elif correct not in options:
        problems.append(f"correct answer {correct!r} is not one of the options")

    try:
        category = GrammarCategory(raw.get("category"))
    except ValueError:
        category = None
        problems.append(f"unknown category {raw.get('category')!r}")

    try:
        difficulty = Difficulty(raw.get("difficulty"))
    except ValueError:
        difficulty = None
        problems.append(f"unknown difficulty {raw.get('difficulty')!r}")

    expl = raw.get("explanation") or {}
    if not isinstance(expl, dict):
        problems.append(f"explanation must be a mapping, got {type(expl).__name__}")
    else:
        missing = [f for f in EXPLANATION_FIELDS if not isinstance(expl.get(f), str) or not expl.get(f)]
        if missing:
            problems.append("explanation is missing " + ", ".join(missing))

    if problems:
        raise QuestionValidationError(qid or "?", problems)

    return Question(
        id=qid,
        sentence=sentence,
        options=options,
        correct_answer=correct,
        category=category,
        difficulty=difficulty,
        explanation=Explanation(**{f: expl[f] for f in EXPLANATION_FIELDS}),
    )


class QuestionStore:
    def __init__(self, records: Iterable[dict]):
        questions: list[Question] = []
        seen: set[str] = set()
        for raw in records:
            q = parse_question(raw)
            if q.id in seen:
                raise QuestionValidationError(q.id, ["duplicate id"])
            seen.add(q.id)
            questions.append(q)
        self._questions = tuple(questions)
        self._by_id = {q.id: q for q in self._questions}

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def get(self, question_id: str) -> Question | None:
        return self._by_id.get(question_id)

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def counts(self) -> dict:
        """Question counts per category and per difficulty, zeros included."""
        by_category = {c.value: 0 for c in GrammarCategory}
        by_difficulty = {d.value: 0 for d in Difficulty}
        for q in self._questions:
            by_category[q.category.value] += 1
            by_difficulty[q.difficulty.value] += 1
        return {
            "total": len(self._questions),
            "by_category": by_category,
            "by_difficulty": by_difficulty,
        }


def load_store(records: Iterable[dict] | None = None) -> QuestionStore:
    """Build the store from ``records`` (the built-in bank by default)."""
    if records is None:
        from grammar_trainer.question_bank import QUESTIONS
        records = QUESTIONS
    store = QuestionStore(records)
    _log.info("Loaded %d questions", len(store))
    return store
