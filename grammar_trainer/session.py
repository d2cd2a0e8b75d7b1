"""Quiz session state machine.

A session walks a learner through the working set: the questions that
match its category and difficulty filters, in store order.  Intents that
are not valid in the current state (submitting with nothing selected,
advancing before submitting, changing a locked answer) are ignored and
leave the session untouched.

States:
  in_progress: a current question exists at ``position``
  completed:   the learner advanced past the last question
  empty:       no question matches the filters
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from grammar_trainer.filters import (
    describe_filter,
    filter_questions,
    parse_category,
    parse_difficulty,
)
from grammar_trainer.models import ALL, Difficulty, GrammarCategory, Question

_log = logging.getLogger("grammar_trainer.session")

IN_PROGRESS = "in_progress"
COMPLETED = "completed"
EMPTY = "empty"

PERFECT = "perfect"
EXCELLENT = "excellent"
GOOD = "good, room to improve"
KEEP_PRACTICING = "keep practicing"

RESULT_MESSAGES = {
    PERFECT: "完美！你是语法大师！",
    EXCELLENT: "太棒了！表现非常出色！",
    GOOD: "不错，还有进步空间。",
    KEEP_PRACTICING: "继续努力！",
}

EMPTY_MESSAGE = "没有找到符合条件的题目，请调整筛选条件。"


def percentage(score: int, total: int) -> int:
    """100 * score / total rounded half up (50.5 -> 51)."""
    if total <= 0:
        return 0
    return (200 * score + total) // (2 * total)


def result_message(pct: int) -> str:
    """Map a percentage to its message class."""
    if pct == 100:
        return PERFECT
    if pct >= 80:
        return EXCELLENT
    if pct >= 60:
        return GOOD
    return KEEP_PRACTICING


def question_to_dict(q: Question, reveal: bool = False) -> dict:
    """Serialize a question; answer and explanation only when ``reveal``."""
    d = {
        "id": q.id,
        "sentence": q.sentence,
        "prefix": q.prefix,
        "suffix": q.suffix,
        "options": list(q.options),
        "category": {"value": q.category.value, "label": q.category.label},
        "difficulty": {"value": q.difficulty.value, "label": q.difficulty.label},
    }
    if reveal:
        d["correct_answer"] = q.correct_answer
        d["explanation"] = q.explanation.to_dict()
    return d


class QuizSession:
    def __init__(
        self,
        questions: Iterable[Question],
        category: GrammarCategory | str | None = ALL,
        difficulty: Difficulty | str | None = ALL,
    ):
        self._questions = tuple(questions)
        self.category = parse_category(category)
        self.difficulty = parse_difficulty(difficulty)
        self.working_set: list[Question] = filter_questions(
            self._questions, self.category, self.difficulty,
        )
        self._restart()

    def _restart(self) -> None:
        self.position = 0
        self.selected_answer: str | None = None
        self.submitted = False
        self.score = 0
        self.completed = False

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def total(self) -> int:
        return len(self.working_set)

    @property
    def state(self) -> str:
        if not self.working_set:
            return EMPTY
        if self.completed:
            return COMPLETED
        return IN_PROGRESS

    @property
    def current_question(self) -> Question | None:
        if self.state != IN_PROGRESS:
            return None
        return self.working_set[self.position]

    @property
    def is_correct(self) -> bool:
        q = self.current_question
        return bool(self.submitted and q is not None and self.selected_answer == q.correct_answer)

    @property
    def progress_fraction(self) -> float:
        state = self.state
        if state == EMPTY:
            return 0.0
        if state == COMPLETED:
            return 1.0
        return (self.position + 1) / self.total

    @property
    def percentage(self) -> int:
        return percentage(self.score, self.total)

    # ── Intents ──────────────────────────────────────────────────────────

    def select_option(self, option: str) -> bool:
        """Pick ``option`` for the current question; last pick wins.

        Only the current question's own options are accepted. Anything
        else is ignored like any other invalid intent, so a stale or forged
        option can never be submitted.
        """
        q = self.current_question
        if q is None or self.submitted:
            _log.debug("select_option ignored (state=%s, submitted=%s)", self.state, self.submitted)
            return False
        if option not in q.options:
            _log.debug("select_option ignored: %r is not an option of question %s", option, q.id)
            return False
        self.selected_answer = option
        return True

    def submit(self) -> bool:
        q = self.current_question
        if q is None or self.submitted or self.selected_answer is None:
            _log.debug("submit ignored (state=%s, submitted=%s, selected=%r)",
                       self.state, self.submitted, self.selected_answer)
            return False
        self.submitted = True
        if self.selected_answer == q.correct_answer:
            self.score += 1
        return True

    def advance(self) -> bool:
        if self.state != IN_PROGRESS or not self.submitted:
            _log.debug("advance ignored (state=%s, submitted=%s)", self.state, self.submitted)
            return False
        if self.position + 1 < self.total:
            self.position += 1
            self.selected_answer = None
            self.submitted = False
        else:
            self.completed = True
            _log.info("Quiz completed: %d/%d (%d%%)", self.score, self.total, self.percentage)
        return True

    def reset(self) -> None:
        self._restart()

    def change_filter(
        self,
        category: GrammarCategory | str | None = ALL,
        difficulty: Difficulty | str | None = ALL,
    ) -> None:
        """Start over on the working set for the new filters.

        Raises ValueError for an unknown filter value, leaving the session
        as it was.
        """
        new_category = parse_category(category)
        new_difficulty = parse_difficulty(difficulty)
        self.category = new_category
        self.difficulty = new_difficulty
        self.working_set = filter_questions(self._questions, new_category, new_difficulty)
        self._restart()
        _log.info("Filters changed to %s/%s: %d questions",
                  getattr(new_category, "value", new_category),
                  getattr(new_difficulty, "value", new_difficulty),
                  self.total)

    def reset_filters(self) -> None:
        self.change_filter(ALL, ALL)

    # ── Snapshot ─────────────────────────────────────────────────────────

    def snapshot(self) -> dict:
        state = self.state
        q = self.current_question
        snap = {
            "state": state,
            "position": self.position,
            "total": self.total,
            "score": self.score,
            "selected_answer": self.selected_answer,
            "submitted": self.submitted,
            "is_correct": self.is_correct if (q is not None and self.submitted) else None,
            "progress": self.progress_fraction,
            "filters": {
                "category": describe_filter(GrammarCategory, self.category),
                "difficulty": describe_filter(Difficulty, self.difficulty),
            },
            "question": None,
        }
        if q is not None:
            snap["question"] = question_to_dict(q, reveal=self.submitted)
            if self.submitted:
                snap["question"]["is_last"] = self.position + 1 >= self.total
        elif state == COMPLETED:
            pct = self.percentage
            message_class = result_message(pct)
            snap["result"] = {
                "score": self.score,
                "total": self.total,
                "percentage": pct,
                "message_class": message_class,
                "message": RESULT_MESSAGES[message_class],
            }
        else:
            snap["message"] = EMPTY_MESSAGE
        return snap
