"""Category/difficulty filtering of the question store."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Union

from grammar_trainer.models import ALL, Difficulty, GrammarCategory, Question

CategoryFilter = Union[GrammarCategory, str]  # member or ALL
DifficultyFilter = Union[Difficulty, str]

ALL_LABELS = {
    GrammarCategory: "所有语法点",
    Difficulty: "所有难度",
}


def filter_questions(
    questions: Iterable[Question],
    category: CategoryFilter = ALL,
    difficulty: DifficultyFilter = ALL,
) -> list[Question]:
    """Return the questions matching both filters, in store order."""
    return [
        q for q in questions
        if (category == ALL or q.category == category)
        and (difficulty == ALL or q.difficulty == difficulty)
    ]


def _parse(enum_cls: type[Enum], value) -> Enum | str:
    if value is None:
        return ALL
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    if text.lower() == ALL or text == ALL_LABELS[enum_cls]:
        return ALL
    for member in enum_cls:
        if text.lower() in (member.value, member.name.lower()) or text == member.label:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__} filter: {value!r}")


def parse_category(value) -> CategoryFilter:
    """Parse external filter input.

    Accepts an enum value (``"noun_clause"``), a member name
    (``"NOUN_CLAUSE"``), the display label (``"名词性从句"``), ``"all"``
    or None. Raises ValueError for anything else.
    """
    return _parse(GrammarCategory, value)


def parse_difficulty(value) -> DifficultyFilter:
    return _parse(Difficulty, value)


def describe_filter(enum_cls: type[Enum], value) -> dict:
    if value == ALL:
        return {"value": ALL, "label": ALL_LABELS[enum_cls]}
    return {"value": value.value, "label": value.label}
