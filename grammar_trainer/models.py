from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BLANK = "______"
ALL = "all"


class GrammarCategory(str, Enum):
    NON_FINITE = "non_finite"
    RELATIVE_CLAUSE = "relative_clause"
    ADVERBIAL_CLAUSE = "adverbial_clause"
    NOUN_CLAUSE = "noun_clause"
    CONJUNCTION = "conjunction"
    TENSE = "tense"
    VOICE = "voice"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        return _DIFFICULTY_LABELS[self]

    @property
    def rank(self) -> int:
        return list(Difficulty).index(self)

    def __lt__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Difficulty):
            return NotImplemented
        return self.rank >= other.rank


_CATEGORY_LABELS = {
    GrammarCategory.NON_FINITE: "非谓语动词",
    GrammarCategory.RELATIVE_CLAUSE: "定语从句",
    GrammarCategory.ADVERBIAL_CLAUSE: "状语从句",
    GrammarCategory.NOUN_CLAUSE: "名词性从句",
    GrammarCategory.CONJUNCTION: "连词",
    GrammarCategory.TENSE: "时态",
    GrammarCategory.VOICE: "语态",
}

_DIFFICULTY_LABELS = {
    Difficulty.BEGINNER: "初级",
    Difficulty.INTERMEDIATE: "中级",
    Difficulty.ADVANCED: "高级",
}


@dataclass(frozen=True)
class Explanation:
    rule: str
    example: str
    common_mistake: str
    translation: str

    def to_dict(self) -> dict:
        return {
            "rule": self.rule,
            "example": self.example,
            "common_mistake": self.common_mistake,
            "translation": self.translation,
        }


@dataclass(frozen=True)
class Question:
    id: str
    sentence: str  # exactly one BLANK
    options: tuple[str, ...]
    correct_answer: str
    category: GrammarCategory
    difficulty: Difficulty
    explanation: Explanation

    @property
    def prefix(self) -> str:
        return self.sentence.split(BLANK, 1)[0]

    @property
    def suffix(self) -> str:
        return self.sentence.split(BLANK, 1)[1]

    def filled(self, answer: str) -> str:
        """The sentence with the blank replaced by ``answer``."""
        return f"{self.prefix}{answer}{self.suffix}"
