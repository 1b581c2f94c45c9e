"""Raw (untrusted) and domain (validated) quiz shapes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class RawOption:
    """One answer option exactly as the model produced it."""

    id: Any = None
    text: Any = None
    is_correct: Any = None
    explanation: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "RawOption":
        if not isinstance(data, dict):
            return cls()
        return cls(
            id=data.get('id'),
            text=data.get('text'),
            is_correct=data.get('isCorrect'),
            explanation=data.get('explanation'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'text': self.text,
            'isCorrect': self.is_correct,
            'explanation': self.explanation,
        }


@dataclass
class RawQuestion:
    """One question decoded from completion text, before validation.

    ``options`` is None when the model did not supply an array.
    """

    id: Any = None
    text: Any = None
    options: Optional[List[RawOption]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "RawQuestion":
        if not isinstance(data, dict):
            return cls()
        options_raw = data.get('options')
        options: Optional[List[RawOption]] = None
        if isinstance(options_raw, list):
            options = [RawOption.from_dict(o) for o in options_raw]
        return cls(id=data.get('id'), text=data.get('text'), options=options)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'text': self.text,
            'options': None if self.options is None else [o.to_dict() for o in self.options],
        }


@dataclass(frozen=True)
class Question:
    id: str
    question: str
    options: Tuple[str, ...]
    correct_answer: int
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'question': self.question,
            'options': list(self.options),
            'correctAnswer': self.correct_answer,
            'explanation': self.explanation,
        }


@dataclass(frozen=True)
class Quiz:
    id: str
    title: str
    course_id: str
    questions: Tuple[Question, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'courseId': self.course_id,
            'questions': [q.to_dict() for q in self.questions],
        }


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: List[str]) -> "ValidationResult":
        return cls(is_valid=not errors, errors=list(errors))
