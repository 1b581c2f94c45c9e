"""Turn validated raw questions into the immutable Quiz shape."""

import time
import uuid
from typing import Sequence

from core.models import Question, Quiz, RawQuestion


def new_quiz_id() -> str:
    return f"quiz_ai_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}"


def assemble_question(raw: RawQuestion) -> Question:
    """Map one raw question; with no correct option the answer index is -1 so final validation rejects it."""
    options = raw.options or []
    correct_answer = next((i for i, o in enumerate(options) if o.is_correct is True), -1)
    return Question(
        id=f"q_{raw.id}",
        question=raw.text,
        options=tuple(o.text for o in options),
        correct_answer=correct_answer,
        explanation=options[correct_answer].explanation if correct_answer >= 0 else "",
    )


def assemble_quiz(questions: Sequence[RawQuestion], course_id: str, course_title: str) -> Quiz:
    """Build a Quiz from raw questions that already passed structural validation."""
    return Quiz(
        id=new_quiz_id(),
        title=f"AI Quiz: {course_title}",
        course_id=course_id,
        questions=tuple(assemble_question(q) for q in questions),
    )
