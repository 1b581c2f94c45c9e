"""Structural validation of raw model output and final validation of assembled quizzes."""

from typing import Any, List, Sequence

from core.errors import NO_QUESTIONS_MESSAGE
from core.models import Quiz, RawOption, RawQuestion, ValidationResult

MIN_OPTIONS = 2
MAX_OPTIONS = 10


def has_text(value: Any) -> bool:
    """True for a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


def _is_index(value: Any) -> bool:
    # bool is an int subclass; True/False are not answer indexes
    return isinstance(value, int) and not isinstance(value, bool)


def validate_options(options: List[RawOption], errors: List[str], *, q_index: int) -> None:
    """Check option count, option fields and the single-correct-answer rule."""
    count = len(options)
    if count < MIN_OPTIONS:
        errors.append(f"Question {q_index}: Question must have at least {MIN_OPTIONS} options (has {count})")
    elif count > MAX_OPTIONS:
        errors.append(f"Question {q_index}: Question has too many options ({count}), maximum is {MAX_OPTIONS}")

    for o_index, option in enumerate(options, start=1):
        where = f"Question {q_index}, Option {o_index}"
        if not option.id:
            errors.append(f"{where}: Missing option id")
        if not has_text(option.text):
            errors.append(f"{where}: Missing option text")
        if not isinstance(option.is_correct, bool):
            errors.append(f"{where}: isCorrect must be a boolean")

    correct = [o for o in options if o.is_correct is True]
    if not correct:
        errors.append(f"Question {q_index}: No correct answer specified (all options marked as false)")
        return
    if len(correct) > 1:
        errors.append(f"Question {q_index}: Multiple correct answers specified ({len(correct)}), only one allowed")
        return
    if not has_text(correct[0].explanation):
        errors.append(f"Question {q_index}: Correct answer missing explanation")


def validate_raw_questions(questions: Sequence[RawQuestion]) -> ValidationResult:
    """Validate repaired model output against the question/option schema.

    Every violation is collected so the caller sees all problems at once.
    An empty list short-circuits with "No questions were generated".
    """
    if not questions:
        return ValidationResult.from_errors([NO_QUESTIONS_MESSAGE])

    errors: List[str] = []
    for q_index, question in enumerate(questions, start=1):
        if not question.id:
            errors.append(f"Question {q_index}: Missing question id")
        if not has_text(question.text):
            errors.append(f"Question {q_index}: Missing question text")
        if not isinstance(question.options, list):
            errors.append(f"Question {q_index}: Missing options array")
            continue
        validate_options(question.options, errors, q_index=q_index)

    return ValidationResult.from_errors(errors)


def validate_quiz(quiz: Quiz) -> ValidationResult:
    """Re-check an assembled quiz for internal consistency."""
    errors: List[str] = []

    if not has_text(quiz.id):
        errors.append("Quiz id is required")
    if not has_text(quiz.title):
        errors.append("Quiz title is required")
    if not has_text(quiz.course_id):
        errors.append("Quiz courseId is required")

    questions = quiz.questions
    if not isinstance(questions, (list, tuple)) or not questions:
        errors.append("Quiz must contain at least one question")
        return ValidationResult.from_errors(errors)

    for q_index, question in enumerate(questions, start=1):
        if not has_text(question.question):
            errors.append(f"Question {q_index}: Question text is required")

        options = question.options
        if not isinstance(options, (list, tuple)) or len(options) < MIN_OPTIONS:
            errors.append(f"Question {q_index}: Question must have at least {MIN_OPTIONS} options")
            options = options if isinstance(options, (list, tuple)) else ()
        for o_index, option in enumerate(options, start=1):
            if not has_text(option):
                errors.append(f"Question {q_index}, Option {o_index}: Option text must be a non-empty string")

        answer = question.correct_answer
        if not _is_index(answer):
            errors.append(f"Question {q_index}: correctAnswer must be a number")
        elif not 0 <= answer < len(options):
            errors.append(
                f"Question {q_index}: correctAnswer ({answer}) is out of range for {len(options)} options"
            )

        if not has_text(question.explanation):
            errors.append(f"Question {q_index}: Explanation is required")

    return ValidationResult.from_errors(errors)
