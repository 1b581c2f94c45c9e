"""Quiz ingestion pipeline.

Turns raw completion text into a validated Quiz:

    raw text -> normalize -> parse (strict, then pattern fallback) -> repair
             -> structural validation -> assemble -> final validation -> Quiz

Normalize, parse and repair never raise. The two validation gates are the only
places the pipeline stops, and each raises its own error type with every
problem it found.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional

from completion.course_text import CourseMaterial
from completion.prompts import build_quiz_messages
from core.config import GenerationConfig, load_generation_config
from core.errors import AssemblyInvalid, NoQuestionsGenerated, StructuralInvalid
from core.logging_utils import get_logger
from core.models import Quiz
from core.validation import validate_quiz, validate_raw_questions
from ingestion.assembler import assemble_quiz
from ingestion.normalize import normalize_completion
from ingestion.parser import parse_questions
from ingestion.repair import repair_questions

LOGGER = get_logger()


@dataclass(frozen=True)
class GenerationResult:
    quiz: Quiz
    raw_completion: str
    generated_at: datetime
    warnings: List[str] = field(default_factory=list)


def build_quiz_from_completion(
    raw_text: str,
    *,
    course_id: str,
    course_title: str,
    warnings: Optional[List[str]] = None,
) -> Quiz:
    """Run the ingestion pipeline over one completion.

    Repair notes are appended to ``warnings`` when a list is given.

    Raises:
        NoQuestionsGenerated: nothing could be parsed out of ``raw_text``.
        StructuralInvalid: the repaired questions break the schema.
        AssemblyInvalid: the assembled quiz failed its consistency check.
    """
    normalized = normalize_completion(raw_text)
    LOGGER.debug("Normalized completion: %d -> %d chars", len(raw_text or ""), len(normalized))

    parsed = parse_questions(normalized, raw=raw_text)
    LOGGER.info("Parsed %d raw question(s) for course %s", len(parsed), course_id)
    if not parsed:
        LOGGER.error("No questions could be parsed from completion for course %s", course_id)
        raise NoQuestionsGenerated()

    repaired = repair_questions(parsed, warnings)

    structural = validate_raw_questions(repaired)
    if not structural.is_valid:
        LOGGER.error("Structural validation failed for course %s: %s", course_id, structural.errors)
        raise StructuralInvalid(structural.errors)

    quiz = assemble_quiz(repaired, course_id, course_title)

    final = validate_quiz(quiz)
    if not final.is_valid:
        LOGGER.error("Final validation failed for quiz %s: %s", quiz.id, final.errors)
        raise AssemblyInvalid(final.errors)

    LOGGER.info("Quiz %s ready with %d question(s)", quiz.id, len(quiz.questions))
    return quiz


def generate_course_quiz(
    course: CourseMaterial,
    client: Any,
    *,
    num_questions: Optional[int] = None,
    config: Optional[GenerationConfig] = None,
) -> GenerationResult:
    """Request a quiz for ``course`` from ``client`` and run it through the pipeline.

    ``client`` is any object with ``generate_text(messages, temperature=None)``.
    Completion failures propagate as CompletionError; retrying is up to the caller.
    """
    cfg = config or load_generation_config()
    count = cfg.num_questions if num_questions is None else num_questions

    LOGGER.info("Starting AI quiz for course %s with %d question(s)", course.id, count)
    messages = build_quiz_messages(course, count, max_chars=cfg.content_max_chars)
    generated_at = datetime.now(timezone.utc)
    raw = client.generate_text(messages, temperature=cfg.temperature)

    warnings: List[str] = []
    quiz = build_quiz_from_completion(raw, course_id=course.id, course_title=course.title, warnings=warnings)
    if warnings:
        LOGGER.warning("Quiz %s needed %d repair(s)", quiz.id, len(warnings))

    return GenerationResult(quiz=quiz, raw_completion=raw, generated_at=generated_at, warnings=warnings)
