"""Prompt text for course quiz generation."""

from typing import Dict, List

from completion.course_text import DEFAULT_CONTENT_MAX_CHARS, CourseMaterial, format_course_content

MIN_QUESTIONS = 3
MAX_QUESTIONS = 10
DEFAULT_QUESTIONS = 5

QUIZ_SYSTEM_PROMPT = (
    "You are a quiz generator for online course material. "
    "You write clear multiple-choice questions and answer only with JSON."
)

QUIZ_USER_PROMPT_TEMPLATE = """
I need you to create a quiz based on the following course content:

Course Title: {title}
Course Description: {description}

COURSE CONTENT:
{content}

Please generate {count} multiple-choice questions that test understanding of key concepts from this course content.

Return your response as a JSON array of objects, each with:
- id (number)
- text (string) - the question text
- options: array of objects {{ id (number), text (string), isCorrect (boolean), explanation (string) }}

Rules:
- Each question has 4 options and EXACTLY ONE option with isCorrect=true.
- The explanation of the correct option says why it is correct.
- Return ONLY the JSON array. No markdown, no commentary.

Make sure questions are varied and cover different sections of the content.
""".strip()


def clamp_question_count(count: int) -> int:
    try:
        count = int(count)
    except (TypeError, ValueError):
        return DEFAULT_QUESTIONS
    return max(MIN_QUESTIONS, min(MAX_QUESTIONS, count))


def build_quiz_messages(
    course: CourseMaterial,
    num_questions: int = DEFAULT_QUESTIONS,
    max_chars: int = DEFAULT_CONTENT_MAX_CHARS,
) -> List[Dict[str, str]]:
    """Build the system/user chat messages that request a quiz for ``course``."""
    user_prompt = QUIZ_USER_PROMPT_TEMPLATE.format(
        title=course.title,
        description=course.description or "",
        content=format_course_content(course, max_chars=max_chars),
        count=clamp_question_count(num_questions),
    )
    return [
        {"role": "system", "content": QUIZ_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]
