"""Course material as prompt text."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from completion.pdf_utils import extract_text_from_pdf_bytes, get_page_count
from core.logging_utils import get_logger

LOGGER = get_logger()

DEFAULT_CONTENT_MAX_CHARS = 4000


@dataclass(frozen=True)
class CourseSection:
    title: str
    content: str = ""

    @classmethod
    def from_pdf_bytes(cls, title: str, pdf_bytes: bytes) -> "CourseSection":
        """Build a section from a PDF attachment's text layer."""
        text = extract_text_from_pdf_bytes(pdf_bytes)
        LOGGER.info(
            "Extracted %d chars of text from %d-page PDF section %r",
            len(text), get_page_count(pdf_bytes), title,
        )
        return cls(title=title, content=text)


@dataclass(frozen=True)
class CourseMaterial:
    id: str
    title: str
    description: str = ""
    sections: List[CourseSection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourseMaterial":
        """Accept the stored course shape: ``{id, title, description, content: [{title, content}]}``."""
        sections = []
        for item in data.get('content') or []:
            if not isinstance(item, dict):
                continue
            content = item.get('content')
            sections.append(CourseSection(
                title=str(item.get('title') or ''),
                content=content if isinstance(content, str) else '',
            ))
        return cls(
            id=str(data.get('id', '')),
            title=str(data.get('title') or ''),
            description=str(data.get('description') or ''),
            sections=sections,
        )


def format_course_content(course: CourseMaterial, max_chars: int = DEFAULT_CONTENT_MAX_CHARS) -> str:
    """Render non-empty sections as prompt text, truncated to ``max_chars``."""
    blocks = [
        f"Section: {s.title}\nContent: {s.content}"
        for s in course.sections
        if s.content
    ]
    text = "\n\n".join(blocks)
    if len(text) > max_chars:
        LOGGER.info("Course %s content truncated from %d to %d chars", course.id, len(text), max_chars)
        text = text[:max_chars]
    return text
