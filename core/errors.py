"""Terminal errors raised by quiz generation.

Callers should branch on the exception class (or ``kind``); the message text is
kept stable for display and for older callers that match on substrings.
"""

from typing import Iterable, List, Optional

NO_QUESTIONS_MESSAGE = "No questions were generated"


class QuizGenerationError(ValueError):
    """Base class for every terminal quiz-generation failure."""

    kind = "quiz_generation_error"
    prefix = ""

    def __init__(self, errors: Optional[Iterable[str]] = None, message: Optional[str] = None):
        self.errors: List[str] = list(errors or [])
        if message is None:
            message = self.prefix + "; ".join(self.errors)
        super().__init__(message)


class StructuralInvalid(QuizGenerationError):
    """The model output failed structural validation after repair."""

    kind = "structural_invalid"
    prefix = "Invalid quiz generated: "


class NoQuestionsGenerated(StructuralInvalid):
    """Neither parsing strategy recovered a single question."""

    kind = "no_questions_generated"

    def __init__(self) -> None:
        super().__init__([NO_QUESTIONS_MESSAGE])


class AssemblyInvalid(QuizGenerationError):
    """The assembled quiz failed the final consistency check."""

    kind = "assembly_invalid"
    prefix = "Quiz structure invalid: "


class CompletionError(QuizGenerationError):
    """The upstream text-completion call failed."""

    kind = "completion_error"
    prefix = "Completion request failed: "

    def __init__(self, message: str, *, auth_related: bool = False):
        self.auth_related = auth_related
        super().__init__([message])
