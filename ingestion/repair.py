"""Deterministic repair of the two answer-key mistakes models make most often."""

import copy
from typing import Iterable, List, Optional

from core.logging_utils import get_logger
from core.models import RawOption, RawQuestion

LOGGER = get_logger()

# Phrases that suggest an option's explanation is justifying the right answer.
CORRECT_MARKERS = ("correct", "right answer", "this is because")


def _explains_correct_answer(option: RawOption) -> bool:
    explanation = option.explanation
    if not isinstance(explanation, str):
        return False
    lowered = explanation.lower()
    return any(marker in lowered for marker in CORRECT_MARKERS)


def repair_options(options: List[RawOption], warnings: List[str], *, q_index: int) -> None:
    """Force exactly one ``is_correct is True`` option, in place."""
    correct_indexes = [i for i, o in enumerate(options) if o.is_correct is True]
    if len(correct_indexes) == 1:
        return

    if not correct_indexes:
        inferred = next((i for i, o in enumerate(options) if _explains_correct_answer(o)), None)
        if inferred is not None:
            options[inferred].is_correct = True
            warnings.append(
                f"Question {q_index}: no correct option marked; inferred option {inferred + 1} from its explanation"
            )
            LOGGER.info("Question %d: inferred correct option %d from explanation", q_index, inferred + 1)
            return
        # Nothing to go on: first option wins. The quiz stays gradeable but may be wrong.
        options[0].is_correct = True
        warnings.append(f"Question {q_index}: no correct option marked; defaulted first option to correct")
        LOGGER.warning("Question %d: no correct option could be inferred, defaulted to option 1", q_index)
        return

    keep = correct_indexes[0]
    for i in correct_indexes[1:]:
        options[i].is_correct = False
    warnings.append(
        f"Question {q_index}: multiple correct options ({len(correct_indexes)}); kept option {keep + 1}"
    )
    LOGGER.info("Question %d: %d options marked correct, kept option %d", q_index, len(correct_indexes), keep + 1)


def repair_questions(questions: Iterable[RawQuestion], warnings: Optional[List[str]] = None) -> List[RawQuestion]:
    """Return repaired copies of ``questions``; the input is left untouched.

    Each repair appends a note to ``warnings`` when a list is given. Questions
    without a usable options list pass through for the validator to report.
    """
    notes: List[str] = warnings if warnings is not None else []
    repaired: List[RawQuestion] = []
    for q_index, question in enumerate(questions, start=1):
        fixed = copy.deepcopy(question)
        if isinstance(fixed.options, list) and fixed.options:
            repair_options(fixed.options, notes, q_index=q_index)
        repaired.append(fixed)
    return repaired
