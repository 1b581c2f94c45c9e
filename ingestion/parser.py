"""Lenient parsing of normalized completion text into raw questions.

Two strategies, tried in order:

1. ``decode_strict`` - decode the whole normalized string as a JSON array.
2. ``extract_question_objects`` - scan the raw completion text for objects that look
   like questions (keys ``id``, ``text``, ``options`` in that order) and decode
   each one on its own. This rescues output that was truncated mid-array or has
   junk between questions.

Neither strategy raises; a unit that cannot be decoded is skipped.
"""

import json
import re
from typing import Any, Dict, List, Optional

from core.logging_utils import get_logger
from core.models import RawQuestion
from ingestion.normalize import remove_trailing_commas

LOGGER = get_logger()

_QUESTION_OBJECT = re.compile(
    r'\{[^{}]*?"id"\s*:[^{}]*?"text"\s*:[^{}]*?"options"\s*:\s*\[.*?\]\s*,?\s*\}',
    flags=re.DOTALL,
)


def decode_strict(text: str) -> Optional[List[Any]]:
    """Decode ``text`` as a JSON array; a lone object counts as a one-item array.

    Returns None when the text does not decode.
    """
    try:
        data = json.loads(text, strict=False)
    except (TypeError, ValueError) as e:
        LOGGER.debug("Strict JSON decode failed: %s", e)
        return None

    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    LOGGER.debug("Strict JSON decode produced %s, expected an array", type(data).__name__)
    return None


def extract_question_objects(text: str) -> List[Dict[str, Any]]:
    """Pull individually decodable question objects out of arbitrary text."""
    if not isinstance(text, str) or not text:
        return []

    found: List[Dict[str, Any]] = []
    for match in _QUESTION_OBJECT.finditer(text):
        chunk = remove_trailing_commas(match.group(0))
        try:
            obj = json.loads(chunk, strict=False)
        except ValueError:
            LOGGER.debug("Skipping undecodable question fragment at offset %d", match.start())
            continue
        if isinstance(obj, dict):
            found.append(obj)
    return found


def parse_questions(normalized: str, raw: Optional[str] = None) -> List[RawQuestion]:
    """Parse normalized completion text into raw questions.

    ``raw`` is the untouched completion text used by the fallback extractor;
    when omitted the normalized text is scanned instead. Returns an empty list
    when nothing can be recovered.
    """
    items = decode_strict(normalized)
    if not items:
        source = raw if isinstance(raw, str) else normalized
        items = extract_question_objects(source)
        if items:
            LOGGER.warning("Strict JSON decode failed; recovered %d question(s) by pattern extraction", len(items))

    if not items:
        return []

    questions = []
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            LOGGER.warning("Question %d is %s, not an object", i, type(item).__name__)
        questions.append(RawQuestion.from_dict(item))
    return questions
