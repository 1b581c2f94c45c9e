"""Best-effort cleanup of raw completion text before JSON decoding."""

import re
from typing import Any, Iterator, Tuple

_FENCE_LINE = re.compile(r"^[ \t]*```[\w.+-]*[ \t]*$", flags=re.MULTILINE)
_LEADING_FENCE = re.compile(r"^\s*```[\w.+-]*")
_TRAILING_FENCE = re.compile(r"```\s*$")
_CLOSER_AHEAD = re.compile(r"\s*[}\]]")


def strip_code_fences(text: str) -> str:
    """Remove markdown fence lines anywhere in the text, plus fences glued to its edges."""
    s = _FENCE_LINE.sub("", text)
    s = _LEADING_FENCE.sub("", s)
    s = _TRAILING_FENCE.sub("", s)
    return s.strip()


def slice_json_array(text: str) -> str:
    """Return the span from the first '[' to the last ']', or the text unchanged."""
    start = text.find('[')
    end = text.rfind(']')
    if start == -1 or end == -1 or end < start:
        return text
    return text[start:end + 1]


def _walk_json_text(text: str) -> Iterator[Tuple[int, str, bool]]:
    """Yield ``(index, char, inside_string)`` for each character of JSON-like text.

    Backslash escapes are honoured, so ``\\"`` does not end a string. The closing
    quote counts as inside, the opening quote as outside.
    """
    in_string = False
    escaped = False
    for i, ch in enumerate(text):
        inside = in_string
        if in_string:
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        yield i, ch, inside


def remove_trailing_commas(text: str) -> str:
    """Drop commas that directly precede a closing ``}`` or ``]``, leaving string contents alone."""
    out = []
    for i, ch, inside in _walk_json_text(text):
        if ch == ',' and not inside and _CLOSER_AHEAD.match(text, i + 1):
            continue
        out.append(ch)
    return ''.join(out)


def escape_newlines_in_strings(text: str) -> str:
    """Escape raw newline characters that sit inside JSON string literals."""
    out = []
    for _, ch, inside in _walk_json_text(text):
        if inside and ch == '\n':
            out.append('\\n')
        elif inside and ch == '\r':
            out.append('\\r')
        else:
            out.append(ch)
    return ''.join(out)


def normalize_completion(raw: Any) -> str:
    """Turn raw completion text into something that should decode as a JSON array.

    Never raises. The result always starts with '['; whether it decodes is up
    to the parser.
    """
    s = raw if isinstance(raw, str) else ""
    s = strip_code_fences(s)
    s = slice_json_array(s)
    s = remove_trailing_commas(s)
    s = escape_newlines_in_strings(s)
    s = s.strip()
    if not s.startswith('['):
        s = f"[{s}]"
    return s
