import re
from typing import List, Union

FIELD_DELIMITER = ":"

# Not-a-number sentinel for line/column fields that fail to parse.
NAN = float("nan")

# Integer prefix: leading whitespace, optional sign, digits. Trailing text is ignored.
_RE_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def tokenize(line: str) -> List[str]:
    """Split a diagnostic line on every delimiter, keeping empty fields."""
    return line.split(FIELD_DELIMITER)


def field_at(fields: List[str], index: int) -> str:
    """Trimmed field at index, or "" when the line is too short."""
    if 0 <= index < len(fields):
        return fields[index].strip()
    return ""


def parse_number(text: str) -> Union[int, float]:
    """
    Parses the integer prefix of text.
    Returns NAN (never 0) when there is no leading integer.
    """
    match = _RE_INT_PREFIX.match(text or "")
    if not match:
        return NAN
    return int(match.group(1))


def is_number(value: Union[int, float]) -> bool:
    return value == value  # NaN is the only value not equal to itself
